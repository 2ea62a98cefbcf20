"""The stash command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import Runner, run_command

_HELP = """Usage: ggc stash [command]

Commands:
  trash  Delete stash
"""


class Stasher:
    """Manages stashed changes."""

    def __init__(self, out: TextIO | None = None, runner: Runner | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._run = runner or run_command

    def stash(self, args: list[str]) -> None:
        """Run ``stash trash`` to drop the latest stash; anything else shows usage."""
        if not args or args[0] != "trash":
            self._out.write(_HELP)
            return
        if self._run(["git", "stash", "drop"], capture=True).returncode != 0:
            self._out.write("Error: no stash found\n")
            return
        self._out.write("Dropped refs/stash@{0}\n")