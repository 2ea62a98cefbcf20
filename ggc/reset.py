"""The reset command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import GitError, Runner, run_command

_HELP = """Usage: ggc reset [command]

Commands:
  clean  Reset to HEAD and clean untracked files
"""


class Resetter:
    """Resets the working tree."""

    def __init__(self, client=None, out: TextIO | None = None, runner: Runner | None = None) -> None:
        self._client = client
        self._out = out if out is not None else sys.stdout
        self._run = runner or run_command

    def reset(self, args: list[str]) -> None:
        """Reset and clean; without arguments this needs a client, else shows usage."""
        if not args:
            if self._client is None:
                self._out.write(_HELP)
                return
            try:
                self._client.reset_hard_and_clean()
            except GitError as exc:
                self._out.write(f"Error: {exc}\n")
            return

        if args[0] != "clean":
            self._out.write(_HELP)
            return

        if self._run(["git", "reset", "--hard", "HEAD"], capture=True).returncode != 0:
            self._out.write("Error resetting changes: reset failed\n")
            return
        if self._run(["git", "clean", "-fd"], capture=True).returncode != 0:
            self._out.write("Error cleaning untracked files: clean failed\n")
            return
        self._out.write("Reset and clean successful\n")