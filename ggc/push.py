"""The push command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import GitClient, GitError

_HELP = """Usage: ggc push <command>

Commands:
  current  Push current branch from remote repository
  force    Force push current branch
"""


class Pusher:
    """Pushes the current branch."""

    def __init__(self, client=None, out: TextIO | None = None) -> None:
        self._client = client if client is not None else GitClient()
        self._out = out if out is not None else sys.stdout

    def push(self, args: list[str]) -> None:
        """Run ``push current`` or ``push force``; anything else shows usage."""
        if not args or args[0] not in ("current", "force"):
            self._out.write(_HELP)
            return
        try:
            self._client.push(args[0] == "force")
        except GitError as exc:
            self._out.write(f"Error: {exc}\n")