"""The pull command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import GitClient, GitError

_HELP = """Usage: ggc pull <command>

Commands:
  current  Pull current branch from remote repository
  rebase   Pull and rebase
"""


class Puller:
    """Pulls the current branch."""

    def __init__(self, client=None, out: TextIO | None = None) -> None:
        self._client = client if client is not None else GitClient()
        self._out = out if out is not None else sys.stdout

    def pull(self, args: list[str]) -> None:
        """Run ``pull current`` or ``pull rebase``; anything else shows usage."""
        if not args or args[0] not in ("current", "rebase"):
            self._out.write(_HELP)
            return
        try:
            self._client.pull(args[0] == "rebase")
        except GitError as exc:
            self._out.write(f"Error: {exc}\n")