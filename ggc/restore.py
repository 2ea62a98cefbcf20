"""The restore command."""

from __future__ import annotations

import string
import sys
from typing import TextIO

from ggc.git import GitClient, GitError

_HELP = """Usage: ggc restore <command>

Commands:
  <file>                Restore file in working directory
  .                     Restore all files in working directory
  staged <file>         Unstage file
  staged .              Unstage all files
  <commit> <file>       Restore file from a commit
"""

_HEX = frozenset(string.hexdigits)


def is_commit_like(s: str) -> bool:
    """Tell whether ``s`` looks like a commit hash or reference."""
    if 7 <= len(s) <= 40:
        return all(c in _HEX for c in s)
    return s.startswith(("HEAD", "refs/", "origin/"))


class Restorer:
    """Restores files in the working tree or the index."""

    def __init__(self, client=None, out: TextIO | None = None) -> None:
        self._client = client if client is not None else GitClient()
        self._out = out if out is not None else sys.stdout

    def restore(self, args: list[str]) -> None:
        """Restore paths, staged paths, or paths from a commit."""
        if not args:
            self._out.write(_HELP)
            return
        try:
            if args[0] == "staged":
                if len(args) < 2:
                    self._out.write(_HELP)
                    return
                self._client.restore_staged(*args[1:])
            elif len(args) >= 2 and is_commit_like(args[0]):
                self._client.restore_from_commit(args[0], *args[1:])
            else:
                self._client.restore_working_dir(*args)
        except GitError as exc:
            self._out.write(f"Error: {exc}\n")