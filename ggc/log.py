"""The log command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import GitClient, GitError

_HELP = """Usage: ggc log <command>

Commands:
  simple  Show simple historical log
  graph   Show log with graph
"""


class Logger:
    """Shows the commit history."""

    def __init__(self, client=None, out: TextIO | None = None) -> None:
        self._client = client if client is not None else GitClient()
        self._out = out if out is not None else sys.stdout

    def log(self, args: list[str]) -> None:
        """Run ``log simple`` or ``log graph``; anything else shows usage."""
        if not args:
            self._out.write(_HELP)
            return
        if args[0] == "simple":
            action = self._client.log_simple
        elif args[0] == "graph":
            action = self._client.log_graph
        else:
            self._out.write(_HELP)
            return
        try:
            action()
        except GitError as exc:
            self._out.write(f"Error: {exc}\n")