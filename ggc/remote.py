"""The remote command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import Runner, exit_status, run_command

_HELP = """Usage: ggc remote <command>

Commands:
  list                   List all remote repositories
  add <name> <url>       Add remote repository
  remove <name>          Remove remote repository
  set-url <name> <url>   Change remote URL
"""

# subcommand -> (number of arguments, failure wording, success wording)
_ACTIONS = {
    "add": (3, "add remote", "added"),
    "remove": (2, "remove remote", "removed"),
    "set-url": (3, "set remote URL", "URL updated"),
}


class Remoter:
    """Manages the repository's remotes."""

    def __init__(self, out: TextIO | None = None, runner: Runner | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._run = runner or run_command

    def _git(self, *args: str):
        result = self._run(["git", "remote", *args], capture=True)
        if result.stdout:
            self._out.write(result.stdout)
        return result

    def remote(self, args: list[str]) -> None:
        """List, add, remove or re-point remotes; bad arguments show usage."""
        if not args:
            self._out.write(_HELP)
            return
        sub = args[0]
        if sub == "list":
            result = self._git("-v")
            if result.returncode != 0:
                self._out.write(f"Error: failed to list remotes: {exit_status(result)}\n")
            return
        action = _ACTIONS.get(sub)
        if action is None or len(args) != action[0]:
            self._out.write(_HELP)
            return
        _, failure, success = action
        result = self._git(*args)
        if result.returncode != 0:
            self._out.write(f"Error: failed to {failure}: {exit_status(result)}\n")
            return
        self._out.write(f"Remote '{args[1]}' {success}\n")