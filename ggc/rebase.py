"""The rebase command."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from ggc.git import Runner, run_command

_HELP = """Usage: ggc rebase <command>

Commands:
  interactive  Interactive rebase
"""

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Rebaser:
    """Rebases the current branch interactively."""

    def __init__(
        self,
        out: TextIO | None = None,
        runner: Runner | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._run = runner or run_command
        self._stdin = stdin if stdin is not None else sys.stdin

    def rebase(self, args: list[str]) -> None:
        """Run ``rebase interactive``; anything else shows usage."""
        if args and args[0] == "interactive":
            self.rebase_interactive()
        else:
            self._out.write(_HELP)

    def rebase_interactive(self) -> None:
        """Ask how many of the branch's commits to rebase, then run ``git rebase -i``."""
        out = self._out
        branch_result = self._run(["git", "rev-parse", "--abbrev-ref", "HEAD"], capture=True)
        if branch_result.returncode != 0:
            out.write("Error: failed to get current branch\n")
            return
        branch = (branch_result.stdout or "").strip()

        upstream_result = self._run(
            ["git", "rev-parse", "--abbrev-ref", f"{branch}@{{upstream}}"], capture=True
        )
        upstream = "main"
        if upstream_result.returncode == 0:
            upstream = (upstream_result.stdout or "").strip()

        log_result = self._run(
            ["git", "log", "--oneline", "--reverse", f"{upstream}..HEAD"], capture=True
        )
        if log_result.returncode != 0:
            out.write("Error: failed to get git log\n")
            return

        lines = (log_result.stdout or "").strip().split("\n")
        if lines == [""]:
            out.write("Error: no commit history found\n")
            return

        out.write(f"Current branch: {branch}\n")
        out.write("Select number of commits to rebase (commits are shown from oldest to newest):\n")
        for number, line in enumerate(lines, start=1):
            out.write(f"  [{number}] {line}\n")
        out.write("> ")

        answer = self._stdin.readline()
        if not answer.endswith("\n") or not answer.strip():
            out.write("Error: operation cancelled\n")
            return

        answer = answer.strip()
        if not _INTEGER.fullmatch(answer) or not 1 <= int(answer) <= len(lines):
            out.write("Error: invalid number\n")
            return

        try:
            result = self._run(["git", "rebase", "-i", f"HEAD~{int(answer)}"])
        except OSError as exc:
            out.write(f"Error: failed to start rebase: {exc}\n")
            return
        if result.returncode != 0:
            out.write("Error: rebase failed\n")
            return
        out.write("Rebase successful\n")