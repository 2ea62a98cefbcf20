"""The status command."""

from __future__ import annotations

import shutil
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from ggc.git import GitClient, GitError, Runner, exit_status, run_command

_HELP = """Usage: ggc status [command]

Commands:
  short  Show concise status (porcelain format)
"""

DEFAULT_PAGER = ("less", "-R")


class Statuser:
    """Shows the working tree status with upstream tracking information."""

    def __init__(
        self,
        client=None,
        out: TextIO | None = None,
        runner: Runner | None = None,
        pager: Sequence[str] | None = DEFAULT_PAGER,
    ) -> None:
        self._run = runner or run_command
        self._client = client if client is not None else GitClient(self._run)
        self._out = out if out is not None else sys.stdout
        self._pager = list(pager) if pager else None

    def upstream_status(self, branch: str) -> str:
        """Describe how ``branch`` relates to its upstream, or "" if it has none."""
        result = self._run(
            ["git", "rev-parse", "--abbrev-ref", f"{branch}@{{upstream}}"], capture=True
        )
        if result.returncode != 0:
            return ""
        upstream = (result.stdout or "").strip()
        up_to_date = f"Your branch is up to date with '{upstream}'"

        result = self._run(
            ["git", "rev-list", "--left-right", "--count", f"{branch}...{upstream}"],
            capture=True,
        )
        if result.returncode != 0:
            return up_to_date
        counts = (result.stdout or "").split()
        if len(counts) != 2:
            return up_to_date
        ahead, behind = counts
        if ahead == "0" and behind == "0":
            return up_to_date
        if behind == "0":
            return f"Your branch is ahead of '{upstream}' by {ahead} commit(s)"
        if ahead == "0":
            return f"Your branch is behind '{upstream}' by {behind} commit(s)"
        return f"Your branch and '{upstream}' have diverged"

    def status(self, args: list[str]) -> None:
        """Show ``git status`` (or its short form), through the pager when available."""
        if not args:
            git_args = ["git", "-c", "color.status=always", "status"]
        elif args[0] == "short":
            git_args = ["git", "-c", "color.status=always", "status", "--short"]
        else:
            self._out.write(_HELP)
            return

        try:
            branch = self._client.get_current_branch()
        except GitError as exc:
            self._out.write(f"Error getting current branch: {exc}\n")
            return

        header = f"On branch {branch}\n"
        upstream = self.upstream_status(branch)
        if upstream:
            header += f"{upstream}\n"
        header += "\n"

        if self._pager is None or shutil.which(self._pager[0]) is None:
            self._out.write(header)
            result = self._run(git_args, capture=True)
            if result.stdout:
                self._out.write(result.stdout)
            if result.returncode != 0:
                self._out.write(f"Error running git status: {exit_status(result)}\n")
            return

        self._page(git_args, header)

    def _page(self, git_args: list[str], header: str) -> None:
        result = self._run(git_args, capture=True)
        text = header + (result.stdout or "")
        to_terminal = self._out is sys.stdout
        try:
            paged = subprocess.run(
                self._pager,
                input=text,
                text=True,
                stdout=None if to_terminal else subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            self._out.write(f"Error starting {self._pager[0]} command: {exc}\n")
            return
        if not to_terminal and paged.stdout:
            self._out.write(paged.stdout)
        if result.returncode != 0:
            self._out.write(f"Error waiting for git command: {exit_status(result)}\n")
        if paged.returncode != 0:
            self._out.write(
                f"Error waiting for {self._pager[0]} command: {exit_status(paged)}\n"
            )