"""A small client around the git executable."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def run_command(argv: Sequence[str], *, capture: bool = False) -> subprocess.CompletedProcess:
    """Run a command and return its result.

    With ``capture`` the standard output and error are merged and returned as
    text; otherwise the command shares the terminal. A command that cannot be
    started yields a result with exit status 127.
    """
    argv = list(argv)
    try:
        if capture:
            return subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        return subprocess.run(argv, check=False)
    except OSError as exc:
        return subprocess.CompletedProcess(argv, 127, stdout=f"{exc}\n" if capture else None)


def exit_status(result: subprocess.CompletedProcess) -> str:
    """Describe a failed result the way the command reports it."""
    return f"exit status {result.returncode}"


class GitError(Exception):
    """A git command failed."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class GitClient:
    """Runs the git operations the commands build on."""

    def __init__(self, runner: Runner | None = None) -> None:
        self._run = runner or run_command

    def _git(self, *args: str, capture: bool = False) -> str:
        result = self._run(["git", *args], capture=capture)
        if result.returncode != 0:
            raise GitError(
                f"git {' '.join(args)} failed: {exit_status(result)}",
                result.returncode,
            )
        return result.stdout or ""

    def get_current_branch(self) -> str:
        """Return the name of the checked-out branch."""
        return self._git("rev-parse", "--abbrev-ref", "HEAD", capture=True).strip()

    def log_simple(self) -> None:
        """Show a one-line-per-commit log."""
        self._git("log", "--oneline")

    def log_graph(self) -> None:
        """Show the log with a branch graph."""
        self._git("log", "--graph", "--oneline", "--decorate", "--all")

    def pull(self, rebase: bool) -> None:
        """Pull the current branch, rebasing when asked."""
        branch = self.get_current_branch()
        if rebase:
            self._git("pull", "--rebase", "origin", branch)
        else:
            self._git("pull", "origin", branch)

    def push(self, force: bool) -> None:
        """Push the current branch, forcing when asked."""
        branch = self.get_current_branch()
        if force:
            self._git("push", "--force", "origin", branch)
        else:
            self._git("push", "origin", branch)

    def reset_hard_and_clean(self) -> None:
        """Reset to HEAD and remove untracked files and directories."""
        self._git("reset", "--hard", "HEAD", capture=True)
        self._git("clean", "-fd", capture=True)

    def restore_working_dir(self, *args: str) -> None:
        """Discard working-tree changes in the given paths."""
        self._git("restore", *args, capture=True)

    def restore_staged(self, *args: str) -> None:
        """Unstage the given paths."""
        self._git("restore", "--staged", *args, capture=True)

    def restore_from_commit(self, commit: str, *args: str) -> None:
        """Restore the given paths from a commit."""
        self._git("restore", "--source", commit, *args, capture=True)