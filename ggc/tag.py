"""The tag command."""

from __future__ import annotations

import sys
from typing import TextIO

from ggc.git import GitError, Runner, exit_status, run_command

_HELP = """Usage: ggc tag [command] [options]

Commands:
  list, l [pattern]             List tags, newest version first
  create, c <tag> [commit]      Create a lightweight tag
  delete, d <tag>...            Delete one or more tags
  annotated, a <tag> [message]  Create an annotated tag
  push [tag] [remote]           Push tags to a remote
  show <tag>                    Show tag information
"""


class Tagger:
    """Lists, creates, deletes, pushes and shows tags."""

    def __init__(self, out: TextIO | None = None, runner: Runner | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._run = runner or run_command

    def _git(self, *args: str):
        """Run git, copying its output to the writer."""
        result = self._run(["git", *args], capture=True)
        if result.stdout:
            self._out.write(result.stdout)
        return result

    def _query(self, *args: str) -> str:
        """Run git quietly and return its trimmed output, raising on failure."""
        result = self._run(["git", *args], capture=True)
        if result.returncode != 0:
            raise GitError(
                f"git {' '.join(args)} failed: {exit_status(result)}", result.returncode
            )
        return (result.stdout or "").strip()

    def tag(self, args: list[str]) -> None:
        """Dispatch a tag subcommand; without one, list tags plainly."""
        if not args:
            result = self._git("tag")
            if result.returncode != 0:
                self._out.write(f"Error: {exit_status(result)}\n")
            return
        action = {
            "list": self._list,
            "l": self._list,
            "create": self._create,
            "c": self._create,
            "delete": self._delete,
            "d": self._delete,
            "annotated": self._annotated,
            "a": self._annotated,
            "push": self._push,
            "show": self._show,
        }.get(args[0])
        if action is None:
            self._out.write(_HELP)
            return
        action(args[1:])

    def _list(self, args: list[str]) -> None:
        if args:
            result = self._git("tag", "--sort=-version:refname", "-l", *args)
        else:
            result = self._git("tag", "--sort=-version:refname")
        if result.returncode != 0:
            self._out.write(f"Error listing tags: {exit_status(result)}\n")

    def _create(self, args: list[str]) -> None:
        if not args:
            self._out.write("Error: tag name is required\n")
            return
        name = args[0]
        if len(args) > 1:
            result = self._git("tag", name, args[1])
        else:
            result = self._git("tag", name)
        if result.returncode != 0:
            self._out.write(f"Error creating tag: {exit_status(result)}\n")
            return
        self._out.write(f"Tag '{name}' created successfully\n")

    def _delete(self, args: list[str]) -> None:
        if not args:
            self._out.write("Error: tag name(s) required\n")
            return
        for name in args:
            result = self._git("tag", "-d", name)
            if result.returncode != 0:
                self._out.write(f"Error deleting tag '{name}': {exit_status(result)}\n")
            else:
                self._out.write(f"Tag '{name}' deleted successfully\n")

    def _push(self, args: list[str]) -> None:
        if not args:
            result = self._git("push", "origin", "--tags")
        else:
            remote = args[1] if len(args) > 1 else "origin"
            result = self._git("push", remote, args[0])
        if result.returncode != 0:
            self._out.write(f"Error pushing tags: {exit_status(result)}\n")
            return
        self._out.write("Tags pushed successfully\n")

    def _show(self, args: list[str]) -> None:
        if not args:
            self._out.write("Error: tag name is required\n")
            return
        name = args[0]
        result = self._git("show", name)
        if result.returncode != 0:
            self._out.write(f"Error showing tag '{name}': {exit_status(result)}\n")

    def _annotated(self, args: list[str]) -> None:
        if not args:
            self._out.write("Error: tag name is required\n")
            return
        name = args[0]
        if len(args) > 1:
            result = self._git("tag", "-a", name, "-m", " ".join(args[1:]))
        else:
            result = self._git("tag", "-a", name)
        if result.returncode != 0:
            self._out.write(f"Error creating annotated tag: {exit_status(result)}\n")
            return
        self._out.write(f"Annotated tag '{name}' created successfully\n")

    def latest_tag(self) -> str:
        """Return the most recent tag reachable from HEAD."""
        return self._query("describe", "--tags", "--abbrev=0")

    def tag_exists(self, name: str) -> bool:
        """Tell whether a tag with exactly this name exists."""
        try:
            return self._query("tag", "-l", name) == name
        except GitError:
            return False

    def tag_commit(self, name: str) -> str:
        """Return the commit hash a tag points at."""
        return self._query("rev-list", "-n", "1", name)