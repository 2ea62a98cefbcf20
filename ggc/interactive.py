"""Interactive command picker with incremental search."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, BinaryIO, Protocol, TextIO

_CTRL_C = 3
_BACKSPACE = 8
_CTRL_N = 14
_CTRL_P = 16
_ENTER = 13
_DELETE = 127

_PROMPT = (
    "Select a command (incremental search: type to filter, ctrl+n: down, "
    "ctrl+p: up, enter: execute, ctrl+c: quit)"
)


@dataclass(frozen=True)
class CommandInfo:
    """A command template and what it does."""

    command: str
    description: str


COMMANDS: tuple[CommandInfo, ...] = tuple(
    CommandInfo(command, description)
    for command, description in (
        ("help", "Show help message"),
        ("add <file>", "Add a specific file to the index"),
        ("add .", "Add all changes to index"),
        ("add -p", "Add changes interactively"),
        ("branch current", "Show current branch name"),
        ("branch checkout", "Switch to an existing branch"),
        ("branch checkout-remote", "Create and checkout a local branch from the remote"),
        ("branch create", "Create and checkout new branch"),
        ("branch delete", "Delete local branch"),
        ("branch delete-merged", "Delete local merged branch"),
        ("push current", "Push current branch from remote repository"),
        ("push force", "Force push current branch"),
        ("pull current", "Pull current branch from remote repository"),
        ("pull rebase", "Pull and rebase"),
        ("log simple", "Show simple historical log"),
        ("log graph", "Show log with graph"),
        ("commit <message>", "Create commit with a message"),
        ("commit allow-empty", "Create an empty commit"),
        ("commit tmp", "Create a temporary commit"),
        ("commit amend <message>", "Amend a previous commit"),
        ("fetch --prune", "Fetch and clean stale references"),
        ("tag list", "List all tags"),
        ("tag annotated <tag> <message>", "Create annotated tag"),
        ("tag delete <tag>", "Delete tag"),
        ("tag show <tag>", "Show tag information"),
        ("tag push", "Push tags to remote"),
        ("tag create <tag>", "Create tag"),
        ("config list", "List all configuration"),
        ("config get <key>", "Get a specific config value"),
        ("config set <key> <value>", "Set a configuration value"),
        ("hook list", "List all hooks"),
        ("hook install <hook>", "Install a hook"),
        ("hook enable <hook>", "Enable/Turn on a hook"),
        ("hook disable <hook>", "Disable/Turn off a hook"),
        ("hook uninstall <hook>", "Uninstall an existing hook"),
        ("hook edit <hook>", "Edit a hook's contents"),
        ("diff", "Show changes (git diff HEAD)"),
        ("diff unstaged", "Show unstaged changes"),
        ("diff staged", "Show staged changes"),
        ("version", "Show current version"),
        ("clean files", "Clean untracked files"),
        ("clean dirs", "Clean untracked directories"),
        ("clean-interactive", "Clean files interactively"),
        ("stash trash", "Delete stash"),
        ("status", "Show working tree status"),
        ("status short", "Show concise status (porcelain format)"),
        ("rebase interactive", "Interactive rebase"),
        ("remote list", "List all remote repositories"),
        ("remote add <name> <url>", "Add remote repository"),
        ("remote remove <name>", "Remove remote repository"),
        ("remote set-url <name> <url>", "Change remote URL"),
        ("quit", "Exit interactive mode"),
    )
)


class Terminal(Protocol):
    """Switches a terminal into raw mode and back."""

    def make_raw(self, fd: int) -> Any: ...

    def restore(self, fd: int, state: Any) -> None: ...


class PosixTerminal:
    """Raw-mode switching through termios."""

    def make_raw(self, fd: int) -> Any:
        import termios
        import tty

        try:
            state = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as exc:
            raise OSError(str(exc)) from exc
        return state

    def restore(self, fd: int, state: Any) -> None:
        import termios

        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, state)
        except termios.error as exc:
            raise OSError(str(exc)) from exc


def extract_placeholders(s: str) -> list[str]:
    """Return the names inside ``<...>`` placeholders, in order."""
    found: list[str] = []
    start: int | None = None
    for i, c in enumerate(s):
        if c == "<":
            start = i + 1
        elif c == ">" and start is not None:
            found.append(s[start:i])
            start = None
    return found


class UI:
    """Terminal command picker: type to filter, pick with ctrl+n/ctrl+p and enter."""

    def __init__(
        self,
        stdin: TextIO | BinaryIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        terminal: Terminal | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._terminal = terminal if terminal is not None else PosixTerminal()
        self._commands = COMMANDS
        self._source = getattr(self._stdin, "buffer", self._stdin)

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _error(self, text: str) -> None:
        self._stderr.write(text + "\n")

    def _flush(self) -> None:
        flush = getattr(self._stdout, "flush", None)
        if flush is not None:
            flush()

    def _fileno(self) -> int | None:
        try:
            return self._stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def _restore(self, fd: int, state: Any) -> None:
        try:
            self._terminal.restore(fd, state)
        except OSError as exc:
            self._error(f"failed to restore terminal state: {exc}")

    def _read_byte(self) -> int | None:
        data = self._source.read(1)
        if not data:
            return None
        if isinstance(data, str):
            return ord(data[0])
        return data[0]

    def _read_line(self) -> str:
        line = self._source.readline()
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        return line

    def run(self) -> list[str] | None:
        """Let the user pick a command; return its arguments, or None if none was chosen."""
        fd = self._fileno()
        state = None
        if fd is not None:
            try:
                state = self._terminal.make_raw(fd)
            except OSError as exc:
                self._error(f"Failed to set terminal to raw mode: {exc}")
                return None
        try:
            return self._loop(fd, state)
        finally:
            if fd is not None:
                self._restore(fd, state)

    def _render(self, query: str, filtered: list[CommandInfo], selected: int) -> None:
        self._write("\033[H\033[2J\033[H")
        self._write(_PROMPT + "\n")
        self._write(f"\rSearch: {query}\n\n")
        if not query:
            self._write("(Type to filter commands...)\n")
        else:
            if not filtered:
                self._write("  (No matching command)\n")
            width = max((len(info.command) for info in filtered), default=0)
            for i, info in enumerate(filtered):
                description = info.description or "No description"
                marker = ">" if i == selected else " "
                self._write(f"\r{marker} {info.command.ljust(width)}  {description}\n")
        self._write("\n\r")
        self._flush()

    def _loop(self, fd: int | None, state: Any) -> list[str] | None:
        selected = 0
        query = ""
        while True:
            filtered = [info for info in self._commands if query in info.command]
            if query:
                selected = max(0, min(selected, len(filtered) - 1))
            self._render(query, filtered, selected)

            byte = self._read_byte()
            if byte is None:
                return None
            if byte == _CTRL_C:
                if fd is not None:
                    self._restore(fd, state)
                self._write("\nExiting...\n")
                self._flush()
                raise SystemExit(0)
            if byte == _ENTER:
                if not query:
                    continue
                if not filtered:
                    return None
                template = filtered[selected].command
                self._write(f"\nExecute: {template}\n")
                if fd is not None:
                    self._restore(fd, state)
                return self._fill(template)
            if byte == _CTRL_P:
                if selected > 0:
                    selected -= 1
            elif byte == _CTRL_N:
                if selected < len(filtered) - 1:
                    selected += 1
            elif byte in (_DELETE, _BACKSPACE):
                query = query[:-1]
            elif 32 <= byte <= 126:
                query += chr(byte)

    def _fill(self, template: str) -> list[str]:
        values: dict[str, str] = {}
        for name in extract_placeholders(template):
            self._write("\n\r")
            self._write(f"Enter value for {name}: ")
            self._flush()
            values[name] = self._read_line().strip()
        command = template
        for name, value in values.items():
            command = command.replace(f"<{name}>", value)
        return ["ggc", *command.split()]


def interactive_ui() -> list[str] | None:
    """Run the picker on the process's terminal."""
    return UI().run()