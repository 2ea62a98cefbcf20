"""The hook command: manage the repository's git hooks."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import TextIO

from ggc.git import exit_status

_HELP = """Usage: ggc hook <command> [hook-name]

Commands:
  list               List all hooks
  install <hook>     Install a hook
  uninstall <hook>   Uninstall an existing hook
  enable <hook>      Enable/Turn on a hook
  disable <hook>     Disable/Turn off a hook
  edit <hook>        Edit a hook's contents
"""

STANDARD_HOOKS = (
    "applypatch-msg", "pre-applypatch", "post-applypatch",
    "pre-commit", "prepare-commit-msg", "commit-msg", "post-commit",
    "pre-rebase", "post-checkout", "post-merge", "pre-push",
    "pre-receive", "update", "post-receive", "post-update",
    "push-to-checkout", "pre-auto-gc", "post-rewrite",
)

_PRE_COMMIT = """#!/bin/sh
# Pre-commit hook
# Add your pre-commit checks here

# Example: Run tests
# npm test
# make test

# Example: Run linter
# make lint

exit 0
"""

_COMMIT_MSG = """#!/bin/sh
# Commit message hook
# Validates commit message format

commit_regex='^(feat|fix|docs|style|refactor|test|chore)(\\(.+\\))?: .{1,50}'

if ! grep -qE "$commit_regex" "$1"; then
    echo "Invalid commit message format!"
    echo "Format: type(scope): description"
    echo "Example: feat(auth): add user authentication"
    exit 1
fi

exit 0
"""

_PRE_PUSH = """#!/bin/sh
# Pre-push hook
# Add your pre-push checks here

# Example: Run tests before push
# npm test
# make test

# Example: Prevent push to main/master
protected_branch='main'
current_branch=$(git symbolic-ref HEAD | sed -e 's,.*/\\(.*\\),\\1,')

if [ "$current_branch" = "$protected_branch" ]; then
    echo "Direct push to $protected_branch is not allowed"
    exit 1
fi

exit 0
"""

_TEMPLATES = {
    "pre-commit": _PRE_COMMIT,
    "commit-msg": _COMMIT_MSG,
    "pre-push": _PRE_PUSH,
}


def hook_template(name: str) -> str:
    """Return the starter script for the named hook."""
    template = _TEMPLATES.get(name)
    if template is not None:
        return template
    return (
        "#!/bin/sh\n"
        f"# {name} hook\n"
        f"# Add your {name.replace('-', ' ')} logic here\n"
        "\n"
        "exit 0\n"
    )


def _write_executable(path: Path, data: bytes) -> None:
    path.write_bytes(data)
    os.chmod(path, 0o755)


def copy_file(src, dst) -> None:
    """Copy ``src`` to ``dst`` and make the copy executable."""
    _write_executable(Path(dst), Path(src).read_bytes())


class Hooker:
    """Lists, installs and toggles hooks in a hooks directory."""

    def __init__(self, out: TextIO | None = None, editor: str | None = None, hooks_dir=None) -> None:
        self._out = out if out is not None else sys.stdout
        self._editor = editor
        self._hooks_dir = Path(hooks_dir) if hooks_dir is not None else Path(".git", "hooks")

    def hook(self, args: list[str]) -> None:
        """Dispatch a hook subcommand; unknown ones show usage."""
        if not args:
            self._out.write(_HELP)
            return
        sub = args[0]
        if sub == "list":
            self.list_hooks()
            return
        action = {
            "install": self.install_hook,
            "uninstall": self.uninstall_hook,
            "enable": self.enable_hook,
            "disable": self.disable_hook,
            "edit": self.edit_hook,
        }.get(sub)
        if action is None:
            self._out.write(_HELP)
            return
        if len(args) < 2:
            self._out.write("Error: hook name required\n")
            self._out.write(_HELP)
            return
        action(args[1])

    def list_hooks(self) -> None:
        """Show every standard hook and whether it is enabled."""
        if not self._hooks_dir.exists():
            self._out.write("No hooks directory found\n")
            return
        self._out.write("Git Hooks Status:\n")
        self._out.write("==================\n")
        for name in STANDARD_HOOKS:
            path = self._hooks_dir / name
            if path.exists():
                if path.stat().st_mode & 0o111:
                    self._out.write(f"✓ {name} (enabled)\n")
                else:
                    self._out.write(f"✗ {name} (disabled)\n")
            elif (self._hooks_dir / f"{name}.sample").exists():
                self._out.write(f"- {name} (sample available)\n")
            else:
                self._out.write(f"- {name} (not installed)\n")

    def install_hook(self, name: str) -> None:
        """Install a hook from its sample, or from a basic template."""
        path = self._hooks_dir / name
        sample = self._hooks_dir / f"{name}.sample"
        if path.exists():
            self._out.write(f"Hook '{name}' already exists\n")
            return
        if sample.exists():
            try:
                copy_file(sample, path)
            except OSError as exc:
                self._out.write(f"Error copying sample hook: {exc}\n")
                return
            self._out.write(f"Hook '{name}' installed from sample\n")
            return
        try:
            _write_executable(path, hook_template(name).encode())
        except OSError as exc:
            self._out.write(f"Error creating hook: {exc}\n")
            return
        self._out.write(f"Hook '{name}' created with basic template\n")

    def _installed(self, name: str) -> Path | None:
        path = self._hooks_dir / name
        if not path.exists():
            self._out.write(f"Hook '{name}' is not installed\n")
            return None
        return path

    def uninstall_hook(self, name: str) -> None:
        """Remove an installed hook."""
        path = self._installed(name)
        if path is None:
            return
        try:
            path.unlink()
        except OSError as exc:
            self._out.write(f"Error removing hook: {exc}\n")
            return
        self._out.write(f"Hook '{name}' uninstalled\n")

    def enable_hook(self, name: str) -> None:
        """Make an installed hook executable."""
        path = self._installed(name)
        if path is None:
            return
        try:
            os.chmod(path, 0o755)
        except OSError as exc:
            self._out.write(f"Error enabling hook: {exc}\n")
            return
        self._out.write(f"Hook '{name}' enabled\n")

    def disable_hook(self, name: str) -> None:
        """Make an installed hook non-executable."""
        path = self._installed(name)
        if path is None:
            return
        try:
            os.chmod(path, 0o644)
        except OSError as exc:
            self._out.write(f"Error disabling hook: {exc}\n")
            return
        self._out.write(f"Hook '{name}' disabled\n")

    def edit_hook(self, name: str) -> None:
        """Open an installed hook in the editor, ``vi`` by default."""
        path = self._installed(name)
        if path is None:
            return
        editor = self._editor or "vi"
        try:
            result = subprocess.run([editor, str(path)], check=False)
        except OSError as exc:
            self._out.write(f"Error opening editor: {exc}\n")
            return
        if result.returncode != 0:
            self._out.write(f"Error opening editor: {exit_status(result)}\n")