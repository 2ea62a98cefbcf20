"""Git subcommands as small classes: hooks, log, pull, push, rebase, remote,
reset, restore, stash, status, tag, and an interactive command picker."""

__version__ = "0.1.0"

__all__ = [
    "git",
    "hook",
    "interactive",
    "log",
    "pull",
    "push",
    "rebase",
    "remote",
    "reset",
    "restore",
    "stash",
    "status",
    "tag",
]