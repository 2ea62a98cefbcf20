# ggc

`ggc` wraps common Git workflows in short, predictable subcommands. Each
command family is a small class that writes its messages to an output stream
you choose (standard output by default) and runs `git` through an injectable
runner, so it can be driven from scripts and exercised in tests without
touching a real repository.

## What is included

| Module            | Public names                                                  | Subcommands                                                  |
|-------------------|---------------------------------------------------------------|--------------------------------------------------------------|
| `ggc.git`         | `GitClient`, `GitError`                                       | log, pull, push, reset-and-clean, restore, current branch    |
| `ggc.log`         | `Logger`                                                      | `simple`, `graph`                                            |
| `ggc.pull`        | `Puller`                                                      | `current`, `rebase`                                          |
| `ggc.push`        | `Pusher`                                                      | `current`, `force`                                           |
| `ggc.reset`       | `Resetter`                                                    | (none), `clean`                                              |
| `ggc.restore`     | `Restorer`, `is_commit_like`                                  | `<file>...`, `.`, `staged <file>...`, `<commit> <file>...`   |
| `ggc.stash`       | `Stasher`                                                     | `trash`                                                      |
| `ggc.remote`      | `Remoter`                                                     | `list`, `add`, `remove`, `set-url`                           |
| `ggc.hook`        | `Hooker`, `hook_template`, `copy_file`                        | `list`, `install`, `uninstall`, `enable`, `disable`, `edit`  |
| `ggc.rebase`      | `Rebaser`                                                     | `interactive`                                                |
| `ggc.tag`         | `Tagger`                                                      | (none), `list`/`l`, `create`/`c`, `delete`/`d`, `annotated`/`a`, `push`, `show` |
| `ggc.status`      | `Statuser`                                                    | (none), `short`                                              |
| `ggc.interactive` | `UI`, `CommandInfo`, `COMMANDS`, `extract_placeholders`, `interactive_ui` | incremental command picker                       |

Every command object is called with the argument list that would follow the
command name on a command line, for example `Tagger().tag(["create", "v1.2.0"])`
or `Remoter().remote(["add", "origin", "https://example.com/repo.git"])`. With
no arguments, or with an unknown subcommand, a usage summary is written
instead (except for `Tagger.tag`, which lists tags, and `Statuser.status`,
which shows the full status). Failures are reported as `Error: ...` lines on
the output stream rather than raised.

## Runners and clients

A runner is any callable `runner(argv, capture=False)` that returns a
`subprocess.CompletedProcess`. The default, `ggc.git.run_command`, runs the
command for real; with `capture=True` it merges standard output and error into
`stdout` as text. A command that cannot be started gives exit status 127.

```python
import io
import subprocess

from ggc.stash import Stasher

def fake_runner(argv, capture=False):
    return subprocess.CompletedProcess(argv, 0, stdout="")

out = io.StringIO()
Stasher(out=out, runner=fake_runner).stash(["trash"])
out.getvalue()   # "Dropped refs/stash@{0}\n"
```

`GitClient(runner)` provides `get_current_branch`, `log_simple`, `log_graph`,
`pull(rebase)`, `push(force)`, `reset_hard_and_clean`, `restore_working_dir`,
`restore_staged` and `restore_from_commit`. A failing git command raises
`GitError`, whose `returncode` holds the exit status. `Logger`, `Puller`,
`Pusher`, `Restorer` and `Statuser` take such a client; `Resetter` only resets
without arguments when it is given one, and shows usage otherwise.

## Other details

- `Hooker(out, editor, hooks_dir)` works on `.git/hooks` unless another
  directory is given. `install` copies `<hook>.sample` when present, otherwise
  writes `hook_template(name)`; both are made executable. `edit` runs the given
  editor, `vi` when none is given.
- `Rebaser(out, runner, stdin)` lists the branch's commits since its upstream
  (or `main`), reads a count from `stdin` and runs `git rebase -i HEAD~<n>`.
- `Tagger` also offers `latest_tag()`, `tag_commit(name)` (both raise
  `GitError` on failure) and `tag_exists(name)`.
- `Statuser(client, out, runner, pager)` prefixes the status with the branch
  name and `upstream_status(branch)`, then pipes it through the pager
  (`less -R` by default) if that program is found; pass `pager=None` to write
  directly.
- `UI(stdin, stdout, stderr, terminal).run()` shows the picker; typing filters
  `COMMANDS`, `ctrl+n`/`ctrl+p` move the selection, `enter` chooses it and
  prompts for each `<placeholder>`, `ctrl+c` exits with `SystemExit(0)`. It
  returns the chosen arguments, e.g. `["ggc", "status"]`, or `None`.
  `interactive_ui()` runs it on the process's terminal.

```python
from ggc.restore import is_commit_like
from ggc.interactive import extract_placeholders

is_commit_like("abc123f")                          # True
is_commit_like("HEAD~1")                           # True
extract_placeholders("remote add <name> <url>")    # ["name", "url"]
```

## What this package does not do

- It installs no `ggc` command. The classes are meant to be called from
  Python; there is no dispatcher that maps a command line onto them.
- `interactive_ui()` only returns the chosen argument list; it does not run it.
  Several entries in `COMMANDS` (`add`, `branch`, `commit`, `fetch`, `config`,
  `diff`, `version`, `clean`, `clean-interactive`, `help`) have no
  implementation in this package.
- There is no configuration storage; the hook editor is passed to `Hooker`.

## Requirements

Python 3.10 or later and a `git` executable on `PATH`. The interactive picker
uses `termios` and so needs a POSIX terminal.