import io
import os
import stat

import pytest

from ggc.hook import STANDARD_HOOKS, Hooker, copy_file, hook_template


@pytest.fixture
def hooks_dir(tmp_path):
    path = tmp_path / ".git" / "hooks"
    path.mkdir(parents=True)
    return path


def make(hooks_dir, editor=None):
    out = io.StringIO()
    return Hooker(out=out, editor=editor, hooks_dir=hooks_dir), out


def mode(path):
    return stat.S_IMODE(os.stat(path).st_mode)


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], "Usage: ggc hook"),
        (["invalid"], "Usage: ggc hook"),
        (["install"], "Error: hook name required"),
        (["uninstall"], "Error: hook name required"),
        (["enable"], "Error: hook name required"),
        (["disable"], "Error: hook name required"),
        (["edit"], "Error: hook name required"),
    ],
)
def test_hook_dispatch(hooks_dir, args, expected):
    hooker, out = make(hooks_dir)
    hooker.hook(args)
    assert expected in out.getvalue()


def test_missing_name_also_shows_usage(hooks_dir):
    hooker, out = make(hooks_dir)
    hooker.hook(["install"])
    assert out.getvalue().startswith("Error: hook name required\nUsage: ggc hook")


def test_list_without_hooks_directory(tmp_path):
    hooker, out = make(tmp_path / ".git" / "hooks")
    hooker.list_hooks()
    assert out.getvalue() == "No hooks directory found\n"


def test_default_hooks_directory_is_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    Hooker(out=out).list_hooks()
    assert out.getvalue() == "No hooks directory found\n"


def test_list_hooks_statuses(hooks_dir):
    (hooks_dir / "pre-commit.sample").write_text("#!/bin/sh\necho sample")
    active = hooks_dir / "post-commit"
    active.write_text("#!/bin/sh\necho active")
    os.chmod(active, 0o755)
    disabled = hooks_dir / "pre-push"
    disabled.write_text("#!/bin/sh\necho disabled")
    os.chmod(disabled, 0o644)

    hooker, out = make(hooks_dir)
    hooker.list_hooks()
    lines = out.getvalue().splitlines()

    assert lines[0] == "Git Hooks Status:"
    assert lines[1] == "=================="
    assert "✓ post-commit (enabled)" in lines
    assert "✗ pre-push (disabled)" in lines
    assert "- pre-commit (sample available)" in lines
    assert "- update (not installed)" in lines
    assert len(lines) == 2 + len(STANDARD_HOOKS)


def test_install_from_sample(hooks_dir):
    (hooks_dir / "pre-commit.sample").write_text("#!/bin/sh\necho sample")
    hooker, out = make(hooks_dir)
    hooker.install_hook("pre-commit")
    assert "Hook 'pre-commit' installed from sample" in out.getvalue()
    assert (hooks_dir / "pre-commit").read_text() == "#!/bin/sh\necho sample"
    assert mode(hooks_dir / "pre-commit") == 0o755


def test_install_with_template(hooks_dir):
    hooker, out = make(hooks_dir)
    hooker.install_hook("commit-msg")
    assert "Hook 'commit-msg' created with basic template" in out.getvalue()
    assert (hooks_dir / "commit-msg").read_text() == hook_template("commit-msg")
    assert mode(hooks_dir / "commit-msg") == 0o755


def test_install_existing_hook(hooks_dir):
    existing = hooks_dir / "pre-push"
    existing.write_text("#!/bin/sh\necho existing")
    hooker, out = make(hooks_dir)
    hooker.install_hook("pre-push")
    assert "Hook 'pre-push' already exists" in out.getvalue()
    assert existing.read_text() == "#!/bin/sh\necho existing"


def test_install_without_directory_reports_error(tmp_path):
    hooker, out = make(tmp_path / "missing")
    hooker.install_hook("pre-commit")
    assert out.getvalue().startswith("Error creating hook:")


def test_uninstall_existing_hook(hooks_dir):
    (hooks_dir / "pre-commit").write_text("#!/bin/sh\necho test")
    hooker, out = make(hooks_dir)
    hooker.uninstall_hook("pre-commit")
    assert "Hook 'pre-commit' uninstalled" in out.getvalue()
    assert not (hooks_dir / "pre-commit").exists()


def test_uninstall_missing_hook(hooks_dir):
    hooker, out = make(hooks_dir)
    hooker.uninstall_hook("non-existent")
    assert "Hook 'non-existent' is not installed" in out.getvalue()


def test_enable_existing_hook(hooks_dir):
    path = hooks_dir / "pre-commit"
    path.write_text("#!/bin/sh\necho test")
    os.chmod(path, 0o644)
    hooker, out = make(hooks_dir)
    hooker.enable_hook("pre-commit")
    assert "Hook 'pre-commit' enabled" in out.getvalue()
    assert mode(path) == 0o755


def test_enable_missing_hook(hooks_dir):
    hooker, out = make(hooks_dir)
    hooker.enable_hook("non-existent")
    assert "Hook 'non-existent' is not installed" in out.getvalue()


def test_disable_existing_hook(hooks_dir):
    path = hooks_dir / "pre-commit"
    path.write_text("#!/bin/sh\necho test")
    os.chmod(path, 0o755)
    hooker, out = make(hooks_dir)
    hooker.disable_hook("pre-commit")
    assert "Hook 'pre-commit' disabled" in out.getvalue()
    assert mode(path) == 0o644


def test_disable_missing_hook(hooks_dir):
    hooker, out = make(hooks_dir)
    hooker.disable_hook("non-existent")
    assert "Hook 'non-existent' is not installed" in out.getvalue()


def test_hook_dispatches_enable(hooks_dir):
    path = hooks_dir / "pre-commit"
    path.write_text("#!/bin/sh\n")
    os.chmod(path, 0o644)
    hooker, out = make(hooks_dir)
    hooker.hook(["enable", "pre-commit"])
    assert out.getvalue() == "Hook 'pre-commit' enabled\n"


def test_edit_missing_hook(hooks_dir):
    hooker, out = make(hooks_dir, editor="true")
    hooker.edit_hook("pre-commit")
    assert out.getvalue() == "Hook 'pre-commit' is not installed\n"


def test_edit_with_succeeding_editor(hooks_dir):
    (hooks_dir / "pre-commit").write_text("#!/bin/sh\n")
    hooker, out = make(hooks_dir, editor="true")
    hooker.edit_hook("pre-commit")
    assert out.getvalue() == ""


def test_edit_with_failing_editor(hooks_dir):
    (hooks_dir / "pre-commit").write_text("#!/bin/sh\n")
    hooker, out = make(hooks_dir, editor="false")
    hooker.edit_hook("pre-commit")
    assert out.getvalue() == "Error opening editor: exit status 1\n"


def test_edit_with_unknown_editor(hooks_dir):
    (hooks_dir / "pre-commit").write_text("#!/bin/sh\n")
    hooker, out = make(hooks_dir, editor="no-such-editor-xyz")
    hooker.edit_hook("pre-commit")
    assert out.getvalue().startswith("Error opening editor:")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("pre-commit", "# Pre-commit hook"),
        ("commit-msg", "# Commit message hook"),
        ("pre-push", "# Pre-push hook"),
        ("custom-hook", "# custom-hook hook"),
    ],
)
def test_hook_template(name, expected):
    assert expected in hook_template(name)


def test_default_template_words():
    template = hook_template("custom-hook")
    assert template.startswith("#!/bin/sh\n")
    assert "# Add your custom hook logic here" in template
    assert template.endswith("exit 0\n")


def test_copy_file(tmp_path):
    src = tmp_path / "source.txt"
    dst = tmp_path / "destination.txt"
    src.write_text("test content")
    os.chmod(src, 0o644)
    copy_file(src, dst)
    assert dst.read_text() == "test content"
    assert mode(dst) == 0o755


def test_copy_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing", tmp_path / "dst")