import io

import pytest

from ggc.git import GitError
from ggc.pull import Puller


class MockClient:
    def __init__(self, err=None):
        self.err = err
        self.called = False
        self.rebase = None

    def pull(self, rebase):
        self.called = True
        self.rebase = rebase
        if self.err:
            raise GitError(self.err)


@pytest.mark.parametrize("err", [None, "pull failed"])
def test_pull_current(err):
    client = MockClient(err)
    out = io.StringIO()
    Puller(client, out).pull(["current"])
    assert client.called
    assert client.rebase is False
    if err:
        assert out.getvalue() == "Error: pull failed\n"
    else:
        assert out.getvalue() == ""


def test_no_args_shows_usage():
    out = io.StringIO()
    client = MockClient()
    Puller(client, out).pull([])
    assert "Usage" in out.getvalue()
    assert not client.called


def test_rebase():
    client = MockClient()
    Puller(client, io.StringIO()).pull(["rebase"])
    assert client.called
    assert client.rebase is True


def test_rebase_error():
    client = MockClient("rebase failed")
    out = io.StringIO()
    Puller(client, out).pull(["rebase"])
    assert client.rebase is True
    assert out.getvalue() == "Error: rebase failed\n"


def test_unknown_shows_usage():
    out = io.StringIO()
    Puller(MockClient(), out).pull(["unknown"])
    assert "Usage" in out.getvalue()