"""
Shared fixtures for the mkcheckout test suite.

Run with:
    pytest tests/
"""

import pytest
from loguru import logger

from mkcheckout import config


class FakePrompter:
    """
    Prompter replaying scripted answers.

    A selection or text answer that is an exception instance is raised instead of returned.
    """

    def __init__(self, selection=0, texts=()):
        self.selection = selection
        self.texts = list(texts)
        self.calls = []

    def select(self, message, items, default=0):
        self.calls.append(("select", message, list(items), default))
        if isinstance(self.selection, Exception):
            raise self.selection
        return self.selection

    def text(self, message, allow_empty=False):
        self.calls.append(("text", message, allow_empty))
        answer = self.texts.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


class FakeExecutor:
    """Executor recording the commands it was asked to run."""

    def __init__(self, error=None):
        self.error = error
        self.executed = []

    def execute(self, command, branch_name):
        self.executed.append((command, branch_name))
        if self.error is not None:
            raise self.error


@pytest.fixture
def make_prompter():
    return FakePrompter


@pytest.fixture
def make_executor():
    return FakeExecutor


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's real config and log directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.delenv("MKCHECKOUT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    config.load_config.cache_clear()
    yield
    config.load_config.cache_clear()
    logger.remove()
