"""
Test suite for mkcheckout executor module.

Covers interpreter selection and launch failure handling.

Run with:
    pytest tests/
"""

import pytest
from mkcheckout import executor
from mkcheckout.errors import ExecError


class Result:
    def __init__(self, returncode):
        self.returncode = returncode


def test_shell_argv_posix():
    assert executor.shell_argv("git checkout -b feat/x", "linux") == [
        "sh",
        "-c",
        "git checkout -b feat/x",
    ]
    assert executor.shell_argv("git status", "darwin")[:2] == ["sh", "-c"]


def test_shell_argv_windows():
    assert executor.shell_argv("git checkout -b feat/x", "win32") == [
        "cmd",
        "/C",
        "git checkout -b feat/x",
    ]


def test_execute_runs_whole_command_through_shell(monkeypatch, capsys):
    """
    Test that the command string is passed to the shell unchanged and the branch is announced.
    """
    calls = []

    def fake_run(argv, **kwargs):
        calls.append((argv, kwargs))
        return Result(0)

    monkeypatch.setattr(executor.subprocess, "run", fake_run)
    executor.CommandExecutor(platform="linux").execute(
        "git checkout -b feat/issue-1/x origin/main", "feat/issue-1/x"
    )
    assert calls[0][0] == ["sh", "-c", "git checkout -b feat/issue-1/x origin/main"]
    assert calls[0][1]["check"] is False
    assert "feat/issue-1/x" in capsys.readouterr().out


def test_execute_ignores_git_exit_status(monkeypatch, capsys):
    """
    Test that a failing git command is not reported as an error.
    """
    monkeypatch.setattr(executor.subprocess, "run", lambda *a, **k: Result(128))
    executor.CommandExecutor(platform="linux").execute("git checkout -b feat/x", "feat/x")
    assert "ブランチ 'feat/x' を作成しました" in capsys.readouterr().out


def test_execute_launch_failure(monkeypatch, capsys):
    """
    Test that an interpreter that cannot be started raises ExecError and prints nothing.
    """

    def fake_run(*a, **k):
        raise FileNotFoundError(2, "No such file or directory", "cmd")

    monkeypatch.setattr(executor.subprocess, "run", fake_run)
    with pytest.raises(ExecError) as excinfo:
        executor.CommandExecutor(platform="win32").execute("git checkout -b feat/x", "feat/x")
    assert "No such file or directory" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert capsys.readouterr().out == ""


def test__filtered_env_for_log():
    """
    Test that _filtered_env_for_log returns only PATH and GIT_ variables.
    """
    env = {
        "PATH": "/bin:/usr/bin",
        "GIT_WORK_TREE": "/repo",
        "HOME": "/home/user",
        "GIT_DIR": ".git",
    }
    assert executor._filtered_env_for_log(env) == {
        "PATH": "/bin:/usr/bin",
        "GIT_WORK_TREE": "/repo",
        "GIT_DIR": ".git",
    }
    assert executor._filtered_env_for_log(None) == {}
