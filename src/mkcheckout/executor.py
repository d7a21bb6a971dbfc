"""
Shell execution of the generated git command.

The command string is handed to the platform's command interpreter as is. Only a
failure to launch the interpreter is reported; git's own exit status is not checked.
"""

import shlex
import subprocess
import sys
from typing import Optional

from loguru import logger

from .errors import ExecError

__all__ = [
    "CommandExecutor",
    "shell_argv",
]


def shell_argv(command: str, platform: str = sys.platform) -> list[str]:
    """
    Wrap a command string for the host's command interpreter.

    Args:
        command: The full command line.
        platform: A ``sys.platform`` value.

    Returns:
        list[str]: ``cmd /C`` invocation on Windows, ``sh -c`` elsewhere.

    Examples:
        >>> shell_argv("git status", "linux")
        ['sh', '-c', 'git status']
    """
    if platform.startswith("win"):
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def _filtered_env_for_log(env: dict[str, str] | None) -> dict[str, str]:
    """Return only PATH and GIT_ variables of env, for logging."""
    if not env:
        return {}
    return {k: v for k, v in env.items() if k == "PATH" or k.startswith("GIT_")}


class CommandExecutor:
    """
    Run commands through the host shell.

    Args:
        platform: Platform name deciding the interpreter, defaults to ``sys.platform``.
        env: Optional environment variables for the subprocess.
    """

    def __init__(self, platform: str = sys.platform, env: Optional[dict[str, str]] = None):
        self.platform = platform
        self.env = env

    def execute(self, command: str, branch_name: str) -> None:
        """
        Run the command and wait for it to finish.

        A confirmation naming the branch is printed once the interpreter ran,
        whatever git reported.

        Args:
            command: The command line to run.
            branch_name: Branch named in the confirmation message.

        Raises:
            ExecError: If the interpreter could not be started.
        """
        argv = shell_argv(command, self.platform)
        logger.debug(
            f"Running subprocess: {shlex.join(argv)} with env: {_filtered_env_for_log(self.env)}"
        )
        try:
            result = subprocess.run(argv, check=False, env=self.env)
        except OSError as exc:
            logger.error(f"Failed to launch {argv[0]}: {exc}")
            raise ExecError(f"コマンドの実行に失敗しました: {exc}") from exc
        logger.debug(f"subprocess returncode: {result.returncode}")
        print(f"ブランチ '{branch_name}' を作成しました")
