"""
Command-line entry point for mkcheckout.

Pipeline: parse flags, collect answers, print the command, and run it when
``--execute`` is given.

Example:
    $ mkcheckout --execute
"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger
from platformdirs import user_log_dir

from .branch_spec import BranchSpec
from .collector import InputCollector
from .config import APPLICATION_NAME, Options, load_options
from .errors import MkCheckoutError
from .executor import CommandExecutor
from .prompts import Prompter, TerminalPrompter

__all__ = [
    "parse_arguments",
    "configure_logging",
    "run",
    "run_app",
]

COMMAND_LINE_PREFIX: str = "コマンド: $ "


def _package_version() -> str:
    try:
        return version(APPLICATION_NAME)
    except PackageNotFoundError:
        return "unknown"


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog=APPLICATION_NAME,
        description="Build a conventional 'git checkout -b' command interactively.",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="デバッグモード")
    parser.add_argument("-e", "--execute", action="store_true", help="gitコマンド実行")
    parser.add_argument("-g", "--gui", action="store_true", help="Ask with Qt dialogs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser.parse_args(argv)


def configure_logging(debug: bool, log_file: bool = False) -> None:
    """
    Configure loguru sinks.

    The stderr sink stays quiet unless debugging, so prompts are not interleaved
    with log lines. The file sink always records DEBUG.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING")
    if log_file:
        log_file_path = Path(user_log_dir(APPLICATION_NAME)) / f"{APPLICATION_NAME}.log"
        logger.add(
            str(log_file_path),
            level="DEBUG",
            format="{time} {level} {message}",
            rotation="16 MB",
            retention=3,
            compression="zip",
        )


def run(options: Options, prompter: Prompter, executor: CommandExecutor) -> BranchSpec:
    """
    Collect a branch spec, print its command and optionally execute it.

    Args:
        options: Run options.
        prompter: Capability used to ask the user.
        executor: Runs the command when options.execute is set.

    Returns:
        BranchSpec: The collected spec.

    Raises:
        NoPrefixSelected: If the prefix menu was cancelled; nothing is printed.
        InputError: If a prompt failed.
        ExecError: If the command could not be launched.
    """
    if options.debug:
        print(options)

    spec = InputCollector(prompter).collect()
    command = spec.git_command
    print(f"{COMMAND_LINE_PREFIX}{command}")

    if not options.execute:
        logger.debug("Dry run, command not executed")
        return spec

    executor.execute(command, spec.branch_name)
    return spec


def _make_prompter(options: Options) -> Prompter:
    if options.gui:
        from .gui import QtPrompter

        return QtPrompter()
    return TerminalPrompter()


def run_app(argv: Optional[Sequence[str]] = None) -> None:
    """
    Run mkcheckout as a command-line program.

    Fatal errors are reported on stderr and end the process with a non-zero code.
    """
    args = parse_arguments(argv)
    configure_logging(args.debug, log_file=False)
    options = load_options(args)
    if options.log_file:
        configure_logging(options.debug, log_file=True)
    logger.debug(f"Starting {APPLICATION_NAME} with {options}")

    try:
        run(options, _make_prompter(options), CommandExecutor())
    except MkCheckoutError as exc:
        logger.debug(f"{type(exc).__name__}: {exc.message}")
        print(f"エラー: {exc.message}", file=sys.stderr)
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)
