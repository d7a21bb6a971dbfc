"""
Interactive prompt capability for mkcheckout.

The collector only needs two operations: choose one of N labelled items, and read
one line of text. TerminalPrompter provides them on the terminal with rich; the
Qt implementation lives in ``mkcheckout.gui``.
"""

from typing import Optional, Protocol, Sequence

from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from .errors import InputError

__all__ = [
    "Prompter",
    "TerminalPrompter",
]


class Prompter(Protocol):
    """Ask the user for input."""

    def select(self, message: str, items: Sequence[str], default: int = 0) -> Optional[int]:
        """Return the index of the chosen item, or None if the user cancelled."""
        ...

    def text(self, message: str, allow_empty: bool = False) -> str:
        """Return one line of text; re-ask until non-empty unless allow_empty is set."""
        ...


class TerminalPrompter:
    """
    Prompter rendering on stderr so stdout only carries the generated command.

    Args:
        console: Console used for rendering. Defaults to a stderr console.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def select(self, message: str, items: Sequence[str], default: int = 0) -> Optional[int]:
        """
        Show a numbered menu and read a 1-based choice.

        Ctrl-C or end of input at the menu is treated as "no selection".

        Args:
            message: Menu title.
            items: Labels to choose from.
            default: Index selected when the user just presses enter.

        Returns:
            int | None: Selected index, or None when cancelled.
        """
        self.console.print(f"[bold]{message}[/bold]")
        for number, item in enumerate(items, start=1):
            marker = ">" if number - 1 == default else " "
            self.console.print(f"{marker} {number}) {item}", markup=False, highlight=False)
        choices = [str(number) for number in range(1, len(items) + 1)]
        try:
            answer = Prompt.ask(
                "番号",
                console=self.console,
                choices=choices,
                default=str(default + 1),
            )
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            logger.debug(f"Selection cancelled: {message}")
            return None
        logger.debug(f"Selected item {answer} for: {message}")
        return int(answer) - 1

    def text(self, message: str, allow_empty: bool = False) -> str:
        """
        Read one line of free text.

        Args:
            message: Prompt text.
            allow_empty: Accept an empty answer instead of asking again.

        Returns:
            str: The answer with surrounding whitespace removed.

        Raises:
            InputError: If input is interrupted or the stream is closed.
        """
        while True:
            try:
                if allow_empty:
                    answer = Prompt.ask(message, console=self.console, default="", show_default=False)
                else:
                    answer = Prompt.ask(message, console=self.console)
            except (KeyboardInterrupt, EOFError) as exc:
                self.console.print()
                logger.error(f"Input aborted at prompt: {message}")
                raise InputError(f"入力が中断されました: {message}") from exc
            if answer or allow_empty:
                return answer
            self.console.print("[red]値を入力してください[/red]")
