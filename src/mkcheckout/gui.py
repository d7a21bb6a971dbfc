"""
Qt dialogs for mkcheckout.

QtPrompter asks the same questions as the terminal prompter using modal
QInputDialog windows, for use from launchers that have no terminal.
"""

import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QInputDialog, QLineEdit
from loguru import logger

from .config import APPLICATION_NAME
from .errors import InputError

__all__ = [
    "QtPrompter",
]


def _ensure_app() -> QApplication:
    """Return the running QApplication, creating one if needed."""
    return QApplication.instance() or QApplication(sys.argv[:1])


class QtPrompter:
    """
    Prompter backed by modal Qt input dialogs.

    Args:
        parent: Optional parent widget for the dialogs.
        title: Window title of the dialogs.
    """

    def __init__(self, parent=None, title: str = APPLICATION_NAME):
        self.parent = parent
        self.title = title

    def select(self, message: str, items: Sequence[str], default: int = 0) -> Optional[int]:
        """
        Show a non-editable combo box dialog.

        Returns:
            int | None: Index of the chosen item, or None if the dialog was cancelled.
        """
        _ensure_app()
        item, ok = QInputDialog.getItem(self.parent, self.title, message, list(items), default, False)
        if not ok:
            logger.debug(f"Selection dialog cancelled: {message}")
            return None
        logger.debug(f"Selected {item!r} for: {message}")
        return list(items).index(item)

    def text(self, message: str, allow_empty: bool = False) -> str:
        """
        Show a line edit dialog, re-opening it while a required answer is empty.

        Raises:
            InputError: If the dialog is cancelled.
        """
        _ensure_app()
        while True:
            answer, ok = QInputDialog.getText(
                self.parent, self.title, message, QLineEdit.EchoMode.Normal, ""
            )
            if not ok:
                logger.error(f"Input dialog cancelled: {message}")
                raise InputError(f"入力が中断されました: {message}")
            if answer or allow_empty:
                return answer
