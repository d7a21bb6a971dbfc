"""
Error types for mkcheckout.

Every failure that ends a run derives from MkCheckoutError and carries the exit code
the process should terminate with.
"""

__all__ = [
    "MkCheckoutError",
    "NoPrefixSelected",
    "InputError",
    "ExecError",
]


class MkCheckoutError(Exception):
    """
    Base exception for fatal mkcheckout errors.

    Attributes:
        message: Human-readable error message.
        exit_code: The exit code intended for the application.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class NoPrefixSelected(MkCheckoutError):
    """Raised when the prefix selection menu is cancelled."""

    def __init__(self, message: str = "プレフィックスが選択されていません", exit_code: int = 1):
        super().__init__(message, exit_code)


class InputError(MkCheckoutError):
    """Raised when the interactive input mechanism fails (closed stream, cancelled dialog)."""


class ExecError(MkCheckoutError):
    """Raised when the shell running the git command cannot be launched."""
