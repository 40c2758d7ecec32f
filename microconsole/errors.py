"""Shared exception types for microconsole."""

from __future__ import annotations

ERROR_INVALID_CONFIRMATION = "invalid confirmation input"


class ConsoleError(RuntimeError):
    """Base error for console interactions."""


class WriteError(ConsoleError):
    """Raised when the output sink rejects the prompt."""


class ReadError(ConsoleError):
    """Raised when the input source cannot produce a complete line."""


class InvalidConfirmationError(ConsoleError, ValueError):
    """Raised when a confirmation answer is not one of y/yes/n/no."""

    def __init__(self) -> None:
        """Use the fixed message shared by every invalid answer."""
        super().__init__(ERROR_INVALID_CONFIRMATION)


class PasswordPolicyError(ConsoleError):
    """Raised when masked input is requested from a non-terminal source."""
