"""Minimal terminal prompts: line input, yes/no confirmation and passwords."""

from __future__ import annotations

from .console import Console, confirmation_suffix, parse_confirmation
from .defaults import (
    get_confirm,
    get_default_console,
    get_input,
    get_password,
    set_default_console,
    use_console,
)
from .errors import (
    ConsoleError,
    InvalidConfirmationError,
    PasswordPolicyError,
    ReadError,
    WriteError,
)
from .streams import InputSource, OutputSink

__all__ = [
    "Console",
    "ConsoleError",
    "InputSource",
    "InvalidConfirmationError",
    "OutputSink",
    "PasswordPolicyError",
    "ReadError",
    "WriteError",
    "confirmation_suffix",
    "get_confirm",
    "get_default_console",
    "get_input",
    "get_password",
    "parse_confirmation",
    "set_default_console",
    "use_console",
]
