"""Command line entry points exposing the console prompts to shell scripts.

Prompts go to stderr so that stdout carries only the answer, which keeps
``name=$(microconsole input "Name: ")`` usable in scripts.
"""

from __future__ import annotations

import logging
import os
import sys

from cyclopts import App

from .console import Console
from .errors import ConsoleError, InvalidConfirmationError

ENV_DEBUG = "MICROCONSOLE_DEBUG"
EXIT_OK = 0
EXIT_DECLINED = 1
EXIT_ERROR = 1
EXIT_INVALID_CONFIRMATION = 2

_logger = logging.getLogger(__name__)

app = App(name="microconsole")


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _configure_logging() -> None:
    if _env_flag(ENV_DEBUG):
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(levelname)s: %(message)s",
        )


def _console() -> Console:
    return Console(sys.stdin, sys.stderr)


@app.command(name="input")
def input_line(prompt: str) -> None:
    """Prompt for a line of text and print it with whitespace trimmed."""
    _logger.debug("Prompting for a line of input")
    print(_console().get_input(prompt))


@app.command()
def confirm(prompt: str, *, default_yes: bool = False) -> int:
    """Ask a yes/no question; exit 0 for yes and 1 for no."""
    _logger.debug("Prompting for confirmation (default_yes=%s)", default_yes)
    accepted = _console().get_confirm(prompt, default_yes=default_yes)
    return EXIT_OK if accepted else EXIT_DECLINED


@app.command()
def password(prompt: str) -> None:
    """Prompt for a password without echo and print it."""
    _logger.debug("Prompting for a password")
    print(_console().get_password(prompt))


def main(argv: list[str] | tuple[str, ...] | None = None) -> int:
    """Entry point for the microconsole CLI."""
    _configure_logging()
    try:
        result = app(argv)
    except InvalidConfirmationError as error:
        print(f"microconsole: {error}", file=sys.stderr)
        return EXIT_INVALID_CONFIRMATION
    except ConsoleError as error:
        _logger.debug("Console interaction failed", exc_info=True)
        print(f"microconsole: {error}", file=sys.stderr)
        return EXIT_ERROR
    return int(result or 0)


if __name__ == "__main__":
    raise SystemExit(main())
