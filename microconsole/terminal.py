"""Access to the real process terminal.

Masked input needs two things the injected streams cannot offer: knowing
whether a stream is the process standard input, and switching that
terminal's echo off for the duration of a single read. Both live here so
the console stays free of platform details.
"""

from __future__ import annotations

import contextlib
import sys
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ERROR_NO_TERMIOS = "no-echo mode requires termios support on this platform"
ERROR_NOT_A_TTY = "no-echo mode requires an interactive terminal"


class TerminalModeError(OSError):
    """Raised when the terminal echo mode cannot be queried or changed."""


def is_process_stdin(stream: object) -> bool:
    """Return True when ``stream`` is the interpreter's standard input."""
    if stream is None:
        return False
    return stream is sys.stdin or stream is sys.__stdin__


def _stream_fd(stream: typ.IO[str]) -> int:
    try:
        fd = stream.fileno()
    except (OSError, ValueError) as exc:
        raise TerminalModeError(ERROR_NOT_A_TTY) from exc
    if not stream.isatty():
        raise TerminalModeError(ERROR_NOT_A_TTY)
    return fd


@contextlib.contextmanager
def no_echo(stream: typ.IO[str]) -> cabc.Iterator[None]:
    """Disable echo on ``stream``'s terminal, restoring the prior mode on exit.

    Raises:
        TerminalModeError: If the stream is not a terminal, the platform has
            no ``termios``, or the mode cannot be read or changed.

    """
    try:
        import termios
    except ImportError as exc:
        raise TerminalModeError(ERROR_NO_TERMIOS) from exc

    fd = _stream_fd(stream)
    try:
        previous = termios.tcgetattr(fd)
        silenced = termios.tcgetattr(fd)
        silenced[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSAFLUSH, silenced)
    except termios.error as exc:
        raise TerminalModeError(str(exc)) from exc

    try:
        yield
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, previous)
        except termios.error as exc:
            raise TerminalModeError(str(exc)) from exc
