"""Shared pytest fixtures and stream doubles for microconsole tests."""

from __future__ import annotations

import collections.abc as cabc
import contextlib
import io
import typing as typ

import pytest

from microconsole import Console, defaults, terminal

ERROR_SIMULATED_WRITE = "simulated write failure"
ERROR_SIMULATED_READ = "simulated read failure"


class FailingWriter:
    """Output sink that rejects every write."""

    def __init__(self) -> None:
        """Start with no recorded attempts."""
        self.attempts = 0

    def write(self, text: str) -> int:
        """Record the attempt and fail."""
        self.attempts += 1
        raise OSError(ERROR_SIMULATED_WRITE)

    def flush(self) -> None:
        """Nothing is ever buffered."""


class FailingReader:
    """Input source whose reads always fail."""

    def readline(self) -> str:
        """Fail like a broken transport."""
        raise OSError(ERROR_SIMULATED_READ)


class TrackingReader:
    """Input source over fixed text that counts how often it is read."""

    def __init__(self, text: str) -> None:
        """Serve ``text`` line by line."""
        self._buffer = io.StringIO(text)
        self.reads = 0

    def readline(self) -> str:
        """Return the next line and record the call."""
        self.reads += 1
        return self._buffer.readline()

    def remaining(self) -> str:
        """Return the text that has not been consumed yet."""
        position = self._buffer.tell()
        rest = self._buffer.read()
        self._buffer.seek(position)
        return rest


def make_console(text: str) -> tuple[Console, io.StringIO]:
    """Build a console over fixed input, returning it with its output buffer."""
    output = io.StringIO()
    return Console(io.StringIO(text), output), output


@pytest.fixture
def isolated_default_console() -> cabc.Iterator[None]:
    """Restore the shared console after a test swaps it."""
    previous = defaults.set_default_console(None)
    yield
    defaults.set_default_console(previous)


@pytest.fixture
def fake_no_echo(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the terminal echo toggle with one that records enter/exit."""
    events: list[str] = []

    @contextlib.contextmanager
    def recorder(stream: typ.IO[str]) -> cabc.Iterator[None]:
        events.append("disabled")
        try:
            yield
        finally:
            events.append("restored")

    monkeypatch.setattr(terminal, "no_echo", recorder)
    return events
