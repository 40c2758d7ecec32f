"""Capability protocols for the streams a console is bound to."""

from __future__ import annotations

import typing as typ


@typ.runtime_checkable
class InputSource(typ.Protocol):
    """Anything that can hand out one line of text at a time."""

    def readline(self) -> str:
        """Return the next line, including its terminator, or "" at EOF."""
        ...


@typ.runtime_checkable
class OutputSink(typ.Protocol):
    """Anything that accepts text and can push it to its destination."""

    def write(self, text: str) -> object:
        """Accept ``text``; raise ``OSError`` or ``ValueError`` on failure."""
        ...

    def flush(self) -> None:
        """Push buffered text through to the destination."""
        ...
