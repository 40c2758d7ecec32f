"""Process-wide default console and the package-level shortcuts.

The default console is ordinary global state. It is built lazily on the
process terminal the first time it is needed and can be swapped with
:func:`set_default_console` or, for a bounded block, :func:`use_console`.
Tests that touch it must not run concurrently with each other.
"""

from __future__ import annotations

import contextlib
import typing as typ

from .console import Console

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_default_console: Console | None = None


def get_default_console() -> Console:
    """Return the shared console, binding it to the terminal on first use."""
    global _default_console  # noqa: PLW0603
    if _default_console is None:
        _default_console = Console.from_terminal()
    return _default_console


def set_default_console(console: Console | None) -> Console | None:
    """Replace the shared console and return the one it replaced.

    Passing None drops the current instance so the next lookup rebuilds it
    from the terminal.
    """
    global _default_console  # noqa: PLW0603
    previous, _default_console = _default_console, console
    return previous


@contextlib.contextmanager
def use_console(console: Console) -> cabc.Iterator[Console]:
    """Make ``console`` the shared console for the duration of the block."""
    previous = set_default_console(console)
    try:
        yield console
    finally:
        set_default_console(previous)


def get_input(prompt: str) -> str:
    """Read a trimmed line through the shared console."""
    return get_default_console().get_input(prompt)


def get_confirm(prompt: str, *, default_yes: bool = False) -> bool:
    """Ask a yes/no question through the shared console."""
    return get_default_console().get_confirm(prompt, default_yes=default_yes)


def get_password(prompt: str) -> str:
    """Read a password without echo through the shared console."""
    return get_default_console().get_password(prompt)
