"""Prompt-and-read interactions over injectable streams.

A :class:`Console` is bound to one input source and one output sink for its
whole life. Every interaction writes the prompt verbatim, without adding a
newline, then blocks until a full line arrives. Failures are raised as the
typed errors in :mod:`microconsole.errors`; nothing is logged or retried.
"""

from __future__ import annotations

import sys
import typing as typ

from . import terminal
from .errors import (
    InvalidConfirmationError,
    PasswordPolicyError,
    ReadError,
    WriteError,
)

if typ.TYPE_CHECKING:
    from .streams import InputSource, OutputSink

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})
NEGATIVE_ANSWERS = frozenset({"n", "no"})
SUFFIX_DEFAULT_YES = " [Y/n]: "
SUFFIX_DEFAULT_NO = " [y/N]: "

ERROR_MISSING_INPUT = "Console requires an input source, got None."
ERROR_MISSING_OUTPUT = "Console requires an output sink, got None."
ERROR_WRITE_PROMPT = "writing prompt"
ERROR_READ_INPUT = "reading input"
ERROR_READ_PASSWORD = "reading password"
ERROR_END_OF_INPUT = "input ended before a line terminator"
ERROR_PASSWORD_POLICY = (
    "password input requires the process standard input, "
    "got a different input source"
)


def confirmation_suffix(*, default_yes: bool) -> str:
    """Return the hint appended to a confirmation prompt."""
    return SUFFIX_DEFAULT_YES if default_yes else SUFFIX_DEFAULT_NO


def parse_confirmation(answer: str, *, default_yes: bool) -> bool:
    """Classify an already-trimmed answer as yes or no.

    An empty answer selects the default. Matching is exact after
    lower-casing, so "ye" or "nope" are rejected rather than guessed.

    Raises:
        InvalidConfirmationError: If the answer is not y, yes, n or no.

    """
    if not answer:
        return default_yes
    token = answer.lower()
    if token in AFFIRMATIVE_ANSWERS:
        return True
    if token in NEGATIVE_ANSWERS:
        return False
    raise InvalidConfirmationError from None


def _end_of_input(context: str) -> ReadError:
    error = ReadError(f"{context}: {ERROR_END_OF_INPUT}")
    error.__cause__ = EOFError(ERROR_END_OF_INPUT)
    return error


class Console:
    """Interactive text prompts bound to an input source and output sink."""

    __slots__ = ("_input", "_output")

    def __init__(self, input_source: InputSource, output_sink: OutputSink) -> None:
        """Bind the console to its streams; neither may be None."""
        if input_source is None:
            raise TypeError(ERROR_MISSING_INPUT)
        if output_sink is None:
            raise TypeError(ERROR_MISSING_OUTPUT)
        self._input = input_source
        self._output = output_sink

    @classmethod
    def from_terminal(cls) -> Console:
        """Build a console on the process standard input and output."""
        return cls(sys.stdin, sys.stdout)

    @property
    def input_source(self) -> InputSource:
        """Stream prompts read answers from."""
        return self._input

    @property
    def output_sink(self) -> OutputSink:
        """Stream prompts are written to."""
        return self._output

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._input!r}, {self._output!r})"

    def _write(self, text: str) -> None:
        try:
            self._output.write(text)
            self._output.flush()
        except (OSError, ValueError) as exc:
            raise WriteError(f"{ERROR_WRITE_PROMPT}: {exc}") from exc

    def _read_line(self) -> str:
        try:
            line = self._input.readline()
        except (OSError, ValueError) as exc:
            raise ReadError(f"{ERROR_READ_INPUT}: {exc}") from exc
        if not line.endswith("\n"):
            raise _end_of_input(ERROR_READ_INPUT)
        return line

    def get_input(self, prompt: str) -> str:
        """Write ``prompt`` and return the next line with whitespace trimmed.

        Raises:
            WriteError: If the prompt cannot be written; nothing is read.
            ReadError: If the source fails or ends before a full line.

        """
        self._write(prompt)
        return self._read_line().strip()

    def get_confirm(self, prompt: str, *, default_yes: bool = False) -> bool:
        """Ask a yes/no question, returning ``default_yes`` on an empty answer.

        The prompt is followed by ``[Y/n]: `` or ``[y/N]: `` depending on
        the default.

        Raises:
            WriteError: If the prompt cannot be written.
            ReadError: If no answer line can be read.
            InvalidConfirmationError: If the answer is not y, yes, n or no.

        """
        answer = self.get_input(prompt + confirmation_suffix(default_yes=default_yes))
        return parse_confirmation(answer, default_yes=default_yes)

    def get_password(self, prompt: str) -> str:
        """Write ``prompt`` and read a line with terminal echo disabled.

        Only a console bound to the process standard input can do this; the
        prompt is still written before that is checked. The answer keeps its
        surrounding whitespace; only the line terminator is removed.

        Raises:
            WriteError: If the prompt or trailing newline cannot be written.
            PasswordPolicyError: If the input source is not standard input.
            ReadError: If echo cannot be disabled or no line can be read.

        """
        self._write(prompt)
        if not terminal.is_process_stdin(self._input):
            raise PasswordPolicyError(ERROR_PASSWORD_POLICY)

        stream = typ.cast("typ.IO[str]", self._input)
        try:
            with terminal.no_echo(stream):
                line = stream.readline()
        except (OSError, ValueError) as exc:
            raise ReadError(f"{ERROR_READ_PASSWORD}: {exc}") from exc
        if not line:
            raise _end_of_input(ERROR_READ_PASSWORD)

        self._write("\n")
        return line.removesuffix("\n").removesuffix("\r")
