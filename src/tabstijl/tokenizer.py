"""
Character-level tokenizer for delimited text.

Turns an input stream into a lazy sequence of events: a ``Token`` for every
maximal run of non-separator characters and a ``RowBreak`` for every newline.

Example:
    >>> import io
    >>> from tabstijl.models import SeparatorMode
    >>> list(tokenize(io.StringIO("a b\\n"), SeparatorMode.SPACE))
    [Token(text='a'), Token(text='b'), RowBreak()]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from .models import SeparatorMode

NEWLINE = "\n"


@dataclass(frozen=True)
class Token:
    """A maximal run of non-separator characters."""

    text: str


@dataclass(frozen=True)
class RowBreak:
    """Row boundary, emitted once per newline character."""


ROW_BREAK = RowBreak()

Event = Token | RowBreak


def is_separator(char: str, mode: SeparatorMode) -> bool:
    """
    Classify a character under a separator policy.

    Exact modes match their delimiter or a newline; ``WHITESPACE`` matches any
    character for which ``str.isspace`` is true.
    """
    delimiter = mode.char
    if delimiter is None:
        return char.isspace()
    return char == delimiter or char == NEWLINE


def iter_chars(source: TextIO | Iterable[str]) -> Iterator[str]:
    """
    Yield the characters of a text stream or an iterable of characters.

    Streams are read one character at a time until end of stream.
    """
    read = getattr(source, "read", None)
    if read is None:
        yield from source  # type: ignore[misc]
        return
    while True:
        char = read(1)
        if not char:
            return
        yield char


def tokenize(
    source: TextIO | Iterable[str],
    mode: SeparatorMode = SeparatorMode.SPACE,
) -> Iterator[Event]:
    """
    Split input into tokens and row boundaries.

    Args:
        source: Text stream or iterable of characters
        mode: Separator policy

    Yields:
        ``Token`` for each non-empty run of content characters, ``ROW_BREAK``
        for each newline. Content buffered at end of stream is flushed as a
        final token.
    """
    buffer: list[str] = []
    for char in iter_chars(source):
        if not is_separator(char, mode):
            buffer.append(char)
            continue

        if buffer:
            yield Token("".join(buffer))
            buffer.clear()

        if char == NEWLINE:
            yield ROW_BREAK

    if buffer:
        yield Token("".join(buffer))
