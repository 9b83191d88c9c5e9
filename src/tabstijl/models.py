"""Core models for tabstijl."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Color(Enum):
    """Terminal colors usable for text, background and borders."""

    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


class TextStyle(Enum):
    """Text decorations applied to a table section."""

    BOLD = "bold"
    INVERSE = "inverse"
    ITALIC = "italic"
    STRIKE = "strike"
    UNDERLINE = "underline"

    @property
    def style_flag(self) -> str:
        """Keyword understood by ``click.style`` for this decoration."""
        return _STYLE_FLAGS[self]


_STYLE_FLAGS = {
    TextStyle.BOLD: "bold",
    TextStyle.INVERSE: "reverse",
    TextStyle.ITALIC: "italic",
    TextStyle.STRIKE: "strikethrough",
    TextStyle.UNDERLINE: "underline",
}


class Alignment(Enum):
    """Horizontal alignment of cell text within its column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SeparatorMode(Enum):
    """
    Which characters terminate a token.

    The three exact modes split on one character (plus newline, which always
    ends a row). ``WHITESPACE`` splits on any whitespace code point.
    """

    NEWLINE = "newln"
    SPACE = "space"
    TAB = "tab"
    WHITESPACE = "wspace"

    @property
    def char(self) -> str | None:
        """The exact delimiter character, or None for any-whitespace."""
        return _SEPARATOR_CHARS[self]


_SEPARATOR_CHARS = {
    SeparatorMode.NEWLINE: "\n",
    SeparatorMode.SPACE: " ",
    SeparatorMode.TAB: "\t",
    SeparatorMode.WHITESPACE: None,
}


@dataclass(frozen=True)
class BorderGlyphSet:
    """
    Glyphs for one horizontal rule.

    Attributes:
        left: Left corner
        junction: Drawn where a vertical divider meets the rule
        right: Right corner
        fill: Repeated once per character of column width
    """

    left: str
    junction: str
    right: str
    fill: str


@dataclass(frozen=True)
class BorderStyle:
    """Top, header-separator and bottom rules plus the shared vertical divider."""

    top: BorderGlyphSet
    separator: BorderGlyphSet
    bottom: BorderGlyphSet
    vertical: str


@dataclass(frozen=True)
class StyleSpec:
    """
    Styling for one table section (header or body).

    Attributes:
        fg: Text color
        bg: Background color
        decoration: Text decoration
        align: Horizontal alignment of cell text
    """

    fg: Color | None = None
    bg: Color | None = None
    decoration: TextStyle | None = None
    align: Alignment = Alignment.LEFT

    @property
    def is_plain(self) -> bool:
        """True when no ANSI styling applies."""
        return self.fg is None and self.bg is None and self.decoration is None

    def style_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``click.style`` that reproduce this style."""
        kwargs: dict[str, Any] = {}
        if self.fg is not None:
            kwargs["fg"] = self.fg.value
        if self.bg is not None:
            kwargs["bg"] = self.bg.value
        if self.decoration is not None:
            kwargs[self.decoration.style_flag] = True
        return kwargs


@dataclass
class Table:
    """
    Fully materialized table data.

    Rows may be ragged; missing trailing cells render as empty strings.
    """

    rows: list[list[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        """Length of the longest row (0 for an empty table)."""
        return max((len(row) for row in self.rows), default=0)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self.rows)
