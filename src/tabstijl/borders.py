"""
Border presets and horizontal rule rendering.

Example output of ``render_border`` for widths ``[4, 3]`` with the single
preset's top glyphs:

    ┌────┬───┐
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import click

from .models import BorderGlyphSet, BorderStyle, Color


class BorderPreset(Enum):
    """Named border glyph sets."""

    SINGLE = "single"
    DOUBLE = "double"
    HEAVY = "heavy"
    STAR = "star"

    @property
    def style(self) -> BorderStyle:
        """Glyphs for this preset."""
        return BORDER_STYLES[self]


_STAR = BorderGlyphSet("✲", "✲", "✲", "✲")

BORDER_STYLES: dict[BorderPreset, BorderStyle] = {
    BorderPreset.SINGLE: BorderStyle(
        top=BorderGlyphSet("┌", "┬", "┐", "─"),
        separator=BorderGlyphSet("├", "┼", "┤", "─"),
        bottom=BorderGlyphSet("└", "┴", "┘", "─"),
        vertical="│",
    ),
    BorderPreset.DOUBLE: BorderStyle(
        top=BorderGlyphSet("╔", "╦", "╗", "═"),
        separator=BorderGlyphSet("╠", "╬", "╣", "═"),
        bottom=BorderGlyphSet("╚", "╩", "╝", "═"),
        vertical="║",
    ),
    BorderPreset.HEAVY: BorderStyle(
        top=BorderGlyphSet("┏", "┳", "┓", "━"),
        separator=BorderGlyphSet("┣", "╋", "┫", "━"),
        bottom=BorderGlyphSet("┗", "┻", "┛", "━"),
        vertical="┃",
    ),
    BorderPreset.STAR: BorderStyle(
        top=_STAR,
        separator=_STAR,
        bottom=_STAR,
        vertical="║",
    ),
}


def render_border(
    widths: Sequence[int],
    glyphs: BorderGlyphSet,
    color: Color | None = None,
) -> str:
    """
    Render one horizontal rule.

    Each column contributes ``fill * width``; junctions sit between adjacent
    columns so they line up with the vertical dividers of the rows.

    Args:
        widths: Column widths, padding included
        glyphs: Left, junction, right and fill glyphs
        color: Optional color for the whole rule

    Returns:
        The rule followed by a newline
    """
    line = glyphs.left + glyphs.junction.join(glyphs.fill * w for w in widths) + glyphs.right
    if color is not None:
        line = click.style(line, fg=color.value)
    return line + "\n"
