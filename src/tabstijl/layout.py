"""Column width computation and cell alignment."""

from __future__ import annotations

from .exceptions import ValidationError
from .models import Alignment, Table


def column_widths(table: Table, padding: int = 0) -> list[int]:
    """
    Compute one width per column index.

    ``width[i]`` is the longest cell in column ``i`` plus ``padding``. Rows
    shorter than ``i + 1`` do not contribute to column ``i``.

    Args:
        table: Fully collected table
        padding: Extra spaces added to every column

    Returns:
        List of widths, one per column of the widest row

    Raises:
        ValidationError: If padding is negative
    """
    if padding < 0:
        raise ValidationError("padding", padding, "must be >= 0")

    widths = [0] * table.column_count
    for row in table:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    return [w + padding for w in widths]


def align_text(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """
    Pad text with spaces to a column width.

    Text longer than the width is returned unchanged, never truncated. For
    center alignment an odd leftover space goes to the right.
    """
    pad = width - len(text)
    if pad <= 0:
        return text

    if alignment == Alignment.RIGHT:
        return " " * pad + text
    if alignment == Alignment.CENTER:
        left_pad = pad // 2
        return " " * left_pad + text + " " * (pad - left_pad)
    return text + " " * pad
