"""
Table renderer with box-drawing borders.

This module provides a TableRenderer class that turns a collected Table into
aligned, optionally styled text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from enum import Enum

import click

from .borders import render_border
from .config import RenderConfig
from .layout import align_text, column_widths
from .models import Color, StyleSpec, Table

logger = logging.getLogger(__name__)


class RenderState(Enum):
    """Progress of the renderer through a table."""

    BEFORE_FIRST_ROW = "before_first_row"
    RENDERING_HEADER = "rendering_header"
    RENDERING_BODY = "rendering_body"
    DONE = "done"


def _paint(text: str, style: StyleSpec) -> str:
    if style.is_plain:
        return text
    return click.style(text, **style.style_kwargs())


def _paint_border(text: str, color: Color | None) -> str:
    if color is None:
        return text
    return click.style(text, fg=color.value)


class TableRenderer:
    """Render a table with optional borders, header and styling.

    Example output (padding 1, single borders):
        ┌───┬─────┐
        │id │name │
        ├───┼─────┤
        │x  │y    │
        └───┴─────┘
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the table renderer.

        Args:
            config: Rendering options. Defaults to ``RenderConfig()``.
        """
        self._config = config or RenderConfig()
        self.state = RenderState.BEFORE_FIRST_ROW

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, table: Table) -> str:
        """Render a table as one string.

        Args:
            table: Fully collected table

        Returns:
            Rendered text, one newline-terminated line per table line.
            Empty when the table has no rows and borders are off.
        """
        return "".join(self.render_lines(table))

    def render_lines(self, table: Table) -> Iterator[str]:
        """Yield the rendered table line by line, each ending in a newline."""
        config = self._config
        border = config.border_style
        widths = column_widths(table, config.padding)
        logger.debug("Column widths: %s", widths)

        self.state = RenderState.BEFORE_FIRST_ROW
        if config.borders:
            yield render_border(widths, border.top, config.table_color)

        self.state = (
            RenderState.RENDERING_BODY if config.headerless else RenderState.RENDERING_HEADER
        )
        for row in table:
            if self.state == RenderState.RENDERING_HEADER:
                yield self._render_row(row, widths, config.header)
                if config.borders and config.show_separator:
                    yield render_border(widths, border.separator, config.table_color)
                self.state = RenderState.RENDERING_BODY
            else:
                yield self._render_row(row, widths, config.body)

        if config.borders:
            yield render_border(widths, border.bottom, config.table_color)
        self.state = RenderState.DONE

    def _render_row(self, row: Sequence[str], widths: Sequence[int], style: StyleSpec) -> str:
        """Render one row, filling missing trailing cells with empty strings."""
        config = self._config
        divider = ""
        if config.borders:
            divider = _paint_border(config.border_style.vertical, config.table_color)

        parts = [divider]
        for i, width in enumerate(widths):
            cell = row[i] if i < len(row) else ""
            parts.append(_paint(align_text(cell, width, style.align), style))
            parts.append(divider)
        return "".join(parts) + "\n"
