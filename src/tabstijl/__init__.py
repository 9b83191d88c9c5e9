"""
tabstijl: render delimited text as a styled, aligned table.

Reads whitespace- or character-delimited records, computes column widths from
the whole data set and draws the result with box-drawing borders, ANSI colors
and per-section alignment.

Example:
    import io
    from tabstijl import build_config, format_table

    config = build_config(theme="matrix", padding=1)
    print(format_table(io.StringIO("name size\\napp.py 120\\n"), config), end="")

Pipeline:
    tokenize -> collect_rows -> column_widths / align_text / render_border
    -> TableRenderer
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .borders import BORDER_STYLES, BorderPreset, render_border
from .collector import collect_rows
from .config import RenderConfig, build_config, load_config_file, parse_header_names
from .exceptions import ConfigFileError, TabstijlError, ValidationError
from .layout import align_text, column_widths
from .models import (
    Alignment,
    BorderGlyphSet,
    BorderStyle,
    Color,
    SeparatorMode,
    StyleSpec,
    Table,
    TextStyle,
)
from .renderer import RenderState, TableRenderer
from .themes import THEMES, Theme, get_theme
from .tokenizer import ROW_BREAK, RowBreak, Token, tokenize

__version__ = "0.1.0"


def read_table(source: TextIO | Iterable[str], config: RenderConfig | None = None) -> Table:
    """Tokenize and collect input into a Table using the config's header policy."""
    config = config or RenderConfig()
    return collect_rows(
        tokenize(source, config.separator),
        exclude_header=config.exclude_header,
        header=config.header_names,
    )


def format_table(source: TextIO | Iterable[str], config: RenderConfig | None = None) -> str:
    """
    Read all input and render it as a table.

    Args:
        source: Text stream or string of delimited records
        config: Rendering options (defaults to ``RenderConfig()``)

    Returns:
        The rendered table, newline-terminated
    """
    config = config or RenderConfig()
    return TableRenderer(config).render(read_table(source, config))


__all__ = [
    # Version
    "__version__",
    # Entry points
    "format_table",
    "read_table",
    # Pipeline stages
    "tokenize",
    "collect_rows",
    "column_widths",
    "align_text",
    "render_border",
    "TableRenderer",
    "RenderState",
    # Configuration
    "RenderConfig",
    "build_config",
    "load_config_file",
    "parse_header_names",
    "Theme",
    "THEMES",
    "get_theme",
    # Models
    "Alignment",
    "BorderGlyphSet",
    "BorderPreset",
    "BorderStyle",
    "BORDER_STYLES",
    "Color",
    "ROW_BREAK",
    "RowBreak",
    "SeparatorMode",
    "StyleSpec",
    "Table",
    "TextStyle",
    "Token",
    # Exceptions
    "TabstijlError",
    "ValidationError",
    "ConfigFileError",
]
