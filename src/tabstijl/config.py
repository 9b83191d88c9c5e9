"""
Render configuration.

``RenderConfig`` is the immutable value handed to the rendering core.
``build_config`` turns loosely typed option values (command line, YAML
defaults file, or library callers) into a validated ``RenderConfig``.

Precedence inside ``build_config``: theme first, then options shared by both
sections (``text_color``, ``bg_color``...), then section-specific options
(``htext_color``, ``bbg_color``...).
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .borders import BorderPreset
from .exceptions import ConfigFileError, ValidationError
from .models import Alignment, BorderStyle, Color, SeparatorMode, StyleSpec, TextStyle
from .themes import Theme, get_theme

E = TypeVar("E", bound=Enum)

DEFAULT_PADDING = 2

# Keyword arguments accepted by build_config, also the keys allowed in a
# YAML defaults file.
OPTION_NAMES = (
    "borderless",
    "border_style",
    "fusion",
    "simplify",
    "hdata",
    "padding",
    "separator",
    "tab_color",
    "text_color",
    "htext_color",
    "btext_color",
    "bg_color",
    "hbg_color",
    "bbg_color",
    "text_style",
    "htext_style",
    "btext_style",
    "text_align",
    "htext_align",
    "btext_align",
    "theme",
)


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything the table renderer needs to know.

    Attributes:
        separator: Separator policy for the tokenizer
        padding: Spaces added to every column width
        borders: Draw borders and vertical dividers
        border_preset: Glyph set used when borders are drawn
        table_color: Color of borders and dividers
        header: Style of the header row
        body: Style of body rows
        header_names: Replacement for the first row, empty to keep it
        exclude_header: Drop the first input line before collecting rows
        headerless: Render every row, including the first, as body
        show_separator: Draw the rule between header and body
    """

    separator: SeparatorMode = SeparatorMode.SPACE
    padding: int = DEFAULT_PADDING
    borders: bool = True
    border_preset: BorderPreset = BorderPreset.SINGLE
    table_color: Color | None = None
    header: StyleSpec = StyleSpec()
    body: StyleSpec = StyleSpec()
    header_names: tuple[str, ...] = ()
    exclude_header: bool = False
    headerless: bool = False
    show_separator: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.padding, bool) or not isinstance(self.padding, int):
            raise ValidationError("padding", self.padding, "must be an integer")
        if self.padding < 0:
            raise ValidationError("padding", self.padding, "must be >= 0")

    @property
    def border_style(self) -> BorderStyle:
        """Glyphs of the selected border preset."""
        return self.border_preset.style

    def with_theme(self, theme: Theme) -> RenderConfig:
        """
        Return a copy with a theme applied.

        The theme replaces the border preset, table color and both section
        styles; the separator changes only if the theme names one.
        """
        return dataclasses.replace(
            self,
            border_preset=theme.border,
            table_color=theme.table_color,
            header=theme.header,
            body=theme.body,
            separator=theme.separator or self.separator,
        )


def _choice(enum_cls: type[E], field: str, value: Any) -> E | None:
    """Convert an option value to an enum member, passing None and members through."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(field, value, f"Must be one of: {choices}") from None


def parse_header_names(value: str) -> tuple[str, ...]:
    """
    Split a comma-separated header list.

    Empty names between commas are kept; a single trailing comma is ignored.

    Raises:
        ValidationError: If the value is empty
    """
    if not value:
        raise ValidationError("hdata", value, "Header list cannot be empty")
    names = value.split(",")
    if names[-1] == "":
        names.pop()
    return tuple(names)


def _section(
    base: StyleSpec,
    fg: Color | None,
    bg: Color | None,
    decoration: TextStyle | None,
    align: Alignment | None,
) -> StyleSpec:
    return StyleSpec(
        fg=fg or base.fg,
        bg=bg or base.bg,
        decoration=decoration or base.decoration,
        align=align or base.align,
    )


def build_config(
    *,
    borderless: bool = False,
    border_style: str | BorderPreset | None = None,
    fusion: bool = False,
    simplify: bool = False,
    hdata: str | None = None,
    padding: int | None = None,
    separator: str | SeparatorMode | None = None,
    tab_color: str | Color | None = None,
    text_color: str | Color | None = None,
    htext_color: str | Color | None = None,
    btext_color: str | Color | None = None,
    bg_color: str | Color | None = None,
    hbg_color: str | Color | None = None,
    bbg_color: str | Color | None = None,
    text_style: str | TextStyle | None = None,
    htext_style: str | TextStyle | None = None,
    btext_style: str | TextStyle | None = None,
    text_align: str | Alignment | None = None,
    htext_align: str | Alignment | None = None,
    btext_align: str | Alignment | None = None,
    theme: str | None = None,
) -> RenderConfig:
    """
    Build a validated configuration from option values.

    Option names follow the command line flags. ``simplify`` turns on both
    headerless rendering and exclusion of the first input line.

    Raises:
        ValidationError: If any value is outside its allowed set
    """
    config = RenderConfig()
    if theme is not None:
        config = config.with_theme(get_theme(theme))

    header = _section(
        config.header,
        _choice(Color, "htext_color", htext_color) or _choice(Color, "text_color", text_color),
        _choice(Color, "hbg_color", hbg_color) or _choice(Color, "bg_color", bg_color),
        _choice(TextStyle, "htext_style", htext_style)
        or _choice(TextStyle, "text_style", text_style),
        _choice(Alignment, "htext_align", htext_align)
        or _choice(Alignment, "text_align", text_align),
    )
    body = _section(
        config.body,
        _choice(Color, "btext_color", btext_color) or _choice(Color, "text_color", text_color),
        _choice(Color, "bbg_color", bbg_color) or _choice(Color, "bg_color", bg_color),
        _choice(TextStyle, "btext_style", btext_style)
        or _choice(TextStyle, "text_style", text_style),
        _choice(Alignment, "btext_align", btext_align)
        or _choice(Alignment, "text_align", text_align),
    )

    return dataclasses.replace(
        config,
        separator=_choice(SeparatorMode, "separator", separator) or config.separator,
        padding=config.padding if padding is None else padding,
        borders=not borderless,
        border_preset=_choice(BorderPreset, "border_style", border_style)
        or config.border_preset,
        table_color=_choice(Color, "tab_color", tab_color) or config.table_color,
        header=header,
        body=body,
        header_names=parse_header_names(hdata) if hdata is not None else (),
        exclude_header=simplify,
        headerless=simplify,
        show_separator=not fusion,
    )


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Load option defaults from a YAML file.

    Keys are option names, with either hyphens or underscores
    (``border-style`` or ``border_style``). An empty file yields no defaults.
    ``hdata`` may be a list of names instead of a comma-separated string.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, is not
            a mapping, names an unknown option, or gives a list or mapping where a
            single value is expected
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigFileError(str(path), e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigFileError(str(path), f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(str(path), "Top level must be a mapping of option names")

    defaults: dict[str, Any] = {}
    for key, value in data.items():
        name = str(key).replace("-", "_")
        if name not in OPTION_NAMES:
            raise ConfigFileError(str(path), f"Unknown option '{key}'")
        if name == "hdata" and isinstance(value, list):
            value = ",".join(str(item) for item in value)
        if isinstance(value, (list, dict)):
            raise ConfigFileError(str(path), f"Option '{key}' must be a single value")
        defaults[name] = value
    return defaults
