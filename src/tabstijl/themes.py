"""Named theme bundles."""

from __future__ import annotations

from dataclasses import dataclass

from .borders import BorderPreset
from .exceptions import ValidationError
from .models import Alignment, Color, SeparatorMode, StyleSpec, TextStyle


@dataclass(frozen=True)
class Theme:
    """
    Border, color and alignment defaults applied together.

    Attributes:
        name: Theme identifier used on the command line
        border: Border preset
        table_color: Border color (None keeps the terminal default)
        header: Header section style
        body: Body section style
        separator: Separator policy the theme implies, if any
    """

    name: str
    border: BorderPreset
    header: StyleSpec
    body: StyleSpec
    table_color: Color | None = None
    separator: SeparatorMode | None = None


THEMES: dict[str, Theme] = {
    theme.name: theme
    for theme in (
        Theme(
            name="matrix",
            border=BorderPreset.HEAVY,
            table_color=Color.GREEN,
            header=StyleSpec(fg=Color.GREEN, decoration=TextStyle.BOLD, align=Alignment.CENTER),
            body=StyleSpec(fg=Color.GREEN, decoration=TextStyle.BOLD),
        ),
        Theme(
            name="mecha",
            border=BorderPreset.DOUBLE,
            header=StyleSpec(bg=Color.CYAN, decoration=TextStyle.BOLD, align=Alignment.CENTER),
            body=StyleSpec(
                bg=Color.MAGENTA, decoration=TextStyle.UNDERLINE, align=Alignment.CENTER
            ),
        ),
        Theme(
            name="myth",
            border=BorderPreset.DOUBLE,
            table_color=Color.RED,
            header=StyleSpec(
                fg=Color.WHITE,
                bg=Color.RED,
                decoration=TextStyle.BOLD,
                align=Alignment.CENTER,
            ),
            body=StyleSpec(fg=Color.MAGENTA, bg=Color.BLACK, align=Alignment.CENTER),
        ),
        Theme(
            name="retro",
            border=BorderPreset.STAR,
            header=StyleSpec(bg=Color.RED, decoration=TextStyle.BOLD, align=Alignment.CENTER),
            body=StyleSpec(bg=Color.YELLOW, decoration=TextStyle.ITALIC, align=Alignment.CENTER),
        ),
        Theme(
            name="sticky",
            border=BorderPreset.DOUBLE,
            separator=SeparatorMode.TAB,
            header=StyleSpec(bg=Color.GREEN, decoration=TextStyle.BOLD, align=Alignment.CENTER),
            body=StyleSpec(bg=Color.YELLOW, decoration=TextStyle.UNDERLINE),
        ),
    )
}


def get_theme(name: str) -> Theme:
    """
    Look up a theme by name.

    Raises:
        ValidationError: If no theme has that name
    """
    try:
        return THEMES[name.lower()]
    except KeyError:
        choices = ", ".join(sorted(THEMES))
        raise ValidationError("theme", name, f"Must be one of: {choices}") from None
