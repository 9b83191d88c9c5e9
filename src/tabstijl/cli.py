"""Command-line interface for tabstijl."""

import logging
import sys
from typing import Any

import click

from . import __version__, format_table
from .borders import BorderPreset
from .config import build_config, load_config_file
from .exceptions import TabstijlError
from .models import Alignment, Color, SeparatorMode, TextStyle
from .themes import THEMES

COLORS = click.Choice([c.value for c in Color], case_sensitive=False)
TEXT_STYLES = click.Choice([s.value for s in TextStyle], case_sensitive=False)
ALIGNMENTS = click.Choice([a.value for a in Alignment], case_sensitive=False)


def _load_defaults(ctx: click.Context, param: click.Parameter, value: str | None) -> None:
    """Use a YAML file as the default map for the remaining options."""
    if value is None:
        return
    try:
        defaults = load_config_file(value)
    except TabstijlError as e:
        click.echo(f"✗ {e}", err=True)
        ctx.exit(1)
    ctx.default_map = {**(ctx.default_map or {}), **defaults}


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "auto_envvar_prefix": "TABSTIJL",
    }
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="tabstijl",
    message="%(prog)s %(version)s",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    is_eager=True,
    expose_value=False,
    callback=_load_defaults,
    help="YAML file with option defaults (keys are option names)",
)
@click.option("-b", "--borderless", is_flag=True, help="Hide table border")
@click.option(
    "--border-style",
    type=click.Choice([p.value for p in BorderPreset], case_sensitive=False),
    help="Border style (default: single)",
)
@click.option("-f", "--fusion", is_flag=True, help="Hide the separator between header and body")
@click.option(
    "-s",
    "--simplify",
    is_flag=True,
    help="Show table in simple form (first line skipped, no header)",
)
@click.option(
    "--hdata",
    help="Header data (column names) separated by commas, e.g. perm,user,group,size,name",
)
@click.option(
    "--padding",
    type=click.IntRange(min=0),
    help="Spaces added to every column (default: 2)",
)
@click.option(
    "--separator",
    type=click.Choice([m.value for m in SeparatorMode], case_sensitive=False),
    help="Column separator; wspace splits on every whitespace (default: space)",
)
@click.option("--tab-color", type=COLORS, help="Table border color")
@click.option("--text-color", type=COLORS, help="Header and body text color")
@click.option("--htext-color", type=COLORS, help="Header text color")
@click.option("--btext-color", type=COLORS, help="Body text color")
@click.option("--bg-color", type=COLORS, help="Header and body background color")
@click.option("--hbg-color", type=COLORS, help="Header background color")
@click.option("--bbg-color", type=COLORS, help="Body background color")
@click.option("--text-style", type=TEXT_STYLES, help="Header and body text style")
@click.option("--htext-style", type=TEXT_STYLES, help="Header text style")
@click.option("--btext-style", type=TEXT_STYLES, help="Body text style")
@click.option("--text-align", type=ALIGNMENTS, help="Header and body text alignment")
@click.option("--htext-align", type=ALIGNMENTS, help="Header text alignment")
@click.option("--btext-align", type=ALIGNMENTS, help="Body text alignment")
@click.option(
    "--theme",
    type=click.Choice(sorted(THEMES), case_sensitive=False),
    help="Table theme; individual options override it",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or strip ANSI styling (default: only when writing to a terminal)",
)
@click.option("--debug", is_flag=True, help="Log pipeline details to stderr")
def cli(
    borderless: bool,
    border_style: str | None,
    fusion: bool,
    simplify: bool,
    hdata: str | None,
    padding: int | None,
    separator: str | None,
    tab_color: str | None,
    text_color: str | None,
    htext_color: str | None,
    btext_color: str | None,
    bg_color: str | None,
    hbg_color: str | None,
    bbg_color: str | None,
    text_style: str | None,
    htext_style: str | None,
    btext_style: str | None,
    text_align: str | None,
    htext_align: str | None,
    btext_align: str | None,
    theme: str | None,
    color: bool | None,
    debug: bool,
) -> None:
    """Parse tabular data from standard input and display it as a formatted table.

    \b
    Example:
        ls -l | tabstijl --simplify --theme=matrix
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )

    options: dict[str, Any] = {
        "borderless": borderless,
        "border_style": border_style,
        "fusion": fusion,
        "simplify": simplify,
        "hdata": hdata,
        "padding": padding,
        "separator": separator,
        "tab_color": tab_color,
        "text_color": text_color,
        "htext_color": htext_color,
        "btext_color": btext_color,
        "bg_color": bg_color,
        "hbg_color": hbg_color,
        "bbg_color": bbg_color,
        "text_style": text_style,
        "htext_style": htext_style,
        "btext_style": btext_style,
        "text_align": text_align,
        "htext_align": htext_align,
        "btext_align": btext_align,
        "theme": theme,
    }

    try:
        config = build_config(**options)
    except TabstijlError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    output = format_table(sys.stdin, config)
    click.echo(output, nl=False, color=color)


if __name__ == "__main__":
    cli()
