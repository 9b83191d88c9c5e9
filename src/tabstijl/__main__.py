"""Allow ``python -m tabstijl``."""

from .cli import cli

cli(prog_name="tabstijl")
