"""Command line entry points for chronofns."""

from typer import Typer

from .calendar import calendar_app
from .phrase import phrase_app


cli = Typer(help="chronofns command line tools")
cli.add_typer(phrase_app, name="phrase")
cli.add_typer(calendar_app, name="calendar")

__all__ = ["cli", "phrase_app", "calendar_app"]
