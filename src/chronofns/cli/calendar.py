"""Calendar math CLI commands.

Commands:
    chronofns calendar add 2025-01-31 1 month
    chronofns calendar subtract 2025-07-09T15:00 3 day
    chronofns calendar diff 2025-09-09 2025-07-09 month
"""

from __future__ import annotations

from datetime import datetime

import typer

from chronofns.core.calendar import add_units, difference_in, subtract_units
from chronofns.core.timestamps import to_timestamp
from chronofns.errors import CalendarError, ChronoError
from chronofns.errors.user_messages import format_error_for_cli

calendar_app = typer.Typer(help="Calendar arithmetic")


def _fail(error: ChronoError) -> None:
    typer.echo(format_error_for_cli(error), err=True)
    raise typer.Exit(1)


def _fail_out_of_range(error: Exception) -> None:
    _fail(CalendarError(f"Result out of range: {error}"))


def _echo_timestamp(value: datetime) -> None:
    typer.echo(value.isoformat(timespec="milliseconds"))


@calendar_app.command("add")
def add_command(
    timestamp: str = typer.Argument(..., help="Base timestamp (ISO 8601)"),
    amount: int = typer.Argument(..., help="Number of units"),
    unit: str = typer.Argument(..., help="millisecond|second|minute|hour|day|week|month|year"),
) -> None:
    """Add AMOUNT UNITs to TIMESTAMP."""
    try:
        _echo_timestamp(add_units(to_timestamp(timestamp), amount, unit))
    except ChronoError as e:
        _fail(e)
    except (OverflowError, ValueError) as e:
        _fail_out_of_range(e)


@calendar_app.command("subtract")
def subtract_command(
    timestamp: str = typer.Argument(..., help="Base timestamp (ISO 8601)"),
    amount: int = typer.Argument(..., help="Number of units"),
    unit: str = typer.Argument(..., help="millisecond|second|minute|hour|day|week|month|year"),
) -> None:
    """Subtract AMOUNT UNITs from TIMESTAMP."""
    try:
        _echo_timestamp(subtract_units(to_timestamp(timestamp), amount, unit))
    except ChronoError as e:
        _fail(e)
    except (OverflowError, ValueError) as e:
        _fail_out_of_range(e)


@calendar_app.command("diff")
def diff_command(
    first: str = typer.Argument(..., help="Timestamp A (ISO 8601)"),
    second: str = typer.Argument(..., help="Timestamp B (ISO 8601)"),
    unit: str = typer.Argument(..., help="millisecond|second|minute|hour|day|week|month|year"),
) -> None:
    """Print A - B in whole UNITs."""
    try:
        typer.echo(str(difference_in(first, second, unit)))
    except ChronoError as e:
        _fail(e)
    except (OverflowError, ValueError) as e:
        _fail_out_of_range(e)
