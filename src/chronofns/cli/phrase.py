"""Phrase resolution CLI commands.

Commands:
    chronofns phrase parse "next friday" "in 2 hours" --reference 2025-07-09T15:00
    chronofns phrase parse "tomorrow" --json
    chronofns phrase check "3 days ago"
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from chronofns.configuration.settings import bootstrap_settings
from chronofns.core.timestamps import to_timestamp
from chronofns.errors import ChronoError
from chronofns.errors.user_messages import format_error_for_cli
from chronofns.nlp.models import ParseOptions
from chronofns.nlp.resolver import resolve_natural

logger = logging.getLogger(__name__)

console = Console()
phrase_app = typer.Typer(help="Resolve natural-language date phrases")


def build_options(
    reference: Optional[str],
    strict: Optional[bool],
    week_start: Optional[int],
    config_path: Optional[Path],
    verbose: bool = False,
) -> ParseOptions:
    """Merge config file, environment and command-line flags into ParseOptions.

    Prints a user-facing message and exits with status 1 on bad input.
    """
    try:
        settings = bootstrap_settings(
            path=config_path,
            overrides={"strict": strict, "week_start_day": week_start},
        )
        logging.basicConfig(level=logging.DEBUG if verbose else settings.logging_level)
        reference_instant = to_timestamp(reference) if reference else None
        return settings.to_parse_options(reference_instant)
    except ChronoError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(1)


@phrase_app.command("parse")
def parse_phrases(
    phrases: List[str] = typer.Argument(..., help="Phrases to resolve"),
    reference: Optional[str] = typer.Option(
        None, "--reference", "-r", help="Reference instant (ISO 8601); defaults to now"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Disable the date-literal fallback"
    ),
    week_start: Optional[int] = typer.Option(
        None, "--week-start", min=0, max=6, help="First day of the week (0 = Sunday)"
    ),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Settings file (JSON)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Resolve each phrase and show its instant, confidence and spans."""
    options = build_options(reference, strict, week_start, config_path, verbose)
    logger.debug(f"Resolving {len(phrases)} phrase(s), reference={options.reference_instant}")
    results = [(phrase, resolve_natural(phrase, options)) for phrase in phrases]

    if output_json:
        payload = [{"input": phrase, **result.to_dict()} for phrase, result in results]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Resolved phrases")
    table.add_column("Phrase", style="bold")
    table.add_column("Instant")
    table.add_column("Confidence", justify="right")
    table.add_column("Recognizer")
    table.add_column("Remaining")

    for phrase, result in results:
        if result.instant is None:
            table.add_row(phrase, "[red]could not parse[/red]", "0.00", "-", result.remaining)
            continue
        table.add_row(
            phrase,
            result.instant.isoformat(sep=" ", timespec="milliseconds"),
            f"{result.confidence:.2f}",
            result.kind.value if result.kind else "-",
            result.remaining,
        )

    console.print(table)


@phrase_app.command("check")
def check_phrase(
    phrase: str = typer.Argument(..., help="Phrase to check"),
    reference: Optional[str] = typer.Option(
        None, "--reference", "-r", help="Reference instant (ISO 8601); defaults to now"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Disable the date-literal fallback"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Settings file (JSON)"
    ),
) -> None:
    """Exit 0 when the phrase resolves with more than fallback confidence, else 1."""
    options = build_options(reference, strict, None, config_path)
    result = resolve_natural(phrase, options)

    if result.trusted:
        typer.echo(f"'{phrase}' resolves to {result.instant.isoformat()} ({result.confidence:.2f})")
        return

    typer.echo(f"'{phrase}' cannot be resolved reliably ({result.confidence:.2f})")
    raise typer.Exit(1)
