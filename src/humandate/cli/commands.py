"""Parse commands for the humandate CLI.

Commands:
    humandate parse "last friday at 19:45" --now 2024-05-08T12:00:00 --json
    humandate repl

This is the only part of the package that reads the system clock.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from humandate.configuration.settings import (
    ParserSettings,
    TimeOfDayPolicy,
    WeekdayPolicy,
)
from humandate.errors import HumanDateError, ParseError, format_error_for_cli
from humandate.parsing.engine import HumanDateParser

logger = logging.getLogger(__name__)

console = Console()
error_console = Console(stderr=True)


def _format(moment: datetime) -> str:
    """YYYY-MM-DD HH:MM:SS, with the year zero-padded to four digits."""
    return moment.isoformat(sep=" ", timespec="seconds")


def configure_logging(verbose: bool) -> None:
    """Route library logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _parse_reference(value: Optional[str]) -> datetime:
    if value is None:
        return datetime.now()
    try:
        reference = datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"not an ISO date-time: {value!r}") from exc
    if reference.tzinfo is not None:
        raise typer.BadParameter("the reference must not carry a timezone")
    return reference


def parse_command(
    text: str = typer.Argument(..., help="Phrase to resolve, e.g. 'in 3 days'"),
    now: Optional[str] = typer.Option(
        None, "--now", "-n", help="Reference instant (ISO 8601, naive). Defaults to the system clock"
    ),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    bare_weekday: WeekdayPolicy = typer.Option(
        WeekdayPolicy.THIS_WEEK, "--bare-weekday", help="Placement of a weekday without this/last/next"
    ),
    weekday_time: TimeOfDayPolicy = typer.Option(
        TimeOfDayPolicy.MIDNIGHT, "--weekday-time", help="Time-of-day for weekday phrases without a time"
    ),
    keyword_time: TimeOfDayPolicy = typer.Option(
        TimeOfDayPolicy.REFERENCE, "--keyword-time", help="Time-of-day for today/tomorrow/... without a time"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log matcher decisions"),
) -> None:
    """Resolve a single phrase and print the date-time."""
    configure_logging(verbose)
    reference = _parse_reference(now)
    settings = ParserSettings(
        bare_weekday=bare_weekday,
        weekday_default_time=weekday_time,
        keyword_default_time=keyword_time,
    )

    try:
        result = HumanDateParser(settings).parse(text, reference)
    except HumanDateError as e:
        if output_json:
            print(json.dumps({"input": text, "reference": reference.isoformat(), "error": e.to_dict()}))
        else:
            error_console.print(f"[red]{escape(format_error_for_cli(e))}[/red]")
        raise typer.Exit(code=1)

    if output_json:
        print(json.dumps({
            "input": text,
            "reference": reference.isoformat(),
            "result": result.isoformat(),
        }))
    else:
        typer.echo(_format(result))


def repl_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log matcher decisions"),
) -> None:
    """Read phrases line by line and resolve each against the current time."""
    configure_logging(verbose)
    parser = HumanDateParser()

    for line in sys.stdin:
        if not line.strip():
            continue
        now = datetime.now()
        try:
            result = parser.parse(line.rstrip("\n"), now)
        except ParseError as e:
            console.print(f"[red]{escape(e.user_message)}[/red]")
            console.print(f"Suggestion: {escape(e.recovery_suggestion)}\n")
            continue
        console.print(f"Time now: {_format(now)}")
        console.print(f"Calculated: {_format(result)}\n")
