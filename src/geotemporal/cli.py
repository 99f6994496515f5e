"""Command-line interface for geotemporal.

Typer application exposing the date and template operations:

    geotemporal parse 2345-6-7 --resolution month
    geotemporal offset 1999-12 1 --resolution month
    geotemporal format-range 2001 2005 --resolution year
    geotemporal fill "/api/{name}" -v name="a b"
    geotemporal fill "/q/{filter}" -v filter='{"a": 1}' --store

Settings are read from --config (TOML) and GEOTEMPORAL_* environment
variables; command options override them. Malformed input exits with code 2.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer

from .config import Settings, load_settings
from .dates import format_at_precision, format_range_at_precision, offset_at_precision, parse_at_precision
from .exceptions import GeotemporalError
from .precision import Precision, get_precision_by_resolution
from .template import fill_template_string
from .utils import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Precision-aware dates and template filling.", no_args_is_help=True)

EXIT_USAGE = 2


class _State:
    settings: Settings = Settings()


state = _State()


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="TOML configuration file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging.level"),
) -> None:
    """Load settings and configure logging before any command runs."""
    try:
        settings = load_settings(config)
    except (GeotemporalError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    level = log_level or settings.logging.level
    try:
        configure_logging(level, structured=settings.logging.structured)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    state.settings = settings
    logger.debug("Loaded settings: %s", settings.model_dump())


def _resolve_precision(resolution: Optional[str]) -> Precision:
    name = resolution or state.settings.dates.default_resolution
    try:
        return get_precision_by_resolution(name)
    except GeotemporalError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE)


def _parse(date_string: str, precision: Precision):
    try:
        return parse_at_precision(date_string, precision, delimiter=state.settings.dates.delimiter)
    except GeotemporalError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE)


@app.command()
def parse(
    date_string: str = typer.Argument(..., help="Date string, e.g. 2345-6-7 or -0099-03-15"),
    resolution: Optional[str] = typer.Option(None, "--resolution", "-r", help="Precision name"),
) -> None:
    """Parse a date string and print it normalized at the precision."""
    precision = _resolve_precision(resolution)
    instant = _parse(date_string, precision)

    typer.echo(format_at_precision(instant, precision, delimiter=state.settings.dates.delimiter))
    typer.echo(instant.isoformat())


@app.command()
def offset(
    date_string: str = typer.Argument(..., help="Starting date string"),
    amount: int = typer.Argument(..., help="Signed number of precision units"),
    resolution: Optional[str] = typer.Option(None, "--resolution", "-r", help="Precision name"),
) -> None:
    """Shift a date by a number of units at the precision."""
    precision = _resolve_precision(resolution)
    instant = offset_at_precision(_parse(date_string, precision), precision, amount)

    typer.echo(format_at_precision(instant, precision, delimiter=state.settings.dates.delimiter))


@app.command("format-range")
def format_range(
    start: str = typer.Argument(..., help="Range start date string"),
    end: str = typer.Argument(..., help="Range end date string"),
    resolution: Optional[str] = typer.Option(None, "--resolution", "-r", help="Precision name"),
) -> None:
    """Print a normalized ``start - end`` range."""
    precision = _resolve_precision(resolution)
    dates_config = state.settings.dates

    typer.echo(
        format_range_at_precision(
            precision,
            _parse(start, precision),
            _parse(end, precision),
            delimiter=dates_config.delimiter,
            separator=dates_config.range_separator,
        )
    )


def _parse_assignments(assignments: List[str], decode_json: bool) -> dict[str, Any]:
    fillers: dict[str, Any] = {}
    for assignment in assignments:
        name, sep, raw = assignment.partition("=")
        if not sep or not name:
            typer.echo(f"Error: expected NAME=VALUE, got '{assignment}'", err=True)
            raise typer.Exit(code=EXIT_USAGE)

        value: Any = raw
        if decode_json:
            try:
                value = json.loads(raw)
            except json.JSONDecodeError:
                # Not JSON: keep the raw text
                value = raw
        fillers[name] = value
    return fillers


@app.command()
def fill(
    template: str = typer.Argument(..., help="Template containing {name} placeholders"),
    values: List[str] = typer.Option([], "--value", "-v", help="Filler as NAME=VALUE (repeatable)"),
    store: bool = typer.Option(False, "--store", help="JSON-decode values and divert non-strings to a side store"),
) -> None:
    """Fill template placeholders and print the result."""
    fillers = _parse_assignments(values, decode_json=store)
    data_store: Optional[dict[str, Any]] = {} if store else None

    typer.echo(fill_template_string(template, fillers, data_store))

    if data_store is not None:
        typer.echo(json.dumps(data_store, sort_keys=True))


if __name__ == "__main__":
    app()
