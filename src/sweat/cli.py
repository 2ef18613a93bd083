"""SWEAT command-line interface.

This module provides the command-line interface for comparing the
temperature variability of weather stations, either straight from the
NOAA ISD archive or from decoded station files on disk.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Final

import typer

from sweat.errors import SweatError
from sweat.isd import ArchiveError, ISDArchive
from sweat.models import LocationReport
from sweat.pipeline import analyze_station, compare_locations
from sweat.settings import UserSettings
from sweat.utils import format_summary, read_lines

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Strange WEather in AusTin - station temperature statistics", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "sweat.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DAILY_OPTION = typer.Option(False, "--daily", "-d", help="Also print per-day statistics")
YEAR_OPTION = typer.Option(None, "--year", "-y", help="Override the configured year")
WBAN_OPTION = typer.Option(None, "--wban", "-w", help="Station WBAN (repeatable)")
NO_CACHE_OPTION = typer.Option(False, "--no-cache", help="Ignore decoded files in data_dir")
FILES_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Decoded ISD files")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load_settings(config: Path | None) -> UserSettings:
    try:
        return UserSettings.load(config)
    except FileNotFoundError:
        if config is not None or os.environ.get("SWEAT_CONFIG"):
            raise
        logger.info("No configuration file found, using defaults")
        return UserSettings()


def _echo_report(report: LocationReport, daily: bool) -> None:
    stats = report.statistics
    typer.echo(
        f"{report.location} ({report.year}): {stats.valid_days} days with data, "
        f"{report.accepted} records kept, {report.rejected} rejected"
    )
    typer.echo(f"City mean: {format_summary(stats.daily_means)}")
    typer.echo(f"City SD: {format_summary(stats.daily_deviations)}")
    if daily:
        for doy, day in report.days_with_data:
            typer.echo(f"  day {doy:3d}: {format_summary(day)}")


@app.command()
def run(
    config: Path | None = CONFIG_OPTION,
    year: int | None = YEAR_OPTION,
    wban: list[str] | None = WBAN_OPTION,
    daily: bool = DAILY_OPTION,
    no_cache: bool = NO_CACHE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Fetch each configured station from the archive and compare them."""
    _configure_logging(debug)

    try:
        settings = _load_settings(config)
        overrides: dict[str, Any] = {}
        if year is not None:
            overrides["year"] = year
        if wban:
            overrides["wbans"] = wban
        if overrides:
            settings = UserSettings.model_validate({**settings.model_dump(), **overrides})
    except (FileNotFoundError, RuntimeError, ValueError) as exc:
        raise _fail(str(exc)) from exc

    archive = ISDArchive(settings)
    try:
        sources = {
            station: archive.fetch_lines(settings.year, station, use_cache=not no_cache)
            for station in settings.wbans
        }
        reports = compare_locations(sources)
    except ArchiveError as exc:
        raise _fail(f"Archive error: {exc}") from exc
    except SweatError as exc:
        raise _fail(f"Data error: {exc}") from exc

    for report in reports:
        _echo_report(report, daily)


@app.command()
def analyze(
    files: list[Path] = FILES_ARGUMENT,
    daily: bool = DAILY_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Analyze decoded ISD station files already on disk."""
    _configure_logging(debug)

    for path in files:
        try:
            report = analyze_station(read_lines(path), path.name)
        except UnicodeDecodeError as exc:
            raise _fail(f"{path}: not a decoded text file ({exc.reason})") from exc
        except SweatError as exc:
            raise _fail(f"{path}: {exc}") from exc
        _echo_report(report, daily)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
