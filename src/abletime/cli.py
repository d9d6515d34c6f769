"""Command-line interface for abletime."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer

from .config import ConfigError, ScanSettings

app = typer.Typer(help="Estimate time spent on a project from its saved files.")

logger = logging.getLogger(__name__)


def _print_version(value: bool) -> None:
    if not value:
        return
    try:
        typer.echo(version("abletime"))
    except PackageNotFoundError:
        typer.echo("unknown")
    raise typer.Exit()


@app.callback(no_args_is_help=True)
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def summary(
    directory: Path = typer.Argument(
        Path("."),
        path_type=Path,
        help="Directory to inspect. Defaults to the current directory.",
    ),
    suffix: Optional[str] = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Project file suffix. Defaults to .als (Ableton Live sets).",
    ),
    max_minutes_between_saves: Optional[int] = typer.Option(
        None,
        "--max-minutes-between-saves",
        "-m",
        help=(
            "Maximum number of minutes allowed between saves for time to be "
            "counted. Values <= 0 disable the limit. Defaults to 60."
        ),
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        path_type=Path,
        help="Settings file to read instead of the per-user config.toml.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Print time spent on each project file, each session and in total."""
    from .reporting import SummaryPrinter
    from .scanner import scan_project_files

    try:
        settings = ScanSettings.from_options(
            directory,
            suffix=suffix,
            max_minutes_between_saves=max_minutes_between_saves,
            config_path=config_path,
        )
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    try:
        project_files = scan_project_files(
            settings.directory, settings.suffix, settings.max_minutes_between_saves
        )
    except OSError as exc:
        logger.debug("Scan of %s failed", settings.directory, exc_info=True)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    printer = SummaryPrinter()
    if as_json:
        printer.print_json(project_files, settings)
    else:
        printer.print_project_summary(project_files)
