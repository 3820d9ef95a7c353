"""CLI entry point for logtrail."""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import Annotated

import typer

from logtrail import __version__
from logtrail.config import get_log_dir, load_config
from logtrail.discovery import expand_paths
from logtrail.errors import PathError
from logtrail.levels import LevelCache
from logtrail.logging_setup import setup_logging
from logtrail.tailer import TailCoordinator

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"logtrail {__version__}")
        raise typer.Exit


@app.command()
def tail(
    paths: Annotated[list[Path] | None, typer.Argument(help="Log files or directories to tail")] = None,
    extension: Annotated[
        str | None,
        typer.Option("--extension", "-e", help="File extension to match inside directories [default: txt]"),
    ] = None,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = False,  # noqa: FBT002
) -> None:
    """Tail, browse and filter log files in a terminal UI."""
    if not paths:
        typer.echo("Error: provide at least one log file or directory", err=True)
        raise typer.Exit(1)

    config = load_config()
    setup_logging(config.log_level, get_log_dir() / "logtrail.log")

    files, errors = expand_paths(paths, extension or config.extension)
    for error in errors:
        typer.echo(f"Error: {error}", err=True)

    coordinator = TailCoordinator(LevelCache(), poll_interval=config.poll_interval)
    for f in files:
        try:
            coordinator.add_file(f)
        except PathError as e:
            typer.echo(f"Error: {e}", err=True)

    if not coordinator.logs:
        typer.echo("Error: no readable log files found", err=True)
        raise typer.Exit(1)

    from logtrail.app import LogtrailApp  # noqa: PLC0415

    logger.info("Starting UI with %d files", len(coordinator.logs))
    LogtrailApp(coordinator, config).run()


def main() -> None:
    """Entry point for the CLI."""
    app()
