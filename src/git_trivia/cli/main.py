"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..config import load_settings
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging
from . import app
from ._common import console, fail


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"git-trivia {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository to inspect (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Settings file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Calculates fun and useless trivia about your Git repository.

    [bold cyan]Examples:[/bold cyan]

      git-trivia init

      git-trivia ownership --format json

      git-trivia -C ../other-repo update
    """
    try:
        settings = load_settings(config_file=config, verbose=verbose, quiet=quiet)
    except ConfigurationError as e:
        raise fail(e)
    setup_logging(settings.verbosity)
    ctx.obj = {"path": path or Path.cwd(), "settings": settings}
