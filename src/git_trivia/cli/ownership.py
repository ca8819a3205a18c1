"""Ownership command -- rank people and teams by lines owned."""

from typing import Optional

import typer

from ..context import Context
from ..exceptions import GitTriviaError, UnknownAliasError
from ..formatters import get_formatter
from ..formatters.rich_formatter import RichFormatter
from ..ownership import calculate
from . import app
from ._common import console, context_path, context_settings, err_console, fail
from .progress import OwnershipProgress


@app.command()
def ownership(
    ctx: typer.Context,
    revision: str = typer.Option(
        "HEAD",
        "--revision",
        "-r",
        help="Commit whose tree is measured",
    ),
    since: Optional[str] = typer.Option(
        None,
        "--since",
        help="Only count lines added after this commit",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: console or json (default from settings)",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Hide the progress bar",
    ),
):
    """
    Show how many lines each person and team owns.

    Every non-binary file in the tree is blamed; each line is credited to
    the person whose e-mail authored it.

    [bold cyan]Examples:[/bold cyan]

      git-trivia ownership

      git-trivia ownership --since v1.0 --format json
    """
    settings = context_settings(ctx)
    fmt = output_format or settings.output_format
    try:
        formatter = get_formatter(fmt)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
    if isinstance(formatter, RichFormatter):
        formatter.console = console

    try:
        context = Context.load(context_path(ctx), settings)
        newest = context.backend.resolve(revision)
        oldest = context.backend.resolve(since) if since else None
        show_progress = settings.show_progress and not no_progress
        with OwnershipProgress(err_console, enabled=show_progress) as progress:
            statistics = calculate(
                context.backend,
                context.people_db,
                newest,
                oldest,
                on_progress=progress.update,
            )
    except UnknownAliasError as e:
        err_console.print(
            f"[red]Error:[/red] {e}\n"
            "Run [bold]git-trivia update[/bold] or add the e-mail to a person "
            f"in {settings.config_filename}."
        )
        raise typer.Exit(1)
    except GitTriviaError as e:
        raise fail(e)

    formatter.render(statistics)
