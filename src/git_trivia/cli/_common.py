"""Shared CLI helpers."""

from pathlib import Path

import typer
from rich.console import Console

from ..config import TriviaSettings
from ..exceptions import GitTriviaError

console = Console()
err_console = Console(stderr=True)


def context_path(ctx: typer.Context) -> Path:
    return ctx.obj.get("path", Path.cwd()).resolve()


def context_settings(ctx: typer.Context) -> TriviaSettings:
    return ctx.obj.get("settings") or TriviaSettings()


def fail(error: GitTriviaError) -> typer.Exit:
    """Print a library error and return the exit to raise."""
    err_console.print(f"[red]Error:[/red] {error}")
    return typer.Exit(1)
