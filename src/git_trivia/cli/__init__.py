"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="git-trivia",
    help="git-trivia - Who owns the code in your Git repository",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .init import init as _init  # noqa: F401, E402
from .update import update as _update  # noqa: F401, E402
from .ownership import ownership as _ownership  # noqa: F401, E402

__all__ = ["app", "console", "__version__"]
