"""Init command -- generate the contributor document from history."""

import typer

from ..configuration import Configuration, dump_configuration, save_configuration
from ..context import Context
from ..exceptions import ConfigExistsError, GitTriviaError
from ..logging_config import get_logger
from ..people.builder import RegistryBuilder
from . import app
from ._common import console, context_path, context_settings, fail

logger = get_logger(__name__)


@app.command()
def init(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        "--stdout",
        help="Don't write the generated file; print it on STDOUT instead",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing contributor file",
    ),
):
    """
    Initialize the contributor file for a repository.

    Walks the whole history of HEAD and groups author e-mails by author
    name. Edit the result to merge people, add e-mails or assign teams.
    """
    settings = context_settings(ctx)
    try:
        backend = Context.open_backend(context_path(ctx), settings)
        target = Context.config_path_for(backend, settings)
        if target.exists() and not (force or dry_run):
            raise ConfigExistsError(target)

        builder = RegistryBuilder()
        count = builder.add_commits(backend.commits("HEAD", max_count=settings.max_commits))
        registry = builder.finalize()
    except GitTriviaError as e:
        raise fail(e)

    configuration = Configuration.from_registry(registry)
    logger.info("Found %d people in %d commits", len(registry), count)

    if dry_run:
        print(dump_configuration(configuration), end="")
        return

    save_configuration(configuration, target)
    console.print(
        f"[green]Wrote {len(registry)} people to[/green] {target} "
        f"[dim](as of {registry.checkpoint_revision[:8]})[/dim]"
    )
