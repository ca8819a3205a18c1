"""Update command -- add authors of new commits to the contributor document."""

import typer

from ..configuration import Configuration, dump_configuration, save_configuration
from ..context import Context
from ..exceptions import GitTriviaError
from ..people.builder import RegistryBuilder
from . import app
from ._common import console, context_path, context_settings, fail


@app.command()
def update(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        "--stdout",
        help="Don't write the updated file; print it on STDOUT instead",
    ),
):
    """
    Add people seen in commits made since the last init/update.

    Existing entries (names, e-mails, teams) are kept as they are.
    """
    settings = context_settings(ctx)
    try:
        context = Context.load(context_path(ctx), settings)
        existing = context.people_db
        checkpoint = existing.checkpoint_revision
        head = context.head_commit()
        if checkpoint == head:
            console.print("[green]Already up to date.[/green]")
            return

        builder = RegistryBuilder(existing=existing)
        # every commit since the checkpoint; max_commits only limits init
        builder.add_commits(context.backend.commits(head, oldest=checkpoint))
        registry = builder.finalize(head)
    except GitTriviaError as e:
        raise fail(e)

    configuration = Configuration.from_registry(registry)
    added = len(registry) - len(existing)

    if dry_run:
        print(dump_configuration(configuration), end="")
        return

    save_configuration(configuration, context.config_path)
    console.print(
        f"[green]Added {added} new people[/green] "
        f"[dim](now {len(registry)}, as of {head[:8]})[/dim]"
    )
