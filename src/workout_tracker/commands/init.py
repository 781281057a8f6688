"""Initialize project command."""

import click

from ..db import init_db, seed_exercises
from .base import async_command, echo_info, echo_success, get_db_path


@click.command()
@click.option("--seed", is_flag=True, help="Add a starter set of common exercises")
@click.pass_context
@async_command
async def init(ctx: click.Context, seed: bool):
    """Initialize the workout-tracker database.

    Creates the data directory and the SQLite schema. Safe to run again
    on an existing database.
    """
    db_path = get_db_path(ctx)

    echo_info(f"Initializing workout-tracker in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    if seed:
        count = await seed_exercises(db_path)
        echo_success(f"Exercise catalog populated ({count} exercises added)")

    click.echo()
    click.echo("Next steps:")
    click.echo("  workout-tracker exercises add \"Bench Press\" --muscle-group Chest")
    click.echo("  workout-tracker serve")
