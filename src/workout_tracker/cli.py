"""CLI entry point for workout-tracker."""

import logging
from pathlib import Path

import click

from . import __version__
from .commands import exercises, init, report, serve, workouts
from .db.engine import DATA_DIR_ENV, get_db_path
from .logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="workout-tracker")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help=f"Directory holding the database (env: {DATA_DIR_ENV})",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """workout-tracker: log workouts and report the weight you lift.

    Keep a catalog of exercises, record workouts made of exercise entries
    (sets, reps, weight in kg), and total the volume over a date range.

    Example usage:

        # Initialize the database with a starter exercise catalog
        workout-tracker init --seed

        # Log a workout and an entry
        workout-tracker workouts create --date 2024-01-05
        workout-tracker workouts add-entry 1 1 --sets 3 --reps 10 --weight 80

        # Report and browse
        workout-tracker report 2024-01-01 2024-01-31
        workout-tracker serve
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = get_db_path(data_dir)


# Register commands
main.add_command(init)
main.add_command(exercises)
main.add_command(workouts)
main.add_command(report)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
