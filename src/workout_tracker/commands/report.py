"""Date range report command."""

import json

import click

from ..services.tracker import WorkoutService
from ..validation import parse_date
from .base import async_command, echo_info, ensure_initialized, format_table, get_db_path


@click.command()
@click.argument("from_date")
@click.argument("to_date")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
@async_command
async def report(ctx, from_date: str, to_date: str, as_json: bool):
    """Report total weight lifted between two dates (inclusive).

    Example:

        workout-tracker report 2024-01-01 2024-01-31
    """
    ensure_initialized(ctx)
    start = parse_date("from_date", from_date)
    end = parse_date("to_date", to_date)
    result = await WorkoutService(get_db_path(ctx)).report(start, end)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo()
    click.echo(click.style(f"Report {start.isoformat()} to {end.isoformat()}", bold=True))
    click.echo()
    if result.workouts:
        rows = [
            [str(w.id), w.workout_date.isoformat(), str(len(w.entries)), f"{w.total_volume:.1f}"]
            for w in result.workouts
        ]
        click.echo(format_table(["ID", "Date", "Entries", "Volume"], rows))
        click.echo()
    else:
        echo_info("No workouts in this range")

    click.echo(f"Total weight lifted: {result.total_weight_lifted:.1f} kg")
