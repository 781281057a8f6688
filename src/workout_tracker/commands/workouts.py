"""Workout log commands."""

import click

from ..models.workout import Workout
from ..services.tracker import WorkoutService
from ..validation import parse_entry_form, parse_workout_form
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_db_path,
)


def format_entries(workout: Workout) -> str:
    """Format a workout's entries as a table."""
    rows = [
        [
            str(entry.id),
            entry.exercise.name,
            str(entry.sets),
            str(entry.reps),
            f"{entry.weight:g}",
            f"{entry.volume:.1f}",
        ]
        for entry in workout.entries
    ]
    return format_table(["ID", "Exercise", "Sets", "Reps", "Weight", "Volume"], rows)


@click.group()
@click.pass_context
def workouts(ctx):
    """Manage logged workouts."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.pass_context
@async_command
async def list_workouts(ctx):
    """List all workouts, newest first."""
    log = await WorkoutService(get_db_path(ctx)).list_workouts()

    if not log:
        echo_info("No workouts found. Log one with 'workout-tracker workouts create'")
        return

    rows = [
        [
            str(w.id),
            w.workout_date.isoformat(),
            str(len(w.entries)),
            f"{w.total_volume:.1f}",
            (w.notes or "")[:30],
        ]
        for w in log
    ]

    click.echo()
    click.echo(format_table(["ID", "Date", "Entries", "Volume", "Notes"], rows))
    click.echo()
    click.echo(f"Total: {len(log)} workout(s)")


@workouts.command()
@click.argument("workout_id", type=int)
@click.pass_context
@async_command
async def show(ctx, workout_id: int):
    """Show a workout and its entries."""
    workout = await WorkoutService(get_db_path(ctx)).get_workout(workout_id)

    click.echo()
    click.echo(click.style(f"Workout {workout.id}", bold=True) + f"  {workout.workout_date.isoformat()}")
    if workout.notes:
        click.echo(workout.notes)
    click.echo()

    if workout.entries:
        click.echo(format_entries(workout))
        click.echo()
        click.echo(f"Total volume: {workout.total_volume:.1f} kg")
    else:
        echo_info("No entries yet")


@workouts.command()
@click.option("--date", "-d", "workout_date", required=True, help="Workout date (YYYY-MM-DD)")
@click.option("--notes", "-n", default=None, help="Free-text notes")
@click.pass_context
@async_command
async def create(ctx, workout_date: str, notes: str | None):
    """Log a new workout."""
    data = parse_workout_form(workout_date, notes)
    workout = await WorkoutService(get_db_path(ctx)).save_workout(data)
    echo_success(f"Created workout {workout.id} on {workout.workout_date.isoformat()}")


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--date", "-d", "workout_date", required=True, help="Workout date (YYYY-MM-DD)")
@click.option("--notes", "-n", default=None, help="Free-text notes")
@click.pass_context
@async_command
async def update(ctx, workout_id: int, workout_date: str, notes: str | None):
    """Change the date and notes of a workout. Entries are kept."""
    data = parse_workout_form(workout_date, notes, workout_id)
    workout = await WorkoutService(get_db_path(ctx)).save_workout(data)
    echo_success(f"Updated workout {workout.id}")


@workouts.command()
@click.argument("workout_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, workout_id: int, yes: bool):
    """Delete a workout and all of its entries."""
    if not yes and not click.confirm(f"Delete workout {workout_id} and its entries?"):
        return

    count = await WorkoutService(get_db_path(ctx)).delete_workout(workout_id)
    echo_success(f"Deleted workout {workout_id} ({count} entries)")


@workouts.command(name="add-entry")
@click.argument("workout_id", type=int)
@click.argument("exercise_id", type=int)
@click.option("--sets", "-s", required=True, type=int, help="Number of sets")
@click.option("--reps", "-r", required=True, type=int, help="Repetitions per set")
@click.option("--weight", "-w", required=True, type=float, help="Weight in kg")
@click.pass_context
@async_command
async def add_entry(ctx, workout_id: int, exercise_id: int, sets: int, reps: int, weight: float):
    """Add an exercise entry to a workout."""
    data = parse_entry_form(exercise_id, sets, reps, weight)
    entry = await WorkoutService(get_db_path(ctx)).add_entry(workout_id, data)
    echo_success(
        f"Added entry {entry.id}: {entry.exercise.name} "
        f"{entry.sets}x{entry.reps} @ {entry.weight:g} kg ({entry.volume:.1f} kg)"
    )


@workouts.command(name="remove-entry")
@click.argument("workout_id", type=int)
@click.argument("entry_id", type=int)
@click.pass_context
@async_command
async def remove_entry(ctx, workout_id: int, entry_id: int):
    """Remove an entry from a workout."""
    await WorkoutService(get_db_path(ctx)).remove_entry(workout_id, entry_id)
    echo_success(f"Removed entry {entry_id} from workout {workout_id}")
