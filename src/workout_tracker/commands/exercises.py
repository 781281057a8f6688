"""Exercise catalog commands."""

import click

from ..services.tracker import ExerciseService
from ..validation import parse_exercise_form
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    get_db_path,
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Manage the exercise catalog."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.pass_context
@async_command
async def list_exercises(ctx):
    """List all exercises."""
    service = ExerciseService(get_db_path(ctx))
    catalog = await service.list_exercises()

    if not catalog:
        echo_info("No exercises found. Add one with 'workout-tracker exercises add'")
        return

    usage = await service.usage_counts()
    rows = [
        [str(ex.id), ex.name, ex.muscle_group or "-", str(usage.get(ex.id, 0))]
        for ex in catalog
    ]

    click.echo()
    click.echo(format_table(["ID", "Name", "Muscle group", "Entries"], rows))
    click.echo()
    click.echo(f"Total: {len(catalog)} exercise(s)")


@exercises.command()
@click.argument("name")
@click.option("--muscle-group", "-m", default=None, help="Muscle group label, e.g. Chest")
@click.pass_context
@async_command
async def add(ctx, name: str, muscle_group: str | None):
    """Add an exercise to the catalog."""
    data = parse_exercise_form(name, muscle_group)
    exercise = await ExerciseService(get_db_path(ctx)).save_exercise(data)
    echo_success(f"Added exercise {exercise.id}: {exercise.name}")


@exercises.command()
@click.argument("exercise_id", type=int)
@click.option("--name", "-n", required=True, help="New name")
@click.option("--muscle-group", "-m", default=None, help="New muscle group label")
@click.pass_context
@async_command
async def edit(ctx, exercise_id: int, name: str, muscle_group: str | None):
    """Overwrite the name and muscle group of an exercise."""
    data = parse_exercise_form(name, muscle_group, exercise_id)
    exercise = await ExerciseService(get_db_path(ctx)).save_exercise(data)
    echo_success(f"Updated exercise {exercise.id}: {exercise.name}")


@exercises.command()
@click.argument("exercise_id", type=int)
@click.pass_context
@async_command
async def delete(ctx, exercise_id: int):
    """Delete an exercise that no workout uses."""
    await ExerciseService(get_db_path(ctx)).delete_exercise(exercise_id)
    echo_success(f"Deleted exercise {exercise_id}")
