"""Exercise catalog and workout log services.

These services sit between the entry points (web routes, CLI commands)
and the repositories. They turn missing records into domain errors and
apply the ownership rules between workouts and their entries.
"""

import logging
from datetime import date
from pathlib import Path

import aiosqlite

from ..db.repositories import (
    ExerciseRepository,
    WorkoutEntryRepository,
    WorkoutRepository,
)
from ..errors import (
    EntryNotFoundError,
    ExerciseInUseError,
    ExerciseNotFoundError,
    WorkoutNotFoundError,
)
from ..models.exercises import Exercise
from ..models.report import WorkoutReport, build_report
from ..models.workout import Workout, WorkoutEntry
from ..validation import EntryInput, ExerciseInput, WorkoutInput, storable_id

logger = logging.getLogger(__name__)


class ExerciseService:
    """Manage the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.exercises = ExerciseRepository(db_path)
        self.entries = WorkoutEntryRepository(db_path)

    async def list_exercises(self) -> list[Exercise]:
        return await self.exercises.list_all()

    async def usage_counts(self) -> dict[int, int]:
        """Number of workout entries referencing each exercise."""
        return await self.entries.count_by_exercise()

    async def get_exercise(self, exercise_id: int) -> Exercise:
        """Get an exercise, raising ExerciseNotFoundError if absent."""
        if not storable_id(exercise_id):
            raise ExerciseNotFoundError(exercise_id)
        exercise = await self.exercises.get(exercise_id)
        if exercise is None:
            raise ExerciseNotFoundError(exercise_id)
        return exercise

    async def save_exercise(self, data: ExerciseInput) -> Exercise:
        """Create an exercise, or overwrite every field of an existing one."""
        exercise = Exercise(name=data.name, muscle_group=data.muscle_group, id=data.id)

        if exercise.id is None:
            exercise.id = await self.exercises.create(exercise)
            return exercise

        if not storable_id(exercise.id) or not await self.exercises.update(exercise):
            raise ExerciseNotFoundError(exercise.id)
        logger.info("Updated exercise %d", exercise.id)
        return exercise

    async def delete_exercise(self, exercise_id: int) -> None:
        """Delete an exercise that no workout entry references.

        Raises:
            ExerciseNotFoundError: no exercise has that ID
            ExerciseInUseError: entries still reference the exercise
        """
        await self.get_exercise(exercise_id)

        in_use = await self.entries.count_for_exercise(exercise_id)
        if in_use:
            raise ExerciseInUseError(exercise_id, in_use)

        try:
            deleted = await self.exercises.delete(exercise_id)
        except aiosqlite.IntegrityError:
            # An entry was added after the count
            raise ExerciseInUseError(
                exercise_id, await self.entries.count_for_exercise(exercise_id)
            )
        if not deleted:
            raise ExerciseNotFoundError(exercise_id)
        logger.info("Deleted exercise %d", exercise_id)


class WorkoutService:
    """Manage workouts, their entries, and date range reports."""

    def __init__(self, db_path: Path | None = None):
        self.workouts = WorkoutRepository(db_path)
        self.exercises = ExerciseRepository(db_path)
        self.entries = WorkoutEntryRepository(db_path)

    async def list_workouts(self) -> list[Workout]:
        return await self.workouts.list_all()

    async def get_workout(self, workout_id: int) -> Workout:
        """Get a workout with all its entries, raising WorkoutNotFoundError if absent."""
        if not storable_id(workout_id):
            raise WorkoutNotFoundError(workout_id)
        workout = await self.workouts.get(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)
        return workout

    async def save_workout(self, data: WorkoutInput) -> Workout:
        """Create a workout, or update the date and notes of an existing one.

        An update never touches the entry collection; entries change only
        through add_entry and remove_entry.
        """
        if data.id is None:
            workout = Workout(workout_date=data.workout_date, notes=data.notes)
            workout.id = await self.workouts.create(workout)
            return workout

        existing = await self.get_workout(data.id)
        existing.workout_date = data.workout_date
        existing.notes = data.notes
        if not await self.workouts.update(existing):
            raise WorkoutNotFoundError(data.id)
        logger.info("Updated workout %d", existing.id)
        return existing

    async def delete_workout(self, workout_id: int) -> int:
        """Delete a workout and all of its entries.

        Returns:
            Number of entries deleted with the workout
        """
        if not storable_id(workout_id):
            raise WorkoutNotFoundError(workout_id)
        deleted = await self.workouts.delete(workout_id)
        if deleted is None:
            raise WorkoutNotFoundError(workout_id)
        return deleted

    async def add_entry(self, workout_id: int, data: EntryInput) -> WorkoutEntry:
        """Record an exercise performed in a workout."""
        workout = await self.get_workout(workout_id)
        exercise = None
        if storable_id(data.exercise_id):
            exercise = await self.exercises.get(data.exercise_id)
        if exercise is None:
            raise ExerciseNotFoundError(data.exercise_id)

        entry = WorkoutEntry(
            workout_id=workout.id,
            exercise=exercise,
            sets=data.sets,
            reps=data.reps,
            weight=data.weight,
        )
        entry.id = await self.entries.create(entry)
        workout.entries.append(entry)

        logger.info(
            "Added entry %d to workout %d: %s %dx%d @ %.1f kg",
            entry.id, workout.id, exercise.name, entry.sets, entry.reps, entry.weight,
        )
        return entry

    async def remove_entry(self, workout_id: int, entry_id: int) -> WorkoutEntry:
        """Remove one of a workout's own entries and delete it.

        Raises:
            WorkoutNotFoundError: no workout has that ID
            EntryNotFoundError: the entry is not one of this workout's entries
        """
        workout = await self.get_workout(workout_id)

        entry = workout.remove_entry(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id, workout_id)

        if not await self.entries.delete(entry_id, workout_id):
            raise EntryNotFoundError(entry_id, workout_id)

        logger.info("Removed entry %d from workout %d", entry_id, workout_id)
        return entry

    async def report(self, from_date: date, to_date: date) -> WorkoutReport:
        """Total weight lifted across workouts dated within [from_date, to_date]."""
        workouts = await self.workouts.find_by_date_between(from_date, to_date)
        report = build_report(workouts, from_date, to_date)
        logger.debug(
            "Report %s..%s: %d workouts, %.1f kg",
            from_date, to_date, len(report.workouts), report.total_weight_lifted,
        )
        return report
