"""Data access layer for workout-tracker."""

import logging
from datetime import date
from pathlib import Path

import aiosqlite

from ..models.exercises import Exercise
from ..models.workout import Workout, WorkoutEntry
from .engine import connect, get_db_path

logger = logging.getLogger(__name__)

_ENTRY_SELECT = """
    SELECT e.entry_id, e.workout_id, e.sets, e.reps, e.weight,
           x.exercise_id, x.name, x.muscle_group
    FROM workout_entries e
    JOIN exercises x ON x.exercise_id = e.exercise_id
"""


def _row_to_exercise(row: aiosqlite.Row) -> Exercise:
    """Convert a database row to an Exercise."""
    return Exercise.from_dict(
        {"name": row["name"], "muscle_group": row["muscle_group"]},
        id=row["exercise_id"],
    )


def _row_to_entry(row: aiosqlite.Row) -> WorkoutEntry:
    """Convert a joined entry/exercise row to a WorkoutEntry."""
    return WorkoutEntry(
        id=row["entry_id"],
        workout_id=row["workout_id"],
        exercise=_row_to_exercise(row),
        sets=row["sets"],
        reps=row["reps"],
        weight=row["weight"],
    )


async def _fetch_entries(
    db: aiosqlite.Connection, workout_ids: list[int]
) -> dict[int, list[WorkoutEntry]]:
    """Load the entries of several workouts in one query, keyed by workout."""
    entries: dict[int, list[WorkoutEntry]] = {wid: [] for wid in workout_ids}
    if not workout_ids:
        return entries

    placeholders = ", ".join("?" for _ in workout_ids)
    cursor = await db.execute(
        f"{_ENTRY_SELECT} WHERE e.workout_id IN ({placeholders}) ORDER BY e.entry_id",
        workout_ids,
    )
    for row in await cursor.fetchall():
        entries[row["workout_id"]].append(_row_to_entry(row))
    return entries


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Exercise]:
        """List all exercises by name."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM exercises ORDER BY name COLLATE NOCASE, exercise_id"
            )
            rows = await cursor.fetchall()
            return [_row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE exercise_id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return _row_to_exercise(row)

    async def create(self, exercise: Exercise) -> int:
        """Create a new exercise."""
        data = exercise.to_dict()
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO exercises (name, muscle_group) VALUES (?, ?)",
                (data["name"], data["muscle_group"]),
            )
            await db.commit()
            logger.info("Created exercise %d (%s)", cursor.lastrowid, data["name"])
            return cursor.lastrowid

    async def update(self, exercise: Exercise) -> bool:
        """Overwrite every field of an existing exercise.

        Returns:
            False if no exercise has that ID
        """
        if exercise.id is None:
            raise ValueError("Exercise must have an ID to update")

        data = exercise.to_dict()
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE exercises SET name = ?, muscle_group = ? WHERE exercise_id = ?",
                (data["name"], data["muscle_group"], exercise.id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete(self, exercise_id: int) -> bool:
        """Delete an exercise.

        Returns:
            False if no exercise has that ID
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM exercises WHERE exercise_id = ?", (exercise_id,)
            )
            await db.commit()
            return cursor.rowcount > 0


class WorkoutEntryRepository:
    """Repository for workout entries."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, entry: WorkoutEntry) -> int:
        """Create a new entry."""
        if entry.exercise.id is None:
            raise ValueError("Entry exercise must have an ID")

        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_entries
                (sets, reps, weight, workout_id, exercise_id)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    entry.sets,
                    entry.reps,
                    entry.weight,
                    entry.workout_id,
                    entry.exercise.id,
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def count_for_exercise(self, exercise_id: int) -> int:
        """Count the entries that reference an exercise."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT COUNT(*) FROM workout_entries WHERE exercise_id = ?",
                (exercise_id,),
            )
            (count,) = await cursor.fetchone()
            return count

    async def count_by_exercise(self) -> dict[int, int]:
        """Count entries per exercise ID (exercises with no entries are omitted)."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT exercise_id, COUNT(*) AS entry_count
                FROM workout_entries GROUP BY exercise_id
                """
            )
            rows = await cursor.fetchall()
            return {row["exercise_id"]: row["entry_count"] for row in rows}

    async def delete(self, entry_id: int, workout_id: int) -> bool:
        """Delete an entry, scoped to the workout that owns it.

        Returns:
            False if the workout has no entry with that ID
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM workout_entries WHERE entry_id = ? AND workout_id = ?",
                (entry_id, workout_id),
            )
            await db.commit()
            return cursor.rowcount > 0


class WorkoutRepository:
    """Repository for workouts.

    Workouts are always returned with their full entry collection.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Workout]:
        """List all workouts, newest first."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM workouts ORDER BY workout_date DESC, workout_id DESC"
            )
            rows = await cursor.fetchall()
            return await self._rows_to_workouts(db, rows)

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout and its entries by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE workout_id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            workouts = await self._rows_to_workouts(db, [row])
            return workouts[0]

    async def find_by_date_between(self, start: date, end: date) -> list[Workout]:
        """Find workouts dated within [start, end], both ends included."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM workouts
                WHERE workout_date BETWEEN ? AND ?
                ORDER BY workout_date, workout_id
                """,
                (start.isoformat(), end.isoformat()),
            )
            rows = await cursor.fetchall()
            return await self._rows_to_workouts(db, rows)

    async def create(self, workout: Workout) -> int:
        """Create a new workout. Entries are added separately."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO workouts (workout_date, notes) VALUES (?, ?)",
                (workout.workout_date.isoformat(), workout.notes),
            )
            await db.commit()
            logger.info("Created workout %d on %s", cursor.lastrowid, workout.workout_date)
            return cursor.lastrowid

    async def update(self, workout: Workout) -> bool:
        """Update the date and notes of a workout. Entries are left alone.

        Returns:
            False if no workout has that ID
        """
        if workout.id is None:
            raise ValueError("Workout must have an ID to update")

        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE workouts SET workout_date = ?, notes = ? WHERE workout_id = ?",
                (workout.workout_date.isoformat(), workout.notes, workout.id),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def delete(self, workout_id: int) -> int | None:
        """Delete a workout together with all of its entries.

        Both deletes run in one transaction.

        Returns:
            Number of entries deleted, or None if no workout has that ID
        """
        async with connect(self.db_path) as db:
            try:
                entry_cursor = await db.execute(
                    "DELETE FROM workout_entries WHERE workout_id = ?", (workout_id,)
                )
                workout_cursor = await db.execute(
                    "DELETE FROM workouts WHERE workout_id = ?", (workout_id,)
                )
                if workout_cursor.rowcount == 0:
                    await db.rollback()
                    return None
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise

            logger.info(
                "Deleted workout %d and %d entries", workout_id, entry_cursor.rowcount
            )
            return entry_cursor.rowcount

    async def _rows_to_workouts(
        self, db: aiosqlite.Connection, rows: list[aiosqlite.Row]
    ) -> list[Workout]:
        """Convert workout rows to Workouts, loading their entries."""
        entries = await _fetch_entries(db, [row["workout_id"] for row in rows])
        return [
            Workout(
                id=row["workout_id"],
                workout_date=date.fromisoformat(row["workout_date"]),
                notes=row["notes"],
                entries=entries[row["workout_id"]],
            )
            for row in rows
        ]
