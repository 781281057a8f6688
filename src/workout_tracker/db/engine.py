"""Database engine setup and initialization."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory, overridable with WORKOUT_TRACKER_DATA_DIR
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "WORKOUT_TRACKER_DATA_DIR"
DB_FILENAME = "workout_tracker.db"


def get_data_dir() -> Path:
    """Get the configured data directory."""
    env_dir = os.environ.get(DATA_DIR_ENV)
    return Path(env_dir) if env_dir else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with foreign keys enforced and named-column rows."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with connect(db_path) as db:
        # Exercise catalog
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                exercise_id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                muscle_group TEXT
            )
        """)

        # Workout sessions
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                workout_id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_date TEXT NOT NULL,
                notes TEXT
            )
        """)

        # Exercises performed in a workout. No ON DELETE actions: entry
        # removal is done by the repositories, the keys only guard integrity.
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_entries (
                entry_id INTEGER PRIMARY KEY AUTOINCREMENT,
                sets INTEGER NOT NULL CHECK (sets >= 0),
                reps INTEGER NOT NULL CHECK (reps >= 0),
                weight REAL NOT NULL CHECK (weight >= 0),
                workout_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                FOREIGN KEY (workout_id) REFERENCES workouts(workout_id),
                FOREIGN KEY (exercise_id) REFERENCES exercises(exercise_id)
            )
        """)

        # Indexes for the date range report and per-workout entry loads
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_date
            ON workouts(workout_date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_entries_workout_id
            ON workout_entries(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_entries_exercise_id
            ON workout_entries(exercise_id)
        """)

        await db.commit()

    logger.debug("Database schema ready at %s", db_path)


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the catalog with common exercises.

    Exercises whose name is already in the catalog are skipped.

    Returns:
        Number of exercises added
    """
    from ..models.exercises import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()

    added = 0
    async with connect(db_path) as db:
        cursor = await db.execute("SELECT name FROM exercises")
        existing = {row["name"] for row in await cursor.fetchall()}

        for exercise in COMMON_EXERCISES:
            if exercise.name in existing:
                continue
            await db.execute(
                "INSERT INTO exercises (name, muscle_group) VALUES (?, ?)",
                (exercise.name, exercise.muscle_group),
            )
            added += 1

        await db.commit()

    logger.info("Seeded %d exercises", added)
    return added
