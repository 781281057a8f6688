"""Pytest configuration and fixtures."""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from workout_tracker.db import init_db
from workout_tracker.models.exercises import Exercise
from workout_tracker.models.workout import Workout, WorkoutEntry
from workout_tracker.services.tracker import ExerciseService, WorkoutService


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
def exercise_service(db_path):
    return ExerciseService(db_path)


@pytest.fixture
def workout_service(db_path):
    return WorkoutService(db_path)


@pytest.fixture
def bench_press():
    return Exercise(name="Bench Press", muscle_group="Chest", id=1)


@pytest.fixture
def sample_workout(bench_press):
    """A workout with two bench press entries (2400 kg + 1000 kg)."""
    return Workout(
        id=1,
        workout_date=date(2024, 1, 5),
        notes="Push day",
        entries=[
            WorkoutEntry(id=1, workout_id=1, exercise=bench_press, sets=3, reps=10, weight=80.0),
            WorkoutEntry(id=2, workout_id=1, exercise=bench_press, sets=2, reps=5, weight=100.0),
        ],
    )
