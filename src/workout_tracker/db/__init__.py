"""Database layer for workout-tracker."""

from .engine import get_data_dir, get_db_path, init_db, seed_exercises
from .repositories import (
    ExerciseRepository,
    WorkoutEntryRepository,
    WorkoutRepository,
)

__all__ = [
    "ExerciseRepository",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "seed_exercises",
    "WorkoutEntryRepository",
    "WorkoutRepository",
]
