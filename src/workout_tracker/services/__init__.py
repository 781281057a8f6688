"""Application services for workout-tracker."""

from .tracker import ExerciseService, WorkoutService

__all__ = [
    "ExerciseService",
    "WorkoutService",
]
