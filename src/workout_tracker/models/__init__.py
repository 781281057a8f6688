"""Data models for workout-tracker."""

from .exercises import COMMON_EXERCISES, Exercise, MuscleGroup
from .report import WorkoutReport, build_report, total_weight_lifted
from .workout import Workout, WorkoutEntry

__all__ = [
    "build_report",
    "COMMON_EXERCISES",
    "Exercise",
    "MuscleGroup",
    "total_weight_lifted",
    "Workout",
    "WorkoutEntry",
    "WorkoutReport",
]
