"""CLI commands for workout-tracker."""

from .exercises import exercises
from .init import init
from .report import report
from .serve import serve
from .workouts import workouts

__all__ = [
    "exercises",
    "init",
    "report",
    "serve",
    "workouts",
]
