"""Date range volume report."""

from dataclasses import dataclass, field
from datetime import date

from .workout import Workout


@dataclass
class WorkoutReport:
    """Workouts in an inclusive date range and the weight lifted across them."""

    from_date: date
    to_date: date
    workouts: list[Workout] = field(default_factory=list)
    total_weight_lifted: float = 0.0

    @property
    def entry_count(self) -> int:
        return sum(len(w.entries) for w in self.workouts)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "from_date": self.from_date.isoformat(),
            "to_date": self.to_date.isoformat(),
            "workouts": [w.to_dict() for w in self.workouts],
            "entry_count": self.entry_count,
            "total_weight_lifted": self.total_weight_lifted,
        }


def in_range(workout: Workout, from_date: date, to_date: date) -> bool:
    """Check whether a workout falls within [from_date, to_date]."""
    return from_date <= workout.workout_date <= to_date


def total_weight_lifted(workouts: list[Workout]) -> float:
    """Sum sets x reps x weight over every entry of every workout.

    Example: 3 sets x 10 reps x 80 kg = 2400 kg for that entry.
    """
    total = 0.0
    for workout in workouts:
        for entry in workout.entries:
            total += entry.volume
    return total


def build_report(workouts: list[Workout], from_date: date, to_date: date) -> WorkoutReport:
    """Build a report over the workouts dated within the inclusive range.

    Workouts outside the range are ignored, so callers may pass either a
    pre-filtered list or the whole log. An empty or inverted range gives
    an empty report with a total of 0.0.
    """
    matching = [w for w in workouts if in_range(w, from_date, to_date)]
    return WorkoutReport(
        from_date=from_date,
        to_date=to_date,
        workouts=matching,
        total_weight_lifted=total_weight_lifted(matching),
    )
