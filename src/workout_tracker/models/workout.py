"""Workout session and entry models."""

from dataclasses import dataclass, field
from datetime import date

from .exercises import Exercise


@dataclass
class WorkoutEntry:
    """One exercise performed in a workout.

    Links a workout to a catalog exercise with the sets, reps and
    weight (kg) that were done. Many entries can share one exercise.
    """

    workout_id: int
    exercise: Exercise
    sets: int
    reps: int
    weight: float
    id: int | None = None

    @property
    def volume(self) -> float:
        """Total weight moved: sets x reps x weight."""
        return self.sets * self.reps * self.weight

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "workout_id": self.workout_id,
            "exercise_id": self.exercise.id,
            "exercise_name": self.exercise.name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "volume": self.volume,
        }


@dataclass
class Workout:
    """A dated workout session.

    The workout owns its entries: they are deleted with it, and an
    entry removed from `entries` is deleted rather than detached.
    """

    workout_date: date
    notes: str | None = None
    entries: list[WorkoutEntry] = field(default_factory=list)
    id: int | None = None

    @property
    def total_volume(self) -> float:
        """Sum of the volume of every entry."""
        return sum((entry.volume for entry in self.entries), 0.0)

    def find_entry(self, entry_id: int) -> WorkoutEntry | None:
        """Find one of this workout's own entries by id."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def remove_entry(self, entry_id: int) -> WorkoutEntry | None:
        """Remove an entry from the collection and return it.

        Returns None when the id does not belong to this workout.
        """
        entry = self.find_entry(entry_id)
        if entry is not None:
            self.entries.remove(entry)
        return entry

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "workout_date": self.workout_date.isoformat(),
            "notes": self.notes,
            "entries": [entry.to_dict() for entry in self.entries],
            "total_volume": self.total_volume,
        }
