"""Exercise catalog model."""

from dataclasses import dataclass
from enum import Enum


class MuscleGroup(str, Enum):
    """Suggested muscle group labels for the exercise form."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    LEGS = "Legs"
    GLUTES = "Glutes"
    CORE = "Core"
    FULL_BODY = "Full Body"


@dataclass
class Exercise:
    """An exercise in the catalog, e.g. "Bench Press" tagged "Chest"."""

    name: str
    muscle_group: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "muscle_group": self.muscle_group,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            muscle_group=data.get("muscle_group"),
        )


# Starter catalog used by `workout-tracker init --seed`
COMMON_EXERCISES: list[Exercise] = [
    Exercise(name="Bench Press", muscle_group=MuscleGroup.CHEST.value),
    Exercise(name="Incline Dumbbell Press", muscle_group=MuscleGroup.CHEST.value),
    Exercise(name="Squat", muscle_group=MuscleGroup.LEGS.value),
    Exercise(name="Leg Press", muscle_group=MuscleGroup.LEGS.value),
    Exercise(name="Deadlift", muscle_group=MuscleGroup.BACK.value),
    Exercise(name="Barbell Row", muscle_group=MuscleGroup.BACK.value),
    Exercise(name="Pull-up", muscle_group=MuscleGroup.BACK.value),
    Exercise(name="Overhead Press", muscle_group=MuscleGroup.SHOULDERS.value),
    Exercise(name="Lateral Raise", muscle_group=MuscleGroup.SHOULDERS.value),
    Exercise(name="Barbell Curl", muscle_group=MuscleGroup.ARMS.value),
    Exercise(name="Triceps Pushdown", muscle_group=MuscleGroup.ARMS.value),
    Exercise(name="Hip Thrust", muscle_group=MuscleGroup.GLUTES.value),
    Exercise(name="Plank", muscle_group=MuscleGroup.CORE.value),
]
