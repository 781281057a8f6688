"""Domain errors for workout-tracker."""


class TrackerError(Exception):
    """Base class for all workout-tracker errors."""

    status_code = 500


class NotFoundError(TrackerError):
    """A referenced record does not exist."""

    status_code = 404
    kind = "record"

    def __init__(self, record_id: int, message: str | None = None):
        self.record_id = record_id
        super().__init__(message or f"{self.kind.capitalize()} {record_id} not found")


class ExerciseNotFoundError(NotFoundError):
    kind = "exercise"


class WorkoutNotFoundError(NotFoundError):
    kind = "workout"


class EntryNotFoundError(NotFoundError):
    """An entry id is not part of the given workout's entries."""

    kind = "entry"

    def __init__(self, entry_id: int, workout_id: int):
        self.workout_id = workout_id
        super().__init__(
            entry_id, f"Entry {entry_id} not found in workout {workout_id}"
        )


class ValidationError(TrackerError):
    """Submitted fields are missing or malformed."""

    status_code = 400

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class ExerciseInUseError(TrackerError):
    """An exercise cannot be deleted while entries still reference it."""

    status_code = 409

    def __init__(self, exercise_id: int, entry_count: int):
        self.exercise_id = exercise_id
        self.entry_count = entry_count
        super().__init__(
            f"Exercise {exercise_id} is used by {entry_count} workout "
            f"entr{'y' if entry_count == 1 else 'ies'}"
        )
