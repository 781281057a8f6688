"""Input validation for form and command line values.

Raw submitted values arrive as strings (or None when a field is absent).
Each ``parse_*`` function checks one kind of submission and returns a typed
input object, raising ValidationError on the first bad field.
"""

from dataclasses import dataclass
from datetime import date

from .errors import ValidationError

# Largest value a SQLite INTEGER column holds
MAX_INTEGER = 2**63 - 1


@dataclass(frozen=True)
class ExerciseInput:
    name: str
    muscle_group: str | None = None
    id: int | None = None


@dataclass(frozen=True)
class WorkoutInput:
    workout_date: date
    notes: str | None = None
    id: int | None = None


@dataclass(frozen=True)
class EntryInput:
    exercise_id: int
    sets: int
    reps: int
    weight: float


@dataclass(frozen=True)
class DateRange:
    from_date: date
    to_date: date


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def optional_text(value: str | None) -> str | None:
    """Strip a free-text field, mapping blank to None."""
    if _blank(value):
        return None
    return str(value).strip()


def required_text(field: str, value: str | None) -> str:
    """Strip a text field that must not be blank."""
    if _blank(value):
        raise ValidationError(field, "is required")
    return str(value).strip()


def parse_id(field: str, value, required: bool = False) -> int | None:
    """Parse a record ID. Blank means "no ID" unless required."""
    if _blank(value):
        if required:
            raise ValidationError(field, "is required")
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"must be a whole number, got {value!r}")
    if parsed < 1:
        raise ValidationError(field, "must be a positive ID")
    if parsed > MAX_INTEGER:
        raise ValidationError(field, "is out of range")
    return parsed


def parse_count(field: str, value) -> int:
    """Parse a non-negative whole number (sets, reps)."""
    if _blank(value):
        raise ValidationError(field, "is required")
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"must be a whole number, got {value!r}")
    if parsed < 0:
        raise ValidationError(field, "must not be negative")
    if parsed > MAX_INTEGER:
        raise ValidationError(field, "is out of range")
    return parsed


def parse_weight(field: str, value) -> float:
    """Parse a non-negative weight in kg."""
    if _blank(value):
        raise ValidationError(field, "is required")
    try:
        parsed = float(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"must be a number, got {value!r}")
    if parsed != parsed or parsed in (float("inf"), float("-inf")):
        raise ValidationError(field, "must be a finite number")
    if parsed < 0:
        raise ValidationError(field, "must not be negative")
    return parsed


def parse_date(field: str, value) -> date:
    """Parse an ISO (YYYY-MM-DD) date."""
    if isinstance(value, date):
        return value
    if _blank(value):
        raise ValidationError(field, "is required")
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(field, f"must be a date (YYYY-MM-DD), got {value!r}")


def parse_exercise_form(
    name: str | None, muscle_group: str | None = None, id: str | None = None
) -> ExerciseInput:
    """Validate an exercise submission."""
    return ExerciseInput(
        id=parse_id("id", id),
        name=required_text("name", name),
        muscle_group=optional_text(muscle_group),
    )


def parse_workout_form(
    workout_date: str | None, notes: str | None = None, id: str | None = None
) -> WorkoutInput:
    """Validate a workout submission. Entries are never part of it."""
    return WorkoutInput(
        id=parse_id("id", id),
        workout_date=parse_date("workoutDate", workout_date),
        notes=optional_text(notes),
    )


def parse_entry_form(
    exercise_id: str | None, sets: str | None, reps: str | None, weight: str | None
) -> EntryInput:
    """Validate an add-entry submission."""
    return EntryInput(
        exercise_id=parse_id("exerciseId", exercise_id, required=True),
        sets=parse_count("sets", sets),
        reps=parse_count("reps", reps),
        weight=parse_weight("weight", weight),
    )


def parse_date_range(from_date: str | None, to_date: str | None) -> DateRange:
    """Validate a report date range. An inverted range is allowed."""
    return DateRange(
        from_date=parse_date("fromDate", from_date),
        to_date=parse_date("toDate", to_date),
    )


def storable_id(record_id: int) -> bool:
    """Whether an ID fits in an INTEGER column; larger IDs match no record."""
    return -MAX_INTEGER - 1 <= record_id <= MAX_INTEGER
