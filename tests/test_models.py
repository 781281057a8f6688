"""Tests for data models and report aggregation."""

from datetime import date

from workout_tracker.models.exercises import COMMON_EXERCISES, Exercise
from workout_tracker.models.report import build_report, total_weight_lifted
from workout_tracker.models.workout import Workout, WorkoutEntry


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict(self):
        exercise = Exercise(name="Bench Press", muscle_group="Chest")
        assert exercise.to_dict() == {"name": "Bench Press", "muscle_group": "Chest"}

    def test_exercise_from_dict_without_muscle_group(self):
        exercise = Exercise.from_dict({"name": "Plank"}, id=7)

        assert exercise.id == 7
        assert exercise.name == "Plank"
        assert exercise.muscle_group is None

    def test_common_exercises_have_unique_names(self):
        names = [e.name for e in COMMON_EXERCISES]
        assert "Bench Press" in names
        assert len(names) == len(set(names))


class TestWorkoutEntry:
    """Tests for WorkoutEntry volume."""

    def test_volume(self, bench_press):
        entry = WorkoutEntry(workout_id=1, exercise=bench_press, sets=3, reps=10, weight=80.0)
        assert entry.volume == 2400.0

    def test_zero_sets_gives_zero_volume(self, bench_press):
        entry = WorkoutEntry(workout_id=1, exercise=bench_press, sets=0, reps=10, weight=80.0)
        assert entry.volume == 0.0


class TestWorkout:
    """Tests for Workout entry collection handling."""

    def test_total_volume(self, sample_workout):
        assert sample_workout.total_volume == 3400.0

    def test_total_volume_empty(self):
        assert Workout(workout_date=date(2024, 1, 1)).total_volume == 0.0

    def test_find_entry(self, sample_workout):
        assert sample_workout.find_entry(2).reps == 5
        assert sample_workout.find_entry(99) is None

    def test_remove_entry(self, sample_workout):
        removed = sample_workout.remove_entry(1)

        assert removed.id == 1
        assert [e.id for e in sample_workout.entries] == [2]

    def test_remove_unknown_entry_leaves_collection(self, sample_workout):
        assert sample_workout.remove_entry(42) is None
        assert len(sample_workout.entries) == 2

    def test_to_dict(self, sample_workout):
        data = sample_workout.to_dict()

        assert data["workout_date"] == "2024-01-05"
        assert data["total_volume"] == 3400.0
        assert data["entries"][0]["exercise_name"] == "Bench Press"
        assert data["entries"][0]["volume"] == 2400.0


class TestReport:
    """Tests for date range aggregation."""

    def _workout(self, workout_id, day, bench_press, weight=80.0):
        return Workout(
            id=workout_id,
            workout_date=day,
            entries=[
                WorkoutEntry(
                    id=workout_id, workout_id=workout_id, exercise=bench_press,
                    sets=3, reps=10, weight=weight,
                )
            ],
        )

    def test_total_weight_lifted(self, sample_workout):
        assert total_weight_lifted([sample_workout]) == 3400.0

    def test_total_weight_lifted_empty(self):
        assert total_weight_lifted([]) == 0.0

    def test_example_month_report(self, bench_press):
        workouts = [self._workout(1, date(2024, 1, 5), bench_press)]

        report = build_report(workouts, date(2024, 1, 1), date(2024, 1, 31))

        assert report.total_weight_lifted == 2400.0
        assert [w.id for w in report.workouts] == [1]
        assert report.from_date == date(2024, 1, 1)
        assert report.to_date == date(2024, 1, 31)

    def test_boundaries_are_inclusive(self, bench_press):
        workouts = [
            self._workout(1, date(2024, 1, 1), bench_press),
            self._workout(2, date(2024, 1, 31), bench_press),
            self._workout(3, date(2024, 2, 1), bench_press),
            self._workout(4, date(2023, 12, 31), bench_press),
        ]

        report = build_report(workouts, date(2024, 1, 1), date(2024, 1, 31))

        assert [w.id for w in report.workouts] == [1, 2]
        assert report.total_weight_lifted == 4800.0
        assert report.entry_count == 2

    def test_no_matching_workouts(self, bench_press):
        workouts = [self._workout(1, date(2024, 3, 1), bench_press)]

        report = build_report(workouts, date(2024, 1, 1), date(2024, 1, 31))

        assert report.workouts == []
        assert report.total_weight_lifted == 0.0

    def test_inverted_range_is_empty(self, bench_press):
        workouts = [self._workout(1, date(2024, 1, 5), bench_press)]

        report = build_report(workouts, date(2024, 1, 31), date(2024, 1, 1))

        assert report.workouts == []
        assert report.total_weight_lifted == 0.0

    def test_report_to_dict(self, sample_workout):
        report = build_report([sample_workout], date(2024, 1, 1), date(2024, 1, 31))
        data = report.to_dict()

        assert data["from_date"] == "2024-01-01"
        assert data["total_weight_lifted"] == 3400.0
        assert data["entry_count"] == 2
