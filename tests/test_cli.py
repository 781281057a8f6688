"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from workout_tracker.cli import main
from workout_tracker.models.exercises import COMMON_EXERCISES


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def invoke(data_dir):
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(main, ["--data-dir", str(data_dir), *args], input=input)

    return _invoke


@pytest.fixture
def initialized(invoke):
    result = invoke("init")
    assert result.exit_code == 0, result.output
    return invoke


class TestInit:
    def test_init_creates_database(self, invoke, data_dir):
        result = invoke("init")

        assert result.exit_code == 0
        assert "Database initialized" in result.output
        assert (data_dir / "workout_tracker.db").exists()

    def test_init_seed(self, invoke):
        result = invoke("init", "--seed")
        assert f"{len(COMMON_EXERCISES)} exercises added" in result.output

        listing = invoke("exercises", "list")
        assert "Bench Press" in listing.output

    def test_commands_require_init(self, invoke):
        result = invoke("workouts", "list")

        assert result.exit_code == 1
        assert "not initialized" in result.output

    def test_data_dir_from_environment(self, data_dir):
        result = CliRunner().invoke(
            main, ["init"], env={"WORKOUT_TRACKER_DATA_DIR": str(data_dir)}
        )

        assert result.exit_code == 0
        assert (data_dir / "workout_tracker.db").exists()


class TestExerciseCommands:
    def test_add_and_list(self, initialized):
        result = initialized("exercises", "add", "Bench Press", "--muscle-group", "Chest")
        assert result.exit_code == 0
        assert "Added exercise 1" in result.output

        listing = initialized("exercises", "list")
        assert "Bench Press" in listing.output
        assert "Chest" in listing.output

    def test_add_blank_name_fails(self, initialized):
        result = initialized("exercises", "add", "  ")
        assert result.exit_code == 2
        assert "name: is required" in result.output

    def test_edit(self, initialized):
        initialized("exercises", "add", "Bench Press")
        result = initialized("exercises", "edit", "1", "--name", "Flat Bench")

        assert result.exit_code == 0
        assert "Flat Bench" in initialized("exercises", "list").output

    def test_delete_missing(self, initialized):
        result = initialized("exercises", "delete", "9")
        assert result.exit_code == 1
        assert "Exercise 9 not found" in result.output


class TestWorkoutCommands:
    @pytest.fixture
    def logged(self, initialized):
        initialized("exercises", "add", "Bench Press", "-m", "Chest")
        initialized("workouts", "create", "--date", "2024-01-05", "--notes", "Push")
        result = initialized(
            "workouts", "add-entry", "1", "1", "--sets", "3", "--reps", "10", "--weight", "80"
        )
        assert result.exit_code == 0, result.output
        return initialized

    def test_show(self, logged):
        result = logged("workouts", "show", "1")

        assert "2024-01-05" in result.output
        assert "Bench Press" in result.output
        assert "Total volume: 2400.0 kg" in result.output

    def test_list(self, logged):
        result = logged("workouts", "list")
        assert "2400.0" in result.output
        assert "Total: 1 workout(s)" in result.output

    def test_update_keeps_entries(self, logged):
        result = logged("workouts", "update", "1", "--date", "2024-01-06")
        assert result.exit_code == 0
        assert "Total volume: 2400.0 kg" in logged("workouts", "show", "1").output

    def test_remove_entry_wrong_workout(self, logged):
        logged("workouts", "create", "--date", "2024-01-06")

        result = logged("workouts", "remove-entry", "2", "1")
        assert result.exit_code == 1
        assert "Entry 1 not found in workout 2" in result.output

    def test_remove_entry(self, logged):
        result = logged("workouts", "remove-entry", "1", "1")
        assert result.exit_code == 0
        assert "No entries yet" in logged("workouts", "show", "1").output

    def test_delete_confirmed(self, logged):
        result = logged("workouts", "delete", "1", input="y\n")
        assert "Deleted workout 1 (1 entries)" in result.output

        assert logged("workouts", "show", "1").exit_code == 1

    def test_add_entry_count_out_of_range(self, logged):
        result = logged(
            "workouts", "add-entry", "1", "1", "--sets", str(10**20), "--reps", "1", "--weight", "1"
        )
        assert result.exit_code == 2
        assert "sets: is out of range" in result.output

    def test_show_id_out_of_range(self, logged):
        result = logged("workouts", "show", str(10**20))
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_report(self, logged):
        result = logged("report", "2024-01-01", "2024-01-31")
        assert "Total weight lifted: 2400.0 kg" in result.output

    def test_report_json(self, logged):
        result = logged("report", "2024-01-05", "2024-01-05", "--json")

        data = json.loads(result.output)
        assert data["total_weight_lifted"] == 2400.0
        assert len(data["workouts"]) == 1

    def test_report_empty(self, logged):
        result = logged("report", "2025-01-01", "2025-01-31")
        assert "No workouts in this range" in result.output
        assert "Total weight lifted: 0.0 kg" in result.output
