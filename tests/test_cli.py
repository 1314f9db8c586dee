"""Tests for the command-line interface."""

import importlib
import json

import pytest
from click.testing import CliRunner

from fitness_tracker.cli import main
from fitness_tracker.db import LocalStorage, MemoryBackend, SQLiteBackend, get_db_path


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """A CLI runner with an initialized store in a temporary data directory."""
    monkeypatch.setenv("FITNESS_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("FITNESS_TRACKER_USER", raising=False)
    cli_runner = CliRunner()
    result = cli_runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return cli_runner


def stored(user_id: str = "local") -> dict:
    """Read back what the CLI stored for ``user_id``."""
    storage = LocalStorage(SQLiteBackend(get_db_path()))
    return {
        "plans": storage.get_workout_plans(user_id),
        "diet": storage.get_diet_logs(user_id),
        "progress": storage.get_progress_logs(user_id),
        "todos": storage.get_todos(user_id),
        "profile": storage.get_user_profile(user_id),
    }


class TestInit:
    """Tests for the init command."""

    def test_init_creates_store(self, runner, tmp_path):
        """Test that init creates the database file."""
        assert (tmp_path / "fitness_tracker.db").exists()

    def test_requires_init(self, tmp_path, monkeypatch):
        """Test that commands refuse to run before init."""
        monkeypatch.setenv("FITNESS_TRACKER_DATA_DIR", str(tmp_path / "fresh"))
        result = CliRunner().invoke(main, ["todos", "list"])

        assert result.exit_code == 1
        assert "not initialized" in result.output


class TestWorkoutCommands:
    """Tests for workout plan commands."""

    def test_add_and_list(self, runner):
        """Test adding a plan with exercises."""
        result = runner.invoke(
            main,
            ["workouts", "add", "Push Day", "--day", "Monday", "-e", "Bench Press:3:8:60", "-e", "Dips"],
        )
        assert result.exit_code == 0, result.output

        plans = stored()["plans"]
        assert len(plans) == 1
        assert plans[0].name == "Push Day"
        assert [ex.order_position for ex in plans[0].exercises] == [0, 1]
        assert plans[0].exercises[0].weight == 60.0

        result = runner.invoke(main, ["workouts", "list", "--day", "Monday"])
        assert "Push Day" in result.output

    def test_bad_exercise_format(self, runner):
        """Test that a malformed exercise is rejected."""
        result = runner.invoke(main, ["workouts", "add", "Legs", "-e", "Squat:three"])

        assert result.exit_code != 0
        assert stored()["plans"] == []

    def test_show_and_delete_by_prefix(self, runner):
        """Test addressing a plan by id prefix."""
        runner.invoke(main, ["workouts", "add", "Pull Day", "-e", "Row:4:10"])
        plan_id = stored()["plans"][0].id

        result = runner.invoke(main, ["workouts", "show", plan_id[:8]])
        assert "Row: 4x10" in result.output

        result = runner.invoke(main, ["workouts", "delete", plan_id[:8], "--yes"])
        assert result.exit_code == 0, result.output
        assert stored()["plans"] == []

    def test_plans_scoped_by_user(self, runner):
        """Test that --user selects whose plans are listed."""
        runner.invoke(main, ["--user", "alice", "workouts", "add", "Alice Day"])

        result = runner.invoke(main, ["--user", "bob", "workouts", "list"])
        assert "Alice Day" not in result.output
        assert len(stored("alice")["plans"]) == 1


class TestDietCommands:
    """Tests for diet commands."""

    def test_log_and_totals(self, runner):
        """Test logging meals and listing totals."""
        runner.invoke(main, ["diet", "log", "Oatmeal", "--calories", "350", "--protein", "12"])
        runner.invoke(main, ["diet", "log", "Chicken", "--calories", "500", "--meal", "dinner"])

        result = runner.invoke(main, ["diet", "list"])
        assert result.exit_code == 0, result.output
        assert "Totals: 850 kcal" in result.output

        result = runner.invoke(main, ["diet", "list", "--meal", "dinner"])
        assert "Totals: 500 kcal" in result.output

    def test_delete(self, runner):
        """Test deleting a food entry."""
        runner.invoke(main, ["diet", "log", "Apple"])
        log_id = stored()["diet"][0].id

        result = runner.invoke(main, ["diet", "delete", log_id])
        assert result.exit_code == 0, result.output
        assert stored()["diet"] == []

    def test_delete_unknown(self, runner):
        """Test deleting an id that does not exist."""
        result = runner.invoke(main, ["diet", "delete", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestProgressCommands:
    """Tests for progress commands."""

    def test_log_with_measurements(self, runner):
        """Test recording weight and measurements."""
        result = runner.invoke(
            main, ["progress", "log", "--weight", "80.5", "--measure", "waist=82", "--measure", "chest=101"]
        )
        assert result.exit_code == 0, result.output

        log = stored()["progress"][0]
        assert log.weight == 80.5
        assert log.measurements == {"waist": 82.0, "chest": 101.0}

    def test_log_requires_a_value(self, runner):
        """Test that an empty snapshot is refused."""
        result = runner.invoke(main, ["progress", "log"])
        assert result.exit_code != 0
        assert stored()["progress"] == []


class TestTodoCommands:
    """Tests for to-do commands."""

    def test_add_done_list(self, runner):
        """Test the to-do lifecycle."""
        runner.invoke(main, ["todos", "add", "Stretch", "--due", "2025-03-25"])
        runner.invoke(main, ["todos", "add", "Hydrate"])
        todo_id = stored()["todos"][0].id

        result = runner.invoke(main, ["todos", "done", todo_id])
        assert result.exit_code == 0, result.output

        todos = stored()["todos"]
        assert [t.title for t in todos] == ["Stretch", "Hydrate"]
        assert todos[0].completed is True
        assert todos[0].due_date == "2025-03-25"

        result = runner.invoke(main, ["todos", "list"])
        assert "1/2 completed" in result.output


class TestProfileCommands:
    """Tests for profile commands."""

    def test_set_and_show(self, runner):
        """Test setting profile fields from options."""
        result = runner.invoke(main, ["profile", "set", "--username", "sam", "--height", "180"])
        assert result.exit_code == 0, result.output

        runner.invoke(main, ["profile", "set", "--goal", "Run a 5K"])

        user_profile = stored()["profile"]
        assert user_profile.username == "sam"
        assert user_profile.height == 180.0
        assert user_profile.goal == "Run a 5K"

        result = runner.invoke(main, ["profile", "show"])
        assert "Run a 5K" in result.output

    def test_show_missing(self, runner):
        """Test showing a profile that does not exist."""
        result = runner.invoke(main, ["profile", "show"])
        assert result.exit_code == 0
        assert "No profile yet" in result.output


class TestExport:
    """Tests for the export command."""

    def test_export_json(self, runner):
        """Test exporting the current user's records."""
        runner.invoke(main, ["todos", "add", "Stretch"])
        runner.invoke(main, ["profile", "set", "--username", "sam"])

        result = runner.invoke(main, ["export"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.output)
        assert data["userId"] == "local"
        assert data["profile"] == {"username": "sam"}
        assert [t["title"] for t in data["todos"]] == ["Stretch"]
        assert data["workoutPlans"] == []

    def test_export_to_file(self, runner, tmp_path):
        """Test exporting to a file."""
        target = tmp_path / "backup.json"
        result = runner.invoke(main, ["export", "-o", str(target)])

        assert result.exit_code == 0, result.output
        assert json.loads(target.read_text())["userId"] == "local"


class TestStorageFailures:
    """Tests for writes rejected by the store."""

    def test_full_store_reports_error(self, runner, monkeypatch):
        """Test that a rejected write exits with an error message."""
        todos_module = importlib.import_module("fitness_tracker.commands.todos")
        monkeypatch.setattr(todos_module, "get_storage", lambda: LocalStorage(MemoryBackend(quota=1)))

        result = runner.invoke(main, ["todos", "add", "Stretch"])

        assert result.exit_code == 1
        assert "[ERROR] Storage failure" in result.output
        assert stored()["todos"] == []
