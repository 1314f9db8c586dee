"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from fitness_tracker.db import LocalStorage, MemoryBackend
from fitness_tracker.models.diet import DietLog
from fitness_tracker.models.progress import ProgressLog
from fitness_tracker.models.todo import Todo
from fitness_tracker.models.workout import WorkoutExercise, WorkoutPlan


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def backend():
    """An empty in-memory key-value backend."""
    return MemoryBackend()


@pytest.fixture
def storage(backend):
    """A record store over the in-memory backend."""
    return LocalStorage(backend)


@pytest.fixture
def sample_workout_plan():
    """Create a sample workout plan for testing."""
    return WorkoutPlan(
        id="p1",
        user_id="u1",
        name="Push Day",
        day_of_week="Monday",
        description="Chest, shoulders and triceps",
        exercises=[
            WorkoutExercise(id="e1", name="Bench Press", order_position=0, sets=3, reps=8, weight=60),
            WorkoutExercise(id="e2", name="Overhead Press", order_position=1, sets=3, reps=10),
        ],
    )


@pytest.fixture
def sample_diet_log():
    """Create a sample diet log for testing."""
    return DietLog(
        id="d1",
        user_id="u1",
        food_name="Oatmeal",
        logged_at="2025-03-25T08:00:00.000Z",
        calories=350,
        protein=12,
        carbs=60,
        fats=6,
        meal_type="breakfast",
    )


@pytest.fixture
def sample_progress_log():
    """Create a sample progress log for testing."""
    return ProgressLog(
        id="g1",
        user_id="u1",
        logged_at="2025-03-25T07:00:00.000Z",
        weight=80.5,
        body_fat_percentage=18.2,
        measurements={"waist": 82, "chest": 101.5},
    )


@pytest.fixture
def sample_todo():
    """Create a sample to-do for testing."""
    return Todo(id="t1", user_id="u1", title="Complete morning workout", due_date="2025-03-25")
