"""Summaries computed from a user's stored records."""

from ..models.diet import DietLog, NutritionTotals
from ..models.progress import ProgressLog
from ..models.todo import Todo
from ..models.workout import WorkoutExercise, WorkoutPlan


def logs_for_meal(logs: list[DietLog], meal_type: str | None = None) -> list[DietLog]:
    """Diet logs of one meal type. None or "all" keeps every log."""
    if meal_type and meal_type != "all":
        return [log for log in logs if log.meal_type == meal_type]
    return list(logs)


def nutrition_totals(logs: list[DietLog], meal_type: str | None = None) -> NutritionTotals:
    """Sum macros over diet logs, optionally for one meal type.

    Missing values count as zero. A meal type of None or "all" sums every log.
    """
    totals = NutritionTotals()
    for log in logs_for_meal(logs, meal_type):
        totals.calories += log.calories or 0
        totals.protein += log.protein or 0
        totals.carbs += log.carbs or 0
        totals.fats += log.fats or 0
    return totals


def plans_for_day(plans: list[WorkoutPlan], day: str) -> list[WorkoutPlan]:
    """Plans scheduled on ``day``, in stored order."""
    return [plan for plan in plans if plan.day_of_week == day]


def ordered_exercises(plan: WorkoutPlan) -> list[WorkoutExercise]:
    """A plan's exercises sorted by their recorded position."""
    return sorted(plan.exercises, key=lambda ex: ex.order_position)


def todo_completion(todos: list[Todo]) -> tuple[int, int]:
    """Return (completed, total) counts."""
    return sum(1 for todo in todos if todo.completed), len(todos)


def progress_history(logs: list[ProgressLog]) -> list[ProgressLog]:
    """Progress logs oldest first."""
    return sorted(logs, key=lambda log: log.logged_at)
