"""Data models for fitness-tracker."""

from .diet import DietLog, MealType, NutritionTotals
from .progress import ProgressLog
from .todo import Todo
from .user_profile import UserAccount, UserProfile
from .workout import DAYS_OF_WEEK, WorkoutExercise, WorkoutPlan

__all__ = [
    "DAYS_OF_WEEK",
    "DietLog",
    "MealType",
    "NutritionTotals",
    "ProgressLog",
    "Todo",
    "UserAccount",
    "UserProfile",
    "WorkoutExercise",
    "WorkoutPlan",
]
