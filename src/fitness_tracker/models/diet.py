"""Diet tracking data models."""

from dataclasses import dataclass
from enum import Enum

from ..utils import omit_none


class MealType(str, Enum):
    """Meal slots offered by the diet log."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass
class DietLog:
    """A single food entry. Entries are append-only once stored."""

    id: str
    user_id: str
    food_name: str
    logged_at: str  # ISO8601 timestamp
    calories: float | None = None
    protein: float | None = None  # grams
    carbs: float | None = None  # grams
    fats: float | None = None  # grams
    meal_type: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "id": self.id,
            "userId": self.user_id,
            "foodName": self.food_name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "mealType": self.meal_type,
            "loggedAt": self.logged_at,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "DietLog":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            user_id=data["userId"],
            food_name=data["foodName"],
            logged_at=data["loggedAt"],
            calories=data.get("calories"),
            protein=data.get("protein"),
            carbs=data.get("carbs"),
            fats=data.get("fats"),
            meal_type=data.get("mealType"),
        )


@dataclass
class NutritionTotals:
    """Summed macros over a set of diet logs."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }
