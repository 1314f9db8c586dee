"""Workout plan data models."""

from dataclasses import dataclass, field

from ..utils import omit_none

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


@dataclass
class WorkoutExercise:
    """An exercise embedded in a workout plan.

    ``order_position`` is the exercise's index at the time it was added to
    its plan. Positions are not renumbered when exercises are removed, so
    consumers sort by this field instead of relying on list order.
    """

    id: str
    name: str
    order_position: int
    sets: int | None = None
    reps: int | None = None
    weight: float | None = None  # in kg
    notes: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return omit_none({
            "id": self.id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "notes": self.notes,
            "orderPosition": self.order_position,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutExercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            order_position=data["orderPosition"],
            sets=data.get("sets"),
            reps=data.get("reps"),
            weight=data.get("weight"),
            notes=data.get("notes"),
        )

    def get_display(self) -> str:
        """Format as e.g. 'Bench Press: 3x8 @ 60kg'."""
        text = self.name
        if self.sets and self.reps:
            text += f": {self.sets}x{self.reps}"
        elif self.sets:
            text += f": {self.sets} sets"
        elif self.reps:
            text += f": {self.reps} reps"
        if self.weight:
            text += f" @ {self.weight:g}kg"
        return text


@dataclass
class WorkoutPlan:
    """A named workout scheduled on a day of the week."""

    id: str
    user_id: str
    name: str
    day_of_week: str
    exercises: list[WorkoutExercise] = field(default_factory=list)
    description: str | None = None

    def add_exercise(
        self,
        id: str,
        name: str,
        sets: int | None = None,
        reps: int | None = None,
        weight: float | None = None,
        notes: str | None = None,
    ) -> WorkoutExercise:
        """Append an exercise, positioned at the current list length."""
        exercise = WorkoutExercise(
            id=id,
            name=name,
            order_position=len(self.exercises),
            sets=sets,
            reps=reps,
            weight=weight,
            notes=notes,
        )
        self.exercises.append(exercise)
        return exercise

    def remove_exercise(self, exercise_id: str) -> None:
        """Remove an exercise by id. Remaining positions are left as-is."""
        self.exercises = [ex for ex in self.exercises if ex.id != exercise_id]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "dayOfWeek": self.day_of_week,
            "exercises": [ex.to_dict() for ex in self.exercises],
        })

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            user_id=data["userId"],
            name=data["name"],
            day_of_week=data["dayOfWeek"],
            exercises=[WorkoutExercise.from_dict(ex) for ex in data.get("exercises") or []],
            description=data.get("description"),
        )
