"""Body progress tracking model."""

from dataclasses import dataclass

from ..utils import omit_none


@dataclass
class ProgressLog:
    """A body measurement snapshot.

    ``measurements`` holds free-form named values such as ``{"waist": 82}``.
    """

    id: str
    user_id: str
    logged_at: str  # ISO8601 timestamp
    weight: float | None = None  # in kg
    body_fat_percentage: float | None = None
    measurements: dict[str, float] | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "id": self.id,
            "userId": self.user_id,
            "weight": self.weight,
            "bodyFatPercentage": self.body_fat_percentage,
            "measurements": dict(self.measurements) if self.measurements is not None else None,
            "notes": self.notes,
            "loggedAt": self.logged_at,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "ProgressLog":
        """Create from dictionary."""
        measurements = data.get("measurements")
        return cls(
            id=data["id"],
            user_id=data["userId"],
            logged_at=data["loggedAt"],
            weight=data.get("weight"),
            body_fat_percentage=data.get("bodyFatPercentage"),
            measurements=dict(measurements) if measurements is not None else None,
            notes=data.get("notes"),
        )
