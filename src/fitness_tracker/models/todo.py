"""To-do item model."""

from dataclasses import dataclass

from ..utils import omit_none


@dataclass
class Todo:
    """A to-do item on the dashboard."""

    id: str
    user_id: str
    title: str
    completed: bool = False
    due_date: str | None = None  # YYYY-MM-DD

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "completed": self.completed,
            "dueDate": self.due_date,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "Todo":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            user_id=data["userId"],
            title=data["title"],
            completed=bool(data.get("completed", False)),
            due_date=data.get("dueDate"),
        )
