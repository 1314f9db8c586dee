"""User profile data models."""

from dataclasses import dataclass

from ..utils import omit_none


@dataclass
class UserProfile:
    """Personal details shown on the profile page. Every field is optional."""

    username: str | None = None
    full_name: str | None = None
    height: float | None = None  # in cm
    weight: float | None = None  # in kg
    goal: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "username": self.username,
            "fullName": self.full_name,
            "height": self.height,
            "weight": self.weight,
            "goal": self.goal,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            username=data.get("username"),
            full_name=data.get("fullName"),
            height=data.get("height"),
            weight=data.get("weight"),
            goal=data.get("goal"),
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"User: {self.full_name or self.username or 'Unnamed'}\n"
        if self.username:
            summary += f"Username: {self.username}\n"
        if self.height:
            summary += f"Height: {self.height:g}cm\n"
        if self.weight:
            summary += f"Weight: {self.weight:g}kg\n"
        if self.goal:
            summary += f"Goal: {self.goal}\n"
        return summary


@dataclass
class UserAccount:
    """Account container under which a profile is stored.

    Containers are keyed by user id. One created implicitly by a profile
    save carries an empty email.
    """

    id: str
    email: str = ""
    profile: UserProfile | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return omit_none({
            "id": self.id,
            "email": self.email,
            "profile": self.profile.to_dict() if self.profile is not None else None,
        })

    @classmethod
    def from_dict(cls, data: dict) -> "UserAccount":
        """Create from dictionary."""
        profile = data.get("profile")
        return cls(
            id=data["id"],
            email=data.get("email") or "",
            profile=UserProfile.from_dict(profile) if profile is not None else None,
        )
