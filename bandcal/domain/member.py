"""Member entity - a person in the group whose availability is tracked."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Member:
    """A member of the group."""

    id: int
    name: str
    instrument: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Member":
        """Creates a Member from a dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            instrument=data.get("instrument"),
            email=data.get("email"),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "instrument": self.instrument,
            "email": self.email,
            "created_at": self.created_at,
        }
