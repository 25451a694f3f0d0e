"""Availability entity - one member's answer for one event."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..constants.availability import AVAILABILITY_STATUSES, AvailabilityStatus


@dataclass
class Availability:
    """Status of a member for an event, unique per (member_id, event_id)."""

    id: int
    member_id: int
    event_id: int
    status: AvailabilityStatus = "unknown"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Availability":
        """Creates an Availability from a dictionary.

        Raises:
            ValueError: If the status is not a known value.
        """
        status = data.get("status", "unknown")
        if status not in AVAILABILITY_STATUSES:
            raise ValueError(f"Unknown availability status: {status!r}")

        return cls(
            id=data["id"],
            member_id=data["member_id"],
            event_id=data["event_id"],
            status=status,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "member_id": self.member_id,
            "event_id": self.event_id,
            "status": self.status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
