"""Event entity - a rehearsal or gig on a calendar date."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..constants.availability import (
    EVENT_TYPES,
    REHEARSAL,
    REHEARSAL_STATUSES,
    EventType,
    RehearsalStatus,
)


@dataclass
class Event:
    """A dated event members are asked to attend.

    Only rehearsals carry a rehearsal status; gigs keep it as None.
    """

    id: int
    date: date
    event_type: EventType
    rehearsal_status: Optional[RehearsalStatus] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """Creates an Event from a dictionary.

        Raises:
            ValueError: If the event type or rehearsal status is not a known value.
        """
        event_date = data["date"]
        if isinstance(event_date, str):
            event_date = date.fromisoformat(event_date)

        event_type = data["event_type"]
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown event type: {event_type!r}")

        rehearsal_status = data.get("rehearsal_status")
        if rehearsal_status is not None and rehearsal_status not in REHEARSAL_STATUSES:
            raise ValueError(f"Unknown rehearsal status: {rehearsal_status!r}")

        return cls(
            id=data["id"],
            date=event_date,
            event_type=event_type,
            rehearsal_status=rehearsal_status,
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "date": self.date,
            "event_type": self.event_type,
            "rehearsal_status": self.rehearsal_status,
            "notes": self.notes,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @property
    def is_rehearsal(self) -> bool:
        """Checks if the event is a rehearsal."""
        return self.event_type == REHEARSAL
