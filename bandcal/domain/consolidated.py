"""Read-only views derived from members, events and availability rows."""

from dataclasses import dataclass, field

from ..constants.availability import AvailabilityStatus
from .event import Event
from .member import Member


@dataclass
class ConsolidatedAvailability:
    """Every member of the group sorted into one bucket for a single event."""

    event: Event
    available: list[Member] = field(default_factory=list)
    unavailable: list[Member] = field(default_factory=list)
    unknown: list[Member] = field(default_factory=list)

    @property
    def all_available(self) -> bool:
        """Everyone answered and nobody is unavailable."""
        return not self.unavailable and not self.unknown and bool(self.available)

    @property
    def any_unavailable(self) -> bool:
        return bool(self.unavailable)

    @property
    def all_responded(self) -> bool:
        return not self.unknown

    def to_dict(self) -> dict:
        """Converts to dictionary, flags included."""
        return {
            "event": self.event.to_dict(),
            "available": [m.to_dict() for m in self.available],
            "unavailable": [m.to_dict() for m in self.unavailable],
            "unknown": [m.to_dict() for m in self.unknown],
            "all_available": self.all_available,
            "any_unavailable": self.any_unavailable,
            "all_responded": self.all_responded,
        }


@dataclass
class MemberScheduleEntry:
    """An event paired with one member's status for it."""

    event: Event
    status: AvailabilityStatus

    def to_dict(self) -> dict:
        return {"event": self.event.to_dict(), "status": self.status}
