"""Domain entities for bandcal."""

from .availability import Availability
from .consolidated import ConsolidatedAvailability, MemberScheduleEntry
from .event import Event
from .member import Member

__all__ = [
    "Availability",
    "ConsolidatedAvailability",
    "Event",
    "Member",
    "MemberScheduleEntry",
]
