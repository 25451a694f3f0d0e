"""Closed value domains for events and availability."""

from typing import Literal

AvailabilityStatus = Literal["unknown", "available", "unavailable"]
EventType = Literal["rehearsal", "gig-confirmed", "gig-unconfirmed", "gig-available"]
RehearsalStatus = Literal["unconfirmed", "confirmed", "cancelled"]

AVAILABILITY_STATUSES: tuple[str, ...] = ("available", "unavailable", "unknown")
EVENT_TYPES: tuple[str, ...] = (
    "rehearsal",
    "gig-confirmed",
    "gig-unconfirmed",
    "gig-available",
)
REHEARSAL_STATUSES: tuple[str, ...] = ("unconfirmed", "confirmed", "cancelled")

# A member with no availability row for an event has not responded.
DEFAULT_STATUS: AvailabilityStatus = "unknown"
REHEARSAL = "rehearsal"
