"""Tools for reading and answering event availability."""

from datetime import date
from typing import Optional

from langchain_core.tools import BaseTool, tool

from ..config import logger as log
from ..constants.availability import AVAILABILITY_STATUSES
from ..container import Container
from ..domain.consolidated import ConsolidatedAvailability
from ..domain.event import Event
from ..services.consolidation import AvailabilityConsolidator


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parses an optional YYYY-MM-DD string.

    Raises:
        ValueError: If the value is not an ISO date.
    """
    if value is None or value == "":
        return None
    return date.fromisoformat(value)


def event_summary(event: Event) -> dict:
    return {
        "event_id": event.id,
        "date": event.date.isoformat(),
        "event_type": event.event_type,
        "rehearsal_status": event.rehearsal_status,
        "notes": event.notes,
    }


def consolidated_summary(view: ConsolidatedAvailability) -> dict:
    """Flattens a consolidated view to names and flags."""
    return {
        **event_summary(view.event),
        "available": [m.name for m in view.available],
        "unavailable": [m.name for m in view.unavailable],
        "unknown": [m.name for m in view.unknown],
        "all_available": view.all_available,
        "any_unavailable": view.any_unavailable,
        "all_responded": view.all_responded,
    }


def build_availability_tools(container: Container) -> list[BaseTool]:
    """Creates the availability tools bound to a container."""
    consolidator = AvailabilityConsolidator(
        container.members, container.events, container.availability
    )

    @tool
    def get_event_availability(event_id: int) -> dict | str:
        """Shows which members are available, unavailable or have not answered for an event.

        Args:
            event_id: Event ID.

        Returns:
            Members grouped by status plus the summary flags, or an error message.
        """
        log.info("tools.availability", "get_event_availability called", event_id=event_id)
        view = consolidator.consolidate(event_id)
        if view is None:
            return f"Could not load availability for event {event_id}. It may not exist."
        return consolidated_summary(view)

    @tool
    def get_availability_overview(
        start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> list[dict] | str:
        """Shows consolidated availability for every event in a date range.

        Args:
            start_date: First date in YYYY-MM-DD format (optional).
            end_date: Last date in YYYY-MM-DD format (optional).

        Returns:
            One entry per event ordered by date, or an error message.
        """
        log.info(
            "tools.availability",
            "get_availability_overview called",
            start=start_date,
            end=end_date,
        )
        try:
            start = parse_date(start_date)
            end = parse_date(end_date)
        except ValueError:
            return f"Invalid date range: {start_date} - {end_date}. Use YYYY-MM-DD."

        views = consolidator.consolidate_range(start, end)
        return [consolidated_summary(view) for view in views.values()]

    @tool
    def get_member_schedule(
        member_id: int, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> dict | str:
        """Lists a member's answer for every event in a date range.

        Args:
            member_id: Member ID.
            start_date: First date in YYYY-MM-DD format (optional).
            end_date: Last date in YYYY-MM-DD format (optional).

        Returns:
            The member and their status per event, or an error message.
        """
        member = container.members.get_member(member_id)
        if not member:
            return f"No member with id={member_id}."

        try:
            start = parse_date(start_date)
            end = parse_date(end_date)
        except ValueError:
            return f"Invalid date range: {start_date} - {end_date}. Use YYYY-MM-DD."

        entries = consolidator.member_schedule(member_id, start, end)
        return {
            "member_id": member.id,
            "name": member.name,
            "events": [
                {**event_summary(entry.event), "status": entry.status}
                for entry in entries
            ],
        }

    @tool
    def update_availability(member_id: int, event_id: int, status: str) -> str:
        """Records whether a member can make an event.

        Args:
            member_id: Member ID.
            event_id: Event ID.
            status: One of 'available', 'unavailable' or 'unknown'.

        Returns:
            Confirmation or error message.
        """
        log.info(
            "tools.availability",
            "update_availability called",
            member_id=member_id,
            event_id=event_id,
            status=status,
        )
        if status not in AVAILABILITY_STATUSES:
            return (
                f"Invalid status '{status}'. "
                f"Use one of: {', '.join(AVAILABILITY_STATUSES)}."
            )
        if not container.availability.set_availability_status(member_id, event_id, status):
            return "Could not save availability. Please try again later."
        return f"Saved: member {member_id} is {status} for event {event_id}."

    return [
        get_event_availability,
        get_availability_overview,
        get_member_schedule,
        update_availability,
    ]
