"""Tools for scheduling events."""

from langchain_core.tools import BaseTool, tool
from pydantic import ValidationError

from ..config import logger as log
from ..constants.availability import REHEARSAL_STATUSES
from ..container import Container
from ..models.event import NewEvent


def build_event_tools(container: Container) -> list[BaseTool]:
    """Creates the event scheduling tools bound to a container."""

    @tool
    def update_rehearsal_status(event_id: int, status: str) -> str:
        """Confirms, cancels or unconfirms a rehearsal. Gigs are not affected.

        Args:
            event_id: Event ID of the rehearsal.
            status: One of 'unconfirmed', 'confirmed' or 'cancelled'.

        Returns:
            Confirmation or error message.
        """
        log.info(
            "tools.events", "update_rehearsal_status called", event_id=event_id, status=status
        )
        if status not in REHEARSAL_STATUSES:
            return (
                f"Invalid rehearsal status '{status}'. "
                f"Use one of: {', '.join(REHEARSAL_STATUSES)}."
            )
        if not container.events.set_rehearsal_status(event_id, status):
            return "Could not update the rehearsal. Please try again later."
        return f"Rehearsal {event_id} marked as {status}."

    @tool
    def schedule_events(events: list[dict]) -> str:
        """Adds several events to the calendar at once. Either all are added or none.

        Args:
            events: Items with 'date' (YYYY-MM-DD), 'event_type' ('rehearsal',
                'gig-confirmed', 'gig-unconfirmed' or 'gig-available'), and
                optionally 'rehearsal_status' (rehearsals only) and 'notes'.

        Returns:
            Confirmation or error message.
        """
        log.info("tools.events", "schedule_events called", count=len(events))
        try:
            new_events = [NewEvent.model_validate(item) for item in events]
        except ValidationError as e:
            log.warn("tools.events", "Invalid events", error=str(e))
            return f"Invalid events: {e.errors(include_url=False)}"

        if not container.events.create_events(new_events):
            return "Could not schedule the events. Nothing was added."
        return f"Scheduled {len(new_events)} event(s)."

    return [update_rehearsal_status, schedule_events]
