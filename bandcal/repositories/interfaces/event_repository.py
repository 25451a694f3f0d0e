"""Interface for event repository."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

from ...domain.event import Event
from ...models.event import NewEvent
from ...constants.availability import RehearsalStatus
from ...config import logger as log
from ..errors import RepositoryError


class IEventRepository(ABC):
    """Contract for event data access.

    The abstract queries raise RepositoryError when the store fails; the
    public operations log the failure and return a safe default.
    """

    @abstractmethod
    def fetch_by_id(self, event_id: int) -> Optional[Event]:
        """Gets an event by ID."""
        pass

    @abstractmethod
    def fetch_in_range(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> list[Event]:
        """Gets events ordered by date, bounds inclusive and optional."""
        pass

    @abstractmethod
    def update_rehearsal_status(self, event_id: int, status: RehearsalStatus) -> int:
        """Sets the status of a rehearsal. Returns the number of rows changed."""
        pass

    @abstractmethod
    def insert_many(self, new_events: Sequence[NewEvent]) -> int:
        """Inserts events in a single transaction. Returns the number inserted."""
        pass

    def get_event(self, event_id: int) -> Optional[Event]:
        """Gets an event by ID, None if missing or on failure."""
        try:
            return self.fetch_by_id(event_id)
        except RepositoryError as e:
            log.error("repo.event", "Error fetching event", event_id=event_id, error=str(e))
            return None

    def list_events(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> list[Event]:
        """Lists events ordered by date, empty on failure."""
        try:
            return self.fetch_in_range(start, end)
        except RepositoryError as e:
            log.error(
                "repo.event",
                "Error fetching events",
                start=start,
                end=end,
                error=str(e),
            )
            return []

    def set_rehearsal_status(self, event_id: int, status: RehearsalStatus) -> bool:
        """Updates a rehearsal's status.

        Events that are not rehearsals, or do not exist, are left untouched
        and the call still succeeds.
        """
        try:
            self.update_rehearsal_status(event_id, status)
            return True
        except RepositoryError as e:
            log.error(
                "repo.event",
                "Error updating rehearsal status",
                event_id=event_id,
                status=status,
                error=str(e),
            )
            return False

    def create_events(self, new_events: Sequence[NewEvent]) -> bool:
        """Creates all events or none of them."""
        try:
            self.insert_many(new_events)
            return True
        except RepositoryError as e:
            log.error(
                "repo.event", "Error creating events", count=len(new_events), error=str(e)
            )
            return False
