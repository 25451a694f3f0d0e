"""Interface for availability repository."""

from abc import ABC, abstractmethod
from typing import Iterable

from ...domain.availability import Availability
from ...constants.availability import AvailabilityStatus
from ...config import logger as log
from ..errors import RepositoryError


class IAvailabilityRepository(ABC):
    """Contract for availability data access.

    Rows are provisioned by the store; this layer only reads them and
    updates their status.
    """

    @abstractmethod
    def fetch_by_member(self, member_id: int) -> list[Availability]:
        """Gets all availability rows for a member."""
        pass

    @abstractmethod
    def fetch_by_event(self, event_id: int) -> list[Availability]:
        """Gets all availability rows for an event."""
        pass

    @abstractmethod
    def fetch_by_events(self, event_ids: Iterable[int]) -> list[Availability]:
        """Gets availability rows for any of the given events in one query."""
        pass

    @abstractmethod
    def update_status(
        self, member_id: int, event_id: int, status: AvailabilityStatus
    ) -> int:
        """Sets the status of an existing row. Returns the number of rows changed."""
        pass

    def get_availability_for_member(self, member_id: int) -> list[Availability]:
        try:
            return self.fetch_by_member(member_id)
        except RepositoryError as e:
            log.error(
                "repo.availability",
                "Error fetching availability for member",
                member_id=member_id,
                error=str(e),
            )
            return []

    def get_availability_for_event(self, event_id: int) -> list[Availability]:
        try:
            return self.fetch_by_event(event_id)
        except RepositoryError as e:
            log.error(
                "repo.availability",
                "Error fetching availability for event",
                event_id=event_id,
                error=str(e),
            )
            return []

    def get_availability_for_events(self, event_ids: Iterable[int]) -> list[Availability]:
        event_ids = list(event_ids)
        try:
            return self.fetch_by_events(event_ids)
        except RepositoryError as e:
            log.error(
                "repo.availability",
                "Error fetching availability for events",
                event_ids=event_ids,
                error=str(e),
            )
            return []

    def set_availability_status(
        self, member_id: int, event_id: int, status: AvailabilityStatus
    ) -> bool:
        """Updates a member's status for an event.

        A missing row is not created; the call succeeds with nothing changed.
        """
        try:
            self.update_status(member_id, event_id, status)
            return True
        except RepositoryError as e:
            log.error(
                "repo.availability",
                "Error updating availability",
                member_id=member_id,
                event_id=event_id,
                status=status,
                error=str(e),
            )
            return False
