"""Consolidated availability: who can make each event.

Joins members, events and availability rows into one view per event. A
member with no availability row for an event is treated exactly like one
who answered ``unknown``.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from ..config import logger as log
from ..constants.availability import (
    AVAILABILITY_STATUSES,
    DEFAULT_STATUS,
    AvailabilityStatus,
)
from ..domain.availability import Availability
from ..domain.consolidated import ConsolidatedAvailability, MemberScheduleEntry
from ..domain.event import Event
from ..domain.member import Member
from ..repositories.errors import RepositoryError
from ..repositories.interfaces.availability_repository import IAvailabilityRepository
from ..repositories.interfaces.event_repository import IEventRepository
from ..repositories.interfaces.member_repository import IMemberRepository


class StatusIndex:
    """Lookup of availability status by member or event ID.

    ``status_of`` is total: IDs without a row resolve to ``unknown``.
    """

    def __init__(self, statuses: dict[int, AvailabilityStatus]):
        self._statuses = statuses

    @classmethod
    def by_member(cls, rows: Iterable[Availability]) -> "StatusIndex":
        """Indexes one event's rows by member ID."""
        return cls({row.member_id: row.status for row in rows})

    @classmethod
    def by_event(cls, rows: Iterable[Availability]) -> "StatusIndex":
        """Indexes one member's rows by event ID."""
        return cls({row.event_id: row.status for row in rows})

    def status_of(self, key: int) -> AvailabilityStatus:
        return self._statuses.get(key, DEFAULT_STATUS)

    def __len__(self) -> int:
        return len(self._statuses)


def classify(
    event: Event, members: Sequence[Member], rows: Iterable[Availability]
) -> ConsolidatedAvailability:
    """Sorts every member into exactly one bucket for the event.

    Args:
        event: The event being consolidated.
        members: All members, in the order the buckets should keep.
        rows: Availability rows for this event only.

    Returns:
        ConsolidatedAvailability with the member set partitioned.
    """
    index = StatusIndex.by_member(rows)
    buckets: dict[str, list[Member]] = {status: [] for status in AVAILABILITY_STATUSES}
    for member in members:
        buckets[index.status_of(member.id)].append(member)

    return ConsolidatedAvailability(
        event=event,
        available=buckets["available"],
        unavailable=buckets["unavailable"],
        unknown=buckets["unknown"],
    )


def group_by_event(rows: Iterable[Availability]) -> dict[int, list[Availability]]:
    """Groups availability rows by event ID."""
    grouped: dict[int, list[Availability]] = {}
    for row in rows:
        grouped.setdefault(row.event_id, []).append(row)
    return grouped


class AvailabilityConsolidator:
    """Builds consolidated availability views from the repositories.

    Uses the strict repository queries so a failed fetch is never mistaken
    for an empty one. Any failure yields None (single event), an empty
    mapping (bulk) or an empty schedule; partial results are not returned.
    """

    def __init__(
        self,
        members: IMemberRepository,
        events: IEventRepository,
        availability: IAvailabilityRepository,
    ):
        self._members = members
        self._events = events
        self._availability = availability

    def consolidate(self, event_id: int) -> Optional[ConsolidatedAvailability]:
        """Consolidated availability for one event, None if it cannot be built.

        Three queries: the event, the members, the event's availability rows.
        """
        log.debug("consolidation", "consolidate", event_id=event_id)
        try:
            event = self._events.fetch_by_id(event_id)
            if event is None:
                log.info("consolidation", "Event not found", event_id=event_id)
                return None
            members = self._members.fetch_all()
            rows = self._availability.fetch_by_event(event_id)
        except RepositoryError as e:
            log.error(
                "consolidation",
                "Error consolidating event",
                event_id=event_id,
                error=str(e),
            )
            return None

        result = classify(event, members, rows)
        log.debug(
            "consolidation",
            "consolidate result",
            event_id=event_id,
            available=len(result.available),
            unavailable=len(result.unavailable),
            unknown=len(result.unknown),
        )
        return result

    def consolidate_bulk(
        self, events: Sequence[Event]
    ) -> dict[int, ConsolidatedAvailability]:
        """Consolidated availability for many already-fetched events.

        Two queries regardless of how many events are given: all members,
        then the availability rows of every event at once. Each input event
        gets an entry, even when it has no rows.
        """
        if not events:
            return {}

        event_ids = [event.id for event in events]
        log.debug("consolidation", "consolidate_bulk", event_ids=event_ids)
        try:
            members = self._members.fetch_all()
            rows = self._availability.fetch_by_events(event_ids)
        except RepositoryError as e:
            log.error(
                "consolidation",
                "Error consolidating events",
                event_ids=event_ids,
                error=str(e),
            )
            return {}

        rows_by_event = group_by_event(rows)
        consolidated = {
            event.id: classify(event, members, rows_by_event.get(event.id, []))
            for event in events
        }
        log.debug(
            "consolidation",
            "consolidate_bulk result",
            events=len(consolidated),
            rows=len(rows),
        )
        return consolidated

    def consolidate_range(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> dict[int, ConsolidatedAvailability]:
        """Bulk consolidation of every event between start and end, inclusive."""
        try:
            events = self._events.fetch_in_range(start, end)
        except RepositoryError as e:
            log.error(
                "consolidation",
                "Error listing events",
                start=start,
                end=end,
                error=str(e),
            )
            return {}
        return self.consolidate_bulk(events)

    def member_schedule(
        self,
        member_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[MemberScheduleEntry]:
        """One member's status for every event in the range, ordered by date."""
        log.debug(
            "consolidation", "member_schedule", member_id=member_id, start=start, end=end
        )
        try:
            events = self._events.fetch_in_range(start, end)
            rows = self._availability.fetch_by_member(member_id)
        except RepositoryError as e:
            log.error(
                "consolidation",
                "Error building member schedule",
                member_id=member_id,
                error=str(e),
            )
            return []

        index = StatusIndex.by_event(rows)
        return [MemberScheduleEntry(event, index.status_of(event.id)) for event in events]
