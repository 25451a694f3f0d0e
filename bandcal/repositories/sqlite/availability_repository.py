"""SQLite implementation of AvailabilityRepository."""

from datetime import datetime
from typing import Iterable

from ..interfaces.availability_repository import IAvailabilityRepository
from ...domain.availability import Availability
from ...constants.availability import AvailabilityStatus
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteAvailabilityRepository(IAvailabilityRepository):
    """SQLite implementation of availability repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def fetch_by_member(self, member_id: int) -> list[Availability]:
        """Gets all availability rows for a member."""
        log.debug("repo.availability", "fetch_by_member", member_id=member_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT * FROM availability WHERE member_id = ?", (member_id,)
            )
            results = [Availability.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.availability", "fetch_by_member result", count=len(results))
            return results

    def fetch_by_event(self, event_id: int) -> list[Availability]:
        """Gets all availability rows for an event."""
        log.debug("repo.availability", "fetch_by_event", event_id=event_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM availability WHERE event_id = ?", (event_id,))
            results = [Availability.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.availability", "fetch_by_event result", count=len(results))
            return results

    def fetch_by_events(self, event_ids: Iterable[int]) -> list[Availability]:
        """Gets availability rows for any of the given events in one query."""
        ids = sorted(set(event_ids))
        log.debug("repo.availability", "fetch_by_events", event_ids=ids)
        if not ids:
            return []
        placeholders = ", ".join("?" for _ in ids)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT * FROM availability WHERE event_id IN ({placeholders})",
                ids,
            )
            results = [Availability.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.availability", "fetch_by_events result", count=len(results))
            return results

    def update_status(
        self, member_id: int, event_id: int, status: AvailabilityStatus
    ) -> int:
        """Sets the status of an existing row; never inserts."""
        log.info(
            "repo.availability",
            "update_status",
            member_id=member_id,
            event_id=event_id,
            status=status,
        )
        now = datetime.now()
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """UPDATE availability
                   SET status = ?, updated_at = ?
                   WHERE member_id = ? AND event_id = ?""",
                (status, now, member_id, event_id),
            )
            log.debug("repo.availability", "update_status result", rows=cursor.rowcount)
            return cursor.rowcount
