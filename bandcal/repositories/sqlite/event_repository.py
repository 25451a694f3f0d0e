"""SQLite implementation of EventRepository."""

from datetime import datetime, date
from typing import Optional, Sequence

from ..interfaces.event_repository import IEventRepository
from ...domain.event import Event
from ...models.event import NewEvent
from ...constants.availability import RehearsalStatus
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteEventRepository(IEventRepository):
    """SQLite implementation of event repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def fetch_by_id(self, event_id: int) -> Optional[Event]:
        """Gets an event by ID."""
        log.debug("repo.event", "fetch_by_id", event_id=event_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM events WHERE id = ?", (event_id,))
            row = cursor.fetchone()
            result = Event.from_dict(dict(row)) if row else None
            log.debug(
                "repo.event",
                "fetch_by_id result",
                found=result is not None,
                date=str(result.date) if result else None,
                event_type=result.event_type if result else None,
            )
            return result

    def fetch_in_range(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> list[Event]:
        """Gets events ordered by date, bounds inclusive and optional."""
        log.debug("repo.event", "fetch_in_range", start=start, end=end)
        query = "SELECT * FROM events"
        clauses = []
        params: list = []
        if start is not None:
            clauses.append("date >= ?")
            params.append(start)
        if end is not None:
            clauses.append("date <= ?")
            params.append(end)
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY date, id"

        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            results = [Event.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.event", "fetch_in_range result", count=len(results))
            return results

    def update_rehearsal_status(self, event_id: int, status: RehearsalStatus) -> int:
        """Sets the status of a rehearsal. Non-rehearsals are not matched."""
        log.info(
            "repo.event", "update_rehearsal_status", event_id=event_id, status=status
        )
        now = datetime.now()
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """UPDATE events
                   SET rehearsal_status = ?, updated_at = ?
                   WHERE id = ? AND event_type = 'rehearsal'""",
                (status, now, event_id),
            )
            log.debug(
                "repo.event", "update_rehearsal_status result", rows=cursor.rowcount
            )
            return cursor.rowcount

    def insert_many(self, new_events: Sequence[NewEvent]) -> int:
        """Inserts events in a single transaction."""
        log.info("repo.event", "insert_many", count=len(new_events))
        if not new_events:
            return 0
        now = datetime.now()
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.executemany(
                """INSERT INTO events (
                    date, event_type, rehearsal_status, notes, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)""",
                [
                    (
                        event.date,
                        event.event_type,
                        event.rehearsal_status,
                        event.notes,
                        now,
                        now,
                    )
                    for event in new_events
                ],
            )
        log.debug("repo.event", "insert_many success", count=len(new_events))
        return len(new_events)
