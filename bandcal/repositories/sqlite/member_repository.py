"""SQLite implementation of MemberRepository."""

from typing import Optional

from ..interfaces.member_repository import IMemberRepository
from ...domain.member import Member
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteMemberRepository(IMemberRepository):
    """SQLite implementation of member repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def fetch_all(self) -> list[Member]:
        """Gets all members ordered by name."""
        log.debug("repo.member", "fetch_all")
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM members ORDER BY name COLLATE NOCASE, id")
            results = [Member.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.member", "fetch_all result", count=len(results))
            return results

    def fetch_by_id(self, member_id: int) -> Optional[Member]:
        """Gets a member by ID."""
        log.debug("repo.member", "fetch_by_id", member_id=member_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM members WHERE id = ?", (member_id,))
            row = cursor.fetchone()
            result = Member.from_dict(dict(row)) if row else None
            log.debug(
                "repo.member",
                "fetch_by_id result",
                found=result is not None,
                name=result.name if result else None,
            )
            return result
