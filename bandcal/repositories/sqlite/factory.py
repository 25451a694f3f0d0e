"""Factory for creating Container with SQLite implementation."""

from typing import Optional

from ...container import Container
from .connection import SQLiteConnection
from .member_repository import SQLiteMemberRepository
from .event_repository import SQLiteEventRepository
from .availability_repository import SQLiteAvailabilityRepository


def create_sqlite_container(db_path: Optional[str] = None) -> Container:
    """Creates a Container with SQLite repository implementations.

    Args:
        db_path: Path to database file. Uses BANDCAL_DB_PATH or the default
            location if not specified.

    Returns:
        Container: Configured with SQLite repositories.
    """
    connection = SQLiteConnection(db_path)

    return Container(
        members=SQLiteMemberRepository(connection),
        events=SQLiteEventRepository(connection),
        availability=SQLiteAvailabilityRepository(connection),
    )
