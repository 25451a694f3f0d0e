"""SQLite connection management."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime, date
from pathlib import Path
from typing import Optional

from ...config.env import get_db_path
from ..errors import RepositoryError


DEFAULT_DB_PATH = Path(__file__).parent.parent.parent.parent / "data" / "bandcal.db"


def adapt_date(val: date) -> str:
    return val.isoformat()


def adapt_datetime(val: datetime) -> str:
    return val.isoformat()


def convert_date(val: bytes) -> date:
    return date.fromisoformat(val.decode())


def convert_datetime(val: bytes) -> datetime:
    return datetime.fromisoformat(val.decode())


sqlite3.register_adapter(date, adapt_date)
sqlite3.register_adapter(datetime, adapt_datetime)
sqlite3.register_converter("DATE", convert_date)
sqlite3.register_converter("DATETIME", convert_datetime)


class SQLiteConnection:
    """Manages SQLite connection with transaction context manager."""

    def __init__(self, db_path: Optional[str] = None):
        """Initializes connection.

        Args:
            db_path: Path to database file. Falls back to BANDCAL_DB_PATH,
                then to the default location.
        """
        db_path = db_path or get_db_path()
        if db_path:
            self.db_path = Path(db_path)
        else:
            self.db_path = DEFAULT_DB_PATH

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_tables()

    @contextmanager
    def get_connection(self):
        """Context manager for getting a connection with transaction.

        Store errors, and rows that do not fit the domain, are rolled back
        and re-raised as RepositoryError.
        """
        try:
            conn = sqlite3.connect(
                self.db_path,
                detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            )
        except sqlite3.Error as e:
            raise RepositoryError(f"cannot open {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except (sqlite3.Error, ValueError) as e:
            conn.rollback()
            raise RepositoryError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_tables(self):
        """Initializes all database tables."""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS members (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    instrument TEXT,
                    email TEXT,
                    created_at DATETIME
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS events (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    date DATE NOT NULL,
                    event_type TEXT NOT NULL CHECK (event_type IN (
                        'rehearsal', 'gig-confirmed', 'gig-unconfirmed', 'gig-available'
                    )),
                    rehearsal_status TEXT CHECK (
                        rehearsal_status IS NULL OR (
                            event_type = 'rehearsal'
                            AND rehearsal_status IN ('unconfirmed', 'confirmed', 'cancelled')
                        )
                    ),
                    notes TEXT,
                    created_at DATETIME,
                    updated_at DATETIME
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS availability (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    member_id INTEGER NOT NULL,
                    event_id INTEGER NOT NULL,
                    status TEXT NOT NULL DEFAULT 'unknown' CHECK (
                        status IN ('unknown', 'available', 'unavailable')
                    ),
                    created_at DATETIME,
                    updated_at DATETIME,
                    FOREIGN KEY (member_id) REFERENCES members(id) ON DELETE CASCADE,
                    FOREIGN KEY (event_id) REFERENCES events(id) ON DELETE CASCADE,
                    UNIQUE(member_id, event_id)
                )
            """
            )

            # New events and new members start with an 'unknown' row for
            # every counterpart.
            cursor.execute(
                """
                CREATE TRIGGER IF NOT EXISTS trg_events_provision_availability
                AFTER INSERT ON events
                BEGIN
                    INSERT OR IGNORE INTO availability
                        (member_id, event_id, status, created_at, updated_at)
                    SELECT m.id, NEW.id, 'unknown',
                           COALESCE(NEW.created_at, datetime('now')),
                           COALESCE(NEW.created_at, datetime('now'))
                    FROM members m;
                END
            """
            )

            cursor.execute(
                """
                CREATE TRIGGER IF NOT EXISTS trg_members_provision_availability
                AFTER INSERT ON members
                BEGIN
                    INSERT OR IGNORE INTO availability
                        (member_id, event_id, status, created_at, updated_at)
                    SELECT NEW.id, e.id, 'unknown',
                           COALESCE(NEW.created_at, datetime('now')),
                           COALESCE(NEW.created_at, datetime('now'))
                    FROM events e;
                END
            """
            )

            cursor.execute("CREATE INDEX IF NOT EXISTS idx_members_name ON members(name)")
            cursor.execute("CREATE INDEX IF NOT EXISTS idx_events_date ON events(date)")
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_availability_member ON availability(member_id)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_availability_event ON availability(event_id)"
            )
