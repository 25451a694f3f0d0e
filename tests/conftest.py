"""Shared fixtures: a throwaway SQLite store and in-memory fake repositories."""

from datetime import date, datetime
from typing import Iterable, Optional, Sequence

import pytest

from bandcal.container import Container
from bandcal.domain.availability import Availability
from bandcal.domain.event import Event
from bandcal.domain.member import Member
from bandcal.models.event import NewEvent
from bandcal.repositories.errors import RepositoryError
from bandcal.repositories.interfaces.availability_repository import IAvailabilityRepository
from bandcal.repositories.interfaces.event_repository import IEventRepository
from bandcal.repositories.interfaces.member_repository import IMemberRepository
from bandcal.repositories.sqlite.availability_repository import SQLiteAvailabilityRepository
from bandcal.repositories.sqlite.connection import SQLiteConnection
from bandcal.repositories.sqlite.event_repository import SQLiteEventRepository
from bandcal.repositories.sqlite.member_repository import SQLiteMemberRepository


# ============================================
# Fakes
# ============================================


class FakeStore:
    """Records every query and can be told to fail specific ones."""

    def __init__(self):
        self.calls: list[str] = []
        self.failing: set[str] = set()

    def hit(self, name: str):
        self.calls.append(name)
        if name in self.failing:
            raise RepositoryError(f"{name} failed")


class FakeMemberRepository(IMemberRepository):
    def __init__(self, store: FakeStore, members: list[Member]):
        self._store = store
        self.members = members

    def fetch_all(self) -> list[Member]:
        self._store.hit("members.fetch_all")
        return sorted(self.members, key=lambda m: (m.name.lower(), m.id))

    def fetch_by_id(self, member_id: int) -> Optional[Member]:
        self._store.hit("members.fetch_by_id")
        return next((m for m in self.members if m.id == member_id), None)


class FakeEventRepository(IEventRepository):
    def __init__(self, store: FakeStore, events: list[Event]):
        self._store = store
        self.events = events

    def fetch_by_id(self, event_id: int) -> Optional[Event]:
        self._store.hit("events.fetch_by_id")
        return next((e for e in self.events if e.id == event_id), None)

    def fetch_in_range(self, start=None, end=None) -> list[Event]:
        self._store.hit("events.fetch_in_range")
        return sorted(
            (
                e
                for e in self.events
                if (start is None or e.date >= start) and (end is None or e.date <= end)
            ),
            key=lambda e: e.date,
        )

    def update_rehearsal_status(self, event_id, status) -> int:
        self._store.hit("events.update_rehearsal_status")
        changed = 0
        for event in self.events:
            if event.id == event_id and event.is_rehearsal:
                event.rehearsal_status = status
                changed += 1
        return changed

    def insert_many(self, new_events: Sequence[NewEvent]) -> int:
        self._store.hit("events.insert_many")
        next_id = max((e.id for e in self.events), default=0) + 1
        for offset, new in enumerate(new_events):
            self.events.append(
                Event(
                    id=next_id + offset,
                    date=new.date,
                    event_type=new.event_type,
                    rehearsal_status=new.rehearsal_status,
                    notes=new.notes,
                )
            )
        return len(new_events)


class FakeAvailabilityRepository(IAvailabilityRepository):
    def __init__(self, store: FakeStore, rows: list[Availability]):
        self._store = store
        self.rows = rows

    def fetch_by_member(self, member_id: int) -> list[Availability]:
        self._store.hit("availability.fetch_by_member")
        return [r for r in self.rows if r.member_id == member_id]

    def fetch_by_event(self, event_id: int) -> list[Availability]:
        self._store.hit("availability.fetch_by_event")
        return [r for r in self.rows if r.event_id == event_id]

    def fetch_by_events(self, event_ids: Iterable[int]) -> list[Availability]:
        self._store.hit("availability.fetch_by_events")
        ids = set(event_ids)
        return [r for r in self.rows if r.event_id in ids]

    def update_status(self, member_id, event_id, status) -> int:
        self._store.hit("availability.update_status")
        changed = 0
        for row in self.rows:
            if row.member_id == member_id and row.event_id == event_id:
                row.status = status
                changed += 1
        return changed


def make_member(member_id: int, name: str, instrument: Optional[str] = None) -> Member:
    return Member(id=member_id, name=name, instrument=instrument)


def make_event(event_id: int, day: date, event_type: str = "rehearsal", **kwargs) -> Event:
    return Event(id=event_id, date=day, event_type=event_type, **kwargs)


def make_row(row_id: int, member_id: int, event_id: int, status: str) -> Availability:
    return Availability(id=row_id, member_id=member_id, event_id=event_id, status=status)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_container(fake_store):
    """Three members (A, B, C), two events, no availability rows yet."""
    members = [make_member(3, "C"), make_member(1, "A"), make_member(2, "B")]
    events = [
        make_event(10, date(2026, 11, 5)),
        make_event(20, date(2026, 11, 12), "gig-confirmed"),
    ]
    return Container(
        members=FakeMemberRepository(fake_store, members),
        events=FakeEventRepository(fake_store, events),
        availability=FakeAvailabilityRepository(fake_store, []),
    )


# ============================================
# SQLite
# ============================================


@pytest.fixture
def connection(tmp_path):
    return SQLiteConnection(str(tmp_path / "bandcal-test.db"))


@pytest.fixture
def sqlite_container(connection):
    return Container(
        members=SQLiteMemberRepository(connection),
        events=SQLiteEventRepository(connection),
        availability=SQLiteAvailabilityRepository(connection),
    )


@pytest.fixture
def add_member(connection):
    """Inserts a member directly and returns its ID."""

    def _add(name: str, instrument: Optional[str] = None, email: Optional[str] = None) -> int:
        with connection.get_connection() as conn:
            cursor = conn.execute(
                "INSERT INTO members (name, instrument, email, created_at) VALUES (?, ?, ?, ?)",
                (name, instrument, email, datetime.now()),
            )
            return cursor.lastrowid

    return _add
