"""
Tests for the SQLite repositories against a temporary database file.
"""

from datetime import date

import pytest

from bandcal.models.event import NewEvent
from bandcal.repositories.errors import RepositoryError
from bandcal.repositories.sqlite.factory import create_sqlite_container
from bandcal.services.consolidation import AvailabilityConsolidator


def rehearsal(day: date, status=None, notes=None) -> NewEvent:
    return NewEvent(date=day, event_type="rehearsal", rehearsal_status=status, notes=notes)


def gig(day: date, event_type="gig-confirmed") -> NewEvent:
    return NewEvent(date=day, event_type=event_type)


def drop_table(connection, table: str):
    with connection.get_connection() as conn:
        conn.execute(f"DROP TABLE {table}")


# ============================================
# Members
# ============================================
class TestMembers:
    def test_list_members_sorted_by_name(self, sqlite_container, add_member):
        add_member("Dana", "drums")
        add_member("Alex", "vocals")
        add_member("Chris")

        members = sqlite_container.members.list_members()
        assert [m.name for m in members] == ["Alex", "Chris", "Dana"]
        assert members[0].instrument == "vocals"
        assert members[1].instrument is None

    def test_list_members_ignores_case(self, sqlite_container, add_member):
        add_member("Zed")
        add_member("bob")
        add_member("Alice")

        assert [m.name for m in sqlite_container.members.list_members()] == [
            "Alice",
            "bob",
            "Zed",
        ]

    def test_get_member(self, sqlite_container, add_member):
        member_id = add_member("Bea", "guitar", "bea@example.com")

        member = sqlite_container.members.get_member(member_id)
        assert member.name == "Bea"
        assert member.email == "bea@example.com"
        assert sqlite_container.members.get_member(member_id + 100) is None

    def test_failure_returns_safe_defaults(self, sqlite_container, connection, add_member):
        add_member("Alex")
        drop_table(connection, "availability")
        drop_table(connection, "members")

        with pytest.raises(RepositoryError):
            sqlite_container.members.fetch_all()
        assert sqlite_container.members.list_members() == []
        assert sqlite_container.members.get_member(1) is None


# ============================================
# Events
# ============================================
class TestEvents:
    def test_list_events_sorted_with_inclusive_bounds(self, sqlite_container):
        assert sqlite_container.events.create_events(
            [gig(date(2026, 11, 10)), rehearsal(date(2026, 11, 1)), rehearsal(date(2026, 11, 5))]
        )
        events = sqlite_container.events

        def days(result):
            return [e.date.day for e in result]

        assert days(events.list_events()) == [1, 5, 10]
        assert days(events.list_events(start=date(2026, 11, 5))) == [5, 10]
        assert days(events.list_events(end=date(2026, 11, 5))) == [1, 5]
        assert days(events.list_events(date(2026, 11, 5), date(2026, 11, 5))) == [5]
        assert events.list_events(start=date(2026, 12, 1)) == []

    def test_get_event(self, sqlite_container):
        sqlite_container.events.create_events([rehearsal(date(2026, 11, 5), "confirmed", "Bring cables")])
        event_id = sqlite_container.events.list_events()[0].id

        event = sqlite_container.events.get_event(event_id)
        assert event.date == date(2026, 11, 5)
        assert event.rehearsal_status == "confirmed"
        assert event.notes == "Bring cables"
        assert event.created_at is not None
        assert sqlite_container.events.get_event(event_id + 100) is None

    def test_set_rehearsal_status_only_touches_rehearsals(self, sqlite_container):
        sqlite_container.events.create_events(
            [rehearsal(date(2026, 11, 1), "unconfirmed"), gig(date(2026, 11, 2))]
        )
        practice, show = sqlite_container.events.list_events()

        assert sqlite_container.events.set_rehearsal_status(practice.id, "cancelled")
        assert sqlite_container.events.get_event(practice.id).rehearsal_status == "cancelled"

        assert sqlite_container.events.set_rehearsal_status(show.id, "confirmed")
        assert sqlite_container.events.get_event(show.id).rehearsal_status is None

        assert sqlite_container.events.set_rehearsal_status(9999, "confirmed")

    def test_create_events_is_all_or_nothing(self, sqlite_container):
        bad = NewEvent.model_construct(
            date=date(2026, 11, 2), event_type="jam", rehearsal_status=None, notes=None
        )
        assert not sqlite_container.events.create_events([rehearsal(date(2026, 11, 1)), bad])
        assert sqlite_container.events.list_events() == []

    def test_create_no_events(self, sqlite_container):
        assert sqlite_container.events.create_events([])
        assert sqlite_container.events.list_events() == []

    def test_failure_returns_safe_defaults(self, sqlite_container, connection):
        drop_table(connection, "availability")
        drop_table(connection, "events")

        assert sqlite_container.events.list_events() == []
        assert sqlite_container.events.get_event(1) is None
        assert sqlite_container.events.set_rehearsal_status(1, "confirmed") is False
        assert sqlite_container.events.create_events([rehearsal(date(2026, 11, 1))]) is False


# ============================================
# Availability
# ============================================
class TestAvailability:
    def test_rows_provisioned_for_new_events_and_members(self, sqlite_container, add_member):
        alex = add_member("Alex")
        sqlite_container.events.create_events([rehearsal(date(2026, 11, 1))])
        event_id = sqlite_container.events.list_events()[0].id
        bea = add_member("Bea")

        rows = sqlite_container.availability.get_availability_for_event(event_id)
        assert sorted(r.member_id for r in rows) == [alex, bea]
        assert {r.status for r in rows} == {"unknown"}

    def test_set_status_updates_existing_row(self, sqlite_container, add_member):
        alex = add_member("Alex")
        sqlite_container.events.create_events([rehearsal(date(2026, 11, 1))])
        event_id = sqlite_container.events.list_events()[0].id
        before = sqlite_container.availability.get_availability_for_member(alex)[0]

        assert sqlite_container.availability.set_availability_status(alex, event_id, "available")

        after = sqlite_container.availability.get_availability_for_member(alex)[0]
        assert after.status == "available"
        assert after.id == before.id
        assert after.updated_at >= before.updated_at

    def test_set_status_without_row_is_a_noop(self, sqlite_container, connection, add_member):
        alex = add_member("Alex")
        sqlite_container.events.create_events([rehearsal(date(2026, 11, 1))])
        event_id = sqlite_container.events.list_events()[0].id
        with connection.get_connection() as conn:
            conn.execute("DELETE FROM availability")

        assert sqlite_container.availability.set_availability_status(alex, event_id, "available")
        assert sqlite_container.availability.get_availability_for_event(event_id) == []

    def test_set_invalid_status_fails(self, sqlite_container, add_member):
        alex = add_member("Alex")
        sqlite_container.events.create_events([rehearsal(date(2026, 11, 1))])
        event_id = sqlite_container.events.list_events()[0].id

        assert not sqlite_container.availability.set_availability_status(alex, event_id, "maybe")
        rows = sqlite_container.availability.get_availability_for_event(event_id)
        assert rows[0].status == "unknown"

    def test_get_availability_for_events(self, sqlite_container, add_member):
        add_member("Alex")
        add_member("Bea")
        sqlite_container.events.create_events(
            [rehearsal(date(2026, 11, 1)), rehearsal(date(2026, 11, 2)), gig(date(2026, 11, 3))]
        )
        first, second, third = (e.id for e in sqlite_container.events.list_events())

        rows = sqlite_container.availability.get_availability_for_events({first, third})
        assert sorted({r.event_id for r in rows}) == [first, third]
        assert len(rows) == 4
        assert sqlite_container.availability.get_availability_for_events([]) == []

    def test_failure_returns_safe_defaults(self, sqlite_container, connection):
        drop_table(connection, "availability")

        with pytest.raises(RepositoryError):
            sqlite_container.availability.fetch_by_events([1])
        assert sqlite_container.availability.get_availability_for_member(1) == []
        assert sqlite_container.availability.get_availability_for_event(1) == []
        assert sqlite_container.availability.get_availability_for_events([1]) == []
        assert sqlite_container.availability.set_availability_status(1, 1, "available") is False


# ============================================
# End to end
# ============================================
class TestConsolidationOnSQLite:
    def test_scenario_with_missing_row(self, sqlite_container, connection, add_member):
        a, b, c = add_member("A"), add_member("B"), add_member("C")
        sqlite_container.events.create_events([gig(date(2026, 11, 14))])
        event = sqlite_container.events.list_events()[0]
        sqlite_container.availability.set_availability_status(a, event.id, "available")
        sqlite_container.availability.set_availability_status(b, event.id, "unavailable")
        with connection.get_connection() as conn:
            conn.execute("DELETE FROM availability WHERE member_id = ?", (c,))

        consolidator = AvailabilityConsolidator(
            sqlite_container.members, sqlite_container.events, sqlite_container.availability
        )
        view = consolidator.consolidate(event.id)

        assert [m.name for m in view.available] == ["A"]
        assert [m.name for m in view.unavailable] == ["B"]
        assert [m.name for m in view.unknown] == ["C"]
        assert (view.all_available, view.any_unavailable, view.all_responded) == (
            False,
            True,
            False,
        )
        assert consolidator.consolidate_bulk([event])[event.id].to_dict() == view.to_dict()
        assert consolidator.consolidate(event.id + 100) is None

    def test_factory_uses_env_path(self, tmp_path, monkeypatch):
        db_file = tmp_path / "from-env.db"
        monkeypatch.setenv("BANDCAL_DB_PATH", str(db_file))

        container = create_sqlite_container()
        assert container.members.list_members() == []
        assert db_file.exists()
