"""
Seed Data - Poblar la base de datos con datos de ejemplo

Crea los miembros del grupo y unas semanas de ensayos y conciertos.
Las filas de disponibilidad las crean los triggers de la base de datos.

Ejecutar: python -m bandcal.db.seed
"""

from datetime import date, datetime, timedelta
from typing import Optional

from ..config import logger as log
from ..models.event import NewEvent
from ..repositories.sqlite.connection import SQLiteConnection
from ..repositories.sqlite.factory import create_sqlite_container


MEMBERS = [
    {"name": "Alex Rivera", "instrument": "vocals", "email": "alex@example.com"},
    {"name": "Bea Lindqvist", "instrument": "guitar", "email": "bea@example.com"},
    {"name": "Chris Okafor", "instrument": "bass", "email": None},
    {"name": "Dana Moreau", "instrument": "drums", "email": "dana@example.com"},
    {"name": "Eli Tanaka", "instrument": "keys", "email": None},
]

# (días desde hoy, tipo, estado de ensayo, notas)
EVENTS = [
    (3, "rehearsal", "confirmed", "Setlist run-through"),
    (10, "rehearsal", "unconfirmed", None),
    (14, "gig-confirmed", None, "Harbor Bar, load-in 18:00"),
    (17, "rehearsal", "unconfirmed", None),
    (21, "gig-unconfirmed", None, "Summer festival, waiting on the promoter"),
    (28, "gig-available", None, "Private party, need a yes from everyone"),
]

# (miembro, evento, estado) usando índices de las listas de arriba
ANSWERS = [
    (0, 0, "available"),
    (1, 0, "available"),
    (2, 0, "available"),
    (3, 0, "unavailable"),
    (0, 2, "available"),
    (1, 2, "available"),
    (2, 2, "available"),
    (3, 2, "available"),
    (4, 2, "available"),
    (1, 4, "unavailable"),
]


def seed_members(connection: SQLiteConnection) -> list[int]:
    """Inserta los miembros y retorna sus IDs."""
    now = datetime.now()
    ids = []
    with connection.get_connection() as conn:
        cursor = conn.cursor()
        for member in MEMBERS:
            cursor.execute(
                """INSERT INTO members (name, instrument, email, created_at)
                   VALUES (?, ?, ?, ?)""",
                (member["name"], member["instrument"], member["email"], now),
            )
            ids.append(cursor.lastrowid)
    log.info("seed", "Members created", count=len(ids))
    return ids


def seed_all(db_path: Optional[str] = None, start: Optional[date] = None) -> None:
    """Puebla una base de datos vacía con el grupo de ejemplo."""
    start = start or date.today()
    connection = SQLiteConnection(db_path)
    container = create_sqlite_container(db_path)

    with connection.get_connection() as conn:
        member_count = conn.execute("SELECT COUNT(*) FROM members").fetchone()[0]
        event_count = conn.execute("SELECT COUNT(*) FROM events").fetchone()[0]
    if member_count or event_count:
        log.warn(
            "seed",
            "Database is not empty, skipping",
            members=member_count,
            events=event_count,
        )
        return

    member_ids = seed_members(connection)

    new_events = [
        NewEvent(
            date=start + timedelta(days=offset),
            event_type=event_type,
            rehearsal_status=rehearsal_status,
            notes=notes,
        )
        for offset, event_type, rehearsal_status, notes in EVENTS
    ]
    if not container.events.create_events(new_events):
        raise RuntimeError("Could not create seed events")

    # La base estaba vacía: los eventos listados son exactamente los insertados.
    events = container.events.fetch_in_range(start=start)
    if len(events) != len(EVENTS):
        raise RuntimeError(f"Expected {len(EVENTS)} seed events, found {len(events)}")
    for member_index, event_index, status in ANSWERS:
        container.availability.set_availability_status(
            member_ids[member_index], events[event_index].id, status
        )

    log.info(
        "seed",
        "Seed complete",
        members=len(member_ids),
        events=len(events),
        answers=len(ANSWERS),
    )


if __name__ == "__main__":
    seed_all()
