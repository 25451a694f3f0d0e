#!/usr/bin/env python3
"""
Resumen de disponibilidad del grupo por evento.

Uso:
    python scripts/overview.py
    python scripts/overview.py --from 2026-11-01 --to 2026-11-30
    python scripts/overview.py --member 3
"""
import argparse
import os
import sys
from datetime import date

# Agregar el directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.table import Table

from bandcal.config.env import get_group_name
from bandcal.repositories.sqlite.factory import create_sqlite_container
from bandcal.services.consolidation import AvailabilityConsolidator

console = Console()

STATUS_STYLES = {"available": "green", "unavailable": "red", "unknown": "dim"}


def _names(members) -> str:
    return ", ".join(m.name for m in members) or "-"


def print_overview(consolidator: AvailabilityConsolidator, start, end):
    views = consolidator.consolidate_range(start, end)

    table = Table(title=f"{get_group_name()} - availability")
    table.add_column("Date")
    table.add_column("Event")
    table.add_column("Available", style="green")
    table.add_column("Unavailable", style="red")
    table.add_column("No answer", style="dim")
    table.add_column("Status")

    for view in views.values():
        event = view.event
        label = event.event_type
        if event.rehearsal_status:
            label += f" ({event.rehearsal_status})"
        if view.all_available:
            summary = "[green]everyone in[/green]"
        elif view.any_unavailable:
            summary = "[red]conflict[/red]"
        elif not view.all_responded:
            summary = "[yellow]waiting[/yellow]"
        else:
            summary = "-"
        table.add_row(
            event.date.isoformat(),
            label,
            _names(view.available),
            _names(view.unavailable),
            _names(view.unknown),
            summary,
        )

    console.print(table)


def print_member(container, consolidator: AvailabilityConsolidator, member_id, start, end):
    member = container.members.get_member(member_id)
    if not member:
        console.print(f"[red]No member with id={member_id}[/red]")
        return

    table = Table(title=f"{member.name} ({member.instrument or 'no instrument'})")
    table.add_column("Date")
    table.add_column("Event")
    table.add_column("Answer")

    for entry in consolidator.member_schedule(member_id, start, end):
        style = STATUS_STYLES[entry.status]
        table.add_row(
            entry.event.date.isoformat(),
            entry.event.event_type,
            f"[{style}]{entry.status}[/{style}]",
        )

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Print consolidated availability")
    parser.add_argument("--db", help="SQLite file (defaults to BANDCAL_DB_PATH)")
    parser.add_argument("--from", dest="start", type=date.fromisoformat)
    parser.add_argument("--to", dest="end", type=date.fromisoformat)
    parser.add_argument("--member", type=int, help="Show one member's answers instead")
    args = parser.parse_args()

    container = create_sqlite_container(args.db)
    consolidator = AvailabilityConsolidator(
        container.members, container.events, container.availability
    )

    if args.member is not None:
        print_member(container, consolidator, args.member, args.start, args.end)
    else:
        print_overview(consolidator, args.start, args.end)


if __name__ == "__main__":
    main()
