"""Gemeinsamer Renderer für die Zimmer-Anzeige im Terminal.

Wird von den CLI-Befehlen und der interaktiven Sitzung verwendet.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from export.helpers import today_str, yes_no

if TYPE_CHECKING:
    from models.criteria import AllocationCriteria
    from models.room import Room

ROOM_COLUMNS = ["Zimmer", "Kapazität", "Klimaanlage", "Eigenes Bad"]


def render_room_rows(rooms: Iterable["Room"]) -> list[list[str]]:
    """Gibt Tabellenzeilen für die Zimmerliste zurück.

    Jede Zeile: [Zimmer, Kapazität, Klimaanlage, Eigenes Bad]
    Die Reihenfolge der Eingabe bleibt erhalten.
    """
    return [
        [room.id, str(room.capacity), yes_no(room.has_ac), yes_no(room.has_washroom)]
        for room in rooms
    ]


def build_room_table(rooms: Iterable["Room"], title: str = "Zimmer") -> Table:
    table = Table(title=title, caption=f"Stand: {today_str()}", box=box.ROUNDED)
    table.add_column(ROOM_COLUMNS[0], style="bold")
    table.add_column(ROOM_COLUMNS[1], justify="right")
    table.add_column(ROOM_COLUMNS[2])
    table.add_column(ROOM_COLUMNS[3])
    for row in render_room_rows(rooms):
        table.add_row(*(escape(cell) for cell in row))
    return table


def print_search_results(
    rooms: list["Room"],
    criteria: "AllocationCriteria",
    console: Optional[Console] = None,
) -> None:
    """Gibt Kriterien und Treffer einer Zimmersuche aus."""
    console = console or Console()
    console.print(f"[bold]Kriterien:[/bold] {criteria.describe()}")
    if not rooms:
        console.print("[yellow]Keine Zimmer gefunden, die diese Kriterien erfüllen.[/yellow]")
        return
    console.print(build_room_table(rooms, title="Suchergebnis"))
    console.print(f"Treffer gesamt: [bold]{len(rooms)}[/bold]")
