"""AllocationService: Suche und Best-Fit-Zuteilung über dem Zimmerregister.

Alle Operationen sind reine Lese-Abfragen auf der aktuellen Momentaufnahme
des Registers. Eine Zuteilung belegt das Zimmer nicht.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from models.criteria import AllocationCriteria
from models.room import Room
from registry.room_registry import RoomRegistry

logger = logging.getLogger(__name__)


class AllocationResult(BaseModel):
    """Ergebnis einer Zuteilung inklusive aller geprüften Kandidaten."""

    criteria: AllocationCriteria
    candidates: list[Room]       # Alle passenden Zimmer, Register-Reihenfolge
    room: Optional[Room] = None  # Kleinstes passendes Zimmer oder None

    @property
    def success(self) -> bool:
        return self.room is not None

    def print_rich(self) -> None:
        """Gibt das Ergebnis formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel

        console = Console()
        if self.room is not None:
            lines = [
                "[bold green]✓ Zimmer zugeteilt[/bold green]",
                "",
                "Ausgewähltes Zimmer:",
                f"  {self.room.describe()}",
                "",
                f"[dim]{len(self.candidates)} passende(s) Zimmer geprüft. "
                "Gewählt wurde das kleinste Zimmer, das alle Anforderungen erfüllt.[/dim]",
            ]
            border = "green"
        else:
            lines = [
                "[bold red]✗ Kein passendes Zimmer verfügbar[/bold red]",
                "",
                f"Kriterien: {self.criteria.describe()}",
                "[yellow]Anforderungen reduzieren oder weitere Zimmer anlegen.[/yellow]",
            ]
            border = "red"
        console.print(Panel("\n".join(lines), title="Zuteilung", border_style=border))


class AllocationService:
    """Such- und Zuteilungsabfragen über einem RoomRegistry."""

    def __init__(self, registry: RoomRegistry):
        self.registry = registry

    # ─── Suche ───

    def search(self, criteria: AllocationCriteria) -> list[Room]:
        """Alle Zimmer, die die Kriterien erfüllen, in Register-Reihenfolge."""
        found = [r for r in self.registry.list_rooms() if criteria.matches(r)]
        logger.debug(f"Suche ({criteria.describe()}): {len(found)} Treffer")
        return found

    def search_rooms(self, min_capacity: int, require_ac: bool = False,
                     require_washroom: bool = False) -> list[Room]:
        return self.search(AllocationCriteria.from_flags(
            min_capacity, require_ac, require_washroom))

    # ─── Zuteilung ───

    def allocate(self, criteria: AllocationCriteria) -> Optional[Room]:
        """Best Fit: kleinstes Zimmer unter allen passenden Kandidaten.

        Bei gleicher Kapazität gewinnt das zuerst angelegte Zimmer.
        Keine Kandidaten → None (kein Fehler).
        """
        return _smallest(self.search(criteria))

    def allocate_room(self, students: int, needs_ac: bool = False,
                      needs_washroom: bool = False) -> Optional[Room]:
        return self.allocate(AllocationCriteria.from_flags(
            students, needs_ac, needs_washroom))

    def explain(self, criteria: AllocationCriteria) -> AllocationResult:
        """Wie allocate(), liefert zusätzlich die geprüften Kandidaten."""
        candidates = self.search(criteria)
        room = _smallest(candidates)
        if room is None:
            logger.info(f"Keine Zuteilung möglich ({criteria.describe()})")
        else:
            logger.info(f"Zugeteilt: Zimmer {room.id} ({criteria.describe()})")
        return AllocationResult(criteria=criteria, candidates=candidates, room=room)


def _smallest(candidates: list[Room]) -> Optional[Room]:
    # Striktes '<': bei Gleichstand bleibt das frühere Zimmer stehen
    best: Optional[Room] = None
    for room in candidates:
        if best is None or room.capacity < best.capacity:
            best = room
    return best
