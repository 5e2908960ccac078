"""HostelManager: einzige Schnittstelle zwischen Oberfläche und Kernlogik.

Prüft Benutzereingaben, bevor sie Register oder Zuteilung erreichen. Die
Oberfläche hält genau eine Instanz und leitet alle Aufrufe darüber.
"""

import logging
from typing import Optional

from allocation.service import AllocationResult, AllocationService
from config.schema import HostelConfig
from models.criteria import AllocationCriteria
from models.room import Room
from registry.room_registry import RoomRegistry

logger = logging.getLogger(__name__)


class RoomInputError(ValueError):
    """Ungültige Eingabe (leere Zimmernummer, Kapazität/Personenzahl ≤ 0)."""


class HostelManager:

    def __init__(self, registry: Optional[RoomRegistry] = None,
                 hostel_name: str = "Studentenwohnheim"):
        self.registry = registry if registry is not None else RoomRegistry()
        self.service = AllocationService(self.registry)
        self.hostel_name = hostel_name

    @classmethod
    def from_config(cls, config: HostelConfig) -> "HostelManager":
        """Erzeugt Register + Dienst und lädt die Startzimmer."""
        from data.seed_data import seed_registry

        manager = cls(hostel_name=config.hostel_name)
        seed_registry(manager.registry, config)
        return manager

    # ─── Zimmer ───

    def add_room(self, room_id: str, capacity: int,
                 has_ac: bool = False, has_washroom: bool = False) -> bool:
        """True = angelegt, False = Zimmernummer existiert bereits."""
        if not isinstance(room_id, str) or not room_id.strip():
            raise RoomInputError("Zimmernummer darf nicht leer sein.")
        _require_int(capacity, "Kapazität", minimum=1)
        return self.registry.add(room_id.strip(), capacity,
                                 bool(has_ac), bool(has_washroom))

    def list_rooms(self) -> tuple[Room, ...]:
        return self.registry.list_rooms()

    # ─── Suche & Zuteilung ───

    def search_rooms(self, min_capacity: int, require_ac: bool = False,
                     require_washroom: bool = False) -> list[Room]:
        _require_int(min_capacity, "Mindestkapazität", minimum=0)
        return self.service.search_rooms(min_capacity, bool(require_ac),
                                         bool(require_washroom))

    def allocate_room(self, students: int, needs_ac: bool = False,
                      needs_washroom: bool = False) -> Optional[Room]:
        """Kleinstes passendes Zimmer oder None."""
        return self.explain_allocation(students, needs_ac, needs_washroom).room

    def explain_allocation(self, students: int, needs_ac: bool = False,
                           needs_washroom: bool = False) -> AllocationResult:
        _require_int(students, "Anzahl Studierende", minimum=1)
        criteria = AllocationCriteria.from_flags(
            students, bool(needs_ac), bool(needs_washroom))
        return self.service.explain(criteria)

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über den Zimmerbestand."""
        rooms = self.registry.list_rooms()
        lines = [
            f"Wohnheim: {self.hostel_name}",
            f"Zimmer: {len(rooms)}",
            f"Betten gesamt: {sum(r.capacity for r in rooms)}",
            f"Mit Klimaanlage: {sum(1 for r in rooms if r.has_ac)}",
            f"Mit eigenem Bad: {sum(1 for r in rooms if r.has_washroom)}",
        ]
        return "\n".join(lines)


def _require_int(value, label: str, minimum: int) -> None:
    # bool ist eine int-Unterklasse, zählt hier aber nicht als Zahl
    if isinstance(value, bool) or not isinstance(value, int):
        raise RoomInputError(f"{label} muss eine ganze Zahl sein.")
    if value < minimum:
        raise RoomInputError(f"{label} muss mindestens {minimum} sein.")
