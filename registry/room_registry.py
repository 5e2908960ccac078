"""RoomRegistry: geordnete Zimmerliste mit eindeutigen Zimmernummern.

Die Reihenfolge entspricht der Einfüge-Reihenfolge und ist zugleich die
Anzeige-Reihenfolge. Zimmer werden nur angehängt, nie geändert oder entfernt.
Nicht thread-sicher: Aufrufe müssen vom Aufrufer serialisiert werden.
"""

import logging
from typing import Iterable, Optional

from models.room import Room

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Besitzt die Zimmerliste einer Programminstanz."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: list[Room] = []
        for room in rooms or ():
            self.add_room(room)

    # ─── Schreiben ───

    def add(self, room_id: str, capacity: int,
            has_ac: bool = False, has_washroom: bool = False) -> bool:
        """Legt ein Zimmer an.

        Gibt False zurück, wenn die Zimmernummer (ohne Beachtung der
        Groß-/Kleinschreibung) bereits vergeben ist; das Register bleibt dann
        unverändert. Ungültige Werte scheitern an der Validierung von Room,
        bevor das Register angefasst wird.
        """
        room = Room(id=room_id, capacity=capacity,
                    has_ac=has_ac, has_washroom=has_washroom)
        return self.add_room(room)

    def add_room(self, room: Room) -> bool:
        """Wie add(), aber für ein bereits gebautes Room-Objekt."""
        if self._find(room.key) is not None:
            logger.info(f"Zimmer '{room.id}' existiert bereits – abgelehnt")
            return False
        self._rooms.append(room)
        logger.debug(f"Zimmer angelegt: {room.describe()}")
        return True

    # ─── Lesen ───

    def list_rooms(self) -> tuple[Room, ...]:
        """Momentaufnahme aller Zimmer in Einfüge-Reihenfolge."""
        return tuple(self._rooms)

    def get(self, room_id: str) -> Optional[Room]:
        """Sucht ein Zimmer über seine Nummer (Groß-/Kleinschreibung egal)."""
        return self._find(room_id.strip().lower())

    def _find(self, key: str) -> Optional[Room]:
        for room in self._rooms:
            if room.key == key:
                return room
        return None

    def __contains__(self, room_id: object) -> bool:
        return isinstance(room_id, str) and self.get(room_id) is not None

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self):
        return iter(self.list_rooms())
