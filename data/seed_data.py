"""Vorbelegung des Zimmerregisters beim Programmstart.

Reihenfolge: zuerst die Beispielzimmer (falls aktiviert), danach die
zusätzlichen Zimmer aus der Konfiguration.
"""

import logging

from config.defaults import EXAMPLE_ROOMS
from config.schema import HostelConfig, SeedRoomDef
from registry.room_registry import RoomRegistry

logger = logging.getLogger(__name__)


def seed_rooms(config: HostelConfig) -> list[SeedRoomDef]:
    """Alle Zimmer, die laut Config beim Start angelegt werden sollen."""
    rooms: list[SeedRoomDef] = []
    if config.seed_example_rooms:
        rooms.extend(EXAMPLE_ROOMS)
    rooms.extend(config.initial_rooms)
    return rooms


def seed_registry(registry: RoomRegistry, config: HostelConfig) -> int:
    """Legt die Startzimmer im Register an. Gibt die Anzahl neuer Zimmer zurück."""
    added = 0
    for rd in seed_rooms(config):
        if registry.add(rd.id, rd.capacity, rd.has_ac, rd.has_washroom):
            added += 1
        else:
            logger.warning(f"Startzimmer '{rd.id}' doppelt – übersprungen")
    logger.info(f"{added} Startzimmer geladen")
    return added
