"""Zimmerregister: maßgebliche In-Memory-Liste aller Zimmer."""

from .room_registry import RoomRegistry

__all__ = ["RoomRegistry"]
