"""Zuteilungs-Modul: Zimmersuche und Best-Fit-Zuteilung."""

from .service import AllocationService, AllocationResult
from .hostel_manager import HostelManager, RoomInputError

__all__ = [
    "AllocationService",
    "AllocationResult",
    "HostelManager",
    "RoomInputError",
]
