from models.room import Facility, Room
from models.criteria import AllocationCriteria

__all__ = [
    "Facility",
    "Room",
    "AllocationCriteria",
]
