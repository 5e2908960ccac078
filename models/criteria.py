"""Suchkriterien für Zimmersuche und Zuteilung (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field

from models.room import Facility, Room


class AllocationCriteria(BaseModel):
    """Mindestkapazität plus Menge verlangter Ausstattungsmerkmale.

    Ein nicht verlangtes Merkmal ist irrelevant: ein Zimmer mit Klimaanlage
    erfüllt auch Kriterien ohne Klima-Anforderung.
    """

    model_config = ConfigDict(frozen=True)

    # Mindestanzahl Betten (0 = jede Größe)
    min_capacity: int = Field(0, ge=0)
    # Merkmale, die das Zimmer zwingend haben muss
    required_facilities: frozenset[Facility] = frozenset()

    @classmethod
    def from_flags(cls, min_capacity: int, require_ac: bool = False,
                   require_washroom: bool = False) -> "AllocationCriteria":
        """Baut Kriterien aus den positionellen Flags der UI."""
        required = set()
        if require_ac:
            required.add(Facility.AC)
        if require_washroom:
            required.add(Facility.WASHROOM)
        return cls(min_capacity=min_capacity, required_facilities=frozenset(required))

    @property
    def requires_ac(self) -> bool:
        return Facility.AC in self.required_facilities

    @property
    def requires_washroom(self) -> bool:
        return Facility.WASHROOM in self.required_facilities

    def matches(self, room: Room) -> bool:
        """True wenn das Zimmer groß genug ist und alle Merkmale besitzt."""
        return (
            room.capacity >= self.min_capacity
            and self.required_facilities <= room.facilities
        )

    def describe(self) -> str:
        return (
            f"Mindestkapazität {self.min_capacity}, "
            f"Klima: {'Ja' if self.requires_ac else 'egal'}, "
            f"Bad: {'Ja' if self.requires_washroom else 'egal'}"
        )
