"""Datenmodell für ein Wohnheimzimmer (Pydantic v2)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Facility(str, Enum):
    """Ausstattungsmerkmale, die bei der Zuteilung verlangt werden können."""
    AC = "ac"
    WASHROOM = "washroom"


class Room(BaseModel):
    """Repräsentiert ein Zimmer. Nach dem Anlegen unveränderlich."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: str                         # Zimmernummer ("101", "B-12")
    capacity: int = Field(gt=0)     # Anzahl Betten
    has_ac: bool = False            # Klimaanlage
    has_washroom: bool = False      # Eigenes Bad

    @field_validator("id")
    @classmethod
    def _strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Zimmernummer darf nicht leer sein.")
        return v

    @property
    def key(self) -> str:
        """Vergleichsschlüssel für die Eindeutigkeit (Groß-/Kleinschreibung egal).

        Einfaches lower(): "STRASSE" und "straße" bleiben verschiedene Zimmer.
        """
        return self.id.lower()

    @property
    def facilities(self) -> frozenset[Facility]:
        found = set()
        if self.has_ac:
            found.add(Facility.AC)
        if self.has_washroom:
            found.add(Facility.WASHROOM)
        return frozenset(found)

    def describe(self) -> str:
        """Einzeilige Kurzbeschreibung mit fester Spaltenbreite."""
        return (
            f"Zimmer: {self.id:<5s} | Kapazität: {self.capacity:<2d} | "
            f"Klima: {_yes_no(self.has_ac):<4s} | Bad: {_yes_no(self.has_washroom):<4s}"
        )


def _yes_no(flag: bool) -> str:
    return "Ja" if flag else "Nein"
