from pydantic import BaseModel, Field, field_validator


# ─── ZIMMER ───

class SeedRoomDef(BaseModel):
    """Ein beim Programmstart vorgeladenes Zimmer."""
    # Zimmernummer, z.B. "101"
    id: str
    # Anzahl Betten
    capacity: int = Field(gt=0)
    # Klimaanlage vorhanden
    has_ac: bool = False
    # Eigenes Bad vorhanden
    has_washroom: bool = False


# ─── LOGGING ───

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Protokollierung auf der Konsole."""
    # Log-Level (DEBUG, INFO, WARNING, ERROR)
    level: str = Field("WARNING",
        description="Log-Level für die Konsolenausgabe")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Unbekanntes Log-Level: {v}")
        return v


# ─── GESAMT-CONFIG ───

class HostelConfig(BaseModel):
    """Gesamtkonfiguration des Wohnheims."""
    # Name des Wohnheims (nur Anzeige)
    hostel_name: str = Field("Studentenwohnheim",
        description="Name des Wohnheims")
    # Beispielzimmer beim Start laden
    seed_example_rooms: bool = Field(True,
        description="Die fünf Beispielzimmer beim Start laden")
    # Zusätzliche Zimmer, die beim Start geladen werden
    initial_rooms: list[SeedRoomDef] = Field(default_factory=list,
        description="Zusätzliche Zimmer beim Start")
    # Protokollierung
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
