from config.schema import HostelConfig, SeedRoomDef


# Typische Wohnheim-Konfigurationen: Einzel mit Klima+Bad, Doppel nur Bad,
# Vierer nur Klima, Doppel mit Klima+Bad, Sechser ohne Ausstattung.
EXAMPLE_ROOMS: list[SeedRoomDef] = [
    SeedRoomDef(id="101", capacity=1, has_ac=True, has_washroom=True),
    SeedRoomDef(id="102", capacity=2, has_ac=False, has_washroom=True),
    SeedRoomDef(id="103", capacity=4, has_ac=True, has_washroom=False),
    SeedRoomDef(id="104", capacity=2, has_ac=True, has_washroom=True),
    SeedRoomDef(id="201", capacity=6, has_ac=False, has_washroom=False),
]


def default_hostel_config() -> HostelConfig:
    """Standardkonfiguration: Beispielzimmer an, keine Zusatzzimmer."""
    return HostelConfig(
        hostel_name="Studentenwohnheim",
        seed_example_rooms=True,
        initial_rooms=[],
    )
