"""Tests für Zimmer-Datenmodell und Zimmerregister."""

import pytest
from pydantic import ValidationError

from models.room import Facility, Room
from registry.room_registry import RoomRegistry


# ─── ROOM ─────────────────────────────────────────────────────────────────────

class TestRoom:
    def test_room_is_frozen(self):
        """Zimmer sind nach dem Anlegen unveränderlich."""
        room = Room(id="101", capacity=1, has_ac=True, has_washroom=True)
        with pytest.raises(ValidationError):
            room.capacity = 5

    def test_room_id_stripped(self):
        room = Room(id="  A-12 ", capacity=2)
        assert room.id == "A-12"

    def test_room_empty_id_raises(self):
        """Leere Zimmernummer → Validierungsfehler."""
        with pytest.raises(ValidationError):
            Room(id="   ", capacity=2)

    def test_room_non_positive_capacity_raises(self):
        with pytest.raises(ValidationError):
            Room(id="101", capacity=0)
        with pytest.raises(ValidationError):
            Room(id="101", capacity=-3)

    def test_room_facilities(self):
        assert Room(id="1", capacity=1).facilities == frozenset()
        assert Room(id="2", capacity=1, has_ac=True).facilities == {Facility.AC}
        assert Room(id="3", capacity=1, has_ac=True, has_washroom=True).facilities == {
            Facility.AC, Facility.WASHROOM,
        }

    def test_room_key_case_insensitive(self):
        assert Room(id="ROOM", capacity=1).key == Room(id="room", capacity=1).key

    def test_room_key_plain_lowercase(self):
        """"STRASSE" und "straße" sind verschiedene Zimmernummern."""
        assert Room(id="STRASSE", capacity=1).key != Room(id="straße", capacity=1).key

    @pytest.mark.parametrize("capacity", [True, "2", 2.0])
    def test_room_capacity_not_coerced(self, capacity):
        """Kapazität muss ein echter int sein."""
        with pytest.raises(ValidationError):
            Room(id="101", capacity=capacity)

    def test_describe_contains_details(self):
        text = Room(id="104", capacity=2, has_ac=True, has_washroom=False).describe()
        assert "104" in text
        assert "Kapazität: 2" in text
        assert "Klima: Ja" in text
        assert "Bad: Nein" in text


# ─── REGISTRY ─────────────────────────────────────────────────────────────────

class TestRoomRegistry:
    def test_new_registry_empty(self):
        registry = RoomRegistry()
        assert len(registry) == 0
        assert registry.list_rooms() == ()

    def test_add_distinct_ids_keeps_order(self):
        """Eindeutige Nummern: Länge = Anzahl Aufrufe, Reihenfolge = Aufruf-Reihenfolge."""
        registry = RoomRegistry()
        ids = ["305", "101", "B2", "007", "a1"]
        for i, room_id in enumerate(ids, start=1):
            assert registry.add(room_id, i) is True
        assert len(registry) == len(ids)
        assert [r.id for r in registry.list_rooms()] == ids

    def test_duplicate_rejected(self):
        registry = RoomRegistry()
        assert registry.add("101", 2, True, True)
        assert registry.add("101", 4, False, False) is False
        assert len(registry) == 1
        assert registry.list_rooms()[0].capacity == 2

    def test_duplicate_rejected_case_insensitive(self):
        """'ROOM' und 'room' gelten als dieselbe Zimmernummer."""
        registry = RoomRegistry()
        assert registry.add("ROOM", 1)
        assert registry.add("room", 3) is False
        assert registry.add("Room", 3) is False
        assert len(registry) == 1

    def test_sharp_s_not_duplicate_of_double_s(self):
        registry = RoomRegistry()
        assert registry.add("STRASSE", 1)
        assert registry.add("straße", 1) is True
        assert len(registry) == 2

    def test_add_rejects_coercible_capacity(self):
        """Ohne HostelManager: True oder "2" werden nicht als Kapazität akzeptiert."""
        registry = RoomRegistry()
        with pytest.raises(ValidationError):
            registry.add("x", True)
        with pytest.raises(ValidationError):
            registry.add("x", "2")
        assert len(registry) == 0

    def test_new_room_appended_last(self):
        registry = RoomRegistry()
        registry.add("1", 1)
        registry.add("2", 2)
        registry.add("0", 3)
        assert registry.list_rooms()[-1].id == "0"

    def test_invalid_room_does_not_mutate(self):
        registry = RoomRegistry()
        registry.add("1", 1)
        with pytest.raises(ValidationError):
            registry.add("2", 0)
        assert len(registry) == 1

    def test_snapshot_not_affected_by_later_add(self):
        """list_rooms() liefert eine Momentaufnahme."""
        registry = RoomRegistry()
        registry.add("1", 1)
        snapshot = registry.list_rooms()
        registry.add("2", 2)
        assert len(snapshot) == 1
        assert len(registry.list_rooms()) == 2

    def test_contains_and_get(self):
        registry = RoomRegistry([Room(id="A1", capacity=2)])
        assert "a1" in registry
        assert "A2" not in registry
        assert registry.get(" a1 ").id == "A1"
        assert registry.get("zzz") is None

    def test_init_with_rooms_skips_duplicates(self):
        registry = RoomRegistry([
            Room(id="X", capacity=1),
            Room(id="x", capacity=2),
            Room(id="Y", capacity=3),
        ])
        assert [r.id for r in registry] == ["X", "Y"]
