"""Gemeinsame Hilfsfunktionen für die Terminal-Ausgabe."""

from datetime import date


def yes_no(flag: bool) -> str:
    """Wandelt ein Ausstattungs-Flag in 'Ja'/'Nein' um."""
    return "Ja" if flag else "Nein"


def today_str() -> str:
    """Gibt das heutige Datum als DD.MM.YYYY zurück."""
    return date.today().strftime("%d.%m.%Y")
