"""Terminal-Ausgabe (Rich) für Zimmerlisten und Suchergebnisse."""

from export.tui_renderer import build_room_table, print_search_results, render_room_rows

__all__ = ["build_room_table", "print_search_results", "render_room_rows"]
