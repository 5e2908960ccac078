"""Wohnheim-Zimmerverwaltung — Haupt-CLI.

Verwendung:
  python main.py                          Interaktive Sitzung starten
  python main.py setup                    Konfigurationsdatei anlegen
  python main.py config show              Konfiguration anzeigen
  python main.py list                     Alle Zimmer anzeigen
  python main.py search -n 2 --ac         Passende Zimmer suchen
  python main.py allocate -n 2 --ac       Kleinstes passendes Zimmer zuteilen
  python main.py add 305 3 --washroom     Zimmer anlegen (nur für diesen Aufruf)
  python main.py shell                    Interaktive Sitzung

Zimmer werden nicht gespeichert: jeder Aufruf startet mit den Startzimmern
aus der Konfiguration.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table
from rich import box

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config_or_abort(ctx: click.Context):
    """Lädt die Konfiguration (oder Standardwerte) oder bricht mit Fehlermeldung ab."""
    mgr = ctx.obj["config_manager"]
    try:
        config = mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    if not ctx.obj["verbose"]:
        _setup_logging(config.logging.level)
    return mgr, config


def _build_manager(ctx: click.Context):
    """Erzeugt den HostelManager für diesen Aufruf (einmal pro Prozess)."""
    if ctx.obj.get("manager") is None:
        from allocation.hostel_manager import HostelManager
        _, config = _load_config_or_abort(ctx)
        ctx.obj["manager"] = HostelManager.from_config(config)
    return ctx.obj["manager"]


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
@click.pass_context
def cmd_setup(ctx: click.Context):
    """Legt die Konfigurationsdatei mit Standardwerten an."""
    from config.defaults import default_hostel_config

    mgr = ctx.obj["config_manager"]
    if not mgr.first_run_check():
        console.print(
            f"[yellow]Eine Konfiguration existiert bereits: {mgr.path}[/yellow]"
        )
        if not click.confirm("Mit Standardwerten überschreiben?", default=False):
            return

    mgr.save(default_hostel_config())
    console.print("[bold green]Einrichtung abgeschlossen![/bold green]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktive Konfiguration an."""
    mgr, config = _load_config_or_abort(ctx)
    source = str(mgr.path) if not mgr.first_run_check() else "Standardwerte"

    console.print(Panel(
        f"[bold]{config.hostel_name}[/bold]  |  Quelle: {source}  |  "
        f"Log-Level: {config.logging.level}",
        title="Wohnheim-Konfiguration",
        border_style="cyan",
    ))

    from data.seed_data import seed_rooms
    from export.tui_renderer import build_room_table
    console.print(build_room_table(seed_rooms(config), title="Startzimmer"))


# ─── LIST ─────────────────────────────────────────────────────────────────────

@click.command("list")
@click.pass_context
def cmd_list(ctx: click.Context):
    """Zeigt alle Zimmer in Anlage-Reihenfolge."""
    from export.tui_renderer import build_room_table

    manager = _build_manager(ctx)
    console.print(build_room_table(manager.list_rooms(), title="Alle Zimmer"))


# ─── SEARCH ───────────────────────────────────────────────────────────────────

def _criteria_options(func):
    func = click.option("--washroom", is_flag=True, default=False,
                        help="Eigenes Bad erforderlich.")(func)
    func = click.option("--ac", is_flag=True, default=False,
                        help="Klimaanlage erforderlich.")(func)
    func = click.option("--students", "-n", type=int, required=True,
                        help="Anzahl Studierende (Mindestkapazität).")(func)
    return func


@click.command("search")
@_criteria_options
@click.pass_context
def cmd_search(ctx: click.Context, students: int, ac: bool, washroom: bool):
    """Listet alle Zimmer, die die Kriterien erfüllen."""
    from allocation.hostel_manager import RoomInputError
    from export.tui_renderer import print_search_results
    from models.criteria import AllocationCriteria

    manager = _build_manager(ctx)
    try:
        rooms = manager.search_rooms(students, ac, washroom)
    except RoomInputError as e:
        console.print(f"[red]Eingabefehler:[/red] {e}")
        sys.exit(1)
    print_search_results(rooms, AllocationCriteria.from_flags(students, ac, washroom),
                         console=console)


# ─── ALLOCATE ─────────────────────────────────────────────────────────────────

@click.command("allocate")
@_criteria_options
@click.pass_context
def cmd_allocate(ctx: click.Context, students: int, ac: bool, washroom: bool):
    """Teilt das kleinste passende Zimmer zu (Best Fit)."""
    from allocation.hostel_manager import RoomInputError

    manager = _build_manager(ctx)
    try:
        result = manager.explain_allocation(students, ac, washroom)
    except RoomInputError as e:
        console.print(f"[red]Eingabefehler:[/red] {e}")
        sys.exit(1)
    result.print_rich()


# ─── ADD ──────────────────────────────────────────────────────────────────────

@click.command("add")
@click.argument("room_id")
@click.argument("capacity", type=int)
@click.option("--ac", is_flag=True, default=False, help="Zimmer hat Klimaanlage.")
@click.option("--washroom", is_flag=True, default=False, help="Zimmer hat eigenes Bad.")
@click.pass_context
def cmd_add(ctx: click.Context, room_id: str, capacity: int, ac: bool, washroom: bool):
    """Legt ein Zimmer an (gilt nur für diesen Aufruf)."""
    from allocation.hostel_manager import RoomInputError
    from export.tui_renderer import build_room_table

    manager = _build_manager(ctx)
    try:
        added = manager.add_room(room_id, capacity, ac, washroom)
    except RoomInputError as e:
        console.print(f"[red]Eingabefehler:[/red] {e}")
        sys.exit(1)
    if not added:
        console.print(f"[red]Zimmer {escape(room_id)} existiert bereits![/red]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Zimmer {escape(room_id)} angelegt.")
    console.print(build_room_table(manager.list_rooms(), title="Alle Zimmer"))
    console.print(
        "[dim]Hinweis: Zimmer werden nicht gespeichert. "
        "Für mehrere Schritte [bold]python main.py shell[/bold] verwenden.[/dim]"
    )


# ─── SHELL ────────────────────────────────────────────────────────────────────

def _ask_criteria() -> tuple[int, bool, bool]:
    students = IntPrompt.ask("Anzahl Studierende")
    ac = Confirm.ask("Klimaanlage erforderlich?", default=False)
    washroom = Confirm.ask("Eigenes Bad erforderlich?", default=False)
    return students, ac, washroom


def _shell_add(manager) -> None:
    room_id = Prompt.ask("Zimmernummer").strip()
    capacity = IntPrompt.ask("Kapazität (Betten)")
    ac = Confirm.ask("Klimaanlage?", default=False)
    washroom = Confirm.ask("Eigenes Bad?", default=False)
    if manager.add_room(room_id, capacity, ac, washroom):
        console.print(f"[green]✓[/green] Zimmer {escape(room_id)} angelegt.")
    else:
        console.print(f"[red]Zimmer {escape(room_id)} existiert bereits![/red]")


def _shell_search(manager) -> None:
    from export.tui_renderer import print_search_results
    from models.criteria import AllocationCriteria

    students, ac, washroom = _ask_criteria()
    rooms = manager.search_rooms(students, ac, washroom)
    print_search_results(rooms, AllocationCriteria.from_flags(students, ac, washroom),
                         console=console)


def _shell_allocate(manager) -> None:
    students, ac, washroom = _ask_criteria()
    manager.explain_allocation(students, ac, washroom).print_rich()


@click.command("shell")
@click.pass_context
def cmd_shell(ctx: click.Context):
    """Interaktive Sitzung: Zimmer anlegen, suchen und zuteilen."""
    from allocation.hostel_manager import RoomInputError
    from export.tui_renderer import build_room_table

    manager = _build_manager(ctx)
    console.print(Panel(
        f"[bold]{manager.hostel_name}[/bold]\n\n"
        f"{len(manager.list_rooms())} Zimmer geladen. "
        "Änderungen gelten nur für diese Sitzung.",
        title="Wohnheim-Zimmerverwaltung",
        border_style="cyan",
    ))

    while True:
        console.print()
        console.print("  [bold]1.[/bold] Zimmer anlegen")
        console.print("  [bold]2.[/bold] Alle Zimmer anzeigen")
        console.print("  [bold]3.[/bold] Zimmer suchen")
        console.print("  [bold]4.[/bold] Zimmer zuteilen (Best Fit)")
        console.print("  [bold]5.[/bold] Übersicht")
        console.print("  [bold]0.[/bold] Beenden")

        choice = Prompt.ask("\nAuswahl", default="0")

        try:
            if choice == "1":
                _shell_add(manager)
            elif choice == "2":
                console.print(build_room_table(manager.list_rooms(), title="Alle Zimmer"))
            elif choice == "3":
                _shell_search(manager)
            elif choice == "4":
                _shell_allocate(manager)
            elif choice == "5":
                console.print(f"\n[dim]{manager.summary()}[/dim]")
            elif choice == "0":
                break
            else:
                console.print("[yellow]Ungültige Auswahl.[/yellow]")
        except RoomInputError as e:
            console.print(f"[red]Eingabefehler:[/red] {e}")


# ─── SUMMARY ──────────────────────────────────────────────────────────────────

@click.command("summary")
@click.pass_context
def cmd_summary(ctx: click.Context):
    """Kurze Übersicht über den Zimmerbestand."""
    manager = _build_manager(ctx)

    table = Table(title="Übersicht", box=box.ROUNDED, show_header=False)
    table.add_column("Kennzahl", style="bold")
    table.add_column("Wert")
    for line in manager.summary().splitlines():
        key, _, value = line.partition(": ")
        table.add_row(key, value)
    console.print(table)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur Konfigurationsdatei.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Protokollierung (DEBUG).")
@click.pass_context
def cli(ctx: click.Context, config_path, verbose: bool):
    """Wohnheim-Zimmerverwaltung: Zimmerbestand und Best-Fit-Zuteilung.

    Starten Sie mit: python main.py shell
    """
    from config.manager import ConfigManager

    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = ConfigManager(config_path)
    ctx.obj["verbose"] = verbose
    ctx.obj["manager"] = None
    if verbose:
        _setup_logging("DEBUG")


def main():
    """Einstiegspunkt. Ohne Argumente startet die interaktive Sitzung."""
    if len(sys.argv) == 1:
        sys.argv.append("shell")

    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_list)
cli.add_command(cmd_search)
cli.add_command(cmd_allocate)
cli.add_command(cmd_add)
cli.add_command(cmd_shell)
cli.add_command(cmd_summary)


if __name__ == "__main__":
    main()
