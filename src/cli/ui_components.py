"""CLI UI components (Rich).

Keeps visual details out of the command functions so tables and panels can be
reused across commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Person
from core.domain.vehicle_kind import VehicleKind

_VEHICLE_NOTES: dict[VehicleKind, str] = {
    VehicleKind.CAR: "Prints the configured car sound",
    VehicleKind.MOTORCYCLE: "Revs the engine",
    VehicleKind.ROCKETSHIP: "Counts down and lifts off",
}


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Goes to whatever console is passed so it can be kept off stdout in
    non-interactive runs.
    """

    title = Text("Delegate Playground", style="bold cyan")
    subtitle = Text("Person • Remote starter • Vehicle", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_vehicles_table() -> Table:
    table = Table(title="Vehicles")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("What start_car does", style="dim")
    for kind in VehicleKind:
        table.add_row(kind.value, kind.label(), _VEHICLE_NOTES[kind])
    return table


def build_person_panel(person: Person) -> Panel:
    """Summary of a person after the scenario ran."""

    body = Text()
    body.append(f"Name: {person.name}\n")
    delegate = person.remote_starter_delegate
    if delegate is None:
        body.append("Remote starter: not hooked up", style="yellow")
    else:
        body.append(f"Remote starter: {type(delegate).__name__}", style="green")
    return Panel(body, title=Text("Person", style="bold"), border_style="dim")
