"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.domain.vehicle_kind import VehicleKind
from core.interfaces.remote_starter import RemoteStarterDelegate
from core.services.garage import build_vehicle

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics.")

_console = Console()


def _check_vehicles(settings: AppSettings) -> tuple[bool, str]:
    """Build every vehicle and check it conforms to the remote starter contract."""

    missing = [
        kind.value
        for kind in VehicleKind
        if not isinstance(build_vehicle(kind, settings=settings), RemoteStarterDelegate)
    ]
    if missing:
        return False, "Not conforming: " + ", ".join(missing)
    return True, f"{len(VehicleKind)} vehicles conform"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and check the vehicles.

    Settings are loaded and validated by the root callback.
    """

    settings: AppSettings = ctx.obj

    table = Table(title="Delegate Playground Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Owner name", "OK", settings.default_owner_name)
    table.add_row("Default vehicle", "OK", settings.default_vehicle.value)
    table.add_row("Car sound", "OK", settings.car_sound)
    table.add_row("Log level", "OK", settings.log_level)

    ok, detail = _check_vehicles(settings)
    table.add_row("Vehicles", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)
