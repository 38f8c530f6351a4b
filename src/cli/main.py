"""Delegate Playground CLI (Typer).

Commands:
- `demo`: hook a person's remote starter to a vehicle and press it.
- `vehicles`: list the vehicles a remote starter can drive.
- `doctor`: configuration diagnostics.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli import doctor
from cli.ui_components import build_person_panel, build_vehicles_table, print_banner
from core.config import AppSettings
from core.domain.vehicle_kind import VehicleKind
from core.services.garage import RemoteStartRequest, run_remote_start

app = typer.Typer(
    no_args_is_help=True,
    help="Playground for the delegate pattern: a person, a remote starter and a vehicle.",
)
app.add_typer(doctor.app, name="doctor")

# Vehicle output owns stdout; everything else goes to stderr.
_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red]\n{escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def demo(
    ctx: typer.Context,
    name: str | None = typer.Option(None, "--name", "-n", help="Name of the person holding the remote."),
    vehicle: VehicleKind | None = typer.Option(None, "--vehicle", case_sensitive=False, help="Vehicle to hook up."),
    unbound: bool = typer.Option(False, "--unbound", help="Never hook the remote starter up."),
    presses: int = typer.Option(1, "--presses", min=0, help="How many times to press the button."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    summary: bool = typer.Option(False, "--summary", help="Print a summary of the person afterwards."),
) -> None:
    """Create a person and a vehicle, hook them up and press the remote starter."""

    settings: AppSettings = ctx.obj
    owner_name = (name if name is not None else settings.default_owner_name).strip()
    if not owner_name:
        raise typer.BadParameter("name must not be empty", param_hint="--name")

    if settings.show_banner and not no_banner:
        print_banner(_err_console)

    request = RemoteStartRequest(
        owner_name=owner_name,
        vehicle=vehicle,
        bind=not unbound,
        presses=presses,
    )
    person = run_remote_start(request, settings=settings)

    if summary:
        _err_console.print(build_person_panel(person))


@app.command()
def vehicles() -> None:
    """List the vehicles a remote starter can be hooked up to."""

    _console.print(build_vehicles_table())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
