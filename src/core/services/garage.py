"""Remote start orchestration.

Wires a person to a vehicle and presses the button. The CLI delegates the
whole scenario here so it can be reused from tests and other entry points;
every object is built locally per call, nothing lives at module level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console

from adapters.vehicles import Car, Motorcycle, Rocketship
from core.config import AppSettings
from core.domain.models import Person
from core.domain.vehicle_kind import VehicleKind
from core.interfaces.remote_starter import RemoteStarterDelegate

logger = logging.getLogger(__name__)


@dataclass
class RemoteStartRequest:
    """Parameters for one remote start scenario.

    `owner_name` and `vehicle` fall back to `AppSettings` when left as None.
    """

    owner_name: str | None = None
    vehicle: VehicleKind | None = None
    bind: bool = True
    presses: int = 1


def build_vehicle(
    kind: VehicleKind,
    *,
    settings: AppSettings | None = None,
    console: Console | None = None,
) -> RemoteStarterDelegate:
    """Build the vehicle for `kind`."""

    kind = VehicleKind(kind)
    if kind is VehicleKind.CAR:
        return Car(settings, console=console)
    if kind is VehicleKind.MOTORCYCLE:
        return Motorcycle(console=console)
    return Rocketship(console=console)


def run_remote_start(
    request: RemoteStartRequest,
    *,
    settings: AppSettings | None = None,
    console: Console | None = None,
) -> Person:
    """Run the scenario and return the person for inspection.

    The person and the vehicle are created independently; the binding happens
    only after both exist.
    """

    if request.presses < 0:
        raise ValueError("presses must be >= 0")

    settings = settings or AppSettings()
    kind = VehicleKind(request.vehicle or settings.default_vehicle)
    owner_name = request.owner_name if request.owner_name is not None else settings.default_owner_name
    person = Person(name=owner_name)
    vehicle = build_vehicle(kind, settings=settings, console=console)

    if request.bind:
        person.bind_remote_starter(vehicle)
    else:
        logger.info("%s has a %s but never hooked up the remote starter", person.name, kind.label())

    for _ in range(request.presses):
        person.press_remote_starter()

    return person
