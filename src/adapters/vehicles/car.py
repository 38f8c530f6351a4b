"""Vehicle: car.

The classic example: pressing the remote starter makes the engine go.
"""

from __future__ import annotations

from rich.console import Console

from adapters.output import build_console, emit_line
from core.config import AppSettings
from core.interfaces.remote_starter import RemoteStarterDelegate


class Car(RemoteStarterDelegate):
    """Prints the configured engine sound once per start."""

    def __init__(self, settings: AppSettings | None = None, *, console: Console | None = None) -> None:
        self._settings = settings or AppSettings()
        self._console = console or build_console()

    def start_car(self) -> None:
        emit_line(self._console, self._settings.car_sound)
