"""Vehicle: motorcycle."""

from __future__ import annotations

from rich.console import Console

from adapters.output import build_console, emit_line
from core.interfaces.remote_starter import RemoteStarterDelegate


class Motorcycle(RemoteStarterDelegate):
    _sound = "vrrRRRM"

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or build_console()

    def start_car(self) -> None:
        emit_line(self._console, self._sound)
