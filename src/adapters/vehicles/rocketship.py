"""Vehicle: rocketship.

Shows that the person's remote starter does not care what it is hooked up to,
as long as it conforms to the contract.
"""

from __future__ import annotations

from rich.console import Console

from adapters.output import build_console, emit_line
from core.interfaces.remote_starter import RemoteStarterDelegate


class Rocketship(RemoteStarterDelegate):
    _countdown = "3... 2... 1... liftoff"

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or build_console()

    def start_car(self) -> None:
        emit_line(self._console, self._countdown)
