"""Vehicle kinds known to the playground.

Lives in the domain layer so config, services and CLI can share it without
importing adapters.
"""

from __future__ import annotations

from enum import Enum


class VehicleKind(str, Enum):
    """Vehicles a remote starter can be hooked up to."""

    CAR = "car"
    MOTORCYCLE = "motorcycle"
    ROCKETSHIP = "rocketship"

    @classmethod
    def default(cls) -> "VehicleKind":
        return cls.CAR

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.capitalize()
