"""Remote starter contract.

Why a Protocol:
- Structural contract (duck typing): a vehicle conforms by having `start_car`,
  no base class required.
- `runtime_checkable` lets the domain model validate assignments with
  `isinstance` at the edge.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RemoteStarterDelegate(Protocol):
    """Minimal contract between a person's remote starter and a vehicle.

    Rules:
    - `start_car` takes nothing and returns nothing.
    - What "starting" means is entirely up to the implementer.
    """

    def start_car(self) -> None:
        """React to the remote starter button being pressed."""

        ...
