"""Domain models (Pydantic v2).

Notes:
- `Person` holds a *reference* to whatever conforms to
  `RemoteStarterDelegate`. It never creates, copies or tears down the vehicle.
- Assignments are validated, so only conforming objects can be bound.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.interfaces.remote_starter import RemoteStarterDelegate

logger = logging.getLogger(__name__)


class Person(BaseModel):
    """Someone who can press a remote starter.

    The person has no idea what pressing the button does: it might start a
    car, turn on a stereo or launch a rocket. That is up to the delegate.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )

    name: str = Field(
        ...,
        frozen=True,
        description="Display name of the person (immutable).",
    )
    remote_starter_delegate: RemoteStarterDelegate | None = Field(
        default=None,
        description="Non-owning reference to the object the remote starter talks to.",
    )

    @property
    def has_remote_starter(self) -> bool:
        return self.remote_starter_delegate is not None

    def bind_remote_starter(self, delegate: RemoteStarterDelegate) -> None:
        """Hook the remote starter up to `delegate`, replacing any previous binding."""

        self.remote_starter_delegate = delegate
        logger.debug("%s bound remote starter to %s", self.name, type(delegate).__name__)

    def unbind_remote_starter(self) -> None:
        self.remote_starter_delegate = None
        logger.debug("%s unbound remote starter", self.name)

    def press_remote_starter(self) -> None:
        """Press the button.

        Without a bound delegate this is a no-op. Errors raised by the delegate
        itself are not caught here.
        """

        delegate = self.remote_starter_delegate
        if delegate is None:
            logger.debug("%s pressed the remote starter but nothing is bound", self.name)
            return
        logger.debug("%s pressed the remote starter (%s)", self.name, type(delegate).__name__)
        delegate.start_car()
