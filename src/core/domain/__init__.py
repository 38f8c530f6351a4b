"""Domain models.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
the CLI or about any concrete vehicle.
"""

from core.domain.models import Person

__all__ = ["Person"]
