"""Core interfaces.

Contracts (Protocol) that concrete adapters implement. The core depends on
these abstractions, never on the adapters themselves.
"""

from core.interfaces.remote_starter import RemoteStarterDelegate

__all__ = ["RemoteStarterDelegate"]
