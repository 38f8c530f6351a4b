"""Wrapper around rich's Console for vehicle output.

Why a builder:
- Every vehicle writes to stdout the same way (no markup, no highlighting).
- Tests can pass a Console backed by a StringIO instead.
"""

from __future__ import annotations

from rich.console import Console


def build_console() -> Console:
    """Create a `Console` with plain-text defaults."""

    return Console(highlight=False, markup=False, emoji=False)


def emit_line(console: Console, line: str) -> None:
    """Write exactly one line, verbatim."""

    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
