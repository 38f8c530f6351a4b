"""Shared test fixtures for delegate-playground.

Every test runs in an empty working directory with no
`DELEGATE_PLAYGROUND_*` variables set, so a developer's `.env` never leaks in.
"""
from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterator

import pytest
from rich.console import Console
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("DELEGATE_PLAYGROUND_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(buffer: io.StringIO) -> Console:
    """A plain-text console writing into ``buffer``."""
    return Console(file=buffer, highlight=False, markup=False, emoji=False, width=120)

