"""Shared pytest fixtures for the full linecfg test suite."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest


GAME_SETTINGS = (
    "pc_health = 50\n"
    "zombie_health=35\n"
    "#comment\n"
    "offline = true #flag\n"
)


@pytest.fixture
def make_stream() -> Callable[[str], io.StringIO]:
    """Provide a factory for in-memory settings streams that keep line endings."""

    def _make(text: str) -> io.StringIO:
        return io.StringIO(text, newline="")

    return _make


@pytest.fixture
def game_settings_text() -> str:
    """Provide the canonical small game settings document."""

    return GAME_SETTINGS


@pytest.fixture
def game_settings_path(tmp_path: Path) -> Path:
    """Write the canonical game settings document to disk and return its path."""

    path = tmp_path / "game.cfg"
    path.write_bytes(GAME_SETTINGS.encode("utf-8"))
    return path
