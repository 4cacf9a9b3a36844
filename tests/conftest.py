# tests/conftest.py
import os
import sys

# pygame headless: no window, no sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pathgrid.core.types import Grid

REFERENCE_ROWS = [
    "11111111",
    "10000111",
    "11010111",
    "11010111",
    "11110001",
    "11111001",
]


@pytest.fixture
def reference_grid() -> Grid:
    return Grid.from_strings(REFERENCE_ROWS)


@pytest.fixture
def open_grid() -> Grid:
    return Grid.from_strings(["0" * 8] * 6)


@pytest.fixture(autouse=True)
def _clean_pathgrid_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("PATHGRID_"):
            monkeypatch.delenv(key, raising=False)
