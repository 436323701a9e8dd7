# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from hillclimb.core.grid import ElevationGrid
from hillclimb.core.parse import parse_heightmap

from helpers import SAMPLE, SEALED, WALLED

MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"


@pytest.fixture
def maps_dir() -> Path:
    return MAPS_DIR


@pytest.fixture
def sample_grid() -> ElevationGrid:
    return parse_heightmap(SAMPLE)


@pytest.fixture
def walled_grid() -> ElevationGrid:
    return parse_heightmap(WALLED)


@pytest.fixture
def sealed_grid() -> ElevationGrid:
    return parse_heightmap(SEALED)
