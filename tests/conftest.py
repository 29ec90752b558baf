"""Shared fixtures. pygame runs headless (dummy SDL drivers)."""
import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import random

import pytest

from core.catalog import StarCatalog
from core.config import ChartConfig
from core.coords import CoordinateMapper
from core.types import ViewState
from game.state_manager import StateManager
from tests.sample_stars import ALL_STARS, CANVAS_H, CANVAS_W, NAMED


@pytest.fixture
def named_stars():
    return NAMED


@pytest.fixture
def catalog():
    return StarCatalog.from_records(ALL_STARS)


@pytest.fixture
def view():
    return ViewState()


@pytest.fixture
def mapper(view):
    return CoordinateMapper(view, CANVAS_W, CANVAS_H)


@pytest.fixture
def chart_config():
    return ChartConfig(width=CANVAS_W, height=CANVAS_H)


@pytest.fixture
def manager(chart_config, catalog):
    sm = StateManager(chart_config, random.Random(1234))
    sm.set_catalog(catalog)
    return sm
