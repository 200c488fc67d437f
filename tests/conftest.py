"""Shared fixtures for the hexplanner test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from hexplanner.adjacency.engine import AdjacencyEngine
from hexplanner.hexgrid.coords import HexCoord
from hexplanner.planning.config import PlannerConfig
from hexplanner.planning.demo import build_demo_map
from hexplanner.world.game_map import GameMap


@pytest.fixture
def small_map() -> GameMap:
    """A blank 8x8 map for fast tests."""
    return GameMap(width=8, height=8, name="Test Map")


@pytest.fixture
def engine(small_map: GameMap) -> AdjacencyEngine:
    """An engine over ``small_map``."""
    return AdjacencyEngine(small_map)


@pytest.fixture
def demo() -> tuple[GameMap, HexCoord]:
    """The demo city: ``(game_map, city_center)``."""
    return build_demo_map()


@pytest.fixture
def demo_engine(demo: tuple[GameMap, HexCoord]) -> AdjacencyEngine:
    return AdjacencyEngine(demo[0])


@pytest.fixture
def default_config() -> PlannerConfig:
    """Default planner config (no YAML file needed)."""
    return PlannerConfig()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo any logging setup a test installs."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
