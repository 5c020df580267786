# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from floor_heating_planner.config import PathAlgorithm
from floor_heating_planner.layout import (
    RectRegion,
    Room,
    build_grid,
    stamp_obstacles,
)


@pytest.fixture
def small_room():
    """A 1 m x 1 m room."""
    return Room(width_m=1.0, length_m=1.0)


@pytest.fixture
def small_grid(small_room):
    """10x10 empty grid at 0.1 m."""
    return build_grid(small_room, 0.1)


@pytest.fixture
def obstacle_grid():
    """3 m x 3 m room with a 1 m x 1 m obstacle in the centre."""
    grid = build_grid(Room(width_m=3.0, length_m=3.0), 0.1)
    return stamp_obstacles(grid, [RectRegion(x=10, y=10, width=10, height=10)])


@pytest.fixture(params=list(PathAlgorithm))
def algorithm(request):
    """Every path strategy."""
    return request.param

