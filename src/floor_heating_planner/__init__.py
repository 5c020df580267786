# File: floor_heating_planner/__init__.py
"""
Floor Heating Planner

Plans radiant floor heating pipe layouts for rectangular rooms.
"""

from .config import GenerationOptions, PathAlgorithm, PlannerConfig
from .layout import (
    Room,
    RectRegion,
    Passageway,
    build_grid,
    generate_path,
    plan_room,
    split_path,
    path_to_draw_commands,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationOptions",
    "PathAlgorithm",
    "PlannerConfig",
    "Room",
    "RectRegion",
    "Passageway",
    "build_grid",
    "generate_path",
    "plan_room",
    "split_path",
    "path_to_draw_commands",
]
