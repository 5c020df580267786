# File: floor_heating_planner/config/__init__.py

"""
Configuration package for the Floor Heating Planner.
Provides a unified interface to:
- Unit conversion between meters and grid cells
- Path algorithm selection and generation defaults
- Room-level planning settings
"""

from .units import (
    meters_to_cells,
    meters_to_cell_index,
    cells_to_meters,
)

from .heating import (
    PathAlgorithm,
    GenerationOptions,
    PlannerConfig,
    parse_algorithm,
    DEFAULT_ALGORITHM,
    DEFAULT_GRID_RESOLUTION_M,
    DEFAULT_LOOP_SPACING_UNITS,
    DEFAULT_MAX_CIRCUIT_LENGTH_M,
    DEFAULT_PIPE_DIAMETER_M,
)

__all__ = [
    "meters_to_cells",
    "meters_to_cell_index",
    "cells_to_meters",
    "PathAlgorithm",
    "GenerationOptions",
    "PlannerConfig",
    "parse_algorithm",
    "DEFAULT_ALGORITHM",
    "DEFAULT_GRID_RESOLUTION_M",
    "DEFAULT_LOOP_SPACING_UNITS",
    "DEFAULT_MAX_CIRCUIT_LENGTH_M",
    "DEFAULT_PIPE_DIAMETER_M",
]
