# File: floor_heating_planner/config/units.py

"""
Unit conversion between real-world meters and grid cells.

Room geometry arrives in meters while the occupancy grid works in whole
cells. Divisions such as ``3 / 0.1`` land a hair above the exact integer in
floating point, so conversions are rounded with a small tolerance.
"""

import math
from typing import Union


# Tolerance applied before rounding meters/resolution quotients
CELL_TOLERANCE = 1e-9


def _check_resolution(resolution_m: float) -> None:
    if resolution_m <= 0:
        raise ValueError(f"Grid resolution must be positive, got {resolution_m}")


def meters_to_cells(value_m: float, resolution_m: float) -> int:
    """
    Number of cells needed to cover a length.

    Args:
        value_m: Length in meters
        resolution_m: Size of one grid cell in meters

    Returns:
        ceil(value / resolution), tolerant to floating point noise

    Raises:
        ValueError: If the resolution is not positive
    """
    _check_resolution(resolution_m)
    return int(math.ceil(value_m / resolution_m - CELL_TOLERANCE))


def meters_to_cell_index(value_m: float, resolution_m: float) -> int:
    """
    Index of the cell containing a position.

    Args:
        value_m: Position in meters from the room origin
        resolution_m: Size of one grid cell in meters

    Returns:
        floor(value / resolution), tolerant to floating point noise
    """
    _check_resolution(resolution_m)
    return int(math.floor(value_m / resolution_m + CELL_TOLERANCE))


def cells_to_meters(value: Union[int, float], resolution_m: float) -> float:
    """Converts a grid-unit length or coordinate to meters."""
    _check_resolution(resolution_m)
    return value * resolution_m
