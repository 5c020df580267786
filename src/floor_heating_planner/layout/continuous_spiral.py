# File: floor_heating_planner/layout/continuous_spiral.py
"""
Bifilar spiral outline in meter coordinates.

A grid-free alternative to the cell-based spirals: the supply run of a
bifilar (counterflow) layout is traced as straight runs between shrinking
boundaries. Each boundary moves in by twice the pipe spacing, leaving a
one-spacing gap for the return run between consecutive laps.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .geometry import Point, path_to_draw_commands
from .reporting import calculate_length, estimate_elbows

logger = logging.getLogger(__name__)


def generate_continuous_spiral(
    width_m: float,
    length_m: float,
    spacing_m: float
) -> List[Point]:
    """
    Trace the supply spiral of a bifilar layout.

    The path starts half a spacing in from the top-left corner and runs
    right, down, left, up to the current boundaries. After each run the
    boundary just travelled along moves inward by ``2 * spacing_m``; tracing
    stops when opposite boundaries cross. A final stub of one spacing turns
    inward from the last run when that run was longer than the spacing.

    Args:
        width_m: Area width (X)
        length_m: Area length (Y)
        spacing_m: Distance between adjacent pipe runs

    Returns:
        Vertices in meters; empty when the area cannot hold one loop
    """
    if (
        width_m <= 0 or length_m <= 0 or spacing_m <= 0
        or spacing_m * 2 > width_m or spacing_m * 2 > length_m
    ):
        logger.warning(
            f"Cannot fit a spiral with spacing {spacing_m} m "
            f"into {width_m} x {length_m} m"
        )
        return []

    half = spacing_m / 2
    step = spacing_m * 2
    min_x, max_x = half, width_m - half
    min_y, max_y = half, length_m - half

    x, y = min_x, min_y
    points = [Point(x, y)]

    while min_x < max_x and min_y < max_y:
        if x < max_x:
            x = max_x
            points.append(Point(x, y))
        min_y += step
        if min_y > max_y:
            break

        if y < max_y:
            y = max_y
            points.append(Point(x, y))
        max_x -= step
        if min_x > max_x:
            break

        if x > min_x:
            x = min_x
            points.append(Point(x, y))
        max_y -= step
        if min_y > max_y:
            break

        if y > min_y:
            y = min_y
            points.append(Point(x, y))
        min_x += step
        if min_x > max_x:
            break

    if len(points) >= 2:
        points.extend(_inward_stub(points[-2], points[-1], spacing_m))

    return points


def _inward_stub(previous: Point, last: Point, spacing_m: float) -> List[Point]:
    """One spacing-length run perpendicular to the final run, if it was long."""
    if last.y == previous.y and abs(last.x - previous.x) > spacing_m:
        offset = spacing_m if last.x < previous.x else -spacing_m
        return [Point(last.x, last.y + offset)]
    if last.x == previous.x and abs(last.y - previous.y) > spacing_m:
        offset = spacing_m if last.y < previous.y else -spacing_m
        return [Point(last.x + offset, last.y)]
    return []


@dataclass(frozen=True)
class ContinuousSpiral:
    """
    Spiral outline with its length and drawing commands.

    Attributes:
        points: Vertices in meters
        length_m: Total length
        elbow_estimate: Interior vertex count
        draw_commands: Move/line command string
    """
    points: Tuple[Point, ...]
    length_m: float
    elbow_estimate: int
    draw_commands: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "points": [list(p) for p in self.points],
            "length_m": self.length_m,
            "elbow_estimate": self.elbow_estimate,
            "draw_commands": self.draw_commands,
        }


def plan_continuous_spiral(
    width_m: float,
    length_m: float,
    spacing_m: float,
    scale: float = 1.0
) -> ContinuousSpiral:
    """
    Generate a spiral outline and report its length.

    Args:
        width_m: Area width
        length_m: Area length
        spacing_m: Distance between adjacent pipe runs
        scale: Multiplier for the drawing commands (meters -> pixels)
    """
    points = generate_continuous_spiral(width_m, length_m, spacing_m)
    return ContinuousSpiral(
        points=tuple(points),
        length_m=calculate_length(points),
        elbow_estimate=estimate_elbows(points),
        draw_commands=path_to_draw_commands(points, scale),
    )
