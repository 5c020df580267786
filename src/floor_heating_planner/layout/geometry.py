# File: floor_heating_planner/layout/geometry.py
"""
Point geometry for heating pipe paths.

Points are (x, y) pairs. Grid-stepping algorithms produce them in grid
units (x = column, y = row); the continuous spiral and feed-line routing
produce meters. Callers scale grid units by the grid resolution.
"""

import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union


class Point(NamedTuple):
    """
    A path vertex.

    Attributes:
        x: Column (grid units) or X (meters)
        y: Row (grid units) or Y (meters)
    """
    x: float
    y: float

    @property
    def cell(self) -> Tuple[int, int]:
        """(row, col) of the grid cell this point sits on."""
        return (int(round(self.y)), int(round(self.x)))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}


PointLike = Union[Point, Tuple[float, float]]

# Points closer than this are treated as coincident
EPSILON = 1e-9


def as_point(value) -> Point:
    """Coerce a tuple, list, or {"x", "y"} mapping into a Point."""
    if isinstance(value, Point):
        return value
    if isinstance(value, dict):
        return Point(value["x"], value["y"])
    return Point(value[0], value[1])


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def manhattan_distance(a: PointLike, b: PointLike) -> float:
    """Rectilinear distance between two points."""
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def interpolate(a: PointLike, b: PointLike, fraction: float) -> Point:
    """Point at ``fraction`` of the way from a to b."""
    return Point(
        a[0] + (b[0] - a[0]) * fraction,
        a[1] + (b[1] - a[1]) * fraction,
    )


def is_grid_aligned(point: PointLike) -> bool:
    """Whether both coordinates are whole grid units."""
    return (
        abs(point[0] - round(point[0])) < EPSILON
        and abs(point[1] - round(point[1])) < EPSILON
    )


def are_adjacent(a: PointLike, b: PointLike) -> bool:
    """Whether two grid points are cardinal neighbours."""
    return abs(manhattan_distance(a, b) - 1.0) < EPSILON and (
        abs(a[0] - b[0]) < EPSILON or abs(a[1] - b[1]) < EPSILON
    )


def edge_lengths(points: Sequence[PointLike], scale: float = 1.0) -> List[float]:
    """Length of every consecutive edge, multiplied by ``scale``."""
    return [
        distance(points[i - 1], points[i]) * scale
        for i in range(1, len(points))
    ]


def _format_number(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def path_to_draw_commands(points: Iterable[PointLike], scale: float = 1.0) -> str:
    """
    Serialize a point sequence as move/line drawing commands.

    The output is "M x0 y0 L x1 y1 L x2 y2 ...", directly usable as the
    ``d`` attribute of an SVG path element.

    Args:
        points: Path vertices
        scale: Multiplier applied to every coordinate (e.g. grid -> pixels)

    Returns:
        Drawing command string, empty for an empty path
    """
    commands = []
    for index, point in enumerate(points):
        token = "M" if index == 0 else "L"
        commands.append(
            f"{token} {_format_number(point[0] * scale)} "
            f"{_format_number(point[1] * scale)}"
        )
    return " ".join(commands)
