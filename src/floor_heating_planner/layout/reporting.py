# File: floor_heating_planner/layout/reporting.py
"""Pipe length and fitting counts for a path."""

from dataclasses import dataclass
from typing import Any, Dict, Sequence

from .geometry import EPSILON, PointLike, edge_lengths


def calculate_length(points: Sequence[PointLike], resolution_m: float = 1.0) -> float:
    """
    Total length of a path.

    Args:
        points: Path vertices
        resolution_m: Meters per unit; pass the grid resolution for
            grid-unit points, 1.0 for points already in meters

    Returns:
        Sum of Euclidean edge lengths times the resolution
    """
    if len(points) < 2:
        return 0.0
    return sum(edge_lengths(points, resolution_m))


def estimate_elbows(points: Sequence[PointLike]) -> int:
    """
    Upper-bound elbow count: every interior vertex.

    Collinear vertices are included, so this over-counts on straight runs.
    """
    return max(0, len(points) - 2)


def count_direction_changes(points: Sequence[PointLike]) -> int:
    """Number of interior vertices where the path actually turns."""
    turns = 0
    for i in range(1, len(points) - 1):
        ax = points[i][0] - points[i - 1][0]
        ay = points[i][1] - points[i - 1][1]
        bx = points[i + 1][0] - points[i][0]
        by = points[i + 1][1] - points[i][1]
        cross = ax * by - ay * bx
        dot = ax * bx + ay * by
        if abs(cross) > EPSILON or dot < 0:
            turns += 1
    return turns


@dataclass(frozen=True)
class LengthReport:
    """
    Length and fitting summary for a path.

    Attributes:
        total_length_m: Pipe length in meters
        elbow_estimate: Interior vertex count (upper bound)
        direction_changes: Interior vertices with an actual turn
        point_count: Number of vertices
    """
    total_length_m: float
    elbow_estimate: int
    direction_changes: int
    point_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "total_length_m": self.total_length_m,
            "elbow_estimate": self.elbow_estimate,
            "direction_changes": self.direction_changes,
            "point_count": self.point_count,
        }


def summarize(points: Sequence[PointLike], resolution_m: float = 1.0) -> LengthReport:
    """Build a LengthReport for a path."""
    return LengthReport(
        total_length_m=calculate_length(points, resolution_m),
        elbow_estimate=estimate_elbows(points),
        direction_changes=count_direction_changes(points),
        point_count=len(points),
    )
