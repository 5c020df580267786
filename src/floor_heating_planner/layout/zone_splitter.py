# File: floor_heating_planner/layout/zone_splitter.py
"""
Zone splitting for over-length heating paths.

A manifold port can only feed a circuit of limited length. The splitter
cuts a path into consecutive segments no longer than that limit, placing
each cut at an interpolated point exactly on the length boundary.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from .geometry import Point, PointLike, as_point, distance, interpolate
from .reporting import calculate_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """
    One installable circuit cut from a path.

    Attributes:
        points: Segment vertices, same units as the source path
        length_m: Geometric length of ``points`` in meters
        index: Position of the segment along the source path
    """
    points: Tuple[Point, ...]
    length_m: float
    index: int = 0

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "index": self.index,
            "points": [list(p) for p in self.points],
            "length_m": self.length_m,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Segment":
        """Deserialize from dictionary."""
        return cls(
            points=tuple(as_point(p) for p in data["points"]),
            length_m=data["length_m"],
            index=data.get("index", 0),
        )


def split_path(
    points: Sequence[PointLike],
    max_segment_length_m: float,
    resolution_m: float = 1.0
) -> List[Segment]:
    """
    Split a path into segments no longer than a limit.

    The path is walked edge by edge. When the next edge would push the
    current segment past the limit, the segment is closed at the exact
    boundary point and a new segment starts there. An edge longer than the
    limit yields several segments. Only the last segment may be shorter
    than the limit.

    Args:
        points: Path vertices
        max_segment_length_m: Maximum segment length in meters
        resolution_m: Meters per point unit (grid resolution for grid points)

    Returns:
        Segments in path order; empty when the path has fewer than two points

    Raises:
        ValueError: If the limit or resolution is not positive
    """
    if max_segment_length_m <= 0:
        raise ValueError(
            f"Maximum segment length must be positive, got {max_segment_length_m}"
        )
    if resolution_m <= 0:
        raise ValueError(f"Resolution must be positive, got {resolution_m}")
    if len(points) < 2:
        return []

    tolerance = 1e-9 * max_segment_length_m
    segments: List[Segment] = []
    current: List[Point] = [as_point(points[0])]
    current_length = 0.0

    def close_segment(vertices: List[Point]) -> None:
        segments.append(Segment(
            points=tuple(vertices),
            length_m=calculate_length(vertices, resolution_m),
            index=len(segments),
        ))

    for raw_end in points[1:]:
        end = as_point(raw_end)
        start = current[-1]
        remaining = distance(start, end) * resolution_m

        while current_length + remaining > max_segment_length_m + tolerance:
            take = max_segment_length_m - current_length
            if take > tolerance:
                cut = interpolate(start, end, take / remaining)
                current.append(cut)
            else:
                cut = start
            close_segment(current)
            current = [cut]
            current_length = 0.0
            remaining = distance(cut, end) * resolution_m
            start = cut

        if remaining > 0:
            current.append(end)
            current_length += remaining

    if len(current) > 1:
        close_segment(current)

    logger.debug(
        f"Split path of {len(points)} points into {len(segments)} segments "
        f"(limit {max_segment_length_m} m)"
    )
    return segments
