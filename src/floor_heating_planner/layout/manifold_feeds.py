# File: floor_heating_planner/layout/manifold_feeds.py
"""
Feed-line routing from the heating source to each room.

Each room is fed by an L-shaped run: horizontally from the source to the
room centre's X, then vertically to the centre, with one elbow at the
corner. Runs longer than the maximum deliverable pipe length are split
into equal pieces joined by couplings.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.heating import DEFAULT_MAX_CIRCUIT_LENGTH_M
from .geometry import EPSILON, Point, PointLike, as_point, distance, interpolate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedRoom:
    """
    A room positioned on the house plan.

    Attributes:
        name: Room identifier
        x_m: X of the room's top-left corner on the plan
        y_m: Y of the room's top-left corner on the plan
        width_m: Extent along X
        length_m: Extent along Y
    """
    name: str
    x_m: float
    y_m: float
    width_m: float
    length_m: float

    @property
    def center(self) -> Point:
        return Point(self.x_m + self.width_m / 2, self.y_m + self.length_m / 2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlacedRoom":
        """Deserialize from dictionary ("height" accepted for length)."""
        return cls(
            name=str(data.get("name", data.get("id", ""))),
            x_m=data["x"],
            y_m=data["y"],
            width_m=data["width"],
            length_m=data.get("length", data.get("height")),
        )


@dataclass(frozen=True)
class FeedRun:
    """
    One straight piece of feed pipe.

    Attributes:
        room_name: Room this run feeds
        start: Run start (meters)
        end: Run end (meters)
    """
    room_name: str
    start: Point
    end: Point

    @property
    def length_m(self) -> float:
        return distance(self.start, self.end)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "room_name": self.room_name,
            "start": list(self.start),
            "end": list(self.end),
            "length_m": self.length_m,
        }


@dataclass(frozen=True)
class FeedLayout:
    """
    Feed lines for a whole house.

    Attributes:
        runs: Straight runs, in room order
        elbows: 90-degree turns, one per L-shaped feed
        couplings: Joints where an over-length run was split
    """
    runs: Tuple[FeedRun, ...] = ()
    elbows: Tuple[Point, ...] = ()
    couplings: Tuple[Point, ...] = ()

    @property
    def total_length_m(self) -> float:
        return sum(run.length_m for run in self.runs)

    def runs_for(self, room_name: str) -> List[FeedRun]:
        """Runs feeding one room."""
        return [run for run in self.runs if run.room_name == room_name]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "runs": [run.to_dict() for run in self.runs],
            "elbows": [list(p) for p in self.elbows],
            "couplings": [list(p) for p in self.couplings],
            "total_length_m": self.total_length_m,
        }


def split_run(
    start: PointLike,
    end: PointLike,
    max_length_m: float
) -> List[Tuple[Point, Point]]:
    """
    Divide a straight run into equal pieces no longer than a limit.

    Returns:
        (start, end) pairs; a single pair when the run already fits

    Raises:
        ValueError: If the limit is not positive
    """
    if max_length_m <= 0:
        raise ValueError(f"Maximum run length must be positive, got {max_length_m}")

    start, end = as_point(start), as_point(end)
    total = distance(start, end)
    if total <= max_length_m:
        return [(start, end)]

    pieces = int(math.ceil(total / max_length_m))
    return [
        (interpolate(start, end, i / pieces), interpolate(start, end, (i + 1) / pieces))
        for i in range(pieces)
    ]


def route_feed_lines(
    rooms: Iterable[PlacedRoom],
    source: Optional[PointLike] = None,
    max_run_length_m: float = DEFAULT_MAX_CIRCUIT_LENGTH_M
) -> FeedLayout:
    """
    Route an L-shaped feed line from the source to every room centre.

    Args:
        rooms: Rooms placed on the house plan
        source: Heating source position, plan origin when omitted
        max_run_length_m: Longest single piece of feed pipe

    Returns:
        FeedLayout with runs, elbows, and couplings
    """
    origin = as_point(source) if source is not None else Point(0.0, 0.0)
    runs: List[FeedRun] = []
    elbows: List[Point] = []
    couplings: List[Point] = []

    for room in rooms:
        target = room.center
        corner = Point(target.x, origin.y)
        legs = [
            (origin, corner),
            (corner, target),
        ]
        legs = [(a, b) for a, b in legs if distance(a, b) > EPSILON]

        if len(legs) == 2:
            elbows.append(corner)

        for leg_start, leg_end in legs:
            pieces = split_run(leg_start, leg_end, max_run_length_m)
            couplings.extend(piece_start for piece_start, _ in pieces[1:])
            runs.extend(FeedRun(room.name, a, b) for a, b in pieces)

    logger.debug(
        f"Routed {len(runs)} feed runs with {len(elbows)} elbows "
        f"and {len(couplings)} couplings"
    )
    return FeedLayout(
        runs=tuple(runs), elbows=tuple(elbows), couplings=tuple(couplings)
    )
