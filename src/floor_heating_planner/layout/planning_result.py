# File: floor_heating_planner/layout/planning_result.py
"""
Result data structures for heating path planning.

Recoverable problems (an end point that could not be reached, a floor
split into separate regions) are recorded as warnings on the result
instead of being raised, so callers always receive a usable path.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config.heating import PathAlgorithm
from .geometry import Point, path_to_draw_commands
from .room_grid import RoomGrid
from .zone_splitter import Segment


class WarningCode(Enum):
    """Machine-readable warning categories."""
    RECONNECTION_FAILED = "reconnection_failed"
    DISCONNECTED_REGIONS = "disconnected_regions"
    EXCEEDS_CIRCUIT_LENGTH = "exceeds_circuit_length"


@dataclass(frozen=True)
class PlanningWarning:
    """
    A recoverable condition found while planning.

    Attributes:
        code: Warning category
        message: Human-readable description
        details: Additional context for the presentation layer
    """
    code: WarningCode
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class PathResult:
    """
    Output of a single path generation.

    Attributes:
        path: Generated vertices in grid units (col, row)
        total_length_m: Length of ``path`` in meters
        elbow_estimate: Interior vertex count
        resolution_m: Meters per grid unit
        algorithm: Strategy that produced the path
        truncated: Whether the length cap stopped generation
        reconnected: True/False when a target point was requested, else None
        warnings: Recoverable conditions encountered
    """
    path: Tuple[Point, ...] = ()
    total_length_m: float = 0.0
    elbow_estimate: int = 0
    resolution_m: float = 1.0
    algorithm: Optional[PathAlgorithm] = None
    truncated: bool = False
    reconnected: Optional[bool] = None
    warnings: Tuple[PlanningWarning, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.path) == 0

    def has_warning(self, code: WarningCode) -> bool:
        """Whether a warning with the given code was recorded."""
        return any(w.code == code for w in self.warnings)

    def path_in_meters(self) -> List[Point]:
        """Path vertices scaled to meters."""
        return [
            Point(p.x * self.resolution_m, p.y * self.resolution_m)
            for p in self.path
        ]

    def draw_commands(self, scale: float = 1.0) -> str:
        """Drawing command string for the path in grid units times ``scale``."""
        return path_to_draw_commands(self.path, scale)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": [list(p) for p in self.path],
            "total_length_m": self.total_length_m,
            "elbow_estimate": self.elbow_estimate,
            "resolution_m": self.resolution_m,
            "algorithm": self.algorithm.value if self.algorithm else None,
            "truncated": self.truncated,
            "reconnected": self.reconnected,
            "warnings": [w.to_dict() for w in self.warnings],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True)
class RoomPlan:
    """
    Complete plan for one room: grid, path, and circuits.

    Attributes:
        grid: Stamped occupancy grid the path was generated on
        result: Generated path
        zones: Circuits cut from the path, at least one when the path is non-empty
        pipe_diameter_m: Passed through for renderer stroke width
        warnings: Room-level warnings plus those from ``result``
    """
    grid: RoomGrid
    result: PathResult
    zones: Tuple[Segment, ...] = ()
    pipe_diameter_m: float = 0.0
    warnings: Tuple[PlanningWarning, ...] = ()

    @property
    def total_length_m(self) -> float:
        return self.result.total_length_m

    @property
    def zone_count(self) -> int:
        return len(self.zones)

    def has_warning(self, code: WarningCode) -> bool:
        """Whether a warning with the given code was recorded."""
        return any(w.code == code for w in self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "grid": {
                "rows": self.grid.rows,
                "cols": self.grid.cols,
                "resolution_m": self.grid.resolution_m,
            },
            "result": self.result.to_dict(),
            "zones": [z.to_dict() for z in self.zones],
            "pipe_diameter_m": self.pipe_diameter_m,
            "warnings": [w.to_dict() for w in self.warnings],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
