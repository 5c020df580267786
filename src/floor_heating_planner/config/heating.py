# File: floor_heating_planner/config/heating.py

"""
Heating-layout configuration for the Floor Heating Planner.

Holds the path algorithm selector, default tuning values, and the option
objects passed from the presentation layer into the layout engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class PathAlgorithm(Enum):
    """Space-filling traversal strategies for the pipe centerline."""

    BOUSTROPHEDON = "boustrophedon"  # Row sweep, alternating direction
    SINGLE_SPIRAL = "single_spiral"  # One inward spiral
    DOUBLE_SPIRAL = "double_spiral"  # Interleaved supply/return spirals


# Size of one grid cell (meters)
DEFAULT_GRID_RESOLUTION_M = 0.1

# Grid rows/cols between adjacent parallel runs
DEFAULT_LOOP_SPACING_UNITS = 1

# Longest single circuit a manifold port can feed (meters)
DEFAULT_MAX_CIRCUIT_LENGTH_M = 100.0

# Outer pipe diameter, only used for renderer stroke width (meters)
DEFAULT_PIPE_DIAMETER_M = 0.016

DEFAULT_ALGORITHM = PathAlgorithm.DOUBLE_SPIRAL


def parse_algorithm(value: Any) -> PathAlgorithm:
    """
    Resolve a PathAlgorithm from an enum member or its string value.

    Accepts the camelCase names used by the UI layer
    ("singleSpiral", "doubleSpiral") as well as the enum values.

    Raises:
        ValueError: If the value names no known algorithm
    """
    if isinstance(value, PathAlgorithm):
        return value

    text = str(value).strip()
    if text.upper() in PathAlgorithm.__members__:
        return PathAlgorithm[text.upper()]

    normalized = "".join(
        "_" + ch.lower() if ch.isupper() else ch for ch in text
    ).lstrip("_").lower()

    try:
        return PathAlgorithm(normalized)
    except ValueError:
        raise ValueError(f"Unsupported path algorithm: {value}")


def _point_or_none(value: Any) -> Optional[Tuple[float, float]]:
    if value is None:
        return None
    if isinstance(value, dict):
        return (value["x"], value["y"])
    return (value[0], value[1])


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options for a single path generation call.

    Attributes:
        grid_resolution_m: Size of one grid cell in meters
        loop_spacing_units: Grid units between adjacent parallel runs
        start_point: Optional manifold supply point (col, row)
        end_point: Optional manifold return point (col, row)
        max_pipe_length_m: Length cap for the generated path, None = unbounded
        algorithm: Traversal strategy
        close_loop: Reconnect back to the start when no end point is given
    """

    grid_resolution_m: float = DEFAULT_GRID_RESOLUTION_M
    loop_spacing_units: int = DEFAULT_LOOP_SPACING_UNITS
    start_point: Optional[Tuple[float, float]] = None
    end_point: Optional[Tuple[float, float]] = None
    max_pipe_length_m: Optional[float] = None
    algorithm: PathAlgorithm = DEFAULT_ALGORITHM
    close_loop: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "grid_resolution_m": self.grid_resolution_m,
            "loop_spacing_units": self.loop_spacing_units,
            "start_point": list(self.start_point) if self.start_point else None,
            "end_point": list(self.end_point) if self.end_point else None,
            "max_pipe_length_m": self.max_pipe_length_m,
            "algorithm": self.algorithm.value,
            "close_loop": self.close_loop,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationOptions":
        """Deserialize from dictionary, filling defaults for missing keys."""
        return cls(
            grid_resolution_m=data.get(
                "grid_resolution_m", DEFAULT_GRID_RESOLUTION_M
            ),
            loop_spacing_units=data.get(
                "loop_spacing_units", DEFAULT_LOOP_SPACING_UNITS
            ),
            start_point=_point_or_none(data.get("start_point")),
            end_point=_point_or_none(data.get("end_point")),
            max_pipe_length_m=data.get("max_pipe_length_m"),
            algorithm=parse_algorithm(data.get("algorithm", DEFAULT_ALGORITHM)),
            close_loop=data.get("close_loop", False),
        )


@dataclass(frozen=True)
class PlannerConfig:
    """
    Room-level planning settings.

    Attributes:
        max_circuit_length_m: Per-circuit limit used to split the path into zones
        pipe_diameter_m: Pipe diameter, passed through for rendering
        check_connectivity: Warn when obstacles split the floor into regions
    """

    max_circuit_length_m: float = DEFAULT_MAX_CIRCUIT_LENGTH_M
    pipe_diameter_m: float = DEFAULT_PIPE_DIAMETER_M
    check_connectivity: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "max_circuit_length_m": self.max_circuit_length_m,
            "pipe_diameter_m": self.pipe_diameter_m,
            "check_connectivity": self.check_connectivity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlannerConfig":
        """Deserialize from dictionary."""
        return cls(
            max_circuit_length_m=data.get(
                "max_circuit_length_m", DEFAULT_MAX_CIRCUIT_LENGTH_M
            ),
            pipe_diameter_m=data.get("pipe_diameter_m", DEFAULT_PIPE_DIAMETER_M),
            check_connectivity=data.get("check_connectivity", True),
        )
