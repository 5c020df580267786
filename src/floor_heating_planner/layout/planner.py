# File: floor_heating_planner/layout/planner.py
"""
Room planning pipeline.

Runs the full layout flow for one room from plain data: build and stamp
the occupancy grid, check floor connectivity, generate the path (with
reconnection), and split it into circuits when it exceeds the
per-circuit maximum.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config.heating import GenerationOptions, PlannerConfig
from .connectivity import routable_regions
from .errors import InvalidGenerationOptionsError, InvalidInputError
from .path_generator import generate_path, validate_options
from .planning_result import PlanningWarning, RoomPlan, WarningCode
from .reporting import calculate_length
from .room_grid import (
    Passageway,
    RectRegion,
    Room,
    RoomGrid,
    build_grid,
    stamp_no_pipe_zones,
    stamp_obstacles,
    stamp_passageways,
)
from .zone_splitter import Segment, split_path

logger = logging.getLogger(__name__)


def prepare_grid(
    room: Room,
    resolution_m: float,
    obstacles: Optional[Iterable[RectRegion]] = None,
    passageways: Optional[Iterable[Passageway]] = None,
    no_pipe_zones: Optional[Iterable[RectRegion]] = None
) -> RoomGrid:
    """
    Build a room grid and stamp it: obstacles, then passageways, then zones.

    Raises:
        InvalidDimensionsError: If room or resolution is not positive
    """
    grid = build_grid(room, resolution_m)
    grid = stamp_obstacles(grid, obstacles)
    grid = stamp_passageways(grid, passageways, room, resolution_m)
    return stamp_no_pipe_zones(grid, no_pipe_zones)


def _connectivity_warning(grid: RoomGrid) -> Optional[PlanningWarning]:
    regions = routable_regions(grid)
    if len(regions) <= 1:
        return None
    sizes = [len(region) for region in regions]
    return PlanningWarning(
        code=WarningCode.DISCONNECTED_REGIONS,
        message=(
            f"Obstacles split the floor into {len(regions)} separate regions "
            f"(cell counts {sizes})"
        ),
        details={"region_sizes": sizes},
    )


def plan_room(
    room: Room,
    obstacles: Optional[Iterable[RectRegion]] = None,
    passageways: Optional[Iterable[Passageway]] = None,
    no_pipe_zones: Optional[Iterable[RectRegion]] = None,
    options: Optional[GenerationOptions] = None,
    config: Optional[PlannerConfig] = None
) -> RoomPlan:
    """
    Plan the heating pipe layout of one room.

    Args:
        room: Room footprint
        obstacles: Blocked regions in grid cells
        passageways: Wall openings
        no_pipe_zones: Regions to keep free of pipe, in grid cells
        options: Path generation options
        config: Room-level settings (circuit length, pipe diameter)

    Returns:
        RoomPlan with the stamped grid, the generated path, and its circuits

    Raises:
        PlannerError: On invalid dimensions, options, circuit limit, or
            terminal points
    """
    options = options or GenerationOptions()
    config = config or PlannerConfig()
    validate_options(options)
    limit = config.max_circuit_length_m
    if isinstance(limit, bool) or not isinstance(limit, (int, float)) or not limit > 0:
        raise InvalidGenerationOptionsError(
            f"Maximum circuit length must be positive, got {limit}",
            extra={"max_circuit_length_m": limit},
        )

    grid = prepare_grid(
        room, options.grid_resolution_m, obstacles, passageways, no_pipe_zones
    )
    result = generate_path(grid, options)
    warnings: List[PlanningWarning] = list(result.warnings)

    if config.check_connectivity:
        warning = _connectivity_warning(grid)
        if warning is not None:
            logger.warning(warning.message)
            warnings.append(warning)

    if result.total_length_m > limit * (1 + 1e-9):
        warning = PlanningWarning(
            code=WarningCode.EXCEEDS_CIRCUIT_LENGTH,
            message=(
                f"Path of {result.total_length_m:.2f} m exceeds the {limit} m "
                f"circuit limit and was split into zones"
            ),
            details={"total_length_m": result.total_length_m, "limit_m": limit},
        )
        logger.warning(warning.message)
        warnings.append(warning)
        zones = split_path(result.path, limit, grid.resolution_m)
    elif len(result.path) >= 2:
        zones = [Segment(
            points=result.path,
            length_m=calculate_length(result.path, grid.resolution_m),
        )]
    else:
        zones = []

    logger.info(
        f"Planned {room.width_m} x {room.length_m} m room: "
        f"{result.total_length_m:.2f} m of pipe in {len(zones)} circuit(s)"
    )

    return RoomPlan(
        grid=grid,
        result=result,
        zones=tuple(zones),
        pipe_diameter_m=config.pipe_diameter_m,
        warnings=tuple(warnings),
    )


def plan_room_from_dict(data: Dict[str, Any]) -> RoomPlan:
    """
    Plan a room described as plain data.

    Expected keys: "room" ({"width_m", "length_m"}) or "dimensions"
    ("LxW" string); optional "obstacles", "passageways", "no_pipe_zones",
    "options", and "config".

    Raises:
        InvalidInputError: If required fields are missing or malformed
        InvalidGenerationOptionsError: If the algorithm name is unknown
        PlannerError: Anything plan_room raises
    """
    if not isinstance(data, dict):
        raise InvalidInputError(
            f"Room description must be a JSON object, got {type(data).__name__}"
        )

    try:
        if "room" in data:
            room = Room.from_dict(data["room"])
        elif "dimensions" in data:
            room = Room.from_dimensions(data["dimensions"])
        else:
            raise InvalidInputError(
                "Room description needs a \"room\" or \"dimensions\" entry"
            )
        obstacles = [RectRegion.from_dict(o) for o in data.get("obstacles", [])]
        passageways = [Passageway.from_dict(p) for p in data.get("passageways", [])]
        no_pipe_zones = [RectRegion.from_dict(z) for z in data.get("no_pipe_zones", [])]
        config = PlannerConfig.from_dict(data.get("config", {}))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidInputError(
            f"Malformed room description: {e!r}", extra={"reason": str(e)}
        ) from e

    try:
        options = GenerationOptions.from_dict(data.get("options", {}))
    except ValueError as e:
        raise InvalidGenerationOptionsError(
            str(e), extra={"options": data.get("options")}
        ) from e
    except (KeyError, TypeError) as e:
        raise InvalidInputError(
            f"Malformed generation options: {e!r}", extra={"reason": str(e)}
        ) from e

    return plan_room(
        room,
        obstacles=obstacles,
        passageways=passageways,
        no_pipe_zones=no_pipe_zones,
        options=options,
        config=config,
    )
