# File: floor_heating_planner/layout/__init__.py
"""
Heating Layout Module

Path-generation and geometry engine for radiant floor heating.

Components:
- RoomGrid: Immutable occupancy grid with obstacle/passageway/zone stamping
- Path generation: Boustrophedon, single spiral, and double spiral strategies
- Reconnector: Breadth-first search joining the path to a manifold point
- Zone splitter: Cuts over-length paths into installable circuits
- Reporting: Pipe length and elbow estimates
- Connectivity: Routable-region analysis on a networkx cell graph
- Continuous spiral and manifold feed lines in meter coordinates
"""

from .errors import (
    PlannerError,
    InvalidDimensionsError,
    OutOfBoundsError,
    InvalidStartPointError,
    InvalidEndPointError,
    InvalidGenerationOptionsError,
    InvalidInputError,
)
from .geometry import (
    Point,
    as_point,
    distance,
    manhattan_distance,
    interpolate,
    is_grid_aligned,
    path_to_draw_commands,
)
from .room_grid import (
    CellState,
    WallSide,
    Room,
    RectRegion,
    Passageway,
    RoomGrid,
    build_grid,
    stamp_obstacles,
    stamp_passageways,
    stamp_no_pipe_zones,
)
from .reporting import (
    LengthReport,
    calculate_length,
    estimate_elbows,
    count_direction_changes,
    summarize,
)
from .zone_splitter import Segment, split_path
from .planning_result import (
    WarningCode,
    PlanningWarning,
    PathResult,
    RoomPlan,
)
from .reconnector import (
    ReconnectionResult,
    find_connection,
    reconnect,
)
from .path_generator import (
    generate_path,
    traversal_cells,
    spiral_laps,
    validate_options,
)
from .connectivity import build_cell_graph, routable_regions
from .planner import prepare_grid, plan_room, plan_room_from_dict
from .continuous_spiral import (
    ContinuousSpiral,
    generate_continuous_spiral,
    plan_continuous_spiral,
)
from .manifold_feeds import (
    PlacedRoom,
    FeedRun,
    FeedLayout,
    split_run,
    route_feed_lines,
)

__all__ = [
    # Errors
    "PlannerError",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "InvalidStartPointError",
    "InvalidEndPointError",
    "InvalidGenerationOptionsError",
    "InvalidInputError",
    # Geometry
    "Point",
    "as_point",
    "distance",
    "manhattan_distance",
    "interpolate",
    "is_grid_aligned",
    "path_to_draw_commands",
    # Grid
    "CellState",
    "WallSide",
    "Room",
    "RectRegion",
    "Passageway",
    "RoomGrid",
    "build_grid",
    "stamp_obstacles",
    "stamp_passageways",
    "stamp_no_pipe_zones",
    # Reporting
    "LengthReport",
    "calculate_length",
    "estimate_elbows",
    "count_direction_changes",
    "summarize",
    # Zones
    "Segment",
    "split_path",
    # Results
    "WarningCode",
    "PlanningWarning",
    "PathResult",
    "RoomPlan",
    # Reconnection
    "ReconnectionResult",
    "find_connection",
    "reconnect",
    # Path generation
    "generate_path",
    "traversal_cells",
    "spiral_laps",
    "validate_options",
    # Connectivity
    "build_cell_graph",
    "routable_regions",
    # Planner
    "prepare_grid",
    "plan_room",
    "plan_room_from_dict",
    # Continuous spiral
    "ContinuousSpiral",
    "generate_continuous_spiral",
    "plan_continuous_spiral",
    # Manifold feeds
    "PlacedRoom",
    "FeedRun",
    "FeedLayout",
    "split_run",
    "route_feed_lines",
]
