# File: floor_heating_planner/layout/path_generator.py
"""
Space-filling pipe path generation.

Produces an ordered sequence of grid points covering a room's routable
cells with one of three strategies:

- BOUSTROPHEDON: row sweep alternating direction every loop spacing
- SINGLE_SPIRAL: inward rectangular spiral
- DOUBLE_SPIRAL: supply and return spirals interleaved for counterflow

Every strategy is expressed as a stream of candidate cells. A shared path
builder accepts or rejects each candidate (out of bounds, blocked, or
already visited) and enforces the maximum pipe length, cutting the final
edge at the exact remaining length when the cap is reached.
"""

import logging
import math
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from ..config.heating import GenerationOptions, PathAlgorithm
from .errors import (
    InvalidEndPointError,
    InvalidGenerationOptionsError,
    InvalidStartPointError,
    OutOfBoundsError,
)
from .geometry import Point, PointLike, are_adjacent, distance, interpolate
from .planning_result import PathResult, PlanningWarning, WarningCode
from .reconnector import search_free_cells
from .reporting import calculate_length, estimate_elbows
from .room_grid import RoomGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# =============================================================================
# Lap stepping
# =============================================================================

def _lap_cells(
    top: int, bottom: int, left: int, right: int, up_stop: int
) -> Iterator[Cell]:
    """One rectangular lap: right along top, down, left along bottom, up."""
    for col in range(left, right + 1):
        yield (top, col)
    for row in range(top + 1, bottom + 1):
        yield (row, right)
    if bottom > top:
        for col in range(right - 1, left - 1, -1):
            yield (bottom, col)
    if right > left:
        for row in range(bottom - 1, up_stop - 1, -1):
            yield (row, left)


def spiral_laps(
    rows: int, cols: int, lap_spacing: int, inset: int = 0
) -> List[List[Cell]]:
    """
    Laps of an inward rectangular spiral.

    Boundaries start ``inset`` cells in from each edge and move inward by
    ``lap_spacing`` after every lap until they cross. The up-run of a lap
    stops at the next lap's top row, so the turn into the next lap keeps the
    spacing.

    Args:
        rows: Grid rows
        cols: Grid columns
        lap_spacing: Cells between consecutive laps
        inset: Initial distance of the boundaries from the grid edge

    Returns:
        (row, col) cells of each lap, outermost first
    """
    laps = []
    top, left = inset, inset
    bottom, right = rows - 1 - inset, cols - 1 - inset

    while top <= bottom and left <= right:
        next_top, next_bottom = top + lap_spacing, bottom - lap_spacing
        next_left, next_right = left + lap_spacing, right - lap_spacing
        has_next = next_top <= next_bottom and next_left <= next_right
        up_stop = next_top if has_next else top + 1

        laps.append(list(_lap_cells(top, bottom, left, right, up_stop)))
        top, bottom, left, right = next_top, next_bottom, next_left, next_right

    return laps


def _flatten(laps: Sequence[Sequence[Cell]]) -> List[Cell]:
    return [cell for lap in laps for cell in lap]


# =============================================================================
# Strategies (canonical orientation: start at the top-left corner)
# =============================================================================

def boustrophedon_cells(rows: int, cols: int, loop_spacing: int) -> List[Cell]:
    """Rows 0, s, 2s, ... swept left-to-right then right-to-left."""
    cells = []
    for sweep, row in enumerate(range(0, rows, loop_spacing)):
        columns = range(cols) if sweep % 2 == 0 else range(cols - 1, -1, -1)
        cells.extend((row, col) for col in columns)
    return cells


def single_spiral_cells(rows: int, cols: int, loop_spacing: int) -> List[Cell]:
    """Inward spiral with laps ``loop_spacing`` apart."""
    return _flatten(spiral_laps(rows, cols, loop_spacing))


def double_spiral_cells(rows: int, cols: int, loop_spacing: int) -> List[Cell]:
    """
    Supply and return spirals interleaved point by point.

    Each spiral steps laps ``2 * loop_spacing`` apart. The return spiral is
    inset by half that lap spacing so its runs fall between the supply
    runs, then reversed so it flows outward, and the two sequences are
    alternated.
    """
    lap_spacing = 2 * loop_spacing
    supply = _flatten(spiral_laps(rows, cols, lap_spacing))
    returning = _flatten(spiral_laps(rows, cols, lap_spacing, inset=lap_spacing // 2))
    returning.reverse()

    cells = []
    for i in range(max(len(supply), len(returning))):
        if i < len(supply):
            cells.append(supply[i])
        if i < len(returning):
            cells.append(returning[i])
    return cells


STRATEGIES: Dict[PathAlgorithm, Callable[[int, int, int], List[Cell]]] = {
    PathAlgorithm.BOUSTROPHEDON: boustrophedon_cells,
    PathAlgorithm.SINGLE_SPIRAL: single_spiral_cells,
    PathAlgorithm.DOUBLE_SPIRAL: double_spiral_cells,
}


def minimum_extent(algorithm: PathAlgorithm, loop_spacing: int) -> int:
    """Smallest row/column count that fits one spacing unit for a strategy."""
    if algorithm == PathAlgorithm.DOUBLE_SPIRAL:
        return 2 * loop_spacing + 1
    return loop_spacing + 1


def traversal_cells(
    rows: int,
    cols: int,
    algorithm: PathAlgorithm,
    loop_spacing: int,
    start: Optional[Cell] = None
) -> List[Cell]:
    """
    Candidate cells for a strategy, mirrored toward a start cell.

    The canonical traversal begins at the top-left corner. When ``start``
    is given, the traversal is flipped vertically and/or horizontally so it
    begins at the corner nearest the start.

    Returns:
        (row, col) candidates in visiting order, not filtered for obstacles
    """
    cells = STRATEGIES[algorithm](rows, cols, loop_spacing)
    if start is None:
        return cells

    flip_rows = start[0] > (rows - 1) / 2
    flip_cols = start[1] > (cols - 1) / 2
    if not (flip_rows or flip_cols):
        return cells

    return [
        (rows - 1 - row if flip_rows else row, cols - 1 - col if flip_cols else col)
        for row, col in cells
    ]


# =============================================================================
# Path builder
# =============================================================================

class _PathBuilder:
    """
    Accumulates accepted points and enforces the length cap.

    Rejects candidates that are out of bounds, unroutable, or already
    visited. Once appending would exceed the cap the builder halts. When
    the rejected edge is a single cardinal step, a final point is placed at
    the remaining length along it; an edge that jumps over skipped cells
    is not cut, so the path stops short of the cap.
    """

    def __init__(self, grid: RoomGrid, max_length_m: Optional[float]):
        self.grid = grid
        self.visited = bytearray(grid.size)
        self.points: List[Point] = []
        self.length_m = 0.0
        self.max_length_m = math.inf if max_length_m is None else max_length_m
        self.halted = False
        self._tolerance = 1e-9
        if not math.isinf(self.max_length_m):
            self._tolerance *= max(1.0, self.max_length_m)

    def is_free(self, row: int, col: int) -> bool:
        return (
            self.grid.is_routable(row, col)
            and not self.visited[self.grid.index(row, col)]
        )

    def reserve(self, cell: Cell) -> None:
        self.visited[self.grid.index(*cell)] = 1

    def release(self, cell: Cell) -> None:
        self.visited[self.grid.index(*cell)] = 0

    def offer(self, cell: Cell) -> bool:
        """Append a traversal candidate if it is free and within the cap."""
        if self.halted or not self.is_free(*cell):
            return False
        return self.force(cell)

    def force(self, cell: Cell) -> bool:
        """Append a cell without the visited check, still honouring the cap."""
        if self.halted:
            return False

        point = Point(cell[1], cell[0])
        if self.points:
            last = self.points[-1]
            edge_m = distance(last, point) * self.grid.resolution_m
            if self.length_m + edge_m > self.max_length_m + self._tolerance:
                remaining = self.max_length_m - self.length_m
                # Only a single cardinal step is known to lie on routable cells
                if remaining > self._tolerance and are_adjacent(last, point):
                    self.points.append(interpolate(last, point, remaining / edge_m))
                    self.length_m = self.max_length_m
                self.halted = True
                return False
            self.length_m += edge_m

        self.points.append(point)
        self.visited[self.grid.index(*cell)] = 1
        return True

    @property
    def last_cell(self) -> Optional[Cell]:
        if not self.points:
            return None
        last = self.points[-1]
        return (int(last.y), int(last.x))


# =============================================================================
# Public API
# =============================================================================

def validate_options(options: GenerationOptions) -> None:
    """
    Check generation options before any grid work.

    Raises:
        InvalidGenerationOptionsError: Bad loop spacing, length cap, or algorithm
    """
    spacing = options.loop_spacing_units
    if isinstance(spacing, bool) or not isinstance(spacing, int) or spacing < 1:
        raise InvalidGenerationOptionsError(
            f"Loop spacing must be a positive whole number of grid units, got {spacing}",
            extra={"loop_spacing_units": spacing},
        )
    if options.max_pipe_length_m is not None and options.max_pipe_length_m <= 0:
        raise InvalidGenerationOptionsError(
            f"Maximum pipe length must be positive, got {options.max_pipe_length_m}",
            extra={"max_pipe_length_m": options.max_pipe_length_m},
        )
    if options.algorithm not in STRATEGIES:
        raise InvalidGenerationOptionsError(
            f"Unsupported algorithm: {options.algorithm}",
            extra={"algorithm": str(options.algorithm)},
        )


def _validate_point(grid: RoomGrid, point: PointLike, role: str) -> Cell:
    """Check a (col, row) terminal point and return its (row, col) cell."""
    x, y = point[0], point[1]
    if not (0 <= x < grid.cols and 0 <= y < grid.rows):
        raise OutOfBoundsError(role, (x, y), grid.rows, grid.cols)

    cell = (int(math.floor(y)), int(math.floor(x)))
    if not grid.is_routable(*cell):
        state = grid.state(*cell).name.lower()
        if role == "start":
            raise InvalidStartPointError((x, y), state)
        raise InvalidEndPointError((x, y), state)
    return cell


def _lead_in(builder: _PathBuilder, start: Cell, candidates: Sequence[Cell]) -> None:
    """Join the start cell to the first free traversal cell if they are apart."""
    first = next((c for c in candidates if builder.is_free(*c)), None)
    if first is None or are_adjacent((start[1], start[0]), (first[1], first[0])):
        return

    connection = search_free_cells(builder.grid, start, first, builder.visited)
    if not connection.connected:
        return
    for point in connection.chain[1:-1]:
        builder.offer((int(point.y), int(point.x)))


def generate_path(grid: RoomGrid, options: Optional[GenerationOptions] = None) -> PathResult:
    """
    Generate a heating pipe path over a grid.

    The grid already fixes the cell size, so lengths are measured with
    ``grid.resolution_m``; ``options.grid_resolution_m`` only matters when
    building the grid (see plan_room) and is ignored here.

    Args:
        grid: Stamped occupancy grid
        options: Generation options, defaults when omitted

    Returns:
        PathResult with the path in grid units, its length in meters,
        elbow estimate, and any recoverable warnings. A room too small for
        one loop spacing yields an empty result.

    Raises:
        InvalidGenerationOptionsError: Bad loop spacing or length cap
        OutOfBoundsError: Start or end point outside the grid
        InvalidStartPointError: Start point on an unroutable cell
        InvalidEndPointError: End point on an unroutable cell
    """
    options = options or GenerationOptions()
    validate_options(options)

    start = (
        _validate_point(grid, options.start_point, "start")
        if options.start_point is not None else None
    )
    end = (
        _validate_point(grid, options.end_point, "end")
        if options.end_point is not None else None
    )

    algorithm = options.algorithm
    spacing = options.loop_spacing_units
    resolution = grid.resolution_m
    requested = options.grid_resolution_m
    if isinstance(requested, (int, float)) and abs(requested - resolution) > 1e-12:
        logger.debug(
            f"Options resolution {requested} m differs from the "
            f"grid's {resolution} m; using the grid resolution"
        )

    if min(grid.rows, grid.cols) < minimum_extent(algorithm, spacing):
        logger.debug(
            f"{grid.rows}x{grid.cols} grid too small for spacing {spacing} "
            f"with {algorithm.value}"
        )
        return PathResult(resolution_m=resolution, algorithm=algorithm)

    builder = _PathBuilder(grid, options.max_pipe_length_m)
    if end is not None and end != start:
        builder.reserve(end)

    candidates = traversal_cells(grid.rows, grid.cols, algorithm, spacing, start)

    if start is not None:
        builder.offer(start)
        _lead_in(builder, start, candidates)

    for cell in candidates:
        builder.offer(cell)
        if builder.halted:
            break

    warnings: List[PlanningWarning] = []
    reconnected: Optional[bool] = None

    target = end
    if target is None and options.close_loop:
        if start is not None:
            target = start
        elif builder.points:
            first = builder.points[0]
            target = (int(first.y), int(first.x))

    if target is not None:
        reconnected, warning = _reconnect(builder, target, end)
        if warning is not None:
            warnings.append(warning)

    path = tuple(builder.points)
    total_length = calculate_length(path, resolution)
    if builder.halted:
        total_length = min(total_length, builder.max_length_m)

    for warning in warnings:
        logger.warning(warning.message)

    logger.debug(
        f"Generated {algorithm.value} path: {len(path)} points, "
        f"{total_length:.2f} m, truncated={builder.halted}"
    )

    return PathResult(
        path=path,
        total_length_m=total_length,
        elbow_estimate=estimate_elbows(path),
        resolution_m=resolution,
        algorithm=algorithm,
        truncated=builder.halted,
        reconnected=reconnected,
        warnings=tuple(warnings),
    )


def _reconnect(
    builder: _PathBuilder,
    target: Cell,
    reserved_end: Optional[Cell]
) -> Tuple[bool, Optional[PlanningWarning]]:
    """Run the reconnection stage; returns (connected, warning or None)."""
    target_point = (target[1], target[0])

    def failure(reason: str, visited_count: int = 0) -> Tuple[bool, PlanningWarning]:
        return False, PlanningWarning(
            code=WarningCode.RECONNECTION_FAILED,
            message=f"Could not connect path to {target_point}: {reason}",
            details={"target": list(target_point), "reason": reason,
                     "visited_count": visited_count},
        )

    if builder.halted:
        return failure("length cap reached before reconnection")

    source = builder.last_cell
    if source is None:
        return failure("no routable cells to start from")
    if source == target:
        return True, None

    if reserved_end is not None:
        builder.release(reserved_end)

    connection = search_free_cells(builder.grid, source, target, builder.visited)
    if not connection.connected:
        return failure(connection.reason, connection.visited_count)

    for point in connection.chain[1:]:
        if not builder.force((int(point.y), int(point.x))):
            return failure("length cap reached during reconnection",
                           connection.visited_count)

    logger.debug(
        f"Reconnected to {target_point} with {len(connection.chain) - 1} cells"
    )
    return True, None
