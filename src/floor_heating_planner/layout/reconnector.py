# File: floor_heating_planner/layout/reconnector.py
"""
Breadth-first reconnection for generated paths.

The traversal strategies step geometrically and rarely finish on the
manifold return point. The reconnector searches the free cells (routable
and not yet used by the path) for the shortest cardinal chain from the
path's open end to the required point.

Search bookkeeping uses dense arrays sized to the grid, indexed by the
grid's flat cell index.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .geometry import Point, PointLike, is_grid_aligned
from .room_grid import RoomGrid

logger = logging.getLogger(__name__)

# (d_row, d_col): up, right, down, left
CARDINAL_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Cell = Tuple[int, int]


@dataclass(frozen=True)
class ReconnectionResult:
    """
    Outcome of a reconnection search.

    Attributes:
        chain: Points from source to target inclusive, empty when not found
        connected: Whether the target was reached
        visited_count: Number of cells expanded during the search
        reason: Why no connection was found, empty on success
    """
    chain: Tuple[Point, ...] = ()
    connected: bool = False
    visited_count: int = 0
    reason: str = ""


def _cell_of(point: PointLike) -> Cell:
    return (int(round(point[1])), int(round(point[0])))


def find_connection(
    grid: RoomGrid,
    source: Cell,
    target: Cell,
    blocked_cells: Optional[Iterable[Cell]] = None
) -> ReconnectionResult:
    """
    Shortest 4-connected chain between two cells.

    Args:
        grid: Occupancy grid
        source: (row, col) the chain starts from
        target: (row, col) the chain must reach; allowed even if blocked
        blocked_cells: (row, col) cells the chain may not enter

    Returns:
        ReconnectionResult; ``chain`` includes both source and target
    """
    blocked = bytearray(grid.size)
    for row, col in blocked_cells or ():
        if grid.in_bounds(row, col):
            blocked[grid.index(row, col)] = 1
    return search_free_cells(grid, source, target, blocked)


def search_free_cells(
    grid: RoomGrid,
    source: Cell,
    target: Cell,
    blocked: bytearray
) -> ReconnectionResult:
    """
    Breadth-first search over a dense blocked-cell mask.

    Args:
        grid: Occupancy grid
        source: (row, col) start cell
        target: (row, col) goal cell, reachable even if marked in ``blocked``
        blocked: One byte per grid cell, non-zero for cells to avoid;
            not modified

    Returns:
        ReconnectionResult; ``chain`` includes both source and target
    """
    if not grid.in_bounds(*source) or not grid.in_bounds(*target):
        return ReconnectionResult(reason="source or target outside grid")
    if not grid.is_routable(*target):
        return ReconnectionResult(reason="target cell is not routable")

    src = grid.index(*source)
    dst = grid.index(*target)
    if src == dst:
        return ReconnectionResult(
            chain=(Point(source[1], source[0]),), connected=True, visited_count=1
        )

    cells = grid.cells
    cols = grid.cols
    visited = bytearray(blocked)
    parent = [-1] * grid.size
    visited[src] = 1
    visited[dst] = 0

    queue = deque([src])
    visited_count = 0

    while queue:
        current = queue.popleft()
        visited_count += 1
        row, col = divmod(current, cols)

        for d_row, d_col in CARDINAL_STEPS:
            n_row, n_col = row + d_row, col + d_col
            if not grid.in_bounds(n_row, n_col):
                continue
            neighbor = n_row * cols + n_col
            if visited[neighbor] or not cells[neighbor].is_routable:
                continue
            visited[neighbor] = 1
            parent[neighbor] = current

            if neighbor == dst:
                chain = [dst]
                while chain[-1] != src:
                    chain.append(parent[chain[-1]])
                chain.reverse()
                return ReconnectionResult(
                    chain=tuple(
                        Point(index % cols, index // cols) for index in chain
                    ),
                    connected=True,
                    visited_count=visited_count,
                )

            queue.append(neighbor)

    logger.debug(
        f"No connection from {source} to {target} "
        f"(visited {visited_count} cells)"
    )
    return ReconnectionResult(
        visited_count=visited_count,
        reason="search space exhausted",
    )


def reconnect(
    grid: RoomGrid,
    path: Sequence[PointLike],
    target: PointLike
) -> ReconnectionResult:
    """
    Connect the open end of a path to a target point.

    Cells already on the path are avoided, except the target itself so a
    loop can be closed back onto its start.

    Args:
        grid: Occupancy grid the path was generated on
        path: Grid-unit path; its last point is the search source
        target: (col, row) point to reach

    Returns:
        ReconnectionResult whose chain starts at the path's last point
    """
    if not path:
        return ReconnectionResult(reason="path is empty")
    if not is_grid_aligned(path[-1]):
        return ReconnectionResult(reason="path does not end on a grid cell")

    blocked = [_cell_of(p) for p in path if is_grid_aligned(p)]
    return find_connection(grid, _cell_of(path[-1]), _cell_of(target), blocked)
