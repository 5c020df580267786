# File: floor_heating_planner/layout/room_grid.py
"""
Occupancy grid for a heated room.

The room floor is divided into square cells of ``resolution_m`` meters.
Each cell records whether pipe may be routed through it. Grids are
immutable values: the stamping functions return a new grid and never
touch their argument.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.units import meters_to_cells, meters_to_cell_index
from .errors import InvalidDimensionsError

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """State of one grid cell."""
    EMPTY = 0
    OBSTACLE = 1
    PASSAGEWAY = 2
    NO_PIPE_ZONE = 3

    @property
    def is_routable(self) -> bool:
        """Pipe may pass through empty cells and passageways."""
        return self in (CellState.EMPTY, CellState.PASSAGEWAY)


class WallSide(Enum):
    """Room wall a passageway is cut into."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Room:
    """
    Rectangular room footprint.

    Attributes:
        width_m: Extent along X (columns)
        length_m: Extent along Y (rows)
    """
    width_m: float
    length_m: float

    @classmethod
    def from_dimensions(cls, dimensions: str) -> "Room":
        """
        Parse a "LxW" dimension string, e.g. "5x4" (length 5 m, width 4 m).

        Raises:
            InvalidDimensionsError: If the string is not two numbers separated by 'x'
        """
        parts = str(dimensions).lower().replace(" ", "").split("x")
        if len(parts) == 2:
            try:
                length, width = (float(p) for p in parts)
                return cls(width_m=width, length_m=length)
            except ValueError:
                pass
        raise InvalidDimensionsError(
            None,
            None,
            detail=f"Expected dimensions like '5x4', got '{dimensions}'",
            extra={"dimensions": dimensions},
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        """Deserialize from dictionary."""
        return cls(width_m=data["width_m"], length_m=data["length_m"])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {"width_m": self.width_m, "length_m": self.length_m}


@dataclass(frozen=True)
class RectRegion:
    """
    Axis-aligned block of cells (obstacle or no-pipe zone).

    Attributes:
        x: First column
        y: First row
        width: Number of columns
        height: Number of rows
    """
    x: int
    y: int
    width: int
    height: int

    def cells(self) -> Iterable[Tuple[int, int]]:
        """Yield (row, col) for every cell in the region, unclipped."""
        for row in range(self.y, self.y + self.height):
            for col in range(self.x, self.x + self.width):
                yield row, col

    def clipped_cells(self, rows: int, cols: int) -> Iterable[Tuple[int, int]]:
        """Yield (row, col) for the part of the region inside a rows x cols grid."""
        for row in range(max(self.y, 0), min(self.y + self.height, rows)):
            for col in range(max(self.x, 0), min(self.x + self.width, cols)):
                yield row, col

    def contains(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the region."""
        return (
            self.x <= col < self.x + self.width
            and self.y <= row < self.y + self.height
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RectRegion":
        """Deserialize from dictionary."""
        return cls(
            x=int(data["x"]),
            y=int(data["y"]),
            width=int(data["width"]),
            height=int(data["height"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Passageway:
    """
    Opening through a room wall (door, pipe pass-through).

    Attributes:
        side: Wall the opening is on
        position_m: Offset of the opening along the wall from its origin
        width_m: Opening width along the wall
    """
    side: WallSide
    position_m: float
    width_m: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Passageway":
        """Deserialize from dictionary ("position"/"width" keys accepted)."""
        return cls(
            side=WallSide(data["side"]),
            position_m=data.get("position_m", data.get("position", 0.0)),
            width_m=data.get("width_m", data.get("width", 0.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "side": self.side.value,
            "position_m": self.position_m,
            "width_m": self.width_m,
        }


class RoomGrid:
    """
    Immutable occupancy grid.

    Cells are stored in a flat tuple, row-major; ``index(row, col)`` maps
    coordinates into it. Use the module-level stamping functions to derive
    new grids.

    Example:
        >>> grid = build_grid(Room(width_m=2.0, length_m=1.0), 0.5)
        >>> grid.rows, grid.cols
        (2, 4)
        >>> grid = stamp_obstacles(grid, [RectRegion(0, 0, 1, 1)])
        >>> grid.is_routable(0, 0)
        False
    """

    __slots__ = ("_rows", "_cols", "_resolution_m", "_cells")

    def __init__(
        self,
        rows: int,
        cols: int,
        resolution_m: float,
        cells: Optional[Iterable[CellState]] = None
    ):
        """
        Initialize a grid.

        Args:
            rows: Number of rows (Y)
            cols: Number of columns (X)
            resolution_m: Cell size in meters
            cells: Row-major cell states, all EMPTY when omitted
        """
        self._rows = rows
        self._cols = cols
        self._resolution_m = resolution_m
        if cells is None:
            self._cells = (CellState.EMPTY,) * (rows * cols)
        else:
            self._cells = tuple(CellState(c) for c in cells)
            if len(self._cells) != rows * cols:
                raise ValueError(
                    f"Expected {rows * cols} cells, got {len(self._cells)}"
                )

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def resolution_m(self) -> float:
        return self._resolution_m

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._cols

    @property
    def cells(self) -> Tuple[CellState, ...]:
        """Flat row-major cell states."""
        return self._cells

    def index(self, row: int, col: int) -> int:
        """Flat index of (row, col)."""
        return row * self._cols + col

    def position(self, index: int) -> Tuple[int, int]:
        """(row, col) of a flat index."""
        return divmod(index, self._cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def state(self, row: int, col: int) -> CellState:
        """
        State of one cell.

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return self._cells[self.index(row, col)]

    def is_routable(self, row: int, col: int) -> bool:
        """Whether pipe may be placed at (row, col); False when out of bounds."""
        return self.in_bounds(row, col) and self._cells[self.index(row, col)].is_routable

    def count(self, state: CellState) -> int:
        """Number of cells in a given state."""
        return sum(1 for c in self._cells if c == state)

    def routable_cells(self) -> List[Tuple[int, int]]:
        """All routable (row, col) cells in row-major order."""
        return [
            self.position(i) for i, c in enumerate(self._cells) if c.is_routable
        ]

    def with_cells(self, cells: Iterable[CellState]) -> "RoomGrid":
        """New grid of the same shape with different cell states."""
        return RoomGrid(self._rows, self._cols, self._resolution_m, cells)

    def to_rows(self) -> List[List[int]]:
        """Nested [row][col] lists of integer states, for renderers."""
        return [
            [int(c) for c in self._cells[r * self._cols:(r + 1) * self._cols]]
            for r in range(self._rows)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "rows": self._rows,
            "cols": self._cols,
            "resolution_m": self._resolution_m,
            "cells": self.to_rows(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoomGrid":
        """Deserialize from dictionary."""
        flat = [state for row in data["cells"] for state in row]
        return cls(data["rows"], data["cols"], data["resolution_m"], flat)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoomGrid):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._resolution_m == other._resolution_m
            and self._cells == other._cells
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._cols, self._resolution_m, self._cells))

    def __repr__(self) -> str:
        return (
            f"RoomGrid(rows={self._rows}, cols={self._cols}, "
            f"resolution_m={self._resolution_m})"
        )


def build_grid(room: Room, resolution_m: float) -> RoomGrid:
    """
    Create an all-empty grid covering a room.

    Args:
        room: Room footprint in meters
        resolution_m: Cell size in meters

    Returns:
        Grid with ceil(length/res) rows and ceil(width/res) columns

    Raises:
        InvalidDimensionsError: If width, length, or resolution is not a
            positive finite number
    """
    values = (room.width_m, room.length_m, resolution_m)
    if any(not math.isfinite(v) or v <= 0 for v in values):
        raise InvalidDimensionsError(room.width_m, room.length_m, resolution_m)

    rows = meters_to_cells(room.length_m, resolution_m)
    cols = meters_to_cells(room.width_m, resolution_m)
    logger.debug(f"Building {rows}x{cols} grid at {resolution_m} m resolution")
    return RoomGrid(rows, cols, resolution_m)


def _stamp_blocking(
    grid: RoomGrid,
    regions: Iterable[RectRegion],
    state: CellState
) -> RoomGrid:
    cells = list(grid.cells)
    stamped = 0
    for region in regions:
        for row, col in region.clipped_cells(grid.rows, grid.cols):
            index = grid.index(row, col)
            # Passageways stay routable whatever is stamped afterwards
            if cells[index] == CellState.PASSAGEWAY:
                continue
            cells[index] = state
            stamped += 1
    logger.debug(f"Stamped {stamped} {state.name} cells")
    return grid.with_cells(cells)


def stamp_obstacles(grid: RoomGrid, obstacles: Optional[Iterable[RectRegion]]) -> RoomGrid:
    """
    Mark obstacle regions (grid-cell coordinates) as unroutable.

    Parts of a region outside the grid are ignored.

    Returns:
        New grid; the input grid is unchanged
    """
    if not obstacles:
        return grid
    return _stamp_blocking(grid, obstacles, CellState.OBSTACLE)


def stamp_no_pipe_zones(grid: RoomGrid, zones: Optional[Iterable[RectRegion]]) -> RoomGrid:
    """
    Mark no-pipe zones (grid-cell coordinates) as unroutable.

    Passageway cells are left routable.

    Returns:
        New grid; the input grid is unchanged
    """
    if not zones:
        return grid
    return _stamp_blocking(grid, zones, CellState.NO_PIPE_ZONE)


def _passageway_cells(
    passageway: Passageway,
    rows: int,
    cols: int,
    resolution_m: float,
    wall_length_m: Optional[float]
) -> List[Tuple[int, int]]:
    """(row, col) cells covered by a passageway, clipped to the grid."""
    start_m = passageway.position_m
    end_m = passageway.position_m + passageway.width_m
    if wall_length_m is not None:
        end_m = min(end_m, wall_length_m)

    first = meters_to_cell_index(start_m, resolution_m)
    last = meters_to_cell_index(end_m, resolution_m)

    if passageway.side in (WallSide.TOP, WallSide.BOTTOM):
        row = 0 if passageway.side == WallSide.TOP else rows - 1
        return [(row, col) for col in range(max(first, 0), min(last, cols - 1) + 1)]

    col = 0 if passageway.side == WallSide.LEFT else cols - 1
    return [(row, col) for row in range(max(first, 0), min(last, rows - 1) + 1)]


def stamp_passageways(
    grid: RoomGrid,
    passageways: Optional[Iterable[Passageway]],
    room: Optional[Room] = None,
    resolution_m: Optional[float] = None
) -> RoomGrid:
    """
    Mark wall passageways on the border cells of the grid.

    Each passageway covers the inclusive cell range
    floor(position / res) .. floor((position + width) / res) along its wall.
    Passageway cells are always routable, overriding obstacles.

    Args:
        grid: Grid to derive from
        passageways: Openings to stamp
        room: Room footprint; when given, openings are clipped to the wall length
        resolution_m: Cell size, defaults to the grid's resolution

    Returns:
        New grid; the input grid is unchanged
    """
    if not passageways:
        return grid

    resolution = resolution_m if resolution_m is not None else grid.resolution_m
    cells = list(grid.cells)

    for passageway in passageways:
        wall_length = None
        if room is not None:
            wall_length = (
                room.width_m
                if passageway.side in (WallSide.TOP, WallSide.BOTTOM)
                else room.length_m
            )
        covered = _passageway_cells(
            passageway, grid.rows, grid.cols, resolution, wall_length
        )
        for row, col in covered:
            cells[grid.index(row, col)] = CellState.PASSAGEWAY
        logger.debug(
            f"Passageway on {passageway.side.value} wall covers {len(covered)} cells"
        )

    return grid.with_cells(cells)
