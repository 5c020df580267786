# File: tests/layout/test_room_grid.py
"""Tests for the occupancy grid and stamping functions."""

import pytest

from floor_heating_planner.layout import (
    CellState,
    InvalidDimensionsError,
    Passageway,
    RectRegion,
    Room,
    RoomGrid,
    WallSide,
    build_grid,
    stamp_no_pipe_zones,
    stamp_obstacles,
    stamp_passageways,
)


class TestRoom:
    """Tests for the Room footprint."""

    def test_from_dimensions(self):
        """Test parsing the "LxW" dimension string."""
        room = Room.from_dimensions("5x4")
        assert room.length_m == 5.0
        assert room.width_m == 4.0

    @pytest.mark.parametrize("text", ["5by4", "5x", "axb", "1x2x3"])
    def test_from_dimensions_invalid(self, text):
        """Test that malformed dimension strings raise InvalidDimensionsError."""
        with pytest.raises(InvalidDimensionsError) as exc_info:
            Room.from_dimensions(text)
        assert exc_info.value.extra["dimensions"] == text

    def test_serialization(self):
        """Test to_dict and from_dict."""
        room = Room(width_m=3.5, length_m=2.0)
        assert Room.from_dict(room.to_dict()) == room


class TestBuildGrid:
    """Tests for build_grid."""

    def test_dimensions(self):
        """Rows follow length, columns follow width."""
        grid = build_grid(Room(width_m=2.0, length_m=1.0), 0.5)
        assert grid.rows == 2
        assert grid.cols == 4
        assert grid.resolution_m == 0.5

    def test_all_cells_empty(self, small_grid):
        """A fresh grid is entirely empty."""
        assert small_grid.count(CellState.EMPTY) == small_grid.size == 100

    def test_ceil_tolerates_float_noise(self):
        """3 / 0.1 must give 30 cells, not 31."""
        grid = build_grid(Room(width_m=3.0, length_m=0.7), 0.1)
        assert grid.cols == 30
        assert grid.rows == 7

    def test_partial_cells_round_up(self):
        """A partial cell still gets a cell."""
        grid = build_grid(Room(width_m=1.05, length_m=1.0), 0.1)
        assert grid.cols == 11

    @pytest.mark.parametrize("width,length,resolution", [
        (0, 1, 0.1),
        (1, -2, 0.1),
        (1, 1, 0),
        (1, 1, -0.1),
    ])
    def test_invalid_dimensions(self, width, length, resolution):
        """Non-positive inputs raise InvalidDimensionsError."""
        with pytest.raises(InvalidDimensionsError) as exc_info:
            build_grid(Room(width_m=width, length_m=length), resolution)
        assert exc_info.value.code == "invalid_dimensions"
        assert exc_info.value.to_dict()["extra"]["resolution_m"] == resolution

    @pytest.mark.parametrize("width,length,resolution", [
        (float("nan"), 1.0, 0.1),
        (1.0, float("inf"), 0.1),
        (1.0, 1.0, float("nan")),
        (1.0, 1.0, float("inf")),
    ])
    def test_non_finite_dimensions(self, width, length, resolution):
        """NaN and infinite inputs raise InvalidDimensionsError."""
        with pytest.raises(InvalidDimensionsError):
            build_grid(Room(width_m=width, length_m=length), resolution)


class TestRoomGrid:
    """Tests for RoomGrid accessors."""

    def test_flat_indexing(self):
        """Row-major flat indexing round-trips with position()."""
        grid = RoomGrid(3, 4, 1.0)
        assert grid.index(2, 1) == 9
        assert grid.position(9) == (2, 1)

    def test_state_out_of_bounds(self, small_grid):
        """state() raises outside the grid."""
        with pytest.raises(IndexError):
            small_grid.state(10, 0)

    def test_is_routable_out_of_bounds(self, small_grid):
        """is_routable() is False outside the grid."""
        assert small_grid.is_routable(-1, 0) is False
        assert small_grid.is_routable(0, 10) is False

    def test_wrong_cell_count(self):
        """Cell list length must match the shape."""
        with pytest.raises(ValueError):
            RoomGrid(2, 2, 1.0, [CellState.EMPTY] * 3)

    def test_to_rows_and_back(self):
        """to_dict/from_dict preserve states."""
        grid = stamp_obstacles(RoomGrid(2, 3, 0.5), [RectRegion(1, 0, 1, 2)])
        assert grid.to_rows() == [[0, 1, 0], [0, 1, 0]]
        assert RoomGrid.from_dict(grid.to_dict()) == grid


class TestStampObstacles:
    """Tests for obstacle stamping."""

    def test_marks_region(self, small_grid):
        """Cells inside the region become obstacles."""
        grid = stamp_obstacles(small_grid, [RectRegion(x=2, y=3, width=2, height=1)])
        assert grid.state(3, 2) == CellState.OBSTACLE
        assert grid.state(3, 3) == CellState.OBSTACLE
        assert grid.state(3, 4) == CellState.EMPTY
        assert grid.count(CellState.OBSTACLE) == 2

    def test_copy_on_write(self, small_grid):
        """The input grid is never modified."""
        stamp_obstacles(small_grid, [RectRegion(0, 0, 5, 5)])
        assert small_grid.count(CellState.OBSTACLE) == 0

    def test_clipped_silently(self, small_grid):
        """Regions hanging off the grid are clipped."""
        grid = stamp_obstacles(small_grid, [RectRegion(x=8, y=-2, width=5, height=4)])
        assert grid.count(CellState.OBSTACLE) == 2 * 2

    def test_huge_region_is_clipped(self, small_grid):
        """A region far larger than the grid covers it without walking every cell."""
        huge = RectRegion(x=-10**6, y=-10**6, width=2 * 10**6, height=2 * 10**6)
        grid = stamp_obstacles(small_grid, [huge])
        assert grid.count(CellState.OBSTACLE) == small_grid.size

    def test_region_entirely_outside(self, small_grid):
        grid = stamp_obstacles(small_grid, [RectRegion(x=20, y=-5, width=3, height=3)])
        assert grid.count(CellState.OBSTACLE) == 0

    def test_no_obstacles_returns_same_grid(self, small_grid):
        """Empty input is a no-op."""
        assert stamp_obstacles(small_grid, []) is small_grid
        assert stamp_obstacles(small_grid, None) is small_grid


class TestStampPassageways:
    """Tests for passageway stamping."""

    def test_top_wall_range(self, small_grid):
        """Passageway covers floor(pos/res)..floor((pos+width)/res) on row 0."""
        grid = stamp_passageways(
            small_grid, [Passageway(WallSide.TOP, position_m=0.2, width_m=0.3)]
        )
        marked = [c for c in range(10) if grid.state(0, c) == CellState.PASSAGEWAY]
        assert marked == [2, 3, 4, 5]

    def test_right_wall(self, small_grid):
        """Right-wall passageways run along the last column."""
        grid = stamp_passageways(
            small_grid, [Passageway(WallSide.RIGHT, position_m=0.0, width_m=0.1)]
        )
        assert grid.state(0, 9) == CellState.PASSAGEWAY
        assert grid.state(1, 9) == CellState.PASSAGEWAY
        assert grid.count(CellState.PASSAGEWAY) == 2

    def test_overrides_obstacle(self, small_room, small_grid):
        """A passageway punches through an obstacle on the border."""
        grid = stamp_obstacles(small_grid, [RectRegion(0, 9, 10, 1)])
        grid = stamp_passageways(
            grid, [Passageway(WallSide.BOTTOM, 0.4, 0.1)], small_room, 0.1
        )
        assert grid.state(9, 4) == CellState.PASSAGEWAY
        assert grid.is_routable(9, 4)
        assert not grid.is_routable(9, 3)

    def test_clipped_to_wall(self, small_room, small_grid):
        """Openings running past the wall end are clipped."""
        grid = stamp_passageways(
            small_grid, [Passageway(WallSide.LEFT, 0.8, 2.0)], small_room, 0.1
        )
        assert grid.count(CellState.PASSAGEWAY) == 2

    def test_from_dict_accepts_short_keys(self):
        """Plain data may use "position"/"width"."""
        passage = Passageway.from_dict({"side": "top", "position": 1.0, "width": 0.8})
        assert passage == Passageway(WallSide.TOP, 1.0, 0.8)


class TestRectRegion:
    """Tests for RectRegion cell iteration."""

    def test_clipped_cells(self):
        region = RectRegion(x=-1, y=1, width=3, height=5)
        assert list(region.clipped_cells(3, 4)) == [(1, 0), (1, 1), (2, 0), (2, 1)]

    def test_huge_region_zone_clipped(self, small_grid):
        huge = RectRegion(x=0, y=0, width=10**9, height=10**9)
        grid = stamp_no_pipe_zones(small_grid, [huge])
        assert grid.count(CellState.NO_PIPE_ZONE) == 100


class TestStampNoPipeZones:
    """Tests for no-pipe zone stamping and precedence."""

    def test_marks_region(self, small_grid):
        """Zone cells become NO_PIPE_ZONE and unroutable."""
        grid = stamp_no_pipe_zones(small_grid, [RectRegion(1, 1, 2, 2)])
        assert grid.count(CellState.NO_PIPE_ZONE) == 4
        assert not grid.is_routable(1, 1)

    def test_passageway_stays_routable(self, small_grid):
        """A later no-pipe zone does not re-block a passageway."""
        grid = stamp_passageways(small_grid, [Passageway(WallSide.TOP, 0.0, 0.2)])
        grid = stamp_no_pipe_zones(grid, [RectRegion(0, 0, 10, 2)])
        assert grid.state(0, 0) == CellState.PASSAGEWAY
        assert grid.is_routable(0, 2)
        assert not grid.is_routable(0, 3)

    def test_later_obstacle_does_not_block_passageway(self, small_grid):
        """Passageways stay routable regardless of stamping order."""
        grid = stamp_passageways(small_grid, [Passageway(WallSide.TOP, 0.0, 0.0)])
        grid = stamp_obstacles(grid, [RectRegion(0, 0, 1, 1)])
        assert grid.is_routable(0, 0)
