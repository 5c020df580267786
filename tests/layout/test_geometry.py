# File: tests/layout/test_geometry.py
"""Tests for point helpers and drawing command serialization."""

import pytest

from floor_heating_planner.layout import Point, path_to_draw_commands
from floor_heating_planner.layout.geometry import (
    are_adjacent,
    as_point,
    distance,
    edge_lengths,
    interpolate,
    is_grid_aligned,
)


class TestPointHelpers:
    """Tests for the small geometry helpers."""

    def test_as_point_accepts_mapping_and_sequence(self):
        """Tuples, lists, and {"x", "y"} dicts coerce to Point."""
        assert as_point((1, 2)) == Point(1, 2)
        assert as_point([3, 4]) == Point(3, 4)
        assert as_point({"x": 5, "y": 6}) == Point(5, 6)

    def test_cell_is_row_col(self):
        """Point.cell swaps to (row, col)."""
        assert Point(3, 7).cell == (7, 3)

    def test_distance(self):
        assert distance((0, 0), (3, 4)) == pytest.approx(5.0)

    def test_interpolate(self):
        """Interpolated point lies on the segment."""
        assert interpolate((0, 0), (10, 0), 0.25) == Point(2.5, 0.0)

    def test_grid_alignment(self):
        assert is_grid_aligned(Point(3.0, 4.0))
        assert not is_grid_aligned(Point(3.5, 4.0))

    def test_adjacency(self):
        """Only cardinal unit steps are adjacent."""
        assert are_adjacent((0, 0), (1, 0))
        assert are_adjacent((2, 3), (2, 2))
        assert not are_adjacent((0, 0), (1, 1))
        assert not are_adjacent((0, 0), (2, 0))

    def test_edge_lengths_scaled(self):
        lengths = edge_lengths([(0, 0), (0, 2), (3, 2)], scale=0.5)
        assert lengths == pytest.approx([1.0, 1.5])


class TestDrawCommands:
    """Tests for path_to_draw_commands."""

    def test_empty_path(self):
        """An empty path gives an empty string."""
        assert path_to_draw_commands([]) == ""

    def test_single_point(self):
        assert path_to_draw_commands([Point(1, 2)]) == "M 1 2"

    def test_move_then_lines(self):
        """First vertex is a move, the rest are lines."""
        commands = path_to_draw_commands([(0, 0), (1, 0), (1, 1)])
        assert commands == "M 0 0 L 1 0 L 1 1"

    def test_scale_applied(self):
        """Coordinates are multiplied by the scale."""
        commands = path_to_draw_commands([(0, 0), (2, 1)], scale=10)
        assert commands == "M 0 0 L 20 10"

    def test_fractional_coordinates(self):
        """Trailing zeros are trimmed from fractional values."""
        commands = path_to_draw_commands([(0.5, 1.25)])
        assert commands == "M 0.5 1.25"
