# File: tests/layout/test_zone_splitter.py
"""Tests for splitting over-length paths into circuits."""

import pytest

from floor_heating_planner.layout import Point, Segment, calculate_length, split_path


class TestSplitPath:
    """Tests for split_path."""

    def test_long_straight_run(self):
        """27 m run with a 10 m limit gives 10, 10, 7."""
        segments = split_path([(0, 0), (270, 0)], 10.0, 0.1)
        lengths = [s.length_m for s in segments]
        assert lengths == pytest.approx([10.0, 10.0, 7.0])
        assert segments[0].end.x == pytest.approx(100.0)
        assert segments[1].end.x == pytest.approx(200.0)

    def test_segments_are_contiguous(self):
        """Each segment starts where the previous one ended."""
        path = [(0, 0), (0, 30), (30, 30), (30, 0)]
        segments = split_path(path, 2.5, 0.1)
        for previous, current in zip(segments, segments[1:]):
            assert current.start == previous.end
        assert segments[0].start == Point(0, 0)
        assert segments[-1].end == Point(30, 0)

    def test_total_length_preserved(self):
        """The segment lengths add up to the path length."""
        path = [(0, 0), (0, 17), (13, 17), (13, 4)]
        segments = split_path(path, 1.0, 0.1)
        total = sum(s.length_m for s in segments)
        assert total == pytest.approx(calculate_length(path, 0.1))
        assert all(s.length_m <= 1.0 + 1e-9 for s in segments)

    def test_indices_in_order(self):
        segments = split_path([(0, 0), (50, 0)], 1.0, 0.1)
        assert [s.index for s in segments] == list(range(5))

    def test_short_path_single_segment(self):
        """A path under the limit is returned whole."""
        segments = split_path([(0, 0), (1, 0), (1, 1)], 100.0, 0.1)
        assert len(segments) == 1
        assert segments[0].points == (Point(0, 0), Point(1, 0), Point(1, 1))

    def test_exact_multiple_has_no_empty_tail(self):
        """A path of exactly two limits gives two segments."""
        segments = split_path([(0, 0), (20, 0)], 1.0, 0.1)
        assert len(segments) == 2

    def test_degenerate_input(self):
        """Fewer than two points yields no segments."""
        assert split_path([], 5.0) == []
        assert split_path([(1, 1)], 5.0) == []

    @pytest.mark.parametrize("limit,resolution", [(0, 1.0), (-1, 1.0), (5, 0)])
    def test_invalid_arguments(self, limit, resolution):
        with pytest.raises(ValueError):
            split_path([(0, 0), (1, 0)], limit, resolution)

    def test_segment_serialization(self):
        segment = Segment(points=(Point(0, 0), Point(1, 0)), length_m=0.1, index=2)
        assert Segment.from_dict(segment.to_dict()) == segment
