# File: tests/layout/test_manifold_feeds.py
"""Tests for feed-line routing from the heating source."""

import pytest

from floor_heating_planner.layout import (
    PlacedRoom,
    Point,
    route_feed_lines,
    split_run,
)


class TestPlacedRoom:
    """Tests for PlacedRoom."""

    def test_center(self):
        room = PlacedRoom("bath", x_m=2.0, y_m=4.0, width_m=2.0, length_m=3.0)
        assert room.center == Point(3.0, 5.5)

    def test_from_dict_accepts_height(self):
        room = PlacedRoom.from_dict({"id": 7, "x": 0, "y": 0, "width": 2, "height": 4})
        assert room.name == "7"
        assert room.length_m == 4


class TestSplitRun:
    """Tests for split_run."""

    def test_fits(self):
        assert split_run((0, 0), (5, 0), 10) == [(Point(0, 0), Point(5, 0))]

    def test_equal_pieces(self):
        """A 25 m run with a 10 m limit is cut into three equal pieces."""
        pieces = split_run((0, 0), (25, 0), 10)
        assert len(pieces) == 3
        for start, end in pieces:
            assert end.x - start.x == pytest.approx(25 / 3)
        assert pieces[-1][1] == Point(25, 0)

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            split_run((0, 0), (1, 0), 0)


class TestRouteFeedLines:
    """Tests for route_feed_lines."""

    def test_l_shaped_run(self):
        """Horizontal then vertical with one elbow at the corner."""
        room = PlacedRoom("living", x_m=2.0, y_m=4.0, width_m=2.0, length_m=2.0)
        layout = route_feed_lines([room])
        assert [(r.start, r.end) for r in layout.runs] == [
            (Point(0, 0), Point(3, 0)),
            (Point(3, 0), Point(3, 5)),
        ]
        assert layout.elbows == (Point(3, 0),)
        assert layout.couplings == ()
        assert layout.total_length_m == pytest.approx(8.0)

    def test_straight_run_has_no_elbow(self):
        """A room directly below the source needs only the vertical leg."""
        room = PlacedRoom("hall", x_m=-1.0, y_m=2.0, width_m=2.0, length_m=2.0)
        layout = route_feed_lines([room])
        assert len(layout.runs) == 1
        assert layout.elbows == ()

    def test_long_leg_gets_couplings(self):
        room = PlacedRoom("far", x_m=0.0, y_m=0.0, width_m=0.0, length_m=10.0)
        layout = route_feed_lines([room], source=(0, 0), max_run_length_m=2.0)
        assert len(layout.runs) == 3
        assert len(layout.couplings) == 2

    def test_runs_grouped_by_room(self):
        rooms = [
            PlacedRoom("a", 2.0, 2.0, 2.0, 2.0),
            PlacedRoom("b", 6.0, 4.0, 2.0, 2.0),
        ]
        layout = route_feed_lines(rooms, source=Point(1.0, 1.0))
        assert len(layout.runs_for("a")) == 2
        assert len(layout.runs_for("b")) == 2
        assert layout.to_dict()["total_length_m"] == pytest.approx(layout.total_length_m)
