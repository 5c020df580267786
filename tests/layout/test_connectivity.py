# File: tests/layout/test_connectivity.py
"""Tests for routable-region analysis on the cell graph."""

from floor_heating_planner.layout import (
    RectRegion,
    RoomGrid,
    build_cell_graph,
    routable_regions,
    stamp_obstacles,
)


class TestBuildCellGraph:
    """Tests for build_cell_graph."""

    def test_open_grid(self):
        """An open 3x4 grid has 12 nodes and 17 edges."""
        graph = build_cell_graph(RoomGrid(3, 4, 0.5))
        assert graph.number_of_nodes() == 12
        assert graph.number_of_edges() == 3 * 3 + 2 * 4

    def test_node_attributes(self):
        graph = build_cell_graph(RoomGrid(2, 2, 0.5))
        assert graph.nodes[(1, 0)]["location"] == (0, 1)
        assert graph.nodes[(1, 0)]["state"] == "EMPTY"
        assert graph.edges[(0, 0), (0, 1)]["weight"] == 0.5

    def test_obstacles_excluded(self):
        """Blocked cells are not graph nodes."""
        grid = stamp_obstacles(RoomGrid(3, 3, 0.5), [RectRegion(1, 1, 1, 1)])
        graph = build_cell_graph(grid)
        assert (1, 1) not in graph
        assert graph.number_of_nodes() == 8


class TestRoutableRegions:
    """Tests for routable_regions."""

    def test_single_region(self, small_grid):
        regions = routable_regions(small_grid)
        assert len(regions) == 1
        assert len(regions[0]) == 100

    def test_wall_splits_floor(self, small_grid):
        """A full-height wall yields two regions, largest first."""
        grid = stamp_obstacles(small_grid, [RectRegion(5, 0, 1, 10)])
        regions = routable_regions(grid)
        assert [len(r) for r in regions] == [50, 40]
        assert (0, 0) in regions[0]
        assert (0, 9) in regions[1]

    def test_equal_regions_ordered_by_first_cell(self):
        grid = stamp_obstacles(RoomGrid(3, 3, 0.5), [RectRegion(1, 0, 1, 3)])
        regions = routable_regions(grid)
        assert min(regions[0]) == (0, 0)
        assert min(regions[1]) == (0, 2)

    def test_fully_blocked(self, small_grid):
        grid = stamp_obstacles(small_grid, [RectRegion(0, 0, 10, 10)])
        assert routable_regions(grid) == []
