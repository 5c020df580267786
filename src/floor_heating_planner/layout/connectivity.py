# File: floor_heating_planner/layout/connectivity.py
"""
Connectivity analysis of a room's routable floor.

Builds a 4-connected cell graph over routable cells so obstacles that cut
the floor into separate regions can be reported before a layout is
installed: one continuous circuit cannot serve a pocket it has no free
corridor into.
"""

import logging
from typing import List, Set, Tuple

import networkx as nx

from .room_grid import RoomGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def build_cell_graph(grid: RoomGrid) -> nx.Graph:
    """
    Build a grid graph of routable cells.

    Nodes are (row, col) tuples carrying ``location`` = (col, row) and the
    cell ``state``. Edges join cardinal neighbours and are weighted with the
    cell size in meters.

    Args:
        grid: Occupancy grid

    Returns:
        NetworkX graph of routable cells
    """
    graph = nx.Graph()

    for row, col in grid.routable_cells():
        graph.add_node(
            (row, col),
            location=(col, row),
            state=grid.state(row, col).name,
        )

    for row, col in list(graph.nodes):
        # Right and down neighbours cover every edge once
        for n_row, n_col in ((row, col + 1), (row + 1, col)):
            if (n_row, n_col) in graph:
                graph.add_edge(
                    (row, col), (n_row, n_col), weight=grid.resolution_m
                )

    logger.debug(
        f"Cell graph built: {graph.number_of_nodes()} nodes, "
        f"{graph.number_of_edges()} edges"
    )
    return graph


def routable_regions(grid: RoomGrid) -> List[Set[Cell]]:
    """
    Connected regions of routable cells, largest first.

    Ties in size are ordered by each region's first cell in row-major
    order so the result is deterministic.
    """
    graph = build_cell_graph(grid)
    regions = [set(component) for component in nx.connected_components(graph)]
    regions.sort(key=lambda region: (-len(region), min(region)))
    return regions

