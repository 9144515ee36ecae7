"""
Tests for maze graph, grid and rendering helpers.
"""

import networkx as nx
import numpy as np

from corners.core.definitions import GRID_SHAPE, Direction
from corners.utils.graph_utils import (
    connection_array,
    is_strongly_connected,
    maze_to_graph,
    render_maze,
    tag_grids,
    undirected_edges,
)

from maze_builders import build_maze, serpentine_links, serpentine_maze


class TestGraphViews:

    def test_graph_matches_connections(self, maze):
        G = maze_to_graph(maze)
        assert isinstance(G, nx.DiGraph)
        assert G.number_of_nodes() == 16
        assert G.number_of_edges() == maze.edge_count()
        for cell in maze:
            assert G.nodes[cell.position]['corner_color'] == cell.corner_color
            assert G.nodes[cell.position]['serial_digit'] == cell.serial_digit

    def test_edge_direction_attribute(self):
        G = maze_to_graph(serpentine_maze())
        assert G.edges[(0, 0), (1, 0)]['direction'] is Direction.RIGHT
        assert G.edges[(1, 0), (0, 0)]['direction'] is Direction.LEFT

    def test_connectivity_check(self):
        assert is_strongly_connected(serpentine_maze())
        one_way = build_maze(list(range(16)), [i % 10 for i in range(16)], [], one_way=serpentine_links())
        assert not is_strongly_connected(one_way)

    def test_undirected_edges_of_serpentine(self):
        edges = undirected_edges(serpentine_maze())
        assert len(edges) == 15
        assert ((0, 0), (1, 0)) in edges


class TestNumpyViews:

    def test_tag_grids(self, maze):
        digits, colors = tag_grids(maze)
        assert digits.shape == GRID_SHAPE
        assert colors.dtype == np.int32
        assert sorted(colors.ravel().tolist()) == list(range(16))
        for cell in maze:
            assert digits[cell.y, cell.x] == cell.serial_digit
            assert colors[cell.y, cell.x] == cell.corner_color

    def test_connection_array(self, maze):
        arr = connection_array(maze)
        assert arr.shape == GRID_SHAPE + (4,)
        assert arr.dtype == np.bool_
        assert int(arr.sum()) == maze.edge_count()
        # Nothing leaves the grid
        assert not arr[0, :, Direction.UP].any()
        assert not arr[-1, :, Direction.DOWN].any()
        assert not arr[:, 0, Direction.LEFT].any()
        assert not arr[:, -1, Direction.RIGHT].any()


class TestRenderMaze:

    def test_layout(self, maze):
        lines = render_maze(maze).split('\n')
        assert len(lines) == 7
        x, y = maze.start
        cell = maze.cell_at(x, y)
        assert f"[{cell.serial_digit}:{cell.corner_color:>2}]" in lines[2 * y]

    def test_links_drawn(self):
        lines = render_maze(serpentine_maze(), show_colors=False).split('\n')
        assert '<->' in lines[0]
        # Serpentine turns: 3-7 at x=3, 4-8 at x=0, 11-15 at x=3
        assert [lines[row].strip() for row in (1, 3, 5)] == ['|', '|', '|']
        assert lines[1].index('|') == lines[0].index('3')
        assert lines[3].index('|') == lines[2].index('4')

    def test_one_way_arrow(self):
        maze = build_maze(list(range(16)), [i % 10 for i in range(16)], [], one_way=[(0, 1)])
        first_row = render_maze(maze).split('\n')[0]
        assert ' > ' in first_row
