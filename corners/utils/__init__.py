"""
Corners Utilities
=================

Graph, grid and rendering helpers for generated mazes.
"""

from .graph_utils import (
    maze_to_graph,
    is_strongly_connected,
    undirected_edges,
    tag_grids,
    connection_array,
    render_maze,
)

__all__ = [
    'maze_to_graph',
    'is_strongly_connected',
    'undirected_edges',
    'tag_grids',
    'connection_array',
    'render_maze',
]
