"""
Maze Graph Utilities
====================

Helpers for inspecting generated mazes outside the generation path.

This module provides:
- Conversion of a maze to a NetworkX directed graph
- Connectivity checks over recorded connections
- numpy views of the cell tags and connection flags
- ASCII rendering for logs and the CLI

Usage:
    from corners.generation import generate_maze
    from corners.utils.graph_utils import maze_to_graph, render_maze

    maze = generate_maze(rule_seed=7)
    G = maze_to_graph(maze)
    print(render_maze(maze))
"""

import logging
from typing import List, Tuple

import networkx as nx
import numpy as np

from corners.core.definitions import (
    GRID_SHAPE,
    GRID_WIDTH,
    GRID_HEIGHT,
    Direction,
)
from corners.generation.maze_generator import Maze

logger = logging.getLogger(__name__)


# ==========================================
# GRAPH VIEWS
# ==========================================

def maze_to_graph(maze: Maze) -> nx.DiGraph:
    """
    Build a directed graph over (x, y) positions.

    Node attributes: ``serial_digit``, ``corner_color``.
    Edge attributes: ``direction`` (Direction the edge leaves its source by).
    """
    G = nx.DiGraph()
    for cell in maze:
        G.add_node(cell.position, serial_digit=cell.serial_digit, corner_color=cell.corner_color)
    for cell in maze:
        for direction in Direction:
            if cell.connections[direction]:
                target = maze.neighbor(cell, direction)
                if target is None:
                    logger.warning(f"Cell {cell.position} has a connection leaving the grid ({direction.name})")
                    continue
                G.add_edge(cell.position, target.position, direction=direction)
    return G


def is_strongly_connected(maze: Maze) -> bool:
    """True if every cell reaches every other cell along recorded connections."""
    return nx.is_strongly_connected(maze_to_graph(maze))


def undirected_edges(maze: Maze) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """Cell pairs joined in at least one direction, sorted."""
    G = maze_to_graph(maze).to_undirected()
    return sorted(tuple(sorted(edge)) for edge in G.edges())


# ==========================================
# NUMPY VIEWS
# ==========================================

def tag_grids(maze: Maze) -> Tuple[np.ndarray, np.ndarray]:
    """
    Serial digit and corner colour grids.

    Returns:
        (serial_digit_grid, corner_color_grid), each int32 of shape (4, 4)
        indexed [y, x]
    """
    digits = np.zeros(GRID_SHAPE, dtype=np.int32)
    colors = np.zeros(GRID_SHAPE, dtype=np.int32)
    for cell in maze:
        digits[cell.y, cell.x] = cell.serial_digit
        colors[cell.y, cell.x] = cell.corner_color
    return digits, colors


def connection_array(maze: Maze) -> np.ndarray:
    """Boolean array of shape (4, 4, 4) indexed [y, x, direction]."""
    arr = np.zeros(GRID_SHAPE + (len(Direction),), dtype=bool)
    for cell in maze:
        arr[cell.y, cell.x, :] = cell.connections
    return arr


# ==========================================
# RENDERING
# ==========================================

_H_LINKS = {(False, False): '   ', (True, False): ' > ', (False, True): ' < ', (True, True): '<->'}
_V_LINKS = {(False, False): '   ', (True, False): ' v ', (False, True): ' ^ ', (True, True): ' | '}


def render_maze(maze: Maze, show_colors: bool = True) -> str:
    """
    ASCII drawing of the maze.

    Each cell shows its serial digit and (optionally) corner colour value;
    arrows between cells show which way recorded connections run.
    """
    cell_width = 6 if show_colors else 5
    links = connection_array(maze)
    lines = []
    for y in range(GRID_HEIGHT):
        row = []
        for x in range(GRID_WIDTH):
            cell = maze.cell_at(x, y)
            label = f"{cell.serial_digit}:{cell.corner_color:>2}" if show_colors else f" {cell.serial_digit} "
            if (x, y) == maze.start:
                label = f"[{label}]"
            else:
                label = f" {label} "
            row.append(label)
            if x < GRID_WIDTH - 1:
                row.append(_H_LINKS[(bool(links[y, x, Direction.RIGHT]), bool(links[y, x + 1, Direction.LEFT]))])
        lines.append(''.join(row))

        if y < GRID_HEIGHT - 1:
            below = []
            for x in range(GRID_WIDTH):
                link = _V_LINKS[(bool(links[y, x, Direction.DOWN]), bool(links[y + 1, x, Direction.UP]))]
                below.append(link.center(cell_width))
                if x < GRID_WIDTH - 1:
                    below.append('   ')
            lines.append(''.join(below).rstrip())
    return '\n'.join(lines)
