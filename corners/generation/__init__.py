"""
Corners Generation Module
=========================

Rule-seeded maze construction and per-instance corner colour assignment.
"""

from .maze_generator import (
    Cell,
    Maze,
    MazeGenerator,
    generate_maze,
)
from .assignment import (
    Assignment,
    AssignmentSelector,
    Chooser,
)

__all__ = [
    'Cell',
    'Maze',
    'MazeGenerator',
    'generate_maze',
    'Assignment',
    'AssignmentSelector',
    'Chooser',
]
