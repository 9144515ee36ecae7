"""Shared fixtures for the Corners test suite."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from corners.core.rng import MonoRandom
from corners.generation.maze_generator import MazeGenerator


@pytest.fixture
def maze():
    """Maze for rule seed 0."""
    return MazeGenerator(MonoRandom(0)).generate()


@pytest.fixture(params=list(range(0, 40)))
def seeded_maze(request):
    """Mazes for a spread of rule seeds."""
    return MazeGenerator(MonoRandom(request.param)).generate()
