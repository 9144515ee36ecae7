"""
Corners Core Module
===================

Constants, enums, error types and the rule-seed random number generator.
"""

from .definitions import (
    GRID_WIDTH,
    GRID_HEIGHT,
    GRID_SHAPE,
    NUM_CELLS,
    NUM_CORNERS,
    NUM_COLORS,
    Direction,
    DIRECTION_DELTAS,
    Corner,
    ClampColor,
    CORNER_NAMES,
    COLOR_NAMES,
    LedState,
    corner_of,
    color_of,
    parse_corner,
)
from .errors import (
    CornersError,
    MazeInvariantError,
    PuzzleGenerationError,
)
from .rng import MonoRandom

__all__ = [
    # Definitions
    'GRID_WIDTH',
    'GRID_HEIGHT',
    'GRID_SHAPE',
    'NUM_CELLS',
    'NUM_CORNERS',
    'NUM_COLORS',
    'Direction',
    'DIRECTION_DELTAS',
    'Corner',
    'ClampColor',
    'CORNER_NAMES',
    'COLOR_NAMES',
    'LedState',
    'corner_of',
    'color_of',
    'parse_corner',
    # Errors
    'CornersError',
    'MazeInvariantError',
    'PuzzleGenerationError',
    # RNG
    'MonoRandom',
]
