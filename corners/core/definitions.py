"""
CORNERS DEFINITIONS
===================
Central constants and type definitions for the puzzle engine.

This file is the SINGLE SOURCE OF TRUTH for:
- Grid dimensions and direction deltas
- Corner and colour naming
- LED feedback states
- Rule-seed constants

Import from here instead of duplicating constants across modules.
"""

from typing import Dict, List, Tuple
from enum import IntEnum

# ==========================================
# GRID GEOMETRY (FIXED PUZZLE CONSTANTS)
# ==========================================

GRID_WIDTH: int = 4
GRID_HEIGHT: int = 4
NUM_CELLS: int = GRID_WIDTH * GRID_HEIGHT  # 16

NUM_CORNERS: int = 4
NUM_COLORS: int = 4
NUM_SERIAL_DIGITS: int = 10

# Grid shape for numpy arrays (row-major: height first)
GRID_SHAPE: Tuple[int, int] = (GRID_HEIGHT, GRID_WIDTH)


class Direction(IntEnum):
    """Cardinal directions, indexed the way connections are stored on a cell."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> 'Direction':
        return Direction((self + 2) % 4)


# (dx, dy) per Direction; y grows downwards
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

# ==========================================
# CORNERS & COLOURS
# ==========================================

class Corner(IntEnum):
    """Physical corner buttons, numbered clockwise from top-left."""
    TL = 0
    TR = 1
    BR = 2
    BL = 3


class ClampColor(IntEnum):
    """Clamp colours; a corner colour value encodes the colour as value // 4."""
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3


CORNER_NAMES: List[str] = [c.name for c in Corner]  # TL, TR, BR, BL
COLOR_NAMES: List[str] = ["Red", "Green", "Blue", "Yellow"]


class LedState(IntEnum):
    """Status light shown next to each corner."""
    OFF = 0
    YELLOW = 1
    RED = 2
    GREEN = 3


def corner_of(corner_color: int) -> int:
    """Corner index encoded in a corner colour value."""
    return corner_color % NUM_CORNERS


def color_of(corner_color: int) -> int:
    """Colour index encoded in a corner colour value."""
    return corner_color // NUM_CORNERS


def parse_corner(name: str) -> int:
    """
    Parse a corner name (TL/TR/BR/BL, case-insensitive) or a digit 0-3.

    Raises:
        ValueError: if the name is not a known corner
    """
    token = name.strip().upper()
    if token.isdigit():
        index = int(token)
        if 0 <= index < NUM_CORNERS:
            return index
    elif token in CORNER_NAMES:
        return Corner[token].value
    raise ValueError(f"Unknown corner: {name!r} (expected one of {', '.join(CORNER_NAMES)})")


# ==========================================
# RULE SEED
# ==========================================

# Upper bound (exclusive) of the number of draws discarded before generation
# so this module does not share a stream prefix with other rule-seeded modules
RULE_SEED_SKIP_BOUND: int = 70

# ==========================================
# TIMING & GUARDS
# ==========================================

# Seconds before the strike lights revert
STRIKE_RESET_DELAY: float = 1.0

# Assignment retries allowed before giving up on a tie-free puzzle
MAX_ASSIGNMENT_ATTEMPTS: int = 10000

LOG_PREFIX: str = "[Corners #{module_id}]"
