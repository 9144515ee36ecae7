"""
Corner Colour Assignment
========================

Chooses which colour each physical corner clamp shows.

Corner 0 of the draw is the anchor: the cell tagged with the bomb's serial
number last digit (one of the two such cells, chosen at random). The other
three draws come from a shrinking pool so that:
- no two draws share a serial digit tag (both anchor candidates are removed)
- no two draws share a corner (every value with the same ``% 4`` is removed)

Four corners × four colours = 16 values and each draw eliminates exactly
one corner class, so the pool can never run dry.
"""

import logging
from typing import Dict, List, Protocol, Sequence, Tuple, TypeVar
from dataclasses import dataclass

from corners.core.definitions import (
    NUM_CELLS,
    NUM_CORNERS,
    NUM_SERIAL_DIGITS,
    CORNER_NAMES,
    COLOR_NAMES,
    corner_of,
    color_of,
)
from corners.generation.maze_generator import Cell, Maze

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Chooser(Protocol):
    """Anything that can pick from a sequence (MonoRandom, random.Random)."""

    def choice(self, items: Sequence[T]) -> T: ...


@dataclass(frozen=True)
class Assignment:
    """Four corner colour values in draw order; index 0 is the anchor."""
    combinations: Tuple[int, ...]
    anchor: Cell

    @property
    def anchor_corner(self) -> int:
        return corner_of(self.combinations[0])

    @property
    def clamp_colors(self) -> Tuple[int, ...]:
        """Colour index shown on each corner clamp, indexed by corner."""
        colors = [0] * NUM_CORNERS
        for comb in self.combinations:
            colors[corner_of(comb)] = color_of(comb)
        return tuple(colors)

    def by_corner(self) -> Dict[int, int]:
        """Corner index -> corner colour value."""
        return {corner_of(comb): comb for comb in self.combinations}

    def describe(self) -> List[str]:
        return [
            f"{CORNER_NAMES[corner_of(comb)]} corner is {COLOR_NAMES[color_of(comb)]}."
            for comb in self.combinations
        ]


class AssignmentSelector:
    """Draws an Assignment for a maze and a serial number last digit."""

    def __init__(self, maze: Maze, rng: Chooser):
        self.maze = maze
        self.rng = rng

    def select(self, serial_last_digit: int) -> Assignment:
        """
        Draw the four corner colours.

        Args:
            serial_last_digit: Last digit of the bomb's serial number (0-9)

        Returns:
            Assignment with one colour per corner

        Raises:
            ValueError: if the digit is not in 0-9
        """
        if not 0 <= serial_last_digit < NUM_SERIAL_DIGITS:
            raise ValueError(f"Serial number digit must be 0-9, got {serial_last_digit}")

        pool = list(range(NUM_CELLS))
        combinations: List[int] = []

        candidates = self.maze.cells_with_digit(serial_last_digit)
        anchor = self.rng.choice(candidates)
        tagged = {cell.corner_color for cell in candidates}
        pool = [comb for comb in pool if comb not in tagged]
        combinations.append(anchor.corner_color)
        pool = [comb for comb in pool if corner_of(comb) != corner_of(anchor.corner_color)]

        for _ in range(1, NUM_CORNERS):
            comb = self.rng.choice(pool)
            combinations.append(comb)
            pool = [c for c in pool if corner_of(c) != corner_of(comb)]

        logger.debug(f"Drew combinations {combinations} (anchor cell {anchor.position})")
        return Assignment(combinations=tuple(combinations), anchor=anchor)
