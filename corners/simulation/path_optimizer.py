"""
Shortest Press Order Search
===========================

Given the maze and an assignment, the solution is the order of the three
non-anchor cells that minimises the total walk

    d(anchor, p0) + d(p0, p1) + d(p1, p2)

where d is the breadth-first distance along recorded maze connections.
With three cells there are only 6 orders, so the search is exhaustive.

A puzzle whose minimum is shared by two orders has no single answer; the
assignment is redrawn (same maze, continuing random stream) until the
minimum is unique. The maze itself is never regenerated.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from corners.core.definitions import (
    CORNER_NAMES,
    MAX_ASSIGNMENT_ATTEMPTS,
    corner_of,
)
from corners.core.errors import MazeInvariantError, PuzzleGenerationError
from corners.generation.assignment import Assignment, AssignmentSelector, Chooser
from corners.generation.maze_generator import Cell, Maze

logger = logging.getLogger(__name__)

# Orders of the three non-anchor cells, in evaluation order
PERMUTATIONS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 0, 2),
    (1, 2, 0),
    (2, 0, 1),
    (2, 1, 0),
)


def path_length(maze: Maze, source: Cell, dest: Cell) -> int:
    """
    Breadth-first distance from ``source`` to ``dest`` along recorded connections.

    Distances live in a map local to this call.

    Raises:
        MazeInvariantError: if ``dest`` is unreachable (broken maze)
    """
    distance: Dict[Tuple[int, int], int] = {source.position: 0}
    queue = deque([source])

    while queue:
        cell = queue.popleft()
        if cell is dest:
            return distance[cell.position]
        for target in maze.successors(cell):
            if target.position not in distance:
                distance[target.position] = distance[cell.position] + 1
                queue.append(target)

    message = (f"The breadth-first search did not encounter the destination square. "
               f"Trying to go from {source.position} to {dest.position}")
    logger.error(message)
    raise MazeInvariantError(message)


@dataclass(frozen=True)
class OrderEvaluation:
    """Outcome of the permutation search for one assignment."""
    order: Tuple[Cell, ...]  # anchor followed by the best permutation
    total_length: int
    tie: bool

    @property
    def solution(self) -> Tuple[int, ...]:
        return tuple(corner_of(cell.corner_color) for cell in self.order)


@dataclass(frozen=True)
class PuzzleSolution:
    """A tie-free puzzle instance."""
    assignment: Assignment
    solution: Tuple[int, ...]
    total_length: int
    attempts: int

    def describe(self) -> str:
        return ', '.join(CORNER_NAMES[c] for c in self.solution)


def evaluate_orders(maze: Maze, anchor: Cell, remaining: Sequence[Cell]) -> OrderEvaluation:
    """
    Score all orders of ``remaining`` after ``anchor``.

    The first strictly shorter order wins; an equal total flags a tie
    (a later strictly shorter order clears it again).
    """
    if len(remaining) != 3:
        raise ValueError(f"Expected 3 non-anchor cells, got {len(remaining)}")

    best: Optional[Tuple[Cell, ...]] = None
    shortest = None
    tie = False

    for perm in PERMUTATIONS:
        p0, p1, p2 = (remaining[i] for i in perm)
        total = path_length(maze, anchor, p0) + path_length(maze, p0, p1) + path_length(maze, p1, p2)
        if shortest is None or total < shortest:
            shortest = total
            tie = False
            best = (anchor, p0, p1, p2)
        elif total == shortest:
            tie = True

    return OrderEvaluation(order=best, total_length=shortest, tie=tie)


class PathOptimizer:
    """
    Derives the unique shortest press order for a maze.

    Redraws the assignment on ties; ``max_attempts`` bounds the redraws.
    """

    def __init__(self, maze: Maze, rng: Chooser, max_attempts: int = MAX_ASSIGNMENT_ATTEMPTS):
        self.maze = maze
        self.rng = rng
        self.max_attempts = max_attempts
        self.selector = AssignmentSelector(maze, rng)

    def remaining_cells(self, assignment: Assignment) -> List[Cell]:
        """Non-anchor assigned cells, in maze order."""
        wanted = set(assignment.combinations[1:])
        return [cell for cell in self.maze if cell.corner_color in wanted]

    def solve(self, serial_last_digit: int) -> PuzzleSolution:
        """
        Draw assignments until one has a unique shortest order.

        Raises:
            PuzzleGenerationError: if ``max_attempts`` draws all tie
        """
        for attempt in range(1, self.max_attempts + 1):
            assignment = self.selector.select(serial_last_digit)
            result = evaluate_orders(self.maze, assignment.anchor, self.remaining_cells(assignment))
            if result.tie:
                logger.debug(f"Attempt {attempt}: tie at length {result.total_length}, redrawing")
                continue

            logger.debug(f"Attempt {attempt}: unique shortest length {result.total_length}")
            return PuzzleSolution(
                assignment=assignment,
                solution=result.solution,
                total_length=result.total_length,
                attempts=attempt,
            )

        raise PuzzleGenerationError(
            f"No tie-free assignment after {self.max_attempts} attempts "
            f"(rule seed {self.maze.rule_seed}, digit {serial_last_digit})"
        )
