"""
Seeded Maze Generation for the Corners Puzzle
=============================================

Algorithm (randomized Prim-style spanning construction, run twice):
1. Discard a seed-dependent number of draws to decorrelate from other
   modules consuming the same rule seed
2. Tag every cell with a serial-number digit (two shuffled 0-9 runs) and a
   unique corner colour (one shuffled 0-15 run)
3. Pick a random start cell
4. Grow a spanning tree outward from the start: repeatedly pick a random
   frontier cell and link it to a random unvisited neighbour, retiring
   frontier cells that have none left
5. Repeat step 4 with edges recorded on the destination cell, pointing back

Pass 1 yields edges leading away from the start, pass 2 edges leading back
towards it, so every cell can reach every other along recorded connections.

The ORDER of draws is part of the contract: the same rule seed must yield
the same maze as the host's reference generator, so list ordering and index
lookups below deliberately follow that generator step for step.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from corners.core.definitions import (
    GRID_WIDTH,
    GRID_HEIGHT,
    NUM_CELLS,
    NUM_SERIAL_DIGITS,
    RULE_SEED_SKIP_BOUND,
    Direction,
    DIRECTION_DELTAS,
)
from corners.core.rng import MonoRandom

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Cell:
    """One position of the 4×4 grid."""
    x: int
    y: int
    serial_digit: int
    corner_color: int
    connections: List[bool] = field(default_factory=lambda: [False] * 4)

    @property
    def position(self) -> Tuple[int, int]:
        """Position (x, y)."""
        return (self.x, self.y)

    def connects(self, direction: Direction) -> bool:
        return self.connections[direction]

    def __repr__(self) -> str:
        links = ''.join(d.name[0] for d in Direction if self.connections[d])
        return (f"Cell(({self.x}, {self.y}), digit={self.serial_digit}, "
                f"color={self.corner_color}, links={links or '-'})")


@dataclass
class Maze:
    """
    Generated maze: 16 tagged cells plus the start used to grow it.

    ``cells`` keeps generation order (the order cells were finalised), which
    later stages rely on when picking among candidates.
    """
    cells: List[Cell]
    start: Tuple[int, int]
    rule_seed: Optional[int] = None
    _by_position: Dict[Tuple[int, int], Cell] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        self._by_position = {cell.position: cell for cell in self.cells}

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def cell_at(self, x: int, y: int) -> Cell:
        """Cell at (x, y); raises KeyError outside the grid."""
        return self._by_position[(x, y)]

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Grid neighbour of ``cell`` in ``direction``, or None at the border."""
        dx, dy = DIRECTION_DELTAS[direction]
        return self._by_position.get((cell.x + dx, cell.y + dy))

    def successors(self, cell: Cell) -> Iterator[Cell]:
        """Cells reachable in one step along recorded connections."""
        for direction in Direction:
            if cell.connections[direction]:
                target = self.neighbor(cell, direction)
                if target is not None:
                    yield target

    def cells_with_digit(self, digit: int) -> List[Cell]:
        """Cells tagged with serial digit ``digit``, in generation order."""
        return [cell for cell in self.cells if cell.serial_digit == digit]

    def cell_with_color(self, corner_color: int) -> Cell:
        for cell in self.cells:
            if cell.corner_color == corner_color:
                return cell
        raise KeyError(f"No cell has corner colour {corner_color}")

    def edge_count(self) -> int:
        return sum(sum(cell.connections) for cell in self.cells)


def _index_at(cells: List[Cell], x: int, y: int) -> int:
    """Index of the cell at (x, y) in ``cells``, or -1."""
    for i, cell in enumerate(cells):
        if cell.x == x and cell.y == y:
            return i
    return -1


class MazeGenerator:
    """
    Rule-seeded maze generator.

    Features:
    - Reproducible: the maze is a pure function of the rule seed
    - Serial digit tags: each digit 0-9 appears exactly twice
    - Corner colour tags: a permutation of 0-15
    - Every cell reachable from every other along recorded connections
    """

    def __init__(self, rng: MonoRandom, skip_draws: bool = True):
        """
        Initialize generator.

        Args:
            rng: Rule-seed random source (consumed in place)
            skip_draws: Apply the decorrelation skip before generating
        """
        self.rng = rng
        self.skip_draws = skip_draws

    def generate(self) -> Maze:
        """
        Generate the maze.

        Returns:
            Maze with cells in finalisation order
        """
        seed = getattr(self.rng, 'seed', None)
        logger.debug(f"Generating {GRID_WIDTH}×{GRID_HEIGHT} maze (rule seed: {seed})")

        if self.skip_draws:
            skip = self.rng.next_range(0, RULE_SEED_SKIP_BOUND)
            self.rng.skip(skip)
            logger.debug(f"Skipped {skip} draws")

        cells = self._create_cells()
        start_x = self.rng.next_range(0, GRID_WIDTH)
        start_y = self.rng.next_range(0, GRID_HEIGHT)

        done = cells
        for reverse_edges in (False, True):
            done = self._grow_spanning_tree(done, (start_x, start_y), reverse_edges)

        maze = Maze(cells=done, start=(start_x, start_y), rule_seed=seed)
        logger.debug(f"Generated maze: start={maze.start}, {maze.edge_count()} recorded connections")
        return maze

    def _create_cells(self) -> List[Cell]:
        """Tag cells with serial digits and corner colours."""
        serial_digits = self.rng.shuffle_fisher_yates(list(range(NUM_SERIAL_DIGITS)))
        serial_digits.extend(self.rng.shuffle_fisher_yates(list(range(NUM_SERIAL_DIGITS))))
        corner_colors = self.rng.shuffle_fisher_yates(list(range(NUM_CELLS)))

        return [
            Cell(x=i % GRID_WIDTH, y=i // GRID_WIDTH,
                 serial_digit=serial_digits[i], corner_color=corner_colors[i])
            for i in range(NUM_CELLS)
        ]

    def _grow_spanning_tree(self, cells: List[Cell], start: Tuple[int, int],
                            reverse_edges: bool) -> List[Cell]:
        """
        One spanning pass over ``cells``.

        Args:
            cells: Cells in the order left by the previous pass
            start: Start position (x, y)
            reverse_edges: Record each edge on the destination, pointing back

        Returns:
            Cells in the order they were finalised
        """
        todo = list(cells)
        processed: List[Cell] = []
        done: List[Cell] = []

        start_ix = _index_at(todo, *start)
        processed.append(todo.pop(start_ix))

        while todo:
            p_ix = self.rng.next_range(0, len(processed))
            current = processed[p_ix]

            available: List[Tuple[Direction, int]] = []
            for direction in Direction:
                dx, dy = DIRECTION_DELTAS[direction]
                dest_ix = _index_at(todo, current.x + dx, current.y + dy)
                if dest_ix != -1:
                    available.append((direction, dest_ix))

            if not available:
                done.append(processed.pop(p_ix))
                continue

            direction, dest_ix = available[self.rng.next_range(0, len(available))]
            if reverse_edges:
                todo[dest_ix].connections[direction.opposite] = True
            else:
                current.connections[direction] = True
            processed.append(todo.pop(dest_ix))

        done.extend(processed)
        return done


def generate_maze(rule_seed: int) -> Maze:
    """Convenience: generate the maze for ``rule_seed`` with a fresh generator."""
    return MazeGenerator(MonoRandom(rule_seed)).generate()
