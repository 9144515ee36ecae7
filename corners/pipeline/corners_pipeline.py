"""
Corners Module Pipeline
=======================

End-to-end lifecycle of one puzzle instance against an external host:

    1. Seed the rule RNG and generate the maze
    2. Draw a tie-free assignment and its shortest press order
    3. Show the clamp colours and log the solution
    4. Validate presses, driving status lights and strike/solve reports

The host (rendering, audio, bomb state) is only reached through the
ModuleHost protocol, so the pipeline runs headless in tests and the CLI.

Usage:
    from corners.pipeline import CornersConfig, CornersModule, RecordingHost

    host = RecordingHost()
    module = CornersModule(host, CornersConfig(rule_seed=1, serial_last_digit=7))
    puzzle = module.start()
    for corner in puzzle.solution:
        module.press(corner)
    assert host.solved
"""

import itertools
import logging
import threading
from typing import Any, Callable, List, Optional, Protocol, Tuple
from dataclasses import dataclass, field

from corners.core.definitions import (
    CORNER_NAMES,
    COLOR_NAMES,
    LOG_PREFIX,
    MAX_ASSIGNMENT_ATTEMPTS,
    NUM_CORNERS,
    STRIKE_RESET_DELAY,
    LedState,
    corner_of,
    color_of,
)
from corners.core.rng import MonoRandom
from corners.generation.assignment import Chooser
from corners.generation.maze_generator import Maze, MazeGenerator
from corners.simulation.path_optimizer import PathOptimizer, PuzzleSolution
from corners.simulation.validator import (
    DuplicateStrike,
    InputValidator,
    MismatchStrike,
    PressOutcome,
    Progress,
    Success,
)

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class CornersConfig:
    """Inputs and tunables for one puzzle instance."""
    rule_seed: int = 0
    serial_last_digit: int = 0
    strike_reset_delay: float = STRIKE_RESET_DELAY
    max_attempts: int = MAX_ASSIGNMENT_ATTEMPTS
    module_id: Optional[int] = None


# ============================================================================
# HOST INTERFACE
# ============================================================================

class ModuleHost(Protocol):
    """Callbacks into the environment that displays the module."""

    def set_clamp_color(self, corner: int, color: int) -> None: ...

    def set_corner_feedback(self, corner: int, state: LedState) -> None: ...

    def set_all_feedback(self, state: LedState) -> None: ...

    def log_event(self, message: str) -> None: ...

    def report_strike(self) -> None: ...

    def report_solved(self) -> None: ...


@dataclass
class RecordingHost:
    """In-memory host: records every call for inspection."""
    clamp_colors: List[Optional[int]] = field(default_factory=lambda: [None] * NUM_CORNERS)
    leds: List[LedState] = field(default_factory=lambda: [LedState.OFF] * NUM_CORNERS)
    events: List[str] = field(default_factory=list)
    calls: List[Tuple[str, Tuple[Any, ...]]] = field(default_factory=list)
    strikes: int = 0
    solved: bool = False

    def set_clamp_color(self, corner: int, color: int) -> None:
        self.calls.append(('set_clamp_color', (corner, color)))
        self.clamp_colors[corner] = color

    def set_corner_feedback(self, corner: int, state: LedState) -> None:
        self.calls.append(('set_corner_feedback', (corner, state)))
        self.leds[corner] = state

    def set_all_feedback(self, state: LedState) -> None:
        self.calls.append(('set_all_feedback', (state,)))
        self.leds = [state] * NUM_CORNERS

    def log_event(self, message: str) -> None:
        self.events.append(message)

    def report_strike(self) -> None:
        self.calls.append(('report_strike', ()))
        self.strikes += 1

    def report_solved(self) -> None:
        self.calls.append(('report_solved', ()))
        self.solved = True


# ============================================================================
# DEFERRED CALLBACKS
# ============================================================================

class Cancellable(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def timer_scheduler(delay: float, callback: Callable[[], None]) -> Cancellable:
    """Run ``callback`` after ``delay`` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


# ============================================================================
# GENERATION
# ============================================================================

def generate_puzzle(rule_seed: int, serial_last_digit: int,
                    rng: Optional[Chooser] = None,
                    max_attempts: int = MAX_ASSIGNMENT_ATTEMPTS) -> Tuple[Maze, PuzzleSolution]:
    """
    Generate the maze for ``rule_seed`` and a tie-free puzzle on it.

    Args:
        rule_seed: Rule seed for the maze
        serial_last_digit: Last digit of the serial number (0-9)
        rng: Source for assignment draws; defaults to continuing the rule RNG
        max_attempts: Assignment redraw limit

    Returns:
        (maze, puzzle solution)
    """
    rule_rng = MonoRandom(rule_seed)
    maze = MazeGenerator(rule_rng).generate()
    optimizer = PathOptimizer(maze, rng if rng is not None else rule_rng, max_attempts=max_attempts)
    return maze, optimizer.solve(serial_last_digit)


# ============================================================================
# MODULE
# ============================================================================

class CornersModule:
    """
    One activation of the puzzle module.

    Owns the session state; presses are expected in host event order from a
    single thread.
    """

    _module_id_counter = itertools.count(1)

    def __init__(self, host: ModuleHost, config: CornersConfig,
                 scheduler: Scheduler = timer_scheduler,
                 puzzle_rng: Optional[Chooser] = None):
        """
        Args:
            host: Display/bomb callbacks
            config: Seed, serial digit and tunables
            scheduler: Schedules the strike light reset
            puzzle_rng: Source for assignment draws (default: the rule RNG)
        """
        self.host = host
        self.config = config
        self.scheduler = scheduler
        self.puzzle_rng = puzzle_rng
        self.module_id = config.module_id if config.module_id is not None else next(self._module_id_counter)

        self.maze: Optional[Maze] = None
        self.puzzle: Optional[PuzzleSolution] = None
        self.validator: Optional[InputValidator] = None
        self._pending_reset: Optional[Cancellable] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> PuzzleSolution:
        """
        Generate the puzzle and present it.

        Raises:
            MazeInvariantError: generation produced a broken maze
            PuzzleGenerationError: no tie-free assignment was found
        """
        self._log(f"Using rule seed: {self.config.rule_seed}")
        self.maze, self.puzzle = generate_puzzle(
            self.config.rule_seed,
            self.config.serial_last_digit,
            rng=self.puzzle_rng,
            max_attempts=self.config.max_attempts,
        )

        for comb in self.puzzle.assignment.combinations:
            self.host.set_clamp_color(corner_of(comb), color_of(comb))
            self._log(f"{CORNER_NAMES[corner_of(comb)]} corner is {COLOR_NAMES[color_of(comb)]}.")
        self._log(f"Solution is: {self.puzzle.describe()}")

        self.validator = InputValidator(self.puzzle.solution)
        return self.puzzle

    def stop(self) -> None:
        """Cancel any pending light reset."""
        if self._pending_reset is not None:
            self._pending_reset.cancel()
            self._pending_reset = None

    @property
    def clamp_colors(self) -> Tuple[int, ...]:
        """Colour index per corner, for companion tooling."""
        if self.puzzle is None:
            raise RuntimeError("Module has not been started")
        return self.puzzle.assignment.clamp_colors

    @property
    def solved(self) -> bool:
        return self.validator is not None and self.validator.solved

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def press(self, corner: int) -> PressOutcome:
        """Handle one corner press and drive host feedback."""
        if self.validator is None:
            raise RuntimeError("Module has not been started")

        was_solved = self.validator.solved
        outcome = self.validator.press(corner)
        if was_solved:
            return outcome

        self._log(f"You clicked corner: {CORNER_NAMES[corner]}")

        if isinstance(outcome, (DuplicateStrike, MismatchStrike)):
            self.host.set_all_feedback(LedState.RED)
            self.stop()
            self._pending_reset = self.scheduler(self.config.strike_reset_delay, self.reset_lights)
            self.host.report_strike()
            self._log(outcome.describe())
        elif isinstance(outcome, Success):
            self.stop()
            self.host.set_all_feedback(LedState.GREEN)
            self.host.report_solved()
            self._log("Module solved.")
        elif isinstance(outcome, Progress):
            self.host.set_corner_feedback(corner, LedState.YELLOW)
        return outcome

    def reset_lights(self) -> None:
        """Show yellow for corners pressed in the current attempt, off elsewhere."""
        self._pending_reset = None
        if self.validator is None or self.validator.solved:
            return
        for corner in range(NUM_CORNERS):
            pressed = self.validator.state.is_pressed(corner)
            self.host.set_corner_feedback(corner, LedState.YELLOW if pressed else LedState.OFF)

    def _log(self, message: str) -> None:
        line = f"{LOG_PREFIX.format(module_id=self.module_id)} {message}"
        logger.info(line)
        self.host.log_event(line)
