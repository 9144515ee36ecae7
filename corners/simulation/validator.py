"""
Press Sequence Validator
========================

State machine consuming corner presses:

    Idle (progress 0) -> Accumulating (1..3) -> Solved (terminal)
                 \\____________ strike ___________/  (back to Idle)

A press fails immediately if the corner was already pressed in the current
attempt (duplicate), even when the sequence so far matches the solution.
A fourth press that completes a non-matching sequence is a mismatch.
Duplicates take precedence over mismatches.

``handle_press`` is pure: it returns a new SessionState plus an outcome.
``InputValidator`` holds the current state for callers that want one.
"""

import logging
from typing import Optional, Sequence, Tuple, Union
from dataclasses import dataclass

from corners.core.definitions import CORNER_NAMES, NUM_CORNERS

logger = logging.getLogger(__name__)


# ============================================================================
# STATE
# ============================================================================

@dataclass(frozen=True)
class SessionState:
    """Presses entered in the current attempt."""
    entered: Tuple[int, ...] = ()
    solved: bool = False

    @property
    def progress(self) -> int:
        return len(self.entered)

    def is_pressed(self, corner: int) -> bool:
        return corner in self.entered


# ============================================================================
# OUTCOMES
# ============================================================================

@dataclass(frozen=True)
class Progress:
    """A correct-so-far press; the corner lights yellow."""
    corner: int


@dataclass(frozen=True)
class DuplicateStrike:
    """The corner was pressed a second time in one attempt."""
    entered_before: Tuple[int, ...]
    corner: int

    def describe(self) -> str:
        before = ', '.join(CORNER_NAMES[c] for c in self.entered_before)
        return f"You pressed {CORNER_NAMES[self.corner]} a second time after {before}. Strike."


@dataclass(frozen=True)
class MismatchStrike:
    """Four distinct corners entered in the wrong order."""
    entered: Tuple[int, ...]

    def describe(self) -> str:
        return f"You entered: {', '.join(CORNER_NAMES[c] for c in self.entered)}. Strike."


@dataclass(frozen=True)
class Success:
    """The full solution was entered."""


@dataclass(frozen=True)
class Ignored:
    """Press after the module was solved."""
    corner: int


PressOutcome = Union[Progress, DuplicateStrike, MismatchStrike, Success, Ignored]
STRIKE_OUTCOMES = (DuplicateStrike, MismatchStrike)


def is_strike(outcome: PressOutcome) -> bool:
    return isinstance(outcome, STRIKE_OUTCOMES)


# ============================================================================
# TRANSITION
# ============================================================================

def handle_press(state: SessionState, solution: Sequence[int],
                 corner: int) -> Tuple[SessionState, PressOutcome]:
    """
    Apply one press.

    Args:
        state: Current session state
        solution: Expected corner order (length 4)
        corner: Pressed corner index (0-3)

    Returns:
        (new_state, outcome)

    Raises:
        ValueError: if ``corner`` is not a valid corner index
    """
    if not 0 <= corner < NUM_CORNERS:
        raise ValueError(f"Corner index must be 0-{NUM_CORNERS - 1}, got {corner}")

    if state.solved:
        return state, Ignored(corner)

    if state.is_pressed(corner):
        return SessionState(), DuplicateStrike(entered_before=state.entered, corner=corner)

    entered = state.entered + (corner,)
    if len(entered) < NUM_CORNERS:
        return SessionState(entered=entered), Progress(corner)

    if entered == tuple(solution):
        return SessionState(entered=entered, solved=True), Success()
    return SessionState(), MismatchStrike(entered=entered)


class InputValidator:
    """Stateful wrapper around ``handle_press`` for one puzzle instance."""

    def __init__(self, solution: Sequence[int], state: Optional[SessionState] = None):
        if len(solution) != NUM_CORNERS or sorted(solution) != list(range(NUM_CORNERS)):
            raise ValueError(f"Solution must be an ordering of all {NUM_CORNERS} corners, got {solution}")
        self.solution = tuple(solution)
        self.state = state or SessionState()
        self.strikes = 0

    @property
    def solved(self) -> bool:
        return self.state.solved

    @property
    def progress(self) -> int:
        return self.state.progress

    def press(self, corner: int) -> PressOutcome:
        self.state, outcome = handle_press(self.state, self.solution, corner)
        if is_strike(outcome):
            self.strikes += 1
            logger.debug(f"Strike {self.strikes}: {type(outcome).__name__}")
        return outcome

    def reset(self) -> None:
        """Drop the current attempt (no-op once solved)."""
        if not self.state.solved:
            self.state = SessionState()
