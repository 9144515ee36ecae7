"""
Corners Simulation Module
=========================
Solution search and press validation.

This module contains:
- path_optimizer: BFS distances and the exhaustive press order search
- validator: Press sequence state machine
"""

from .path_optimizer import (
    PathOptimizer,
    PuzzleSolution,
    OrderEvaluation,
    PERMUTATIONS,
    path_length,
    evaluate_orders,
)
from .validator import (
    InputValidator,
    SessionState,
    Progress,
    DuplicateStrike,
    MismatchStrike,
    Success,
    Ignored,
    PressOutcome,
    handle_press,
    is_strike,
)

__all__ = [
    # Path optimizer
    'PathOptimizer',
    'PuzzleSolution',
    'OrderEvaluation',
    'PERMUTATIONS',
    'path_length',
    'evaluate_orders',
    # Validator
    'InputValidator',
    'SessionState',
    'Progress',
    'DuplicateStrike',
    'MismatchStrike',
    'Success',
    'Ignored',
    'PressOutcome',
    'handle_press',
    'is_strike',
]
