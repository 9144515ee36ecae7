"""
Error taxonomy for puzzle generation.

Player mistakes (duplicate or mismatched presses) are validator outcomes,
not exceptions; only conditions that must abort setup are raised.
"""


class CornersError(Exception):
    """Base class for puzzle engine errors."""


class MazeInvariantError(CornersError, RuntimeError):
    """A generated maze broke a structural invariant (e.g. unreachable cell)."""


class PuzzleGenerationError(CornersError):
    """No tie-free assignment was found within the attempt budget."""
