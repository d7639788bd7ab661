"""Exception hierarchy for the puzzle engine.

Illegal moves are not errors: ``PuzzleEngine.attempt_move`` reports them by
returning ``False``.  Everything here signals a caller bug.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class BoardSizeError(PuzzleError, ValueError):
    """Raised when a board is requested with a side length below 2."""


class BoardError(PuzzleError, ValueError):
    """Raised when a tile list is not a permutation of ``0..size²-1``."""


class PositionError(PuzzleError, IndexError):
    """Raised for a board position or coordinate outside the grid."""


class StyleError(PuzzleError, KeyError):
    """Raised when an unknown tile style is requested."""
