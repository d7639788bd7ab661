"""Sliding tile puzzle engine with terminal and GUI frontends."""

from fifteen.engine import PuzzleEngine
from fifteen.errors import (
    BoardError,
    BoardSizeError,
    PositionError,
    PuzzleError,
    StyleError,
)
from fifteen.models import Board, Direction, MoveModel

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardError",
    "BoardSizeError",
    "Direction",
    "MoveModel",
    "PositionError",
    "PuzzleEngine",
    "PuzzleError",
    "StyleError",
]
