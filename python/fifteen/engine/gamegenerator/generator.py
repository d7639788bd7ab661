"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from fifteen.engine.gameparity import Parity
from fifteen.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by rejection sampling over random permutations."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> int:
        """Shuffle *board* in-place into a uniformly random solvable arrangement.

        Candidates are drawn with ``rng.shuffle`` (Fisher–Yates) and the
        first solvable one is committed.  Half of all arrangements are
        solvable, so this takes two attempts on average.  Returns the
        number of attempts.
        """
        rng = rng if rng is not None else random.Random()
        candidate = board.copy()
        attempts = 0
        while True:
            attempts += 1
            rng.shuffle(candidate.tiles)
            candidate.blank_pos = candidate.tiles.index(candidate.blank)
            if Parity.is_solvable(candidate):
                break
            logger.debug("Shuffle attempt %d rejected (unsolvable)", attempts)

        board.tiles[:] = candidate.tiles
        board.blank_pos = candidate.blank_pos
        logger.debug(
            "Shuffled %d×%d board in %d attempt(s)", board.size, board.size, attempts
        )
        return attempts

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        board = GameGenerator.solved(size)
        GameGenerator.shuffle(board, rng)
        return board
