"""Core puzzle engine — board state, moves, solvability and shuffling."""

from __future__ import annotations

import logging
import random

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gameparity import Parity
from fifteen.engine.gamestate import GameState
from fifteen.errors import BoardError
from fifteen.models.board import Board, Direction, MoveModel

logger = logging.getLogger(__name__)

# Offset (dx, dy) from the blank to the tile that slides in *direction*.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


class PuzzleEngine:
    """Owns one board and every rule that changes it.

    Moves are keyed by **board position** (0-based, row-major).  Use
    :meth:`position_of` or :meth:`attempt_move_tile` to move by tile
    identifier instead.

    The engine is not thread-safe; give each game a single owner.
    """

    def __init__(
        self,
        size: int,
        move_model: MoveModel = MoveModel.ADJACENT,
        rng: random.Random | None = None,
    ) -> None:
        board = GameGenerator.solved(size)
        self.move_model = MoveModel(move_model)
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState(board)
        logger.debug("New %d×%d engine (%s moves)", size, size, self.move_model)

    @classmethod
    def from_board(
        cls,
        board: Board,
        move_model: MoveModel = MoveModel.ADJACENT,
        rng: random.Random | None = None,
    ) -> "PuzzleEngine":
        """Create an engine around an existing board (e.g. a replayed position).

        The tiles must form a permutation and ``blank_pos`` must point at
        the blank; otherwise :class:`~fifteen.errors.BoardError` is raised.
        """
        checked = Board.from_flat(board.size, board.tiles)
        if checked.blank_pos != board.blank_pos:
            raise BoardError(
                f"Cached blank position {board.blank_pos} does not hold the "
                f"blank; it is at {checked.blank_pos}."
            )
        obj = cls(board.size, move_model, rng)
        obj.state = GameState(board)
        return obj

    # -- board access ---------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def board(self) -> list[int]:
        """A copy of the tiles in board order."""
        return self.state.board.tiles[:]

    @property
    def blank(self) -> int:
        return self.state.board.blank

    @property
    def blank_pos(self) -> int:
        return self.state.board.blank_pos

    @property
    def moves(self) -> int:
        return self.state.moves

    def position_to_coord(self, pos: int) -> tuple[int, int]:
        return self.state.board.to_coord(pos)

    def coord_to_position(self, x: int, y: int) -> int:
        return self.state.board.to_position(x, y)

    def position_of(self, tile: int) -> int:
        return self.state.board.position_of(tile)

    # -- parity ---------------------------------------------------------------

    def inversions(self) -> int:
        return Parity.inversions(self.state.board)

    def is_solvable(self) -> bool:
        return Parity.is_solvable(self.state.board)

    # -- shuffling ------------------------------------------------------------

    def shuffle(self) -> None:
        """Replace the board with a uniformly random solvable arrangement."""
        attempts = GameGenerator.shuffle(self.state.board, self._rng)
        self.state.reset_moves()
        logger.debug("Engine shuffled after %d attempt(s)", attempts)

    # -- movement -------------------------------------------------------------

    def attempt_move(self, target: int) -> bool:
        """Slide toward the blank from the tile at position *target*.

        Returns True if the move was legal and applied.  An illegal move
        leaves the board untouched.  A position outside the board raises
        :class:`~fifteen.errors.PositionError`.
        """
        board = self.state.board
        tx, ty = board.to_coord(target)
        bx, by = board.blank_coord

        if self.move_model is MoveModel.ADJACENT:
            legal = abs(tx - bx) + abs(ty - by) == 1
        else:
            legal = (tx == bx) != (ty == by)

        if not legal:
            return False

        self._slide(target)
        self.state.increment_moves()
        return True

    def attempt_move_tile(self, tile: int) -> bool:
        """Like :meth:`attempt_move`, keyed by tile identifier."""
        return self.attempt_move(self.position_of(tile))

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Always a single-tile slide, whatever the move model.
        """
        board = self.state.board
        bx, by = board.blank_coord
        dx, dy = _OFFSETS[Direction(direction)]
        tx, ty = bx + dx, by + dy

        if not (0 <= tx < board.size and 0 <= ty < board.size):
            return False

        self._slide(board.to_position(tx, ty))
        self.state.increment_moves()
        return True

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _slide(self, target: int) -> None:
        """Shift every tile from *target* up to the blank one cell toward it.

        *target* must share a row or column with the blank.
        """
        board = self.state.board
        tiles = board.tiles
        blank_pos = board.blank_pos
        if target // board.size == blank_pos // board.size:
            step = 1 if target > blank_pos else -1
        else:
            step = board.size if target > blank_pos else -board.size

        cur = blank_pos
        while cur != target:
            tiles[cur] = tiles[cur + step]
            cur += step
        tiles[target] = board.blank
        board.blank_pos = target
