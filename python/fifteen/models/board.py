"""Board model for the sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fifteen.errors import BoardError, BoardSizeError, PositionError

MIN_SIZE = 2


class Direction(StrEnum):
    """Direction the *tile* travels."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MoveModel(StrEnum):
    """How a move request is interpreted.

    ``ADJACENT`` swaps a single tile next to the blank.  ``CHAIN`` accepts
    any tile in the blank's row or column and slides the whole line of
    tiles between them in one move.
    """

    ADJACENT = "adjacent"
    CHAIN = "chain"


def check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise BoardSizeError(f"Board size must be an integer, got {size!r}.")
    if size < MIN_SIZE:
        raise BoardSizeError(
            f"Board size must be at least {MIN_SIZE}, got {size}."
        )


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list holding a permutation of
    ``0..size²-1``.  The largest identifier (``size²-1``) is the blank, so
    the solved board is simply ``[0, 1, ..., size²-1]``.

    ``blank_pos`` caches the linear position of the blank.  Anything that
    rearranges ``tiles`` is responsible for keeping it in step.
    """

    size: int
    tiles: list[int]
    blank_pos: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank last)."""
        check_size(size)
        return cls(size=size, tiles=list(range(size * size)), blank_pos=size * size - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        check_size(size)
        if len(flat) != size * size:
            raise BoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles = list(flat)
        if sorted(tiles) != list(range(size * size)):
            raise BoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}, got {tiles}."
            )
        return cls(size=size, tiles=tiles, blank_pos=tiles.index(size * size - 1))

    # -- coordinates ----------------------------------------------------------

    def to_coord(self, pos: int) -> tuple[int, int]:
        """Convert a linear position to ``(x, y)``."""
        self._check_position(pos)
        return pos % self.size, pos // self.size

    def to_position(self, x: int, y: int) -> int:
        """Convert ``(x, y)`` to a linear position."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise PositionError(
                f"Coordinate ({x}, {y}) is outside a {self.size}×{self.size} board."
            )
        return y * self.size + x

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < self.size * self.size:
            raise PositionError(
                f"Position {pos} is outside a {self.size}×{self.size} board."
            )

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.size * self.size - 1

    @property
    def blank_coord(self) -> tuple[int, int]:
        return self.to_coord(self.blank_pos)

    def get_tile(self, pos: int) -> int:
        self._check_position(pos)
        return self.tiles[pos]

    def position_of(self, tile: int) -> int:
        """Return the position currently holding *tile*."""
        if not 0 <= tile < self.size * self.size:
            raise PositionError(f"No tile {tile} on a {self.size}×{self.size} board.")
        return self.tiles.index(tile)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(tile == pos for pos, tile in enumerate(self.tiles))

    def is_tile_correct(self, pos: int) -> bool:
        """Check if the tile at *pos* is in its goal position."""
        return self.get_tile(pos) == pos

    def is_permutation(self) -> bool:
        return sorted(self.tiles) == list(range(self.size * self.size))

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank_pos=self.blank_pos)
