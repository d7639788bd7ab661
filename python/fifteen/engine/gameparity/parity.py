"""Permutation parity and the sliding puzzle solvability theorem."""

from __future__ import annotations

from fifteen.models.board import Board


class Parity:
    """Stateless helpers — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count pairs ``i < j`` where the tile at ``j`` is lower than at ``i``.

        Pairs involving the blank are ignored.
        """
        blank = board.blank
        flat = [v for v in board.tiles if v != blank]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    @staticmethod
    def blank_row_from_bottom(board: Board) -> int:
        """Row of the blank counted from the bottom edge, starting at 1."""
        _, y = board.blank_coord
        return board.size - y

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd width: the inversion count must be even.  Even width: the blank
        must sit on an odd row from the bottom exactly when the inversion
        count is even.
        """
        even_inversions = Parity.inversions(board) % 2 == 0
        if board.size % 2 == 1:
            return even_inversions
        odd_row = Parity.blank_row_from_bottom(board) % 2 == 1
        return odd_row == even_inversions
