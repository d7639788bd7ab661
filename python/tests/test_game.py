"""PuzzleEngine — construction, both move models, and state invariants."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.errors import BoardError, BoardSizeError, PositionError
from fifteen.models.board import Board, Direction, MoveModel


# -- helpers ------------------------------------------------------------------


def _engine(flat: list[int], model: MoveModel = MoveModel.ADJACENT) -> PuzzleEngine:
    size = int(len(flat) ** 0.5)
    return PuzzleEngine.from_board(Board.from_flat(size, flat), model)


def _assert_consistent(engine: PuzzleEngine) -> None:
    board = engine.board
    assert sorted(board) == list(range(engine.size * engine.size))
    assert board[engine.blank_pos] == engine.blank


# -- construction ---------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 8])
def test_new_engine_is_solved(size: int) -> None:
    engine = PuzzleEngine(size)
    assert engine.board == list(range(size * size))
    assert engine.is_solved()
    assert engine.is_solvable()
    assert engine.inversions() == 0
    assert engine.blank == size * size - 1
    assert engine.moves == 0


@pytest.mark.parametrize("size", [1, 0, -1])
def test_tiny_board_rejected(size: int) -> None:
    with pytest.raises(BoardSizeError):
        PuzzleEngine(size)


def test_board_property_is_a_copy() -> None:
    engine = PuzzleEngine(3)
    engine.board[0] = 5
    assert engine.is_solved()


def test_from_board_rejects_stale_blank_position() -> None:
    board = Board(size=3, tiles=list(range(9)), blank_pos=0)
    with pytest.raises(BoardError, match="blank"):
        PuzzleEngine.from_board(board)


def test_from_board_rejects_non_permutation() -> None:
    board = Board(size=2, tiles=[0, 0, 1, 3], blank_pos=3)
    with pytest.raises(BoardError):
        PuzzleEngine.from_board(board)


def test_coordinate_helpers() -> None:
    engine = PuzzleEngine(4)
    for pos in range(16):
        assert engine.coord_to_position(*engine.position_to_coord(pos)) == pos
    with pytest.raises(PositionError):
        engine.position_to_coord(16)
    with pytest.raises(PositionError):
        engine.coord_to_position(0, 4)


# -- adjacent model -------------------------------------------------------------


def test_adjacent_scenario_solves_in_two_moves() -> None:
    engine = _engine([0, 1, 2, 3, 4, 5, 8, 6, 7])
    assert engine.blank_pos == 6

    assert engine.attempt_move(7)
    assert engine.board == [0, 1, 2, 3, 4, 5, 6, 8, 7]
    assert not engine.is_solved()

    assert engine.attempt_move(8)
    assert engine.board == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert engine.is_solved()
    assert engine.moves == 2


@pytest.mark.parametrize("target", [0, 2, 4, 6])
def test_adjacent_rejects_non_neighbours(target: int) -> None:
    # Blank at the centre; corners are diagonal, 4 is the blank itself.
    engine = _engine([0, 1, 2, 3, 8, 5, 6, 7, 4])
    before = engine.board
    assert not engine.attempt_move(target)
    assert engine.board == before
    assert engine.blank_pos == 4
    assert engine.moves == 0


def test_adjacent_rejects_far_tile_in_same_column() -> None:
    engine = PuzzleEngine(3)
    assert not engine.attempt_move(2)
    assert engine.is_solved()


def test_adjacent_rejects_row_wraparound() -> None:
    # Positions 2 and 3 are consecutive but on different rows.
    engine = _engine([0, 1, 2, 8, 4, 5, 6, 7, 3])
    assert not engine.attempt_move(2)


def test_attempt_move_tile_uses_identifier() -> None:
    engine = PuzzleEngine(3)
    assert engine.attempt_move_tile(7)
    assert engine.board == [0, 1, 2, 3, 4, 5, 6, 8, 7]


# -- chain model ----------------------------------------------------------------


def test_chain_slides_column_in_one_move() -> None:
    engine = PuzzleEngine(3, MoveModel.CHAIN)
    assert engine.attempt_move(2)
    assert engine.board == [0, 1, 8, 3, 4, 2, 6, 7, 5]
    assert engine.blank_pos == 2
    assert engine.moves == 1


def test_chain_slides_row_in_one_move() -> None:
    engine = PuzzleEngine(3, MoveModel.CHAIN)
    assert engine.attempt_move(6)
    assert engine.board == [0, 1, 2, 3, 4, 5, 8, 6, 7]
    assert engine.blank_pos == 6


def test_chain_slides_toward_higher_positions() -> None:
    engine = _engine([8, 0, 1, 2, 3, 4, 5, 6, 7], MoveModel.CHAIN)
    assert engine.attempt_move(2)
    assert engine.board == [0, 1, 8, 2, 3, 4, 5, 6, 7]
    assert engine.attempt_move(8)
    assert engine.board == [0, 1, 4, 2, 3, 7, 5, 6, 8]


def test_chain_single_step_matches_adjacent() -> None:
    chain = PuzzleEngine(4, MoveModel.CHAIN)
    adjacent = PuzzleEngine(4, MoveModel.ADJACENT)
    assert chain.attempt_move(11) and adjacent.attempt_move(11)
    assert chain.board == adjacent.board


@pytest.mark.parametrize("target", [0, 4, 8])
def test_chain_rejects_diagonal_and_blank(target: int) -> None:
    engine = PuzzleEngine(3, MoveModel.CHAIN)
    assert not engine.attempt_move(target)
    assert engine.is_solved()
    assert engine.moves == 0


# -- fail fast ----------------------------------------------------------------


@pytest.mark.parametrize("model", list(MoveModel))
@pytest.mark.parametrize("target", [-1, 9, 42])
def test_out_of_range_target_raises(model: MoveModel, target: int) -> None:
    engine = PuzzleEngine(3, model)
    with pytest.raises(PositionError):
        engine.attempt_move(target)
    assert engine.is_solved()


# -- directional moves ----------------------------------------------------------


def test_direction_is_where_the_tile_goes() -> None:
    engine = PuzzleEngine(3)
    assert not engine.move(Direction.UP)  # nothing below the blank
    assert not engine.move(Direction.LEFT)  # nothing right of the blank
    assert engine.move(Direction.DOWN)
    assert engine.board == [0, 1, 2, 3, 4, 8, 6, 7, 5]
    assert engine.move(Direction.RIGHT)
    assert engine.board == [0, 1, 2, 3, 8, 4, 6, 7, 5]
    assert engine.move(Direction.LEFT)
    assert engine.move(Direction.UP)
    assert engine.is_solved()
    assert engine.moves == 4


# -- invariants -----------------------------------------------------------------


@pytest.mark.parametrize("model", list(MoveModel))
@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_random_play_keeps_a_permutation(model: MoveModel, size: int) -> None:
    rng = random.Random(size)
    engine = PuzzleEngine(size, model, rng)
    engine.shuffle()
    _assert_consistent(engine)
    for _ in range(500):
        before = engine.board
        moved = engine.attempt_move(rng.randrange(size * size))
        if not moved:
            assert engine.board == before
        _assert_consistent(engine)
        assert engine.is_solvable()


def test_solved_board_can_be_left_and_reentered() -> None:
    engine = PuzzleEngine(4)
    assert engine.is_solved()
    assert engine.attempt_move(14)
    assert not engine.is_solved()
    assert engine.attempt_move(15)
    assert engine.is_solved()


def test_shuffle_resets_move_counter() -> None:
    engine = PuzzleEngine(3, rng=random.Random(5))
    engine.attempt_move(7)
    engine.shuffle()
    assert engine.moves == 0
    assert engine.is_solvable()
    _assert_consistent(engine)
