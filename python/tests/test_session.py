"""GameSession — engine ownership, win notification and tile views."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.errors import StyleError
from fifteen.frontend.session import GameSession
from fifteen.models.board import Direction, MoveModel


class _ScriptedRng:
    """Stands in for ``random.Random``: each shuffle yields the next arrangement."""

    def __init__(self, arrangements: list[list[int]]) -> None:
        self._arrangements = iter(arrangements)

    def shuffle(self, tiles: list[int]) -> None:
        tiles[:] = next(self._arrangements)


def test_change_size_replaces_engine() -> None:
    session = GameSession(size=3, move_model=MoveModel.CHAIN)
    old = session.engine
    old.attempt_move(7)

    session.change_size(5)

    assert session.engine is not old
    assert session.size == 5
    assert session.engine.is_solved()
    assert session.engine.move_model is MoveModel.CHAIN
    # The old engine is left alone, not resized.
    assert old.size == 3


def test_toggle_move_model_starts_fresh_engine() -> None:
    session = GameSession(size=4)
    old = session.engine
    assert session.toggle_move_model() is MoveModel.CHAIN
    assert session.engine is not old
    assert session.engine.move_model is MoveModel.CHAIN
    assert session.toggle_move_model() is MoveModel.ADJACENT


def test_win_callback_fires_once_per_solve() -> None:
    wins: list[PuzzleEngine] = []
    session = GameSession(size=3, on_win=wins.append)

    assert session.click(7)  # leave the solved state
    assert wins == []
    assert session.click(8)  # and come back
    assert wins == [session.engine]

    assert not session.click(0)  # illegal move, no second notification
    assert len(wins) == 1

    assert session.press(Direction.RIGHT)
    assert session.press(Direction.LEFT)
    assert len(wins) == 2


def test_clicking_the_blank_does_nothing() -> None:
    session = GameSession(size=3, move_model=MoveModel.CHAIN)
    assert not session.click(8)
    assert session.engine.moves == 0


def test_shuffle_is_reproducible_with_seed() -> None:
    a = GameSession(size=4, rng=random.Random(9))
    b = GameSession(size=4, rng=random.Random(9))
    a.shuffle()
    b.shuffle()
    assert a.engine.board == b.engine.board
    assert a.engine.is_solvable()


def test_shuffle_never_leaves_the_board_solved() -> None:
    wins: list[PuzzleEngine] = []
    rng = _ScriptedRng([[0, 1, 2, 3], [0, 1, 3, 2]])
    session = GameSession(size=2, rng=rng, on_win=wins.append)  # type: ignore[arg-type]

    session.shuffle()
    assert session.engine.board == [0, 1, 3, 2]
    assert not session.is_won

    assert session.click(3)
    assert session.is_won
    assert wins == [session.engine]


def test_tiles_describe_every_cell() -> None:
    session = GameSession(size=3)
    session.click(7)
    views = session.tiles()

    assert [v.tile for v in views] == session.engine.board
    assert [v.position for v in views] == list(range(9))
    assert views[4].coord == (1, 1)

    blank = views[7]
    assert blank.is_blank
    assert blank.style is None

    moved = views[8]
    assert moved.tile == 7
    assert not moved.correct
    assert moved.style is not None
    assert moved.style.label == "8"
    assert views[0].correct
    assert [v.correct for v in views] == [
        v.tile == v.position for v in views
    ]


def test_tile_style_follows_home_cell_not_current_cell() -> None:
    session = GameSession(size=3, style="mosaic")
    session.click(7)
    moved = session.tiles()[8]
    # Tile 7 belongs at (1, 2) even though it now sits at (2, 2).
    assert moved.coord == (2, 2)
    assert moved.style.image_offset == (-1, -2)


def test_cycle_style_visits_every_style() -> None:
    session = GameSession(size=3)
    seen = {session.styler.name}
    for _ in range(3):
        seen.add(session.cycle_style())
    assert seen == {"redwhite", "gray", "mosaic", "mosaic-numbered"}
    assert session.cycle_style() == "redwhite"


def test_unknown_style_rejected() -> None:
    with pytest.raises(StyleError):
        GameSession(style="plaid")
    session = GameSession()
    with pytest.raises(KeyError):
        session.change_style("plaid")
