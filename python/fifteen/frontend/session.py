"""One active game as seen by a frontend.

A frontend holds a single :class:`GameSession`.  Starting over at another
size or move model builds a fresh engine rather than mutating the old one.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.frontend.styles import DEFAULT_STYLE, TileStyler, get_styler, style_names
from fifteen.models.board import Direction, MoveModel
from fifteen.models.style import TileView

logger = logging.getLogger(__name__)

# Board sizes offered by the frontends.
MIN_SIZE = 2
MAX_SIZE = 8

WinCallback = Callable[[PuzzleEngine], None]


class GameSession:
    """Owns the engine, the active tile style and the win notification."""

    def __init__(
        self,
        size: int = 4,
        move_model: MoveModel = MoveModel.ADJACENT,
        style: str = DEFAULT_STYLE,
        rng: random.Random | None = None,
        on_win: WinCallback | None = None,
    ) -> None:
        self.styler: TileStyler = get_styler(style)
        self.on_win = on_win
        self._rng = rng if rng is not None else random.Random()
        self.engine = PuzzleEngine(size, move_model, self._rng)
        self._won = self.engine.is_solved()

    # -- engine replacement ---------------------------------------------------

    def change_size(self, size: int) -> None:
        """Start a fresh, solved game with a *size*×*size* board."""
        self._replace(PuzzleEngine(size, self.engine.move_model, self._rng))

    def change_move_model(self, move_model: MoveModel) -> None:
        """Start a fresh, solved game under another move model."""
        self._replace(PuzzleEngine(self.engine.size, move_model, self._rng))

    def toggle_move_model(self) -> MoveModel:
        model = (
            MoveModel.CHAIN
            if self.engine.move_model is MoveModel.ADJACENT
            else MoveModel.ADJACENT
        )
        self.change_move_model(model)
        return model

    def _replace(self, engine: PuzzleEngine) -> None:
        logger.debug(
            "Replacing %d×%d engine with %d×%d (%s moves)",
            self.engine.size, self.engine.size,
            engine.size, engine.size, engine.move_model,
        )
        self.engine = engine
        self._won = engine.is_solved()

    # -- styles ---------------------------------------------------------------

    def change_style(self, name: str) -> None:
        self.styler = get_styler(name)

    def cycle_style(self) -> str:
        """Switch to the next registered style and return its name."""
        names = style_names()
        nxt = names[(names.index(self.styler.name) + 1) % len(names)]
        self.change_style(nxt)
        return nxt

    # -- play -----------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.engine.size

    @property
    def is_won(self) -> bool:
        return self.engine.is_solved()

    def shuffle(self) -> None:
        """Shuffle until the board is not already solved."""
        self.engine.shuffle()
        while self.engine.is_solved():
            logger.debug("Shuffle landed on the solved board, drawing again")
            self.engine.shuffle()
        self._won = False

    def click(self, position: int) -> bool:
        """Try to move the tile at *position*; notify on a fresh solve."""
        if position == self.engine.blank_pos:
            return False
        return self._after_move(self.engine.attempt_move(position))

    def press(self, direction: Direction) -> bool:
        return self._after_move(self.engine.move(direction))

    def _after_move(self, moved: bool) -> bool:
        if moved:
            solved = self.engine.is_solved()
            if solved and not self._won and self.on_win is not None:
                self.on_win(self.engine)
            self._won = solved
        return moved

    # -- rendering ------------------------------------------------------------

    def tiles(self) -> list[TileView]:
        """Board cells in order, each with its render attributes."""
        engine = self.engine
        views: list[TileView] = []
        for pos, tile in enumerate(engine.board):
            style = None
            if tile != engine.blank:
                home = engine.position_to_coord(tile)
                style = self.styler.style(tile, engine.size, home)
            views.append(
                TileView(
                    tile=tile,
                    position=pos,
                    coord=engine.position_to_coord(pos),
                    style=style,
                    correct=engine.state.board.is_tile_correct(pos),
                )
            )
        return views
