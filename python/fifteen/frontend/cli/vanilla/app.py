"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import random
import sys

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.frontend.cli.actions import apply_action
from fifteen.frontend.cli.input_handler import get_key
from fifteen.frontend.session import GameSession
from fifteen.models.board import MoveModel
from fifteen.models.style import RGB, TileView


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _colour(fg: RGB, bg: RGB) -> str:
    return f"\033[1;38;2;{fg[0]};{fg[1]};{fg[2]}m\033[48;2;{bg[0]};{bg[1]};{bg[2]}m"


# -- board rendering ----------------------------------------------------------


def _cell(view: TileView, width: int) -> str:
    if view.style is None:
        return f"{_DIM} {'·':>{width}} {_R}"
    label = view.style.label or ""
    return f"{_colour(view.style.foreground, view.style.fill)} {label:>{width}} {_R}"


def render_board(session: GameSession) -> str:
    """Return an ANSI-coloured text representation of the board."""
    size = session.size
    width = len(str(size * size))  # widest label
    sep = "+" + (("-" * (width + 2) + "+") * size)

    views = session.tiles()
    lines: list[str] = [sep]
    for y in range(size):
        row = views[y * size : (y + 1) * size]
        lines.append("|" + "|".join(_cell(v, width) for v in row) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_game(session: GameSession, status: str = "") -> None:
    _clear()
    size = session.size
    engine = session.engine
    print(f"  {_C}=== Fifteen ({size}×{size}, {engine.move_model}) ==={_R}")
    print()
    print(render_board(session))
    print()
    print(f"  Moves: {_Y}{engine.moves}{_R}  |  Style: {_Y}{session.styler.name}{_R}")
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}R{_R}: shuffle  |  "
        f"{_C}C{_R}: style  |  "
        f"{_C}M{_R}: move model  |  "
        f"{_C}+/-{_R}: size  |  "
        f"{_C}Q{_R}: quit"
    )
    if status:
        print(f"\n  {status}")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    status = ""

    def _won(engine: PuzzleEngine) -> None:
        nonlocal status
        status = f"{_G}★ CONGRATULATIONS! Solved in {engine.moves} moves. ★{_R}"

    session.on_win = _won
    session.shuffle()

    while True:
        _show_game(session, status)
        status = ""
        key = get_key()
        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        msg = apply_action(session, key)
        if msg:
            status = f"{_Y}{msg}{_R}"


# -- public entry point -------------------------------------------------------


def run(
    size: int = 4,
    move_model: MoveModel = MoveModel.ADJACENT,
    style: str = "redwhite",
    rng: random.Random | None = None,
) -> None:
    """Launch the vanilla CLI."""
    _play(GameSession(size, move_model, style, rng))
