"""Fifteen — sliding tile puzzle.

Usage::

    fifteen                       # rich terminal, 4×4
    fifteen -f vanilla -s 3       # plain ANSI terminal, 3×3
    fifteen -f pygame -m chain    # Pygame GUI, whole-line slides
    fifteen --preview --seed 7    # print one shuffled board and exit
"""

import importlib
import random
from enum import StrEnum
from typing import Optional

import typer

from fifteen.frontend.session import MAX_SIZE, MIN_SIZE, GameSession
from fifteen.frontend.styles import DEFAULT_STYLE, style_names
from fifteen.log import configure_logging
from fifteen.models.board import MoveModel


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "fifteen.frontend.cli.vanilla.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
    Frontend.pygame: "fifteen.frontend.gui.pygame.app",
    Frontend.pyqt: "fifteen.frontend.gui.pyqt.app",
}

_GUI = {Frontend.pygame, Frontend.pyqt}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


def _check_style(value: str) -> str:
    if value not in style_names():
        raise typer.BadParameter(f"choose from {', '.join(style_names())}")
    return value


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    move_model: MoveModel = typer.Option(
        MoveModel.ADJACENT, "-m", "--moves",
        help="adjacent: one tile per move; chain: slide a whole row/column.",
    ),
    style: str = typer.Option(
        DEFAULT_STYLE, "--style",
        callback=_check_style,
        help=f"Tile style ({', '.join(style_names())}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible board.",
    ),
    preview: bool = typer.Option(
        False, "--preview",
        help="Print one shuffled board with its parity and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity.",
    ),
) -> None:
    """Fifteen sliding tile puzzle."""
    configure_logging(verbose)
    rng = random.Random(seed)

    if preview:
        from fifteen.frontend.cli.rich.app import draw_preview

        session = GameSession(size, move_model, style, rng)
        session.shuffle()
        draw_preview(session)
        return

    try:
        mod = importlib.import_module(_RUNNERS[frontend])
    except ImportError as exc:
        if frontend in _GUI:
            typer.echo(
                f"The {frontend} frontend needs the GUI extras: "
                f"pip install 'fifteen-puzzle[gui]' ({exc})",
                err=True,
            )
            raise typer.Exit(code=1) from exc
        raise
    mod.run(size=size, move_model=move_model, style=style, rng=rng)


if __name__ == "__main__":
    app()
