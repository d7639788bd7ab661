"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and session as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.color import Color
from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.frontend.cli.actions import apply_action
from fifteen.frontend.cli.input_handler import get_key
from fifteen.frontend.session import GameSession
from fifteen.models.board import MoveModel
from fifteen.models.style import TileView

console = Console()


# -- board rendering ----------------------------------------------------------


def _cell(view: TileView, width: int) -> Text:
    if view.style is None:
        return Text("·".rjust(width), style="dim")
    style = Style(
        color=Color.from_rgb(*view.style.foreground),
        bgcolor=Color.from_rgb(*view.style.fill),
        bold=True,
    )
    label = view.style.label or ""
    return Text(f" {label:>{width}} ", style=style)


def render_board(session: GameSession) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = session.size
    width = len(str(size * size))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(size):
        table.add_column(width=width + 2, justify="center")

    views = session.tiles()
    for y in range(size):
        table.add_row(*(_cell(v, width) for v in views[y * size : (y + 1) * size]))
    return table


def render_summary(session: GameSession) -> Text:
    """Inversion count and solvability line for the current board."""
    engine = session.engine
    summary = Text()
    summary.append("Inversions: ", style="dim")
    summary.append(str(engine.inversions()), style="bold yellow")
    summary.append("    Solvable: ", style="dim")
    summary.append(
        "yes" if engine.is_solvable() else "no",
        style="bold green" if engine.is_solvable() else "bold red",
    )
    return summary


# -- game screens -------------------------------------------------------------


def _draw_game(session: GameSession, status: str = "") -> None:
    """Draw the game screen."""
    console.clear()

    engine = session.engine
    size = session.size

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.moves), style="bold yellow")
    stats.append("    Style: ", style="dim")
    stats.append(session.styler.name, style="bold yellow")
    stats.append("    Model: ", style="dim")
    stats.append(str(engine.move_model), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("C", style="bold cyan")
    controls.append("  style   ", style="dim")
    controls.append("M", style="bold cyan")
    controls.append("  model   ", style="dim")
    controls.append("+/-", style="bold cyan")
    controls.append("  size   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    title_style = "bold green" if session.is_won else "bold cyan"
    panel = Panel(
        Align.center(render_board(session)),
        title=f"[{title_style}]Fifteen  {size}×{size}[/{title_style}]",
        border_style="bold green" if session.is_won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def draw_preview(session: GameSession) -> None:
    """Print the board once with its parity summary (non-interactive)."""
    size = session.size
    panel = Panel(
        Group(Align.center(render_board(session)), Text(""), Align.center(render_summary(session))),
        title=f"[bold cyan]Fifteen  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession) -> None:
    status = ""

    def _won(engine: PuzzleEngine) -> None:
        nonlocal status
        status = (
            f"[bold yellow]★[/bold yellow] [bold green]CONGRATULATIONS![/bold green]"
            f" Solved in {engine.moves} moves [bold yellow]★[/bold yellow]"
        )

    session.on_win = _won
    session.shuffle()

    while True:
        _draw_game(session, status)
        status = ""
        key = get_key()
        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        msg = apply_action(session, key)
        if msg:
            status = f"[yellow]{msg}[/yellow]"


# -- public entry point -------------------------------------------------------


def run(
    size: int = 4,
    move_model: MoveModel = MoveModel.ADJACENT,
    style: str = "redwhite",
    rng: random.Random | None = None,
) -> None:
    """Launch the Rich CLI."""
    _play(GameSession(size, move_model, style, rng))
