"""Key actions shared by the terminal frontends."""

from __future__ import annotations

from fifteen.frontend.session import MAX_SIZE, MIN_SIZE, GameSession
from fifteen.models.board import Direction

DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def apply_action(session: GameSession, key: str) -> str:
    """Apply a normalised key action to *session*; return a status line."""
    if key in DIRECTIONS:
        session.press(DIRECTIONS[key])
        return ""
    if key == "shuffle":
        session.shuffle()
        return "Shuffled!"
    if key == "style":
        return f"Style: {session.cycle_style()}"
    if key == "model":
        return f"Moves: {session.toggle_move_model()} (new game)"
    if key == "bigger" and session.size < MAX_SIZE:
        session.change_size(session.size + 1)
        return f"Size {session.size}×{session.size}"
    if key == "smaller" and session.size > MIN_SIZE:
        session.change_size(session.size - 1)
        return f"Size {session.size}×{session.size}"
    return ""
