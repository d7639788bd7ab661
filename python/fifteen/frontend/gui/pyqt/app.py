"""PyQt6 GUI frontend — one button per cell, click to slide."""

from __future__ import annotations

import random
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.frontend.session import MAX_SIZE, MIN_SIZE, GameSession
from fifteen.models.board import Direction, MoveModel
from fifteen.models.style import RGB

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_PINK = "#f5c2e7"
_GREEN = "#a6e3a1"
_YELLOW = "#f9e2af"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HELP = "Click / Arrows  move     R  shuffle     C  style     M  model     +/-  size     Esc  quit"

_DIRS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _css(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class _BoardPage(QWidget):
    """The puzzle board with tile buttons and live stats."""

    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self.setObjectName("page")
        self.session = session
        self.session.on_win = self._on_win

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 13, QFont.Weight.Bold))
        self._status.setStyleSheet(f"color:{_YELLOW};")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        hint = QLabel(_HELP)
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._btns: list[QPushButton] = []
        self.rebuild()

    # -- helpers --

    def rebuild(self) -> None:
        """Recreate the button grid for the current board size."""
        for b in self._btns:
            self._grid.removeWidget(b)
            b.deleteLater()
        self._btns = []

        size = self.session.size
        tile_px = max(40, min(84, 400 // size))
        f_sz = max(12, tile_px // 4)
        for pos in range(size * size):
            b = QPushButton()
            b.setFixedSize(tile_px, tile_px)
            b.setFont(QFont("Helvetica", f_sz, QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, p=pos: self._click(p))
            self._grid.addWidget(b, pos // size, pos % size)
            self._btns.append(b)
        self.sync()

    def sync(self) -> None:
        session = self.session
        size = session.size
        colour = _GREEN if session.is_won else _TEXT
        self._title.setText(f"Fifteen  {size}×{size}")
        self._title.setStyleSheet(f"color:{colour};")
        self._stats.setText(
            f"Moves: {session.engine.moves}    Style: {session.styler.name}"
            f"    Model: {session.engine.move_model}"
        )
        for view in session.tiles():
            b = self._btns[view.position]
            if view.style is None:
                b.setText("")
                b.setStyleSheet(
                    f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                )
                continue
            b.setText(view.style.label or "")
            b.setStyleSheet(
                f"QPushButton{{background:{_css(view.style.fill)};"
                f"color:{_css(view.style.foreground)};"
                f"border:none;border-radius:8px;font-weight:bold;}}"
            )

    def say(self, text: str) -> None:
        self._status.setText(text)

    def _on_win(self, engine: PuzzleEngine) -> None:
        self.say(f"★  Solved in {engine.moves} moves!  ★")

    def _click(self, pos: int) -> None:
        self.say("")
        self.session.click(pos)
        self.sync()


class _MainWindow(QMainWindow):
    def __init__(self, session: GameSession) -> None:
        super().__init__()
        self.setWindowTitle("Fifteen")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(480, 580)

        self._page = _BoardPage(session)
        self.setCentralWidget(self._page)

    def _resize_board(self, size: int) -> None:
        if MIN_SIZE <= size <= MAX_SIZE:
            self._page.session.change_size(size)
            self._page.say("")
            self._page.rebuild()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        page = self._page
        session = page.session

        if key in _DIRS:
            page.say("")
            session.press(_DIRS[key])
        elif key == Qt.Key.Key_R:
            page.say("")
            session.shuffle()
        elif key == Qt.Key.Key_C:
            page.say(f"Style: {session.cycle_style()}")
        elif key == Qt.Key.Key_M:
            page.say(f"Model: {session.toggle_move_model()}")
        elif key in (Qt.Key.Key_Plus, Qt.Key.Key_Equal):
            self._resize_board(session.size + 1)
            return
        elif key == Qt.Key.Key_Minus:
            self._resize_board(session.size - 1)
            return
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
            return
        else:
            super().keyPressEvent(event)
            return
        page.sync()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    size: int = 4,
    move_model: MoveModel = MoveModel.ADJACENT,
    style: str = "redwhite",
    rng: random.Random | None = None,
) -> None:
    """Launch the PyQt6 GUI with a freshly shuffled board."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    session = GameSession(size, move_model, style, rng)
    session.shuffle()
    window = _MainWindow(session)
    window.show()
    qapp.exec()
