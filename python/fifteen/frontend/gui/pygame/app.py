"""Pygame GUI frontend — click a tile to slide it.

Under the chain move model a click anywhere in the blank's row or column
slides the whole line.  Image styles are drawn from a procedural picture
sliced by each tile's ``image_offset``.
"""

from __future__ import annotations

import random

import pygame

from fifteen.engine.gameplay import PuzzleEngine
from fifteen.frontend.session import MAX_SIZE, MIN_SIZE, GameSession
from fifteen.frontend.styles import gradient
from fifteen.models.board import Direction, MoveModel
from fifteen.models.style import TileView

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_PINK = (245, 194, 231)
COL_GREEN = (166, 227, 161)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 620
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px

_DIRS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, session: GameSession) -> None:
        self._session = session
        self._session.on_win = self._on_win
        self._status_msg = ""

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Fifteen")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._layout()

    # ── layout ──────────────────────────────────────────────────────────────

    def _layout(self) -> None:
        """Recompute tile geometry and the board picture for the current size."""
        sz = self._session.size
        self._tpx = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        self._total = sz * self._tpx + (sz + 1) * TILE_GAP
        self._ox = _cx(self._total) + TILE_GAP
        self._oy = BOARD_TOP + TILE_GAP
        self._f_tile = pygame.font.SysFont("Helvetica", max(14, self._tpx // 3), bold=True)

        # Bilinear gradient: four corner colours smooth-scaled to the board.
        corners = pygame.Surface((2, 2))
        for x in (0, 1):
            for y in (0, 1):
                corners.set_at((x, y), gradient(x, y, 2))
        self._picture = pygame.transform.smoothscale(
            corners, (sz * self._tpx, sz * self._tpx)
        )

    def _tile_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            self._ox + x * (self._tpx + TILE_GAP),
            self._oy + y * (self._tpx + TILE_GAP),
            self._tpx,
            self._tpx,
        )

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_tile(self, view: TileView) -> None:
        style = view.style
        assert style is not None
        rect = self._tile_rect(*view.coord)
        if style.image_offset is not None:
            ox, oy = style.image_offset
            area = pygame.Rect(-ox * self._tpx, -oy * self._tpx, self._tpx, self._tpx)
            self._surf.blit(self._picture, rect.topleft, area)
        else:
            pygame.draw.rect(self._surf, style.fill, rect, border_radius=6)
        if style.label is not None:
            lbl = self._f_tile.render(style.label, True, style.foreground)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        session = self._session
        engine = session.engine
        sz = session.size

        title_col = COL_GREEN if session.is_won else COL_TEXT
        _blit_center(
            self._surf,
            self._f_title.render(f"Fifteen  {sz}×{sz}", True, title_col),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {engine.moves}    Style: {session.styler.name}"
                f"    Model: {engine.move_model}",
                True,
                COL_PINK,
            ),
            44,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(self._total), BOARD_TOP, self._total, self._total),
            border_radius=10,
        )
        for view in session.tiles():
            if not view.is_blank:
                self._draw_tile(view)

        footer_y = BOARD_TOP + self._total + 14
        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_body.render(self._status_msg, True, COL_YELLOW),
                footer_y,
            )
        _blit_center(
            self._surf,
            self._f_small.render(
                "Click / Arrows  move     R  shuffle     C  style"
                "     M  model     +/-  size     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            footer_y + 30,
        )

    # ── events ──────────────────────────────────────────────────────────────

    def _on_win(self, engine: PuzzleEngine) -> None:
        self._status_msg = f"★  Solved in {engine.moves} moves!  ★"

    def _click(self, pos: tuple[int, int]) -> None:
        engine = self._session.engine
        for y in range(engine.size):
            for x in range(engine.size):
                if self._tile_rect(x, y).collidepoint(pos):
                    self._status_msg = ""
                    self._session.click(engine.coord_to_position(x, y))
                    return

    def _resize(self, size: int) -> None:
        if MIN_SIZE <= size <= MAX_SIZE:
            self._session.change_size(size)
            self._status_msg = ""
            self._layout()

    def _handle(self, ev: pygame.event.Event) -> bool:
        session = self._session
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            self._click(ev.pos)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _DIRS:
                self._status_msg = ""
                session.press(_DIRS[ev.key])
            elif ev.key == pygame.K_r:
                session.shuffle()
                self._status_msg = ""
            elif ev.key == pygame.K_c:
                self._status_msg = f"Style: {session.cycle_style()}"
            elif ev.key == pygame.K_m:
                self._status_msg = f"Model: {session.toggle_move_model()}"
            elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self._resize(session.size + 1)
            elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self._resize(session.size - 1)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break
            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    size: int = 4,
    move_model: MoveModel = MoveModel.ADJACENT,
    style: str = "redwhite",
    rng: random.Random | None = None,
) -> None:
    """Launch the Pygame GUI with a freshly shuffled board."""
    session = GameSession(size, move_model, style, rng)
    session.shuffle()
    PygameApp(session).run_loop()
