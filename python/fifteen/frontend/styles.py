"""Tile styles — how each tile looks, independent of where it sits.

A styler is called once per non-blank tile with the tile identifier, the
board size and the tile's *home* coordinate (where it belongs on a solved
board).  It returns a :class:`~fifteen.models.style.TileStyle` and must not
touch the engine.
"""

from __future__ import annotations

from typing import Protocol

from fifteen.errors import StyleError
from fifteen.models.style import RGB, TileStyle

RED: RGB = (200, 40, 50)
WHITE: RGB = (240, 240, 235)
GRAY: RGB = (140, 140, 150)
INK: RGB = (20, 20, 30)


class TileStyler(Protocol):
    name: str

    def style(self, tile: int, size: int, coord: tuple[int, int]) -> TileStyle: ...


class CheckerboardStyler:
    """Red and white checkerboard, numbered."""

    name = "redwhite"

    def style(self, tile: int, size: int, coord: tuple[int, int]) -> TileStyle:
        _, y = coord
        # On even boards the row offset keeps the pattern from striping.
        red = (tile + y) % 2 == 0 if size % 2 == 0 else tile % 2 == 0
        if red:
            return TileStyle(("tile", "red"), RED, WHITE, str(tile + 1))
        return TileStyle(("tile", "white"), WHITE, RED, str(tile + 1))


class MonochromeStyler:
    name = "gray"

    def style(self, tile: int, size: int, coord: tuple[int, int]) -> TileStyle:
        return TileStyle(("tile", "gray"), GRAY, WHITE, str(tile + 1))


def gradient(x: int, y: int, size: int) -> RGB:
    """Colour of cell ``(x, y)`` in the procedural board picture."""
    span = size - 1
    return (
        60 + 160 * x // span,
        50 + 120 * (x + y) // (2 * span),
        220 - 160 * y // span,
    )


class ImageStyler:
    """Each tile shows its slice of a whole-board picture.

    Renderers that can draw the picture use ``image_offset``; the rest fall
    back to ``fill``, the picture's colour at the tile's home cell.
    """

    def __init__(self, name: str, labelled: bool) -> None:
        self.name = name
        self.labelled = labelled

    def style(self, tile: int, size: int, coord: tuple[int, int]) -> TileStyle:
        x, y = coord
        return TileStyle(
            classes=("tile", self.name),
            fill=gradient(x, y, size),
            foreground=WHITE,
            label=str(tile + 1) if self.labelled else None,
            image_offset=(-x, -y),
        )


STYLES: dict[str, TileStyler] = {
    s.name: s
    for s in (
        CheckerboardStyler(),
        MonochromeStyler(),
        ImageStyler("mosaic", labelled=False),
        ImageStyler("mosaic-numbered", labelled=True),
    )
}

DEFAULT_STYLE = CheckerboardStyler.name


def style_names() -> list[str]:
    return list(STYLES)


def get_styler(name: str) -> TileStyler:
    try:
        return STYLES[name]
    except KeyError:
        raise StyleError(
            f"Unknown style {name!r}; choose from {', '.join(STYLES)}."
        ) from None
