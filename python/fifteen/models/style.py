"""Purely cosmetic tile attributes handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class TileStyle:
    """Render attributes for one tile.

    ``image_offset`` is measured in tiles: a renderer showing a whole-board
    picture shifts it by ``offset * tile_width`` pixels on each axis.
    """

    classes: tuple[str, ...]
    fill: RGB
    foreground: RGB = (0, 0, 0)
    label: str | None = None
    image_offset: tuple[int, int] | None = None


@dataclass(frozen=True)
class TileView:
    """What a renderer needs to draw one cell."""

    tile: int
    position: int
    coord: tuple[int, int]
    style: TileStyle | None  # None for the blank
    correct: bool

    @property
    def is_blank(self) -> bool:
        return self.style is None
