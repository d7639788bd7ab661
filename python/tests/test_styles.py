"""Tile stylers."""

from __future__ import annotations

from fifteen.frontend.styles import (
    GRAY,
    RED,
    WHITE,
    CheckerboardStyler,
    ImageStyler,
    MonochromeStyler,
    get_styler,
    gradient,
)


def test_checkerboard_even_board_offsets_each_row() -> None:
    styler = CheckerboardStyler()
    # 4×4: tile 0 at home row 0 is red, tile 4 starts row 1 and is white.
    assert styler.style(0, 4, (0, 0)).fill == RED
    assert styler.style(1, 4, (1, 0)).fill == WHITE
    assert styler.style(4, 4, (0, 1)).fill == WHITE
    assert styler.style(5, 4, (1, 1)).fill == RED


def test_checkerboard_odd_board_alternates_by_identifier() -> None:
    styler = CheckerboardStyler()
    assert styler.style(2, 3, (2, 0)).fill == RED
    assert styler.style(3, 3, (0, 1)).fill == WHITE
    assert styler.style(3, 3, (0, 1)).classes == ("tile", "white")


def test_labels_are_one_based() -> None:
    assert CheckerboardStyler().style(0, 3, (0, 0)).label == "1"
    assert MonochromeStyler().style(7, 3, (1, 2)).label == "8"


def test_monochrome_is_uniform() -> None:
    styler = MonochromeStyler()
    fills = {styler.style(t, 3, (t % 3, t // 3)).fill for t in range(8)}
    assert fills == {GRAY}


def test_image_styles_offset_by_home_cell() -> None:
    plain = ImageStyler("mosaic", labelled=False).style(5, 3, (2, 1))
    numbered = get_styler("mosaic-numbered").style(5, 3, (2, 1))
    assert plain.image_offset == numbered.image_offset == (-2, -1)
    assert plain.label is None
    assert numbered.label == "6"
    assert plain.fill == gradient(2, 1, 3)


def test_gradient_corners() -> None:
    assert gradient(0, 0, 3) == (60, 50, 220)
    assert gradient(2, 2, 3) == (220, 170, 60)
