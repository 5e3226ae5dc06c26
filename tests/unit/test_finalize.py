import pytest

from palette_wizard.systems.finalize import blend, finalize
from palette_wizard.types import RenderStyle
from tests.test_utils import make_grid

RED = (200, 0, 0)
GREEN = (0, 100, 0)


def _two_column_grid(rows: int) -> list[list[tuple[int, int, int]]]:
    return [[RED, GREEN] for _ in range(rows)]


def test_basic_is_identity() -> None:
    raw = make_grid(4, 5)
    final = finalize(raw, RenderStyle.BASIC)
    assert [list(row) for row in final] == raw


def test_blend_truncates() -> None:
    assert blend((1, 3, 5), (0, 0, 0), 0.5, 0.5) == (0, 1, 2)


def test_pairwise_bottom_row_weights() -> None:
    final = finalize(_two_column_grid(4), RenderStyle.PAIRWISE_GRADIENT)
    # Row 0 of four: own weight 0.125, neighbour 0.875.
    assert final[0][0] == (25, 87, 0)
    assert final[0][1] == (175, 12, 0)


def test_pairwise_top_row_weights() -> None:
    final = finalize(_two_column_grid(4), RenderStyle.PAIRWISE_GRADIENT)
    assert final[3][0] == (175, 12, 0)
    assert final[3][1] == (25, 87, 0)


def test_inverse_mirrors_weights() -> None:
    raw = _two_column_grid(4)
    pairwise = finalize(raw, RenderStyle.PAIRWISE_GRADIENT)
    inverse = finalize(raw, RenderStyle.INVERSE_PAIRWISE_GRADIENT)
    assert inverse[0][0] == (175, 12, 0)
    assert inverse[0][1] == (25, 87, 0)
    assert inverse[0] == pairwise[3]
    assert inverse[3] == pairwise[0]


def test_last_column_wraps_to_first() -> None:
    raw = [[(0, 0, 0), (0, 0, 0), (255, 255, 255)]]
    final = finalize(raw, RenderStyle.PAIRWISE_GRADIENT)
    # Single row: gradient 0.5 both ways.
    assert final[0][1] == (127, 127, 127)
    assert final[0][2] == (127, 127, 127)
    assert final[0][0] == (0, 0, 0)


def test_single_swatch_is_unchanged() -> None:
    raw = [[(33, 66, 99)]]
    for style in RenderStyle:
        assert finalize(raw, style)[0][0] == (33, 66, 99)


@pytest.mark.parametrize("style", list(RenderStyle))
@pytest.mark.parametrize("rows, columns", [(3, 1), (3, 28), (8, 7)])
def test_dimensions_preserved(style: RenderStyle, rows: int, columns: int) -> None:
    final = finalize(make_grid(rows, columns), style)
    assert len(final) == rows
    assert all(len(row) == columns for row in final)


@pytest.mark.parametrize("raw", [[], [[]]])
def test_empty_grid_raises(raw: list) -> None:
    with pytest.raises(ValueError):
        finalize(raw, RenderStyle.BASIC)


def test_ragged_grid_raises() -> None:
    raw = [[RED, GREEN], [RED]]
    with pytest.raises(ValueError):
        finalize(raw, RenderStyle.PAIRWISE_GRADIENT)
