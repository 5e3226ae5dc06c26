import pytest

from palette_wizard.commands import Command
from palette_wizard.components import Tint
from palette_wizard.systems.compose import apply_tint, compose, compose_grid
from palette_wizard.types import RGB, Stage
from palette_wizard.utils.color import hsb_to_rgb
from tests.test_utils import drive_to, tick


@pytest.mark.parametrize(
    "hsb, expected",
    [
        ((0.0, 1.0, 1.0), (255, 0, 0)),
        ((0.5, 1.0, 1.0), (0, 255, 255)),
        ((0.25, 1.0, 1.0), (128, 255, 0)),
        ((0.0, 0.0, 0.5), (128, 128, 128)),
        ((0.0, 0.0, 0.0), (0, 0, 0)),
        ((0.0, 0.5, 1.0), (255, 128, 128)),
    ],
)
def test_hsb_to_rgb(hsb: tuple[float, float, float], expected: RGB) -> None:
    assert hsb_to_rgb(*hsb) == expected


def test_hsb_to_rgb_wraps_hue() -> None:
    assert hsb_to_rgb(1.5, 1.0, 1.0) == hsb_to_rgb(0.5, 1.0, 1.0)
    assert hsb_to_rgb(-0.25, 1.0, 1.0) == hsb_to_rgb(0.75, 1.0, 1.0)


@pytest.mark.parametrize("hue", [0.0, 0.1, 0.25, 0.5, 0.8, 1.3, -0.2])
def test_pure_value_id_is_the_plain_hue(hue: float) -> None:
    assert compose(hue, 1.0, 1.0, 1.0, Tint(0, 0, 0)) == hsb_to_rgb(hue, 1.0, 1.0)


def test_value_extremes_are_black_and_white() -> None:
    assert compose(0.3, 0.0, 1.0, 1.0) == (0, 0, 0)
    assert compose(0.3, 2.0, 1.0, 1.0) == (255, 255, 255)


def test_value_above_one_desaturates() -> None:
    assert compose(0.0, 1.5, 1.0, 1.0) == (255, 128, 128)


def test_brightness_factor_scales_both_halves() -> None:
    assert compose(0.0, 1.0, 1.0, 0.5) == (128, 0, 0)
    # Above 1 brightness comes straight from the factor.
    assert compose(0.0, 2.0, 1.0, 0.5) == (128, 128, 128)


def test_saturation_factor_scales_both_halves() -> None:
    assert compose(0.0, 1.0, 0.5, 1.0) == (255, 128, 128)
    assert compose(0.0, 1.5, 0.0, 1.0) == (255, 255, 255)


def test_tint_uses_red_ratio_as_weight_for_every_channel() -> None:
    tinted = apply_tint((100, 200, 50), Tint(r=50, g=0, b=20))
    assert tinted == (177, 100, 76)


def test_tint_per_channel_weight_variant() -> None:
    tinted = apply_tint((100, 200, 50), Tint(r=50, g=0, b=20), weight_channel=None)
    assert tinted == (177, 200, 91)


def test_full_red_tint_washes_out_other_channels() -> None:
    assert apply_tint((10, 240, 130), Tint(r=100)) == (255, 0, 0)


def test_tint_result_is_clamped() -> None:
    assert apply_tint((100, 100, 100), Tint(r=255)) == (255, 0, 0)


def test_negative_tint_darkens_its_channel() -> None:
    assert apply_tint((100, 100, 100), Tint(r=-20)) == (69, 120, 120)


def test_no_tint_is_identity() -> None:
    assert apply_tint((12, 34, 56), Tint()) == (12, 34, 56)


def test_compose_grid_is_value_major() -> None:
    hues = [0.0, 0.5]
    value_ids = [0.0, 1.0, 2.0]
    grid = compose_grid(hues, value_ids, 1.0, 1.0)
    assert len(grid) == 3
    assert all(len(row) == 2 for row in grid)
    assert grid[1][0] == (255, 0, 0)
    assert grid[1][1] == (0, 255, 255)
    assert grid[0][1] == (0, 0, 0)
    assert grid[2][0] == (255, 255, 255)


@pytest.mark.parametrize("hues, value_ids", [([], [1.0]), ([0.0], [])])
def test_compose_grid_rejects_empty_axes(
    hues: list[float], value_ids: list[float]
) -> None:
    with pytest.raises(ValueError):
        compose_grid(hues, value_ids, 1.0, 1.0)


@pytest.mark.parametrize(
    "args, expected",
    [
        # 0.9 as a single is just below 0.9: the remaining 0.1 rounds up.
        ((0.0, 1.0, 0.9, 1.0), (255, 26, 26)),
        ((0.0, 1.0, 1.0, 0.1), (26, 0, 0)),
        ((0.0, 1.9, 1.0, 1.0), (255, 230, 230)),
    ],
)
def test_single_precision_rounding(
    args: tuple[float, float, float, float], expected: RGB
) -> None:
    assert compose(*args) == expected


def test_level_factor_feeds_single_precision_saturation() -> None:
    state = drive_to(Stage.ADJUST_TINTS, hue_count=1, saturation=9)
    state = tick(state, Command.CONFIRM)
    assert state.raw_colors is not None
    assert state.raw_colors[1][0] == (255, 26, 26)


def test_fraction_rounding_up_to_one_is_black() -> None:
    # -1e-9 is representable, but 1 - 1e-9 rounds to 1.0 in single precision.
    assert hsb_to_rgb(-1e-9, 1.0, 1.0) == (0, 0, 0)
