"""Color composition.

Turns one (hue, value ID, saturation factor, brightness factor, tint) tuple
into a concrete RGB color, and a hue set times a value ID set into a grid.
The same :func:`compose` feeds both the live preview and the exported
palette, so what the user sees while adjusting is what gets written.

Tint blending: each channel becomes ``trunc(ratio_c * 255) +
trunc(raw_c * (1 - ratio_w))`` clamped to ``[0, 255]``, where ``ratio_c`` is
the channel's own tint ratio and ``ratio_w`` is the ratio of
:data:`TINT_WEIGHT_CHANNEL`. The weight comes from the red channel for all
three channels; pass ``weight_channel=None`` for the per-channel variant.
"""

from dataclasses import replace
from typing import Optional, Sequence

from pyrsistent import pvector

from palette_wizard.components import Tint
from palette_wizard.state import State
from palette_wizard.types import RGB, ColorGrid, TintChannel
from palette_wizard.utils.color import clamp_channel, hsb_to_rgb
from palette_wizard.utils.precision import f32

TINT_WEIGHT_CHANNEL: Optional[TintChannel] = TintChannel.R

NO_TINT = Tint()


def base_color(
    hue: float, value_id: float, saturation: float, brightness: float
) -> RGB:
    """Untinted color for a value ID.

    Value IDs above 1 desaturate toward white at full brightness; value IDs
    up to 1 darken toward black at full saturation.
    """
    one, v = f32(1.0), f32(value_id)
    sat, bright = f32(saturation), f32(brightness)
    if v > one:
        return hsb_to_rgb(hue, (f32(2.0) - v) * sat, one * bright)
    return hsb_to_rgb(hue, one * sat, v * bright)


def apply_tint(
    color: RGB,
    tint: Tint,
    weight_channel: Optional[TintChannel] = TINT_WEIGHT_CHANNEL,
) -> RGB:
    """Blend ``tint`` into ``color`` channel by channel."""
    blended = []
    for channel, raw in zip(TintChannel, color):
        ratio = tint.ratio(channel)
        weight = tint.ratio(weight_channel) if weight_channel is not None else ratio
        blended.append(clamp_channel(int(ratio * 255) + int(raw * (1.0 - weight))))
    return blended[0], blended[1], blended[2]


def compose(
    hue: float,
    value_id: float,
    saturation: float,
    brightness: float,
    tint: Tint = NO_TINT,
    weight_channel: Optional[TintChannel] = TINT_WEIGHT_CHANNEL,
) -> RGB:
    """Compose a single swatch color."""
    color = base_color(hue, value_id, saturation, brightness)
    return apply_tint(color, tint, weight_channel)


def compose_grid(
    hues: Sequence[float],
    value_ids: Sequence[float],
    saturation: float,
    brightness: float,
    tint: Tint = NO_TINT,
    weight_channel: Optional[TintChannel] = TINT_WEIGHT_CHANNEL,
) -> ColorGrid:
    """Compose every (value, hue) pair into a ``[value][hue]`` grid.

    Raises:
        ValueError: If either axis is empty.
    """
    if len(hues) == 0 or len(value_ids) == 0:
        raise ValueError(
            f"Cannot compose a {len(value_ids)}x{len(hues)} palette grid"
        )
    return pvector(
        [
            pvector(
                [
                    compose(hue, value_id, saturation, brightness, tint, weight_channel)
                    for hue in hues
                ]
            )
            for value_id in value_ids
        ]
    )


def raw_colors_system(state: State) -> State:
    """Freeze the confirmed parameters into ``state.raw_colors``."""
    if state.saturation is None or state.brightness is None:
        raise ValueError("Saturation and brightness must be confirmed before composing")
    raw_colors = compose_grid(
        state.hues, state.value_ids, state.saturation, state.brightness, state.tint
    )
    return replace(state, raw_colors=raw_colors)
