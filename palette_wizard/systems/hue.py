"""Hue derivation and hue offset systems.

``derive_hues`` is the pure derivation. ``hue_reevaluation_system`` keeps the
hue set in sync with the count selection while the hue count stage is
active, and ``hue_offset_system`` shifts every hue (and the stored offset)
when the user cycles outside the tint stage.
"""

import math
from dataclasses import replace

from pyrsistent import pvector

from palette_wizard.state import State
from palette_wizard.types import HueSet, HueStyle, Stage
from palette_wizard.utils.precision import f32, single

HUE_OFFSET_STEP = 0.025


def derive_hues(style: HueStyle, count: int, offset: float = 0.0) -> HueSet:
    """Return ``count`` hues for ``style`` shifted by ``offset``.

    Args:
        style (HueStyle): Derivation style.
        count (int): Number of hues, at least 1.
        offset (float): Accumulated hue offset added to every hue.

    Returns:
        HueSet: Ordered hue fractions.

    Raises:
        ValueError: If ``count`` is below 1.
    """
    if count < 1:
        raise ValueError(f"Hue count must be at least 1, got {count}")
    one, n, shift = f32(1.0), f32(count), f32(offset)
    if style == HueStyle.LINEAR:
        step = one / n
        return pvector([single(step * f32(i) + shift) for i in range(count)])
    if style == HueStyle.RADIAL:
        hues = []
        for i in range(count):
            x = f32(i) / n
            arc = f32(math.sqrt(one - x * x))
            hues.append(single((arc + (one - x)) * f32(0.5) + shift))
        return pvector(hues)
    raise ValueError(f"Unknown hue style: {style}")


def hue_reevaluation_system(state: State) -> State:
    """Re-derive hues when the count selection no longer matches the hue set."""
    if state.stage != Stage.PICK_HUE_COUNT:
        return state
    if len(state.hues) == state.selection.value:
        return state
    return replace(
        state,
        hues=derive_hues(state.hue_style, state.selection.value, state.hue_offset),
    )


def hue_offset_system(state: State, direction: int) -> State:
    """Shift all hues by one offset step in ``direction`` (``+1`` or ``-1``).

    Has no effect before a hue style has been picked.
    """
    if state.stage.index <= Stage.PICK_HUE_STYLE.index:
        return state
    delta = f32(HUE_OFFSET_STEP) if direction > 0 else -f32(HUE_OFFSET_STEP)
    return replace(
        state,
        hues=pvector([single(f32(hue) + delta) for hue in state.hues]),
        hue_offset=single(f32(state.hue_offset) + delta),
    )
