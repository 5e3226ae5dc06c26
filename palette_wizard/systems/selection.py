"""Input-driven adjustment systems.

Outside the tint stage INCREASE/DECREASE step the bounded selection and
CYCLE_NEXT/CYCLE_PREV shift the hue offset. Inside the tint stage the same
commands adjust the selected channel level and rotate the selected channel.
"""

from dataclasses import replace

from palette_wizard.components.tint import cycle_channel
from palette_wizard.state import State
from palette_wizard.systems.hue import hue_offset_system
from palette_wizard.types import Stage


def adjust_system(state: State, direction: int) -> State:
    """Apply INCREASE (``+1``) or DECREASE (``-1``)."""
    if state.stage == Stage.ADJUST_TINTS:
        if direction > 0:
            tint = state.tint.increase(state.tint_channel)
        else:
            tint = state.tint.decrease(state.tint_channel)
        return replace(state, tint=tint)
    return replace(state, selection=state.selection.step(direction))


def cycle_system(state: State, direction: int) -> State:
    """Apply CYCLE_NEXT (``+1``) or CYCLE_PREV (``-1``)."""
    if state.stage == Stage.ADJUST_TINTS:
        return replace(
            state, tint_channel=cycle_channel(state.tint_channel, direction)
        )
    return hue_offset_system(state, direction)
