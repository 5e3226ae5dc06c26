from dataclasses import replace

import pytest

from palette_wizard.commands import Command
from palette_wizard.components import Tint
from palette_wizard.state import State
from palette_wizard.systems.selection import adjust_system, cycle_system
from palette_wizard.types import Stage, TintChannel
from tests.test_utils import drive_to, tick


def test_increase_never_exceeds_max() -> None:
    state = State()
    assert (state.selection.min, state.selection.max) == (0, 1)
    for _ in range(5):
        state = tick(state, Command.INCREASE)
    assert state.selection.value == 1


def test_decrease_never_goes_below_min() -> None:
    state = drive_to(Stage.PICK_VALUE_COUNT)
    for _ in range(4):
        state = tick(state, Command.DECREASE)
    assert state.selection.value == 3


def test_hue_count_upper_bound() -> None:
    state = drive_to(Stage.PICK_HUE_COUNT)
    for _ in range(40):
        state = tick(state, Command.INCREASE)
    assert state.selection.value == 28
    assert len(state.hues) == 28


@pytest.mark.parametrize(
    "channel, start, expected",
    [
        (TintChannel.R, 0, 5),
        (TintChannel.G, 250, 255),
        (TintChannel.B, 253, 255),
        (TintChannel.R, -20, 0),
        (TintChannel.G, -3, 2),
    ],
)
def test_tint_increase_clamps_to_byte_range(
    channel: TintChannel, start: int, expected: int
) -> None:
    state = drive_to(Stage.ADJUST_TINTS)
    state = replace(
        state, tint=Tint(**{channel.value: start}), tint_channel=channel
    )
    state = adjust_system(state, +1)
    assert state.tint.level(channel) == expected


def test_tint_decrease_has_no_floor() -> None:
    state = drive_to(Stage.ADJUST_TINTS)
    for _ in range(3):
        state = tick(state, Command.DECREASE)
    assert state.tint == Tint(r=-15, g=0, b=0)


def test_tint_stage_leaves_selection_alone() -> None:
    state = drive_to(Stage.ADJUST_TINTS, brightness=6)
    before = state.selection
    state = tick(state, Command.INCREASE)
    state = tick(state, Command.INCREASE)
    assert state.selection == before
    assert state.tint.r == 10


def test_channel_cycles_forward_and_back() -> None:
    state = drive_to(Stage.ADJUST_TINTS)
    assert state.tint_channel == TintChannel.R
    seen = []
    for _ in range(3):
        state = cycle_system(state, +1)
        seen.append(state.tint_channel)
    assert seen == [TintChannel.G, TintChannel.B, TintChannel.R]
    seen = []
    for _ in range(3):
        state = cycle_system(state, -1)
        seen.append(state.tint_channel)
    assert seen == [TintChannel.B, TintChannel.G, TintChannel.R]


def test_channel_cycle_does_not_move_hues() -> None:
    state = drive_to(Stage.ADJUST_TINTS)
    cycled = tick(state, Command.CYCLE_NEXT)
    assert cycled.hues == state.hues
    assert cycled.hue_offset == state.hue_offset


def test_tint_adjusts_selected_channel() -> None:
    state = drive_to(Stage.ADJUST_TINTS)
    state = tick(state, Command.CYCLE_NEXT)
    state = tick(state, Command.INCREASE)
    state = tick(state, Command.CYCLE_NEXT)
    state = tick(state, Command.DECREASE)
    assert state.tint == Tint(r=0, g=5, b=-5)


def test_cycle_outside_tints_shifts_hue_offset() -> None:
    state = drive_to(Stage.ADJUST_SATURATION)
    shifted = tick(state, Command.CYCLE_PREV)
    assert shifted.hue_offset == pytest.approx(-0.025)
    assert shifted.tint_channel == state.tint_channel
