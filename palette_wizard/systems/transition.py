"""Stage transition table and the confirm system.

``STAGE_TRANSITIONS`` maps each stage to what confirming it captures, which
stage follows, and the selection the next stage starts from. Confirming the
last stage finalizes the palette and marks the state finished.

Table (stage → captured → next stage, bounds, start value):

* PICK_HUE_STYLE → ``hue_style`` → PICK_HUE_COUNT, [1, 28], 1
* PICK_HUE_COUNT → ``hues`` → PICK_VALUE_COUNT, [3, 8], 3
* PICK_VALUE_COUNT → ``value_ids``/``value_count`` → ADJUST_SATURATION, [1, 10], 10
* ADJUST_SATURATION → ``saturation`` → ADJUST_BRIGHTNESS, [1, 10], 10
* ADJUST_BRIGHTNESS → ``brightness`` → ADJUST_TINTS, selection kept
* ADJUST_TINTS → ``raw_colors`` → PICK_RENDER_STYLE, [0, styles - 1], 0
* PICK_RENDER_STYLE → ``render_style``/``final_colors`` → finished
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple

from pyrsistent import pvector

from palette_wizard.components import Selection
from palette_wizard.state import State
from palette_wizard.systems.compose import raw_colors_system
from palette_wizard.systems.finalize import final_colors_system
from palette_wizard.systems.hue import hue_reevaluation_system
from palette_wizard.systems.value import derive_value_ids
from palette_wizard.types import HueStyle, RenderStyle, Stage
from palette_wizard.utils.precision import f32, single

logger = logging.getLogger(__name__)

HUE_COUNT_BOUNDS = (1, 28)
VALUE_COUNT_BOUNDS = (3, 8)
LEVEL_BOUNDS = (1, 10)
LEVEL_SCALE = 10.0

# (min, max, start value)
SelectionSpec = Tuple[int, int, int]
CaptureFn = Callable[[State], State]


@dataclass(frozen=True)
class Transition:
    """One row of the stage transition table.

    Attributes:
        capture: Stores the current selection into the state.
        next_stage: Following stage, or ``None`` when confirming ends the run.
        selection: Bounds and start value for the next stage, or ``None`` to
            keep the current selection.
    """

    capture: CaptureFn
    next_stage: Optional[Stage]
    selection: Optional[SelectionSpec] = None


def level_factor(selection: Selection) -> float:
    """Convert a 1..10 level selection into a 0.1..1.0 factor."""
    return single(f32(selection.value) / f32(LEVEL_SCALE))


def _capture_hue_style(state: State) -> State:
    hue_style = list(HueStyle)[state.selection.value]
    return replace(state, hue_style=hue_style, hues=pvector([0.0]))


def _capture_hue_count(state: State) -> State:
    # Covers an INCREASE/DECREASE applied in the same tick as the confirm.
    return hue_reevaluation_system(state)


def _capture_value_count(state: State) -> State:
    count = state.selection.value
    return replace(state, value_ids=derive_value_ids(count), value_count=count)


def _capture_saturation(state: State) -> State:
    return replace(state, saturation=level_factor(state.selection))


def _capture_brightness(state: State) -> State:
    return replace(state, brightness=level_factor(state.selection))


def _capture_tints(state: State) -> State:
    return raw_colors_system(state)


def _capture_render_style(state: State) -> State:
    render_style = list(RenderStyle)[state.selection.value]
    return final_colors_system(replace(state, render_style=render_style))


STAGE_TRANSITIONS: Dict[Stage, Transition] = {
    Stage.PICK_HUE_STYLE: Transition(
        _capture_hue_style, Stage.PICK_HUE_COUNT, (*HUE_COUNT_BOUNDS, 1)
    ),
    Stage.PICK_HUE_COUNT: Transition(
        _capture_hue_count, Stage.PICK_VALUE_COUNT, (*VALUE_COUNT_BOUNDS, 3)
    ),
    Stage.PICK_VALUE_COUNT: Transition(
        _capture_value_count, Stage.ADJUST_SATURATION, (*LEVEL_BOUNDS, 10)
    ),
    Stage.ADJUST_SATURATION: Transition(
        _capture_saturation, Stage.ADJUST_BRIGHTNESS, (*LEVEL_BOUNDS, 10)
    ),
    Stage.ADJUST_BRIGHTNESS: Transition(_capture_brightness, Stage.ADJUST_TINTS),
    Stage.ADJUST_TINTS: Transition(
        _capture_tints, Stage.PICK_RENDER_STYLE, (0, len(RenderStyle) - 1, 0)
    ),
    Stage.PICK_RENDER_STYLE: Transition(_capture_render_style, None),
}


def confirm_system(state: State) -> State:
    """Capture the current selection and advance to the next stage."""
    if state.finished:
        return state
    transition = STAGE_TRANSITIONS[state.stage]
    state = transition.capture(state)

    if transition.next_stage is None:
        logger.debug("Confirmed %s, palette finalized", state.stage)
        return replace(state, finished=True)

    selection = state.selection
    if transition.selection is not None:
        low, high, start = transition.selection
        selection = Selection.bounded(low, high, start)
    logger.debug(
        "Confirmed %s (selection %d), advancing to %s",
        state.stage,
        state.selection.value,
        transition.next_stage,
    )
    return replace(state, stage=transition.next_stage, selection=selection)
