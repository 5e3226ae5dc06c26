"""Read-only render snapshot.

A :class:`Snapshot` is what a front-end pulls once per frame: the stage, the
selection and its bounds, every confirmed parameter, both grids, and
``preview_colors``, the grid that should be on screen right now. The preview
is computed with the same composer and finalizer as the exported palette,
using the live selection in place of the parameter the stage is editing.

Preview per stage:

* PICK_HUE_STYLE: nothing.
* PICK_HUE_COUNT: one row of pure hues.
* PICK_VALUE_COUNT: value IDs for the selected count, full saturation/brightness.
* ADJUST_SATURATION: selected saturation, full brightness.
* ADJUST_BRIGHTNESS: confirmed saturation, selected brightness.
* ADJUST_TINTS: confirmed saturation/brightness, current tint.
* PICK_RENDER_STYLE: raw grid finalized with the selected style.
* finished: the final grid.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pyrsistent import pvector, thaw

from palette_wizard.components import Tint
from palette_wizard.state import State
from palette_wizard.systems.compose import compose_grid
from palette_wizard.systems.finalize import finalize
from palette_wizard.systems.transition import level_factor
from palette_wizard.systems.value import derive_value_ids
from palette_wizard.types import ColorGrid, RenderStyle, Stage, TintChannel

PURE_VALUE_IDS = pvector([1.0])


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of a wizard state for renderers and exporters."""

    stage: Stage
    selection_value: int
    selection_min: int
    selection_max: int
    hues: Tuple[float, ...]
    value_ids: Tuple[float, ...]
    saturation: Optional[float]
    brightness: Optional[float]
    tint: Tint
    tint_channel: TintChannel
    raw_colors: Optional[ColorGrid]
    final_colors: Optional[ColorGrid]
    render_style: RenderStyle
    preview_colors: Optional[ColorGrid]
    finished: bool
    tick: int

    @property
    def hue_count(self) -> int:
        return len(self.hues)

    @property
    def value_count(self) -> int:
        return len(self.value_ids)

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly dict (enums as strings, grids as nested lists)."""

        def grid(colors: Optional[ColorGrid]) -> Optional[List[List[List[int]]]]:
            if colors is None:
                return None
            return [[list(color) for color in row] for row in thaw(colors)]

        return {
            "stage": self.stage.value,
            "selection_value": self.selection_value,
            "selection_min": self.selection_min,
            "selection_max": self.selection_max,
            "hues": list(self.hues),
            "value_ids": list(self.value_ids),
            "saturation": self.saturation,
            "brightness": self.brightness,
            "tint": {"r": self.tint.r, "g": self.tint.g, "b": self.tint.b},
            "tint_channel": self.tint_channel.value,
            "raw_colors": grid(self.raw_colors),
            "final_colors": grid(self.final_colors),
            "render_style": self.render_style.value,
            "preview_colors": grid(self.preview_colors),
            "finished": self.finished,
            "tick": self.tick,
        }


def _preview_hue_count(state: State) -> Optional[ColorGrid]:
    return compose_grid(state.hues, PURE_VALUE_IDS, 1.0, 1.0)


def _preview_value_count(state: State) -> Optional[ColorGrid]:
    value_ids = derive_value_ids(state.selection.value)
    return compose_grid(state.hues, value_ids, 1.0, 1.0)


def _preview_saturation(state: State) -> Optional[ColorGrid]:
    return compose_grid(
        state.hues, state.value_ids, level_factor(state.selection), 1.0
    )


def _preview_brightness(state: State) -> Optional[ColorGrid]:
    assert state.saturation is not None
    return compose_grid(
        state.hues, state.value_ids, state.saturation, level_factor(state.selection)
    )


def _preview_tints(state: State) -> Optional[ColorGrid]:
    assert state.saturation is not None and state.brightness is not None
    return compose_grid(
        state.hues, state.value_ids, state.saturation, state.brightness, state.tint
    )


def _preview_render_style(state: State) -> Optional[ColorGrid]:
    assert state.raw_colors is not None
    return finalize(state.raw_colors, list(RenderStyle)[state.selection.value])


PREVIEW_BUILDERS: Dict[Stage, Callable[[State], Optional[ColorGrid]]] = {
    Stage.PICK_HUE_STYLE: lambda state: None,
    Stage.PICK_HUE_COUNT: _preview_hue_count,
    Stage.PICK_VALUE_COUNT: _preview_value_count,
    Stage.ADJUST_SATURATION: _preview_saturation,
    Stage.ADJUST_BRIGHTNESS: _preview_brightness,
    Stage.ADJUST_TINTS: _preview_tints,
    Stage.PICK_RENDER_STYLE: _preview_render_style,
}


def preview_colors(state: State) -> Optional[ColorGrid]:
    """Grid to display for ``state``'s current stage."""
    if state.finished:
        return state.final_colors
    return PREVIEW_BUILDERS[state.stage](state)


def snapshot(state: State) -> Snapshot:
    return Snapshot(
        stage=state.stage,
        selection_value=state.selection.value,
        selection_min=state.selection.min,
        selection_max=state.selection.max,
        hues=tuple(state.hues),
        value_ids=tuple(state.value_ids),
        saturation=state.saturation,
        brightness=state.brightness,
        tint=state.tint,
        tint_channel=state.tint_channel,
        raw_colors=state.raw_colors,
        final_colors=state.final_colors,
        render_style=state.render_style,
        preview_colors=preview_colors(state),
        finished=state.finished,
        tick=state.tick,
    )
