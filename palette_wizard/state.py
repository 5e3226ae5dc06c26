"""Core immutable wizard ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one
palette wizard run at a single tick. All systems are pure functions that take
a previous ``State`` (plus, for the reducer, the coalesced commands of a tick)
and return a *new* ``State``; no mutation happens in-place. Two runs fed the
same command sequence therefore produce identical palettes.

Design notes:

* Confirmed parameters (``hue_style``, ``value_count``, ``saturation``,
    ``brightness``, ``render_style``) are written once by the stage transition
    that captures them and read verbatim afterwards.
* ``hue_offset`` is stored separately from ``hues`` so re-deriving the hue
    set re-applies the offset in full instead of compounding it.
* ``raw_colors`` is built when the tint stage is confirmed and
    ``final_colors`` when the render style is confirmed; both are indexed
    ``[value_index][hue_index]`` and never resized afterwards.
* ``finished`` is the terminal marker. The reducer short-circuits on it.

See :mod:`palette_wizard.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap

from palette_wizard.components import Selection, Tint
from palette_wizard.types import (
    ColorGrid,
    HueSet,
    HueStyle,
    RenderStyle,
    Stage,
    TintChannel,
    ValueIdSet,
)


def initial_selection() -> Selection:
    return Selection(value=0, min=0, max=len(HueStyle) - 1)


@dataclass(frozen=True)
class State:
    """Immutable wizard state.

    Attributes:
        stage (Stage): Stage currently being edited.
        selection (Selection): Bounded value the current stage is choosing.
        hue_style (HueStyle): Confirmed hue derivation style.
        hue_offset (float): Accumulated hue shift applied on every derivation.
        hues (PVector[float]): Current hue set (fractions, wrapped on conversion).
        value_count (int): Confirmed number of value rows (0 until confirmed).
        value_ids (PVector[float]): Value IDs in ``[0, 2]``, one per row.
        saturation (float | None): Confirmed saturation factor.
        brightness (float | None): Confirmed brightness factor.
        tint (Tint): Tint levels, adjusted during the tint stage.
        tint_channel (TintChannel): Channel targeted by tint adjustments.
        raw_colors (ColorGrid | None): Composed grid, set when tints are confirmed.
        render_style (RenderStyle): Confirmed finalization style.
        final_colors (ColorGrid | None): Finalized grid, set on the last confirm.
        finished (bool): True once the render style has been confirmed.
        tick (int): Number of ticks processed (0-based).
    """

    stage: Stage = Stage.PICK_HUE_STYLE
    selection: Selection = field(default_factory=initial_selection)

    # Hues
    hue_style: HueStyle = HueStyle.LINEAR
    hue_offset: float = 0.0
    hues: HueSet = pvector()

    # Values
    value_count: int = 0
    value_ids: ValueIdSet = pvector()

    # Adjustments
    saturation: Optional[float] = None
    brightness: Optional[float] = None
    tint: Tint = Tint()
    tint_channel: TintChannel = TintChannel.R

    # Grids
    raw_colors: Optional[ColorGrid] = None
    render_style: RenderStyle = RenderStyle.BASIC
    final_colors: Optional[ColorGrid] = None

    # Status
    finished: bool = False
    tick: int = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Skips empty vectors and ``None`` values; handy for logging a state
        without dumping every default.

        Returns:
            PMap[str, Any]: Field name to value for all populated fields.
        """
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(name, value)
        return description
