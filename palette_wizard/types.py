"""Common type aliases and enumerations.

``Stage`` is the ordered wizard sequence; its declaration order is the order
in which a run visits the stages. ``HueStyle`` and ``RenderStyle`` are the
two menus the user picks from by index, so their member order is part of the
selection contract as well.
"""

from enum import StrEnum, auto
from typing import Tuple

from pyrsistent.typing import PVector


class Stage(StrEnum):
    """Wizard stages in order of appearance."""

    PICK_HUE_STYLE = auto()
    PICK_HUE_COUNT = auto()
    PICK_VALUE_COUNT = auto()
    ADJUST_SATURATION = auto()
    ADJUST_BRIGHTNESS = auto()
    ADJUST_TINTS = auto()
    PICK_RENDER_STYLE = auto()

    @property
    def index(self) -> int:
        """Zero-based position of the stage in the wizard sequence."""
        return list(Stage).index(self)


class HueStyle(StrEnum):
    """Hue derivation styles.

    Members:
        LINEAR: Equidistant hues around the wheel.
        RADIAL: Hues sampled along a curve loosely tracing a quarter of the
            unit circle, bunched toward the start of the wheel.
    """

    LINEAR = auto()
    RADIAL = auto()


class RenderStyle(StrEnum):
    """Finalization applied to the raw grid before export.

    Members:
        BASIC: Raw colors are exported unchanged.
        PAIRWISE_GRADIENT: Each swatch is a weighted average with the next
            hue column, the swatch's own weight growing with the value row.
        INVERSE_PAIRWISE_GRADIENT: Same pairing with the weights mirrored, so
            low value rows lean toward their own column.
    """

    BASIC = auto()
    PAIRWISE_GRADIENT = auto()
    INVERSE_PAIRWISE_GRADIENT = auto()


class TintChannel(StrEnum):
    """RGB channel currently targeted by tint adjustments."""

    R = auto()
    G = auto()
    B = auto()


RGB = Tuple[int, int, int]
ColorRow = PVector[RGB]
ColorGrid = PVector[ColorRow]
HueSet = PVector[float]
ValueIdSet = PVector[float]
