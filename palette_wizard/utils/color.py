"""Color conversion helpers shared by the composer and the renderer.

:func:`hsb_to_rgb` follows the classic single-precision HSB sector algorithm
operation by operation, including its half-up channel rounding, so colors
match the reference palettes bit for bit.
"""

from typing import Tuple

import numpy as np

from palette_wizard.types import RGB
from palette_wizard.utils.precision import f32

ONE = f32(1.0)
SIX = f32(6.0)


def to_channel(level: float) -> int:
    """Scale a ``[0, 1]`` level to an 8-bit channel, rounding half up."""
    return int(f32(level) * f32(255.0) + f32(0.5))


def clamp_channel(value: int) -> int:
    """Clamp an integer channel into ``[0, 255]``."""
    return max(0, min(255, value))


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> RGB:
    """Convert hue/saturation/brightness to 8-bit RGB.

    ``hue`` is cyclic: only its fractional part is used, so offsets that drift
    outside ``[0, 1)`` still land on the wheel. Saturation and brightness are
    expected in ``[0, 1]``.
    """
    h32, s32, b32 = f32(hue), f32(saturation), f32(brightness)
    if s32 == 0:
        level = to_channel(b32)
        return level, level, level

    h = (h32 - np.floor(h32)) * SIX
    f = h - np.floor(h)
    p = b32 * (ONE - s32)
    q = b32 * (ONE - s32 * f)
    t = b32 * (ONE - (s32 * (ONE - f)))
    sectors: Tuple[Tuple[np.float32, np.float32, np.float32], ...] = (
        (b32, t, p),
        (q, b32, p),
        (p, b32, t),
        (p, q, b32),
        (t, p, b32),
        (b32, p, q),
    )
    sector = int(h)
    if sector >= len(sectors):
        # A fraction that rounds up to 1.0 falls outside every sector.
        return 0, 0, 0
    r, g, b = sectors[sector]
    return to_channel(r), to_channel(g), to_channel(b)
