"""Single-precision arithmetic helpers.

Hues, value IDs and the saturation/brightness factors are computed in IEEE
single precision, one rounded operation at a time, so the 8-bit channels of a
palette never drift by one between runs. Results are stored as Python floats
holding exact ``float32`` values; arithmetic re-enters ``numpy.float32``.
"""

import numpy as np

f32 = np.float32


def single(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return float(np.float32(value))
