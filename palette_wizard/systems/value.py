"""Value ID derivation.

A value ID is a scalar in ``[0, 2]`` that encodes brightness and saturation
together: 0 is black, 1 is the pure hue at full saturation and brightness,
2 is white. Below 1 brightness rises from black to the pure hue; above 1
saturation falls from the pure hue toward white.
"""

from pyrsistent import pvector

from palette_wizard.types import ValueIdSet
from palette_wizard.utils.precision import f32, single

MIN_VALUE_COUNT = 2


def derive_value_ids(count: int) -> ValueIdSet:
    """Return ``count`` evenly spaced value IDs from 0 to 2 inclusive.

    Raises:
        ValueError: If ``count`` is below 2 (the spacing is undefined).
    """
    if count < MIN_VALUE_COUNT:
        raise ValueError(
            f"Value count must be at least {MIN_VALUE_COUNT}, got {count}"
        )
    step = f32(1.0) / (f32(count) - f32(1.0))
    return pvector([single(step * f32(i) * f32(2.0)) for i in range(count)])
