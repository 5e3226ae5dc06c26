"""Selection component.

The bounded integer the current stage is choosing (a menu index, a count, or
a 1..10 level). Stepping always clamps to ``[min, max]``.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Selection:
    """Bounded integer selection.

    Attributes:
        value: Current value, always within ``[min, max]``.
        min: Inclusive lower bound.
        max: Inclusive upper bound.
    """

    value: int
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Selection bounds are inverted: [{self.min}, {self.max}]")

    def step(self, delta: int) -> "Selection":
        """Return a selection moved by ``delta`` and clamped to its bounds."""
        return replace(self, value=min(self.max, max(self.min, self.value + delta)))

    @classmethod
    def bounded(cls, low: int, high: int, value: int) -> "Selection":
        return cls(value=min(high, max(low, value)), min=low, max=high)
