"""Tint component.

Per-channel tint levels, read as percentages by the composer (``level / 100``
is the blend ratio). Raising a channel clamps it into ``[0, TINT_MAX]``;
lowering it is unbounded, so negative levels are reachable and darken the
channel when composed.
"""

from dataclasses import dataclass, replace

from palette_wizard.types import TintChannel

TINT_STEP = 5
TINT_MAX = 255

# Channel rotation for CYCLE_NEXT; CYCLE_PREV walks it backwards.
CHANNEL_CYCLE = [TintChannel.R, TintChannel.G, TintChannel.B]


@dataclass(frozen=True)
class Tint:
    """RGB tint levels.

    Attributes:
        r: Red level.
        g: Green level.
        b: Blue level.
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def level(self, channel: TintChannel) -> int:
        return getattr(self, channel.value)

    def ratio(self, channel: TintChannel) -> float:
        """Blend ratio of ``channel`` (its level as a fraction of 100)."""
        return self.level(channel) / 100.0

    def increase(self, channel: TintChannel) -> "Tint":
        level = min(TINT_MAX, max(0, self.level(channel) + TINT_STEP))
        return replace(self, **{channel.value: level})

    def decrease(self, channel: TintChannel) -> "Tint":
        # No floor: only the increase path clamps.
        return replace(self, **{channel.value: self.level(channel) - TINT_STEP})


def cycle_channel(channel: TintChannel, direction: int) -> TintChannel:
    """Rotate ``channel`` one position forward (``+1``) or backward (``-1``)."""
    index = CHANNEL_CYCLE.index(channel)
    return CHANNEL_CYCLE[(index + direction) % len(CHANNEL_CYCLE)]
