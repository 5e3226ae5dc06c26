"""palette_wizard.components
=================================

Immutable value objects held by :class:`palette_wizard.state.State`.

``Selection`` is the bounded integer the user steps through in most stages;
``Tint`` is the per-channel bias adjusted in the tint stage. Both are frozen
``@dataclass`` records: systems replace them rather than mutate them.
"""

from .selection import Selection
from .tint import Tint

__all__ = ["Selection", "Tint"]
