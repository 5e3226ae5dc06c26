"""Palette finalization.

Applies a :class:`~palette_wizard.types.RenderStyle` across a raw grid. The
gradient styles pair every swatch with the next hue column (the last column
wraps around to the first) and weight the pair by value row: with
``step = 1 / rows`` row ``j`` uses ``gradient = step * j + step / 2``.
``PAIRWISE_GRADIENT`` gives the swatch itself that weight and its neighbour
the rest; ``INVERSE_PAIRWISE_GRADIENT`` swaps them. Channels are truncated,
not rounded.
"""

from dataclasses import replace
from typing import Sequence

from pyrsistent import pvector

from palette_wizard.state import State
from palette_wizard.types import RGB, ColorGrid, RenderStyle


def blend(current: RGB, neighbour: RGB, weight: float, inverse: float) -> RGB:
    """Weighted sum of two colors, truncated per channel."""
    return (
        int(current[0] * weight + neighbour[0] * inverse),
        int(current[1] * weight + neighbour[1] * inverse),
        int(current[2] * weight + neighbour[2] * inverse),
    )


def _pairwise(raw: Sequence[Sequence[RGB]], inverse: bool) -> ColorGrid:
    rows = len(raw)
    step = 1.0 / rows
    out = []
    for j, row in enumerate(raw):
        gradient = step * j + step / 2.0
        inv_gradient = 1.0 - gradient
        if inverse:
            gradient, inv_gradient = inv_gradient, gradient
        columns = len(row)
        out.append(
            pvector(
                [
                    blend(row[i], row[(i + 1) % columns], gradient, inv_gradient)
                    for i in range(columns)
                ]
            )
        )
    return pvector(out)


def finalize(raw: Sequence[Sequence[RGB]], style: RenderStyle) -> ColorGrid:
    """Return the finalized grid for ``style``.

    Raises:
        ValueError: If the grid is empty or ragged, or the style is unknown.
    """
    if len(raw) == 0 or len(raw[0]) == 0:
        raise ValueError("Cannot finalize an empty palette grid")
    if any(len(row) != len(raw[0]) for row in raw):
        raise ValueError("Palette grid rows must all have the same length")

    if style == RenderStyle.BASIC:
        return pvector([pvector(row) for row in raw])
    if style == RenderStyle.PAIRWISE_GRADIENT:
        return _pairwise(raw, inverse=False)
    if style == RenderStyle.INVERSE_PAIRWISE_GRADIENT:
        return _pairwise(raw, inverse=True)
    raise ValueError(f"Unknown render style: {style}")


def final_colors_system(state: State) -> State:
    """Finalize ``state.raw_colors`` with the confirmed render style."""
    if state.raw_colors is None:
        raise ValueError("Raw colors must be composed before finalizing")
    return replace(state, final_colors=finalize(state.raw_colors, state.render_style))
