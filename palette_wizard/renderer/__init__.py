"""Rendering subpackage.

Turns :class:`palette_wizard.snapshot.Snapshot` views into Pillow images for
on-screen previews. Text (prompts, selection, controls) is left to the
front-end; see :mod:`palette_wizard.prompts`.
"""

from .preview import PreviewRenderer, render

__all__ = ["PreviewRenderer", "render"]
