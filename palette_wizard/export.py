"""Palette image export.

Every grid cell becomes a solid ``resolution x resolution`` block; rows run
top-to-bottom by increasing value index, columns left-to-right by increasing
hue index. Writing the file is separated from building the image so callers
decide how an I/O failure affects the process.
"""

import logging
from pathlib import Path
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from palette_wizard.types import RGB

logger = logging.getLogger(__name__)

EXPORT_RESOLUTION = 16

UInt8Array = npt.NDArray[np.uint8]


def grid_to_array(colors: Sequence[Sequence[RGB]], resolution: int) -> UInt8Array:
    """Expand a ``[value][hue]`` grid into an ``(H, W, 3)`` pixel array."""
    if resolution < 1:
        raise ValueError(f"Export resolution must be positive, got {resolution}")
    if len(colors) == 0 or len(colors[0]) == 0:
        raise ValueError("Cannot export an empty palette grid")
    cells: UInt8Array = np.array(
        [[list(color) for color in row] for row in colors], dtype=np.uint8
    )
    return np.repeat(np.repeat(cells, resolution, axis=0), resolution, axis=1)


def palette_image(
    colors: Sequence[Sequence[RGB]], resolution: int = EXPORT_RESOLUTION
) -> Image.Image:
    """Build the RGB palette image for ``colors``."""
    return Image.fromarray(grid_to_array(colors, resolution))


def save_palette(image: Image.Image, path: Union[str, Path]) -> bool:
    """Write ``image`` as PNG to ``path``, overwriting any existing file.

    Returns:
        bool: True on success. Failures are logged and reported as False.
    """
    try:
        image.save(path, format="PNG")
    except OSError as e:
        logger.error("Could not write palette to %s: %s", path, e)
        return False
    logger.info("Exported %dx%d palette to %s", image.width, image.height, path)
    return True
