from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from palette_wizard.snapshot import Snapshot
from palette_wizard.types import RGB

DEFAULT_RESOLUTION = 640
SWATCHES_PER_WIDTH = 32
BACKGROUND: Tuple[int, int, int, int] = (128, 128, 128, 255)


def swatch_size(resolution: int) -> int:
    return max(1, resolution // SWATCHES_PER_WIDTH)


def draw_grid(
    img: Image.Image, colors: Sequence[Sequence[RGB]], size: int
) -> Image.Image:
    """
    Draw ``colors`` centered on ``img`` with value row 0 at the bottom, so
    rows climb from black to white like a value scale.
    """
    draw = ImageDraw.Draw(img)
    rows = len(colors)
    columns = len(colors[0]) if rows else 0
    left = img.width // 2 - columns * size // 2
    top = img.height // 2 - rows * size // 2
    for j, row in enumerate(colors):
        y0 = top + (rows - 1 - j) * size
        for i, color in enumerate(row):
            x0 = left + i * size
            draw.rectangle(
                [x0, y0, x0 + size - 1, y0 + size - 1], fill=(*color, 255)
            )
    return img


def render(snapshot: Snapshot, resolution: int = DEFAULT_RESOLUTION) -> Image.Image:
    """
    Renders the snapshot's preview grid as a square RGBA image on a neutral
    gray background.
    """
    img = Image.new("RGBA", (resolution, resolution), BACKGROUND)
    colors = snapshot.preview_colors
    if colors is None or len(colors) == 0:
        return img
    return draw_grid(img, colors, swatch_size(resolution))


class PreviewRenderer:
    resolution: int
    last: Optional[Image.Image]

    def __init__(self, resolution: int = DEFAULT_RESOLUTION):
        self.resolution = resolution
        self.last = None

    def render(self, snapshot: Snapshot) -> Image.Image:
        self.last = render(snapshot, resolution=self.resolution)
        return self.last
