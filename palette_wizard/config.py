"""Runtime configuration.

``WizardConfig`` bundles the knobs front-ends share: preview and export
resolutions, where the palette is written, and whether a failed write should
fail the process. Stage bounds and step sizes are fixed by the wizard and
live next to the systems that use them.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from palette_wizard.export import EXPORT_RESOLUTION
from palette_wizard.renderer.preview import DEFAULT_RESOLUTION

DEFAULT_FILENAME = "palette-0.png"
PALETTES_DIRNAME = "palettes"


def desktop_dir() -> Path:
    return Path.home() / "Desktop"


@dataclass(frozen=True)
class ExportConfig:
    """Where the finished palette is written.

    Attributes:
        directory: Target directory. ``None`` picks ``~/Desktop/palettes`` if
            it exists, otherwise ``~/Desktop``.
        filename: File name inside the directory; an existing file is
            overwritten.
    """

    directory: Optional[Path] = None
    filename: str = DEFAULT_FILENAME

    def resolve_path(self) -> Path:
        if self.directory is not None:
            return Path(self.directory).expanduser() / self.filename
        palettes = desktop_dir() / PALETTES_DIRNAME
        if palettes.is_dir():
            return palettes / self.filename
        return desktop_dir() / self.filename


@dataclass(frozen=True)
class WizardConfig:
    """Front-end configuration.

    Attributes:
        export_resolution: Pixel size of one exported swatch.
        preview_resolution: Width and height of the live preview canvas.
        export: Output location.
        strict_export: Exit with status 1 instead of 0 when writing fails.
    """

    export_resolution: int = EXPORT_RESOLUTION
    preview_resolution: int = DEFAULT_RESOLUTION
    export: ExportConfig = field(default_factory=ExportConfig)
    strict_export: bool = False
