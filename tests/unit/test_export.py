import logging
from pathlib import Path

import numpy as np
import pytest

from palette_wizard import config
from palette_wizard.config import DEFAULT_FILENAME, ExportConfig
from palette_wizard.export import grid_to_array, palette_image, save_palette
from tests.test_utils import make_grid


def test_image_size() -> None:
    image = palette_image(make_grid(3, 5), resolution=4)
    assert image.size == (20, 12)
    assert image.mode == "RGB"


def test_blocks_are_solid() -> None:
    grid = make_grid(2, 3)
    array = grid_to_array(grid, 3)
    assert array.shape == (6, 9, 3)
    assert array.dtype == np.uint8
    for j in range(2):
        for i in range(3):
            block = array[j * 3 : (j + 1) * 3, i * 3 : (i + 1) * 3]
            assert (block == np.array(grid[j][i], dtype=np.uint8)).all()


def test_rows_run_top_to_bottom() -> None:
    grid = [[(0, 0, 0)], [(255, 255, 255)]]
    image = palette_image(grid, resolution=2)
    assert image.getpixel((0, 0)) == (0, 0, 0)
    assert image.getpixel((1, 3)) == (255, 255, 255)


@pytest.mark.parametrize("resolution", [0, -4])
def test_non_positive_resolution_raises(resolution: int) -> None:
    with pytest.raises(ValueError):
        grid_to_array(make_grid(1, 1), resolution)


def test_empty_grid_raises() -> None:
    with pytest.raises(ValueError):
        grid_to_array([], 4)


def test_save_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "palette.png"
    path.write_bytes(b"stale")
    assert save_palette(palette_image(make_grid(3, 3), 2), path)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_save_failure_is_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "missing" / "palette.png"
    with caplog.at_level(logging.ERROR, logger="palette_wizard.export"):
        assert not save_palette(palette_image(make_grid(3, 3), 2), path)
    assert "Could not write palette" in caplog.text
    assert not path.exists()


def test_resolve_explicit_directory(tmp_path: Path) -> None:
    export = ExportConfig(directory=tmp_path, filename="out.png")
    assert export.resolve_path() == tmp_path / "out.png"


def test_resolve_prefers_palettes_folder(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(config, "desktop_dir", lambda: tmp_path)
    assert ExportConfig().resolve_path() == tmp_path / DEFAULT_FILENAME
    (tmp_path / "palettes").mkdir()
    assert ExportConfig().resolve_path() == tmp_path / "palettes" / DEFAULT_FILENAME
