from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from spritepack.config import PackOptions
from spritepack.models import SpriteImage


@pytest.fixture
def write_sprite():
    """Save a solid-colour RGBA PNG and return its path."""

    def _write(path: Path, size=(16, 16), color=(255, 0, 0, 255)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, color).save(path, format="PNG")
        return path

    return _write


@pytest.fixture
def make_sprite():
    """Build an in-memory SpriteImage without touching disk."""

    def _make(name: str, size=(16, 16), color=(255, 0, 0, 255), path=None) -> SpriteImage:
        width, height = size
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = color
        return SpriteImage(pixels=pixels, path=Path(path or f"/sprites/{name}.png"), name=name)

    return _make


@pytest.fixture
def options(tmp_path):
    def _options(**overrides) -> PackOptions:
        values = {
            "input_dir": tmp_path / "in",
            "output_dir": tmp_path / "out",
            "workers": 4,
        }
        values.update(overrides)
        return PackOptions(**values)

    return _options
