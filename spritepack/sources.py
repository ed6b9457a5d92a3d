from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from spritepack.errors import DecodeError, PackIOError
from spritepack.models import SpriteImage


def sprite_name(path: Path) -> str:
    # Dotfiles keep their full name (".hidden") rather than collapsing to "".
    return path.stem


def load_sprite(path: Path) -> SpriteImage:
    """Decode ``path`` into a read-only RGBA pixel array."""
    try:
        fh = path.open("rb")
    except OSError as exc:
        raise PackIOError(f"Cannot open {path}: {exc}") from exc

    with fh:
        try:
            with Image.open(fh) as img:
                img.load()
                rgba = img.convert("RGBA")
        except Exception as exc:
            # Pillow signals unknown/truncated/corrupt data with several types.
            raise DecodeError(path, str(exc) or type(exc).__name__) from exc

    pixels = np.asarray(rgba, dtype=np.uint8).copy()
    pixels.setflags(write=False)
    return SpriteImage(pixels=pixels, path=path, name=sprite_name(path))
