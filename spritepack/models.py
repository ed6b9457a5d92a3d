from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

import numpy as np


@dataclass(frozen=True, order=True)
class Dimensions:
    width: int
    height: int

    def to_json(self) -> dict:
        return {"w": self.width, "h": self.height}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def to_json(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class SpriteImage:
    pixels: np.ndarray = field(repr=False, compare=False)  # (h, w, 4) uint8 RGBA
    path: Path
    name: str

    @property
    def size(self) -> Dimensions:
        height, width = self.pixels.shape[:2]
        return Dimensions(int(width), int(height))


@dataclass(frozen=True)
class SheetPlan:
    dimensions: Dimensions
    columns: int
    rows: int
    sheet_size: Dimensions
    placements: Dict[str, Position]


@dataclass
class SheetMeta:
    sheet_size: Dimensions
    sprite_size: Dimensions
    sprites: Dict[str, Position]

    def to_json(self) -> dict:
        return {
            "sheetSize": self.sheet_size.to_json(),
            "spriteSize": self.sprite_size.to_json(),
            "sprites": {name: pos.to_json() for name, pos in self.sprites.items()},
        }
