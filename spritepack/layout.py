from __future__ import annotations

import math
from typing import Dict, Sequence

import numpy as np

from spritepack.models import Dimensions, Position, SheetPlan, SpriteImage


def grid_columns(count: int) -> int:
    return int(np.ceil(np.sqrt(count)))


def padded_extent(cells: int, cell_size: int, padding: int) -> int:
    return cells * cell_size + padding * (cells + 1)


def cell_position(index: int, columns: int, size: Dimensions, padding: int) -> Position:
    col, row = index % columns, index // columns
    return Position(
        padding + col * (size.width + padding),
        padding + row * (size.height + padding),
    )


def plan(
    size: Dimensions,
    sprites: Sequence[SpriteImage],
    padding: int,
    *,
    shrink_rows: bool = False,
) -> SheetPlan:
    """Lay ``sprites`` (already sorted by path) out on a square-ish grid.

    The grid has ``ceil(sqrt(n))`` columns. Rows match the column count so
    the sheet stays square, unless ``shrink_rows`` drops the rows that would
    be entirely empty.
    """
    count = len(sprites)
    columns = grid_columns(count)
    rows = math.ceil(count / columns) if shrink_rows else columns

    sheet_size = Dimensions(
        padded_extent(columns, size.width, padding),
        padded_extent(rows, size.height, padding),
    )
    placements: Dict[str, Position] = {
        sprite.name: cell_position(idx, columns, size, padding)
        for idx, sprite in enumerate(sprites)
    }
    return SheetPlan(
        dimensions=size,
        columns=columns,
        rows=rows,
        sheet_size=sheet_size,
        placements=placements,
    )
