from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from spritepack.models import Position, SheetPlan, SpriteImage
from spritepack.worker_pool import WorkerPool


def owned_margins(index: int, cells: int, padding: int) -> Tuple[int, int]:
    """Padding pixels (before, after) a cell fills along one axis.

    Outer borders belong entirely to the edge cell. The gap between two
    neighbours is split: the earlier cell takes ``padding - padding // 2``
    and the later one ``padding // 2``, so owned regions never overlap.
    """
    before = padding if index == 0 else padding // 2
    after = padding if index == cells - 1 else padding - padding // 2
    return before, after


def _paste(
    canvas: np.ndarray,
    sprite: SpriteImage,
    pos: Position,
    plan: SheetPlan,
    index: int,
    padding: int,
    edge_replicate: bool,
) -> None:
    height, width = sprite.pixels.shape[:2]
    if not edge_replicate or padding == 0:
        canvas[pos.y : pos.y + height, pos.x : pos.x + width] = sprite.pixels
        return

    left, right = owned_margins(index % plan.columns, plan.columns, padding)
    top, bottom = owned_margins(index // plan.columns, plan.rows, padding)
    block = np.pad(sprite.pixels, ((top, bottom), (left, right), (0, 0)), mode="edge")
    canvas[pos.y - top : pos.y + height + bottom, pos.x - left : pos.x + width + right] = block


def rasterize(
    plan: SheetPlan,
    sprites: Sequence[SpriteImage],
    padding: int,
    *,
    edge_replicate: bool = True,
    pool: Optional[WorkerPool] = None,
) -> Image.Image:
    """Composite ``sprites`` into a new RGBA canvas at their planned positions.

    Each sprite is copied as-is (no alpha blending). With ``edge_replicate``
    the padding band around a sprite repeats its border pixels. Cells left
    over at the end of the grid stay transparent.
    """
    sheet = plan.sheet_size
    canvas = np.zeros((sheet.height, sheet.width, 4), dtype=np.uint8)

    def _draw(item: Tuple[int, SpriteImage]) -> None:
        index, sprite = item
        _paste(canvas, sprite, plan.placements[sprite.name], plan, index, padding, edge_replicate)

    items = list(enumerate(sprites))
    if pool is None:
        for item in items:
            _draw(item)
    else:
        pool.run(_draw, items)

    return Image.fromarray(canvas)
