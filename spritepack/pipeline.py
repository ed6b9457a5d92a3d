from __future__ import annotations

import logging
from typing import List, Tuple

from spritepack import layout
from spritepack import pixi
from spritepack import scanner
from spritepack.config import PackOptions
from spritepack.models import Dimensions, SheetMeta, SpriteImage
from spritepack.rasterize import rasterize
from spritepack.worker_pool import WorkerPool
from spritepack.writer import AtlasMetadata, AtlasWriter


def build_sheet(
    size: Dimensions,
    sprites: List[SpriteImage],
    options: PackOptions,
    writer: AtlasWriter,
    sprite_pool: WorkerPool,
) -> Tuple[str, SheetMeta]:
    plan = layout.plan(size, sprites, options.padding, shrink_rows=options.shrink_rows)
    canvas = rasterize(
        plan,
        sprites,
        options.padding,
        edge_replicate=options.edge_replicate,
        pool=sprite_pool,
    )

    writer.write_sheet(canvas, options.sheet_filename(size))
    sheet_key = options.sheet_key(size)
    meta = SheetMeta(
        sheet_size=plan.sheet_size,
        sprite_size=size,
        sprites=dict(plan.placements),
    )
    if options.pixi:
        writer.write_json(pixi.dump_pixi(meta, sheet_key), options.pixi_filename(size))

    logging.info(
        "Packed %s sprites of %sx%s into %sx%s (%s columns)",
        len(sprites),
        size.width,
        size.height,
        plan.sheet_size.width,
        plan.sheet_size.height,
        plan.columns,
    )
    return sheet_key, meta


def pack(options: PackOptions) -> AtlasMetadata:
    """Scan, lay out, rasterize and write every size group.

    Output only appears in ``options.output_dir`` once every sheet and the
    metadata document have been produced.
    """
    groups = scanner.scan(options.input_dir, options)

    metadata: AtlasMetadata = {}
    with AtlasWriter(options) as writer:
        sprite_pool = WorkerPool(max_workers=options.workers)
        with sprite_pool, WorkerPool(max_workers=options.workers) as sheet_pool:

            def _sheet(item: Tuple[Dimensions, List[SpriteImage]]) -> Tuple[str, SheetMeta]:
                size, sprites = item
                return build_sheet(size, sprites, options, writer, sprite_pool)

            sheets = sheet_pool.run(_sheet, sorted(groups.items()))

        for sheet_key, meta in sheets:
            metadata[sheet_key] = meta
        writer.write_metadata(metadata)

    logging.info("Wrote %s sheets + %s", len(metadata), options.metadata_file)
    return metadata
