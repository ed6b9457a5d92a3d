from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List

from spritepack.config import PackOptions
from spritepack.errors import DuplicateSpriteError, PackIOError
from spritepack.models import Dimensions, SpriteImage
from spritepack.sources import load_sprite
from spritepack.worker_pool import WorkerPool

SizeGroups = Dict[Dimensions, List[SpriteImage]]


def collect_files(root: Path) -> List[Path]:
    """Every non-directory entry below ``root``, in walk order."""
    if not root.exists():
        raise PackIOError(f"Input directory {root} does not exist")
    if not root.is_dir():
        raise PackIOError(f"Input path {root} is not a directory")

    def _raise(err: OSError) -> None:
        raise PackIOError(f"Cannot traverse {err.filename}: {err.strerror or err}") from err

    files: List[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for filename in filenames:
            files.append(Path(dirpath) / filename)
    return files


def group_by_size(sprites: Iterable[SpriteImage]) -> SizeGroups:
    groups: SizeGroups = {}
    for sprite in sprites:
        groups.setdefault(sprite.size, []).append(sprite)

    for size, members in groups.items():
        members.sort(key=lambda s: str(s.path))
        seen: Dict[str, Path] = {}
        for sprite in members:
            other = seen.get(sprite.name)
            if other is not None:
                raise DuplicateSpriteError(sprite.name, other, sprite.path)
            seen[sprite.name] = sprite.path

    return groups


def scan(input_dir: Path, options: PackOptions) -> SizeGroups:
    files = collect_files(input_dir)
    if not files:
        logging.warning("No files found in %s", input_dir)
        return {}

    logging.info("Decoding %s files from %s (%s workers)", len(files), input_dir, options.workers)
    with WorkerPool(max_workers=options.workers) as pool:
        sprites = pool.run(load_sprite, files)

    groups = group_by_size(sprites)
    logging.info("Grouped %s sprites into %s sizes", len(sprites), len(groups))
    return groups
