from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from spritepack.models import Dimensions

# CLI defaults
INPUT_DIR = Path("images")
OUTPUT_DIR = Path("images_out")
BASE_NAME = "textures"
PADDING = 8

# Runtime tuning
DEFAULT_WORKERS = os.cpu_count() or 1

# Output
PNG_SUFFIX = ".png"
METADATA_SUFFIX = ".json"
PIXI_SUFFIX = ".pixi.json"
JSON_INDENT = 2
STAGING_PREFIX = ".spritepack-"


@dataclass(frozen=True)
class PackOptions:
    input_dir: Path = INPUT_DIR
    output_dir: Path = OUTPUT_DIR
    base_name: str = BASE_NAME
    base_path: Optional[str] = None
    padding: int = PADDING
    workers: int = DEFAULT_WORKERS
    shrink_rows: bool = False
    edge_replicate: bool = True
    pixi: bool = False

    def __post_init__(self) -> None:
        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not self.base_name:
            raise ValueError("base_name must not be empty")

    @property
    def metadata_filename(self) -> str:
        return f"{self.base_name}{METADATA_SUFFIX}"

    @property
    def metadata_file(self) -> Path:
        return self.output_dir / self.metadata_filename

    def sheet_filename(self, size: Dimensions) -> str:
        return f"{self.base_name}_{size.width}x{size.height}{PNG_SUFFIX}"

    def pixi_filename(self, size: Dimensions) -> str:
        return f"{self.base_name}_{size.width}x{size.height}{PIXI_SUFFIX}"

    def sheet_key(self, size: Dimensions) -> str:
        filename = self.sheet_filename(size)
        if self.base_path:
            return posixpath.join(self.base_path, filename)
        return filename
