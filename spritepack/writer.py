from __future__ import annotations

import io
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from PIL import Image

from spritepack import config
from spritepack.config import PackOptions
from spritepack.errors import EncodeError, PackIOError, SerializationError
from spritepack.models import SheetMeta

AtlasMetadata = Dict[str, SheetMeta]


def dump_metadata(metadata: AtlasMetadata) -> str:
    payload = {key: sheet.to_json() for key, sheet in metadata.items()}
    try:
        return json.dumps(payload, indent=config.JSON_INDENT, sort_keys=True) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize atlas metadata: {exc}") from exc


class AtlasWriter:
    """Stage sheets and metadata, then move them into the output dir together.

    Nothing lands in ``output_dir`` until :meth:`commit`. Leaving the context
    manager with an exception discards whatever was staged.
    """

    def __init__(self, options: PackOptions):
        self.options = options
        self._staging: Optional[Path] = None
        self._created_output_dir = False

    def __enter__(self) -> "AtlasWriter":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None and self._staging is not None:
                self.commit()
        finally:
            self.discard()

    def open(self) -> Path:
        out_dir = self.options.output_dir
        try:
            self._created_output_dir = not out_dir.exists()
            out_dir.mkdir(parents=True, exist_ok=True)
            self._staging = Path(tempfile.mkdtemp(prefix=config.STAGING_PREFIX, dir=out_dir))
        except OSError as exc:
            raise PackIOError(f"Cannot prepare output directory {out_dir}: {exc}") from exc
        return self._staging

    def _target(self, filename: str) -> Path:
        if self._staging is None:
            raise RuntimeError("AtlasWriter used before open()")
        return self._staging / filename

    def write_sheet(self, canvas: Image.Image, filename: str) -> None:
        buf = io.BytesIO()
        try:
            canvas.save(buf, format="PNG")
        except Exception as exc:
            # Pillow reports zlib/encoder failures as OSError.
            raise EncodeError(f"Cannot encode {filename}: {exc}") from exc

        path = self._target(filename)
        try:
            path.write_bytes(buf.getvalue())
        except OSError as exc:
            raise PackIOError(f"Cannot write {filename}: {exc}") from exc

    def write_json(self, payload: str, filename: str) -> None:
        path = self._target(filename)
        try:
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise PackIOError(f"Cannot write {filename}: {exc}") from exc

    def write_metadata(self, metadata: AtlasMetadata) -> None:
        self.write_json(dump_metadata(metadata), self.options.metadata_filename)

    def commit(self) -> List[Path]:
        if self._staging is None:
            raise RuntimeError("AtlasWriter has nothing staged")

        # Metadata goes last so it never references a sheet that is not in place.
        metadata_name = self.options.metadata_filename
        staged = sorted(p.name for p in self._staging.iterdir() if p.name != metadata_name)
        if (self._staging / metadata_name).exists():
            staged.append(metadata_name)

        written: List[Path] = []
        for filename in staged:
            dst = self.options.output_dir / filename
            try:
                os.replace(self._staging / filename, dst)
            except OSError as exc:
                raise PackIOError(f"Cannot move {filename} into {self.options.output_dir}: {exc}") from exc
            written.append(dst)
            logging.info("Saved %s", dst)

        self._created_output_dir = False
        self.discard()
        return written

    def discard(self) -> None:
        if self._staging is None:
            return
        shutil.rmtree(self._staging, ignore_errors=True)
        self._staging = None
        if self._created_output_dir:
            # Failed before commit: do not leave a fresh, empty output dir behind.
            try:
                self.options.output_dir.rmdir()
            except OSError:
                logging.warning("Could not remove %s", self.options.output_dir)
            self._created_output_dir = False
