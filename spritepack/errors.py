from __future__ import annotations

from pathlib import Path


class PackError(Exception):
    """Base class for failures that abort a packing run."""


class PackIOError(PackError):
    """Directory walk or file read/write failed."""


class DecodeError(PackError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path} could not be decoded: {reason}")
        self.path = path


class EncodeError(PackError):
    pass


class SerializationError(PackError):
    pass


class DuplicateSpriteError(PackError):
    def __init__(self, name: str, first: Path, second: Path):
        super().__init__(
            f"Sprite name {name!r} is used by both {first} and {second} in the same sheet"
        )
        self.name = name
        self.paths = (first, second)
