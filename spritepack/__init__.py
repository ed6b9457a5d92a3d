"""Pack sprite images into per-size texture atlases."""

__version__ = "0.1.0"
