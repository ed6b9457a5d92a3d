"""Convert pack metadata into PixiJS spritesheet JSON.

Pack metadata keeps one entry per sheet with a shared sprite size. Pixi
expects per-frame rectangles, so every sprite becomes an untrimmed,
unrotated frame of ``spriteSize``.
"""
from __future__ import annotations

import json

from spritepack import config
from spritepack.models import SheetMeta


def is_pack_metadata(data) -> bool:
    """True when ``data`` looks like a pack metadata document."""
    if not isinstance(data, dict):
        return False
    return any(isinstance(sheet, dict) and "sheetSize" in sheet for sheet in data.values())


def pack_to_pixi(sheet: dict, image: str) -> dict:
    sprite_size = dict(sheet["spriteSize"])
    frames = {}
    for name, pos in sheet["sprites"].items():
        frames[name] = {
            "sourceSize": dict(sprite_size),
            "frame": {**pos, **sprite_size},
            "spriteSourceSize": {"x": 0, "y": 0, **sprite_size},
            "rotated": False,
            "trimmed": False,
        }
    return {
        "frames": frames,
        "meta": {
            "scale": "1",
            "image": image,
            "size": dict(sheet["sheetSize"]),
        },
    }


def dump_pixi(sheet: SheetMeta, image: str) -> str:
    payload = pack_to_pixi(sheet.to_json(), image)
    return json.dumps(payload, indent=config.JSON_INDENT, sort_keys=True) + "\n"
