from pathlib import Path

import pytest

from spritepack.errors import DecodeError, PackIOError
from spritepack.sources import load_sprite, sprite_name


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("hero.png", "hero"),
        ("hero.idle.png", "hero.idle"),
        ("noext", "noext"),
        (".hidden", ".hidden"),
        (".hidden.png", ".hidden"),
    ],
)
def test_sprite_name_strips_last_extension(filename, expected):
    assert sprite_name(Path("/sprites") / filename) == expected


def test_dotfile_sprite_keeps_its_name(tmp_path, write_sprite):
    sprite = load_sprite(write_sprite(tmp_path / ".hidden", (4, 4)))

    assert sprite.name == ".hidden"


def test_missing_file_is_an_io_error(tmp_path):
    with pytest.raises(PackIOError):
        load_sprite(tmp_path / "gone.png")


def test_garbage_is_a_decode_error(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"\x00" * 32)

    with pytest.raises(DecodeError) as excinfo:
        load_sprite(bad)

    assert excinfo.value.path == bad
