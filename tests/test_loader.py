import pytest

from lc3vm.exceptions import LoadError
from lc3vm.loader import load_image, load_file, dump_image
from lc3vm.memory import Memory


def test_load_places_words_at_origin():
    memory = Memory()
    assert load_image(memory, bytes([0x30, 0x00, 0x90, 0x00])) == (0x3000, 1)
    assert memory.peek(0x3000) == 0x9000
    assert memory.peek(0x3001) == 0

def test_round_trip():
    words = [0xE002, 0xF022, 0xF025, 0x0048, 0x0069, 0x0000]
    data = bytes([0x40, 0x00])
    for word in words:
        data += bytes([word >> 8, word & 0xFF])
    memory = Memory()
    origin, count = load_image(memory, data)
    assert origin == 0x4000
    assert count == len(words)
    assert list(memory.words(origin, origin + count)) == words
    assert dump_image(memory, origin, count) == data

@pytest.mark.parametrize("data", [None, b"", b"\x30", b"\x30\x00\x90"])
def test_bad_images(data):
    with pytest.raises(LoadError):
        load_image(Memory(), data)

def test_image_too_large():
    with pytest.raises(LoadError):
        load_image(Memory(), b"\x00\x00" * (65536 + 2))

def test_image_past_end_of_memory():
    memory = Memory()
    with pytest.raises(LoadError):
        load_image(memory, b"\xFF\xFF\x00\x01\x00\x02")
    assert load_image(memory, b"\xFF\xFF\x12\x34") == (0xFFFF, 1)
    assert memory.peek(0xFFFF) == 0x1234

def test_origin_only_image():
    assert load_image(Memory(), b"\x30\x00") == (0x3000, 0)

def test_load_file(tmp_path):
    filename = tmp_path / "prog.obj"
    filename.write_bytes(b"\x30\x00\xF0\x25")
    memory = Memory()
    assert load_file(memory, str(filename)) == (0x3000, 1)
    assert memory.peek(0x3000) == 0xF025

def test_load_missing_file(tmp_path):
    with pytest.raises(IOError):
        load_file(Memory(), str(tmp_path / "missing.obj"))
