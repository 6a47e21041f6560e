import pytest

from voxengine.direction import Direction
from voxengine.quad import Quad, pack_quads


@pytest.mark.parametrize("direction", list(Direction))
def test_quad(direction):
    for z in range(32):
        for y in range(32):
            for x in range(32):
                quad = Quad(direction, x, y, z, [0, 0, 0, 0])
                assert quad.x() == x
                assert quad.y() == y
                assert quad.z() == z
                assert quad.color() == (0, 0, 0, 0)
                assert quad.direction() == direction


def test_color_word_is_read_back_little_endian():
    quad = Quad(Direction.Up, 1, 2, 3, (1, 2, 3, 4))
    assert quad.color() == (4, 3, 2, 1)


def test_to_bytes_layout():
    quad = Quad(Direction.Left, 1, 0, 0, (1, 2, 3, 4))
    assert quad.to_bytes() == b"\x01\x00\x00\x00" + b"\x04\x03\x02\x01"


def test_to_bytes_length():
    assert len(Quad(Direction.Back, 31, 31, 31, (9, 9, 9, 9)).to_bytes()) == 8


def test_pack_quads_concatenates_in_order():
    first = Quad(Direction.Left, 1, 2, 3, (1, 1, 1, 1))
    second = Quad(Direction.Down, 4, 5, 6, (2, 2, 2, 2))
    packed = pack_quads([first, second])
    assert packed == first.to_bytes() + second.to_bytes()


def test_pack_quads_empty():
    assert pack_quads([]) == b""


def test_set_texture_id_keeps_other_fields():
    quad = Quad(Direction.Front, 7, 8, 9, (10, 20, 30, 40))
    quad.set_texture_id(5)
    assert (quad.x(), quad.y(), quad.z()) == (7, 8, 9)
    assert quad.direction() == Direction.Front
    assert quad.color() == (40, 30, 20, 10)
    low = int.from_bytes(quad.to_bytes()[:4], "little")
    assert (low >> 21) & 0x7F == 5


def test_set_texture_id_replaces_previous_id():
    quad = Quad(Direction.Up, 0, 0, 0, (0, 0, 0, 0))
    quad.set_texture_id(0x7F)
    quad.set_texture_id(3)
    low = int.from_bytes(quad.to_bytes()[:4], "little")
    assert (low >> 21) & 0x7F == 3


def test_set_texture_id_masks_to_seven_bits():
    quad = Quad(Direction.Up, 0, 0, 0, (0, 0, 0, 0))
    quad.set_texture_id(0xFF)
    low = int.from_bytes(quad.to_bytes()[:4], "little")
    assert low >> 21 == 0x7F
    assert quad.direction() == Direction.Up


def test_equal_quads_compare_equal():
    assert Quad(Direction.Up, 1, 2, 3, (4, 5, 6, 7)) == Quad(2, 1, 2, 3, (4, 5, 6, 7))


def test_invalid_direction_rejected():
    with pytest.raises(ValueError):
        Quad(6, 0, 0, 0, (0, 0, 0, 0))


def test_wrong_colour_length_rejected():
    with pytest.raises(ValueError):
        Quad(Direction.Up, 0, 0, 0, (0, 0, 0))