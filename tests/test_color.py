import pytest

from unison2d.color import Color


def test_constants_and_default():
    assert Color() == Color.WHITE
    assert Color.WHITE == Color(1.0, 1.0, 1.0, 1.0)
    assert Color.TRANSPARENT == Color(0.0, 0.0, 0.0, 0.0)


def test_from_hex():
    assert Color.from_hex(0xFF0000) == Color(1.0, 0.0, 0.0, 1.0)


def test_from_hex_out_of_range():
    with pytest.raises(ValueError):
        Color.from_hex(-1)
    with pytest.raises(ValueError):
        Color.from_hex(0x1_0000_0000)


def test_tuple_conversion():
    c = Color.rgb(1.0, 0.5, 0.0)
    tup = c.to_rgb_tuple()
    assert tup == (1.0, 0.5, 0.0)
    assert Color.from_sequence(tup) == Color.rgb(1.0, 0.5, 0.0)


def test_array_conversion():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert c.to_array() == [0.1, 0.2, 0.3, 0.4]
    assert Color.from_sequence(c.to_array()) == c
    assert tuple(c) == (0.1, 0.2, 0.3, 0.4)


def test_from_sequence_wrong_length():
    with pytest.raises(ValueError):
        Color.from_sequence([0.1, 0.2])


def test_rgba8_roundtrip():
    c = Color.from_rgba8(255, 0, 51, 255)
    assert c.to_rgba8() == [255, 0, 51, 255]


def test_to_rgba8_truncates_and_saturates():
    assert Color(1.0, 0.5, 0.0, 1.0).to_rgba8() == [255, 127, 0, 255]
    assert Color(2.0, -1.0, float("nan"), 1.0).to_rgba8() == [255, 0, 0, 255]


def test_from_rgba8_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgba8(256, 0, 0, 0)