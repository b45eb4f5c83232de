import pytest

from cnge.color import Color


def test_from_hex_without_alpha():
    c = Color.from_hex(0xFF0000)
    assert c == Color(1.0, 0.0, 0.0, Color.DEFAULT_ALPHA)


def test_from_hex_with_alpha():
    c = Color.from_hex(0x00FF0080)
    assert c.r == 0.0
    assert c.g == 1.0
    assert c.b == 0.0
    assert c.a == pytest.approx(0x80 / 255)


def test_from_hex_blue_channel():
    c = Color.from_hex(0x0000FF)
    assert (c.r, c.g, c.b) == (0.0, 0.0, 1.0)


def test_from_hex_out_of_range():
    with pytest.raises(ValueError):
        Color.from_hex(-1)
    with pytest.raises(ValueError):
        Color.from_hex(0x1_0000_0000)


def test_from_bytes_matches_hex():
    assert Color.from_bytes(255, 0, 255) == Color.from_hex(0xFF00FF)


def test_from_bytes_alpha():
    c = Color.from_bytes(0, 0, 0, 0)
    assert c.a == 0.0


def test_default_alpha():
    assert Color(0.1, 0.2, 0.3).a == Color.DEFAULT_ALPHA


def test_invert_keeps_alpha():
    c = Color(0.25, 0.5, 0.75, 0.3)
    inv = c.invert()
    assert inv.a == c.a
    assert inv.r == pytest.approx(1 - c.r)
    assert inv.b == pytest.approx(1 - c.b)


def test_invert_twice_round_trips():
    c = Color.from_hex(0x12345678)
    back = c.invert().invert()
    assert back.r == pytest.approx(c.r)
    assert back.g == pytest.approx(c.g)
    assert back.b == pytest.approx(c.b)
    assert back.a == c.a