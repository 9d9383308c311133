import math
import pytest

from jzchroma.colors import Color, lerp
from samples import SAMPLE_HEX

COLORS = [Color.from_hex(text) for text in SAMPLE_HEX]


def test_lerp():
    assert lerp(0.0, 10.0, 0.25) == 2.5
    assert lerp(3.0, 3.0, math.nan) == 3.0
    assert lerp(-1.0, 1.0, 0.5) == 0.0

@pytest.mark.parametrize("c1", COLORS[:6])
@pytest.mark.parametrize("c2", COLORS[6:12])
def test_blend_endpoints(c1, c2):
    assert c1.blend(c2, 0.0) == c1
    assert c1.blend(c2, 1.0) == c2

@pytest.mark.parametrize("frac", [0.0, 0.3, 1.0, -2.0, 7.5, math.nan, math.inf])
def test_blend_identity(frac):
    c = Color.from_hex("#c0ffee")
    assert c.blend(c, frac) == c

def test_blend_midpoint():
    red = Color.from_hex("#ff0000")
    blue = Color.from_hex("#0000ff")
    mid = red.blend(blue, 0.5)
    assert mid.j == pytest.approx((red.j + blue.j) / 2)
    assert mid.a == pytest.approx((red.a + blue.a) / 2)
    assert mid.b == pytest.approx((red.b + blue.b) / 2)

def test_blend_keeps_equal_components():
    c1 = Color(0.1, 0.2, 0.3)
    c2 = Color(0.1, 0.5, 0.3)
    mixed = c1.blend(c2, 0.37)
    assert mixed.j == 0.1
    assert mixed.b == 0.3
    assert mixed.a == pytest.approx(0.2 * 0.63 + 0.5 * 0.37)

def test_blend_returns_new_instance():
    c1 = Color(0.1, 0.2, 0.3)
    c2 = Color(0.2, 0.3, 0.4)
    assert c1.blend(c2, 0.5) is not c1
    assert c1.value == (0.1, 0.2, 0.3)
