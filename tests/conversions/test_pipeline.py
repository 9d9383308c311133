import numpy as np
import pytest

from jzchroma.conversions import (
    unit_rgb_to_jzazbz,
    jzazbz_to_unit_rgb,
    np_unit_rgb_to_jzazbz,
    np_jzazbz_to_unit_rgb,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    xyz_to_lms,
    lms_to_xyz,
    lms_to_jzazbz,
    jzazbz_to_lms,
    parse_hex,
    format_hex,
    np_scale_channel,
    convert,
    np_convert,
    conversion_path,
)
from jzchroma.conversions.matrices import (
    LINEAR_RGB_TO_XYZ,
    XYZ_TO_LINEAR_RGB,
    XYZ_TO_LMS,
    LMS_TO_XYZ,
)
from samples import SAMPLE_HEX, max_channel_error


def test_black_maps_to_origin():
    j, a, b = unit_rgb_to_jzazbz(0.0, 0.0, 0.0)
    assert j == pytest.approx(0.0, abs=1e-20)
    assert a == pytest.approx(0.0, abs=1e-20)
    assert b == pytest.approx(0.0, abs=1e-20)

def test_white_is_achromatic():
    j, a, b = unit_rgb_to_jzazbz(1.0, 1.0, 1.0)
    assert 0.0 < j < 1.0
    assert abs(a) < 1e-3
    assert abs(b) < 1e-3

def test_lightness_increases_along_grey_axis():
    greys = [unit_rgb_to_jzazbz(v, v, v)[0] for v in np.linspace(0.05, 1.0, 20)]
    assert all(g0 < g1 for g0, g1 in zip(greys, greys[1:]))

def test_red_and_green_are_opposed_on_a():
    assert unit_rgb_to_jzazbz(1.0, 0.0, 0.0)[1] > 0.0
    assert unit_rgb_to_jzazbz(0.0, 1.0, 0.0)[1] < 0.0

def test_blue_and_yellow_are_opposed_on_b():
    assert unit_rgb_to_jzazbz(0.0, 0.0, 1.0)[2] < 0.0
    assert unit_rgb_to_jzazbz(1.0, 1.0, 0.0)[2] > 0.0

def test_white_point_xyz():
    x, y, z = linear_rgb_to_xyz(1.0, 1.0, 1.0)
    assert x == pytest.approx(0.95045, abs=1e-4)
    assert y == pytest.approx(1.0, abs=1e-6)
    assert z == pytest.approx(1.08905, abs=1e-4)
    assert xyz_to_linear_rgb(x, y, z) == pytest.approx((1.0, 1.0, 1.0), abs=1e-6)

def test_lms_matrices_invert_each_other():
    xyz = (0.3, 0.4, 0.5)
    assert lms_to_xyz(*xyz_to_lms(*xyz)) == pytest.approx(xyz, rel=1e-6)

def test_matrix_pairs_are_inverses():
    assert np.allclose(LMS_TO_XYZ @ XYZ_TO_LMS, np.eye(3), atol=1e-7)
    assert np.allclose(XYZ_TO_LINEAR_RGB @ LINEAR_RGB_TO_XYZ, np.eye(3), atol=1e-7)

def test_jzazbz_stage_inverts_lms_stage():
    lms = xyz_to_lms(*linear_rgb_to_xyz(0.2, 0.5, 0.7))
    assert jzazbz_to_lms(*lms_to_jzazbz(*lms)) == pytest.approx(lms, rel=1e-5)

@pytest.mark.parametrize("text", SAMPLE_HEX)
def test_hex_round_trip(text):
    jab = unit_rgb_to_jzazbz(*parse_hex(text))
    assert max_channel_error(format_hex(*jzazbz_to_unit_rgb(*jab)), text) <= 1

def test_round_trip_grid_numpy():
    levels = np.arange(0, 256, 17)
    grid = np.stack(np.meshgrid(levels, levels, levels, indexing="ij"), axis=-1).reshape(-1, 3)
    jab = np_unit_rgb_to_jzazbz(grid / 255.0)
    back = np_scale_channel(np_jzazbz_to_unit_rgb(jab), 255)
    assert back.shape == grid.shape
    assert np.max(np.abs(back - grid)) <= 1

def test_white_round_trips_exactly():
    assert format_hex(*jzazbz_to_unit_rgb(*unit_rgb_to_jzazbz(1.0, 1.0, 1.0))) == "#ffffff"

def test_round_trip_full_cube():
    levels = np.arange(256)
    green_blue = np.stack(np.meshgrid(levels, levels, indexing="ij"), axis=-1).reshape(-1, 2)
    worst = 0
    # one red plane at a time keeps the working arrays small
    for red in levels:
        plane = np.column_stack([np.full(len(green_blue), red), green_blue])
        back = np_scale_channel(np_jzazbz_to_unit_rgb(np_unit_rgb_to_jzazbz(plane / 255.0)), 255)
        worst = max(worst, int(np.max(np.abs(back - plane))))
    assert worst == 0

def test_numpy_matches_scalar():
    rgb = np.array([parse_hex(text) for text in SAMPLE_HEX])
    jab = np_unit_rgb_to_jzazbz(rgb)
    expected = np.array([unit_rgb_to_jzazbz(*c) for c in rgb])
    assert np.allclose(jab, expected, atol=1e-12)
    back = np_jzazbz_to_unit_rgb(jab)
    expected_back = np.array([jzazbz_to_unit_rgb(*c) for c in expected])
    assert np.allclose(back, expected_back, atol=1e-9)

def test_numpy_keeps_leading_shape():
    rgb = np.random.default_rng(7).random((4, 5, 3))
    assert np_unit_rgb_to_jzazbz(rgb).shape == (4, 5, 3)
    assert np_jzazbz_to_unit_rgb(np_unit_rgb_to_jzazbz(rgb)).shape == (4, 5, 3)


def test_conversion_path():
    assert conversion_path("rgb", "rgb") == []
    assert conversion_path("rgb", "xyz") == [("rgb", "lrgb"), ("lrgb", "xyz")]
    assert conversion_path("jzazbz", "xyz") == [("jzazbz", "lms"), ("lms", "xyz")]
    assert len(conversion_path("jzazbz", "rgb")) == 4

def test_conversion_path_unknown_space():
    with pytest.raises(ValueError):
        conversion_path("rgb", "hsv")

def test_convert_matches_composed_functions():
    rgb = (0.25, 0.5, 0.75)
    assert convert(rgb, "rgb", "jzazbz") == pytest.approx(unit_rgb_to_jzazbz(*rgb))
    jab = unit_rgb_to_jzazbz(*rgb)
    assert convert(jab, "jzazbz", "rgb") == pytest.approx(jzazbz_to_unit_rgb(*jab))
    assert convert(rgb, "RGB", "rgb") == rgb

def test_convert_intermediate_round_trip():
    xyz = convert((0.9, 0.1, 0.4), "rgb", "xyz")
    assert convert(xyz, "xyz", "rgb") == pytest.approx((0.9, 0.1, 0.4), abs=1e-9)

def test_np_convert_matches_scalar():
    rgb = np.array([[0.25, 0.5, 0.75], [1.0, 0.0, 0.0]])
    lms = np_convert(rgb, "rgb", "lms")
    expected = np.array([convert(tuple(c), "rgb", "lms") for c in rgb])
    assert np.allclose(lms, expected)
