import numpy as np

from haeley_colors import Color, ColorSpace, lerp

BLACK = Color((0.0, 0.0, 0.0))
WHITE = Color((1.0, 1.0, 1.0))


def test_endpoints_are_copies():
    start = lerp(BLACK, WHITE, 0.0)
    end = lerp(BLACK, WHITE, 1.0)

    assert start == BLACK and start is not BLACK
    assert end == WHITE and end is not WHITE


def test_weight_outside_unit_range_clamps_to_endpoints():
    assert lerp(BLACK, WHITE, -3.0) == BLACK
    assert lerp(BLACK, WHITE, 7.0) == WHITE


def test_rgb_midpoint():
    assert np.allclose(lerp(BLACK, WHITE, 0.5, ColorSpace.rgb).rgba, (0.5, 0.5, 0.5, 1.0))


def test_alpha_is_interpolated():
    x = Color((1.0, 0.0, 0.0, 0.0))
    y = Color((1.0, 0.0, 0.0, 1.0))
    assert abs(lerp(x, y, 0.25, ColorSpace.rgb).a - 0.25) < 1e-9


def test_lab_midpoint_is_not_rgb_midpoint():
    mid = lerp(BLACK, WHITE, 0.5)
    r, g, b = mid.rgb

    assert abs(r - g) < 1e-3 and abs(g - b) < 1e-3
    assert abs(r - 0.4633) < 2e-3


def test_hsl_interpolates_hue():
    red = Color((1.0, 0.0, 0.0))
    blue = Color((0.0, 0.0, 1.0))
    assert np.allclose(lerp(red, blue, 0.5, ColorSpace.hsl).rgb, (0.0, 1.0, 0.0), atol=1e-6)


def test_cmyk_midpoint():
    red = Color((1.0, 0.0, 0.0))
    white = Color((1.0, 1.0, 1.0))
    assert np.allclose(lerp(red, white, 0.5, "cmyk").rgb, (1.0, 0.5, 0.5))


def test_inputs_are_not_mutated():
    x = Color((0.1, 0.2, 0.3))
    y = Color((0.7, 0.8, 0.9))
    lerp(x, y, 0.5)
    assert x.rgb == (0.1, 0.2, 0.3)
    assert y.rgb == (0.7, 0.8, 0.9)
