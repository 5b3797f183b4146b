import pytest

from haeley_colors.types import ColorEncoding, ColorSpace, encodes_alpha, get_encoding_from_space, stride, uses_clamped_floats
from haeley_colors.utils import clampf, clampf3, clampf4, clampf_n, duplicate, equals


def test_clampf():
    assert clampf(1.5) == 1.0
    assert clampf(-0.5) == 0.0
    assert clampf(0.25) == 0.25


def test_clampf_n():
    assert clampf3((2.0, 0.5, -1.0)) == (1.0, 0.5, 0.0)
    assert clampf4((2.0, 0.5, -1.0, 0.3)) == (1.0, 0.5, 0.0, 0.3)
    with pytest.raises(ValueError):
        clampf_n((1.0, 1.0), 3)


def test_equals_is_exact():
    assert equals((0.1, 0.2, 0.3), (0.1, 0.2, 0.3))
    assert not equals((0.1, 0.2, 0.3), (0.1, 0.2, 0.3 + 1e-12))
    assert not equals((0.1, 0.2, 0.3), (0.1, 0.2, 0.3, 1.0))


def test_duplicate():
    values = [0.1, 0.2, 0.3]
    copy = duplicate(values)
    values[0] = 1.0
    assert copy == (0.1, 0.2, 0.3)


def test_stride():
    assert stride(ColorEncoding.RGB) == 3
    assert stride(ColorEncoding.RGBa) == 4
    assert stride(ColorEncoding.cmyk) == 4
    assert stride(ColorEncoding.cmyka) == 5
    with pytest.raises(ValueError):
        stride(ColorEncoding.hex)


def test_encoding_flags():
    assert encodes_alpha(ColorEncoding.laba)
    assert not encodes_alpha(ColorEncoding.cmyk)
    assert uses_clamped_floats(ColorEncoding.hsl)
    assert not uses_clamped_floats(ColorEncoding.RGBa)


def test_get_encoding_from_space():
    assert get_encoding_from_space(ColorSpace.lab, True) == ColorEncoding.laba
    assert get_encoding_from_space("cmyk", False) == ColorEncoding.cmyk
