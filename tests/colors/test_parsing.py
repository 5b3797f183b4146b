import pytest

from haeley_colors.colors import format_components, parse_color_string
from haeley_colors.types import ColorEncoding


def test_parse_float_encodings():
    assert parse_color_string("rgba(1, 0, 0, 0.5)") == (ColorEncoding.rgba, (1.0, 0.0, 0.0, 0.5))
    assert parse_color_string("hsl(0.5, 1, 0.5)") == (ColorEncoding.hsl, (0.5, 1.0, 0.5))
    assert parse_color_string("cmyka(0, 0, 0, 1, 1)") == (ColorEncoding.cmyka, (0.0, 0.0, 0.0, 1.0, 1.0))


def test_parse_byte_encodings():
    assert parse_color_string("RGB(255, 128, 0)") == (ColorEncoding.RGB, (255.0, 128.0, 0.0))
    assert parse_color_string("RGBA(255, 128, 0, 64)")[0] == ColorEncoding.RGBA
    assert parse_color_string("RGBa(255, 128, 0, 0.5)") == (ColorEncoding.RGBa, (255.0, 128.0, 0.0, 0.5))


def test_parse_hex():
    assert parse_color_string("#0ff") == (ColorEncoding.hex, (0.0, 1.0, 1.0, 1.0))
    encoding, values = parse_color_string("#0ff8")
    assert encoding == ColorEncoding.hexa
    assert values[3] == 0x88 / 255
    assert parse_color_string("0x00ff00")[0] == ColorEncoding.hex


def test_parse_strips_whitespace():
    assert parse_color_string("  rgb(1, 1, 1)\n") == (ColorEncoding.rgb, (1.0, 1.0, 1.0))


@pytest.mark.parametrize("malformed", [
    "rgb 1, 1, 1",
    "xyz(1, 1, 1)",
    "rgb(a, b, c)",
    "rgb(1, 1, 1",
    "rgb(true, 1, 1)",
    "rgb(\"1\", 1, 1)",
])
def test_parse_malformed_warns(malformed):
    with pytest.warns(UserWarning):
        assert parse_color_string(malformed) is None


def test_parse_wrong_arity_raises():
    with pytest.raises(ValueError):
        parse_color_string("rgba(1, 0, 0)")
    with pytest.raises(ValueError):
        parse_color_string("RGB(255, 0, 0, 0)")


def test_format_components():
    assert format_components(ColorEncoding.rgb, (1.0, 0.5, 0.0), 2) == "rgb(1.00, 0.50, 0.00)"
    assert format_components(ColorEncoding.RGBA, (255, 128, 0, 64), 4) == "RGBA(255, 128, 0, 64)"
    assert format_components(ColorEncoding.RGBa, (255, 128, 0, 0.5), 1) == "RGBa(255, 128, 0, 0.5)"
    assert format_components(ColorEncoding.cmyka, (0, 0, 0, 1, 1), 0) == "cmyka(0, 0, 0, 1, 1)"
