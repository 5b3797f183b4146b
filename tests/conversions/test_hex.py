import numpy as np
import pytest

from haeley_colors.conversions import hex_to_rgba, rgb_to_hex, rgba_to_hex, to_2char_hex
from ..samples import samples_hex_rgba


def test_hex_to_rgba():
    for hex_string, expected in samples_hex_rgba.items():
        assert np.allclose(hex_to_rgba(hex_string), expected)


def test_short_hex():
    assert hex_to_rgba("#0ff") == (0.0, 1.0, 1.0, 1.0)


@pytest.mark.parametrize("malformed", ["#12345", "#ggg", "0x", "", "#1234567"])
def test_malformed_hex_is_opaque_black(malformed):
    with pytest.warns(UserWarning):
        assert hex_to_rgba(malformed) == (0.0, 0.0, 0.0, 1.0)


def test_to_2char_hex():
    assert to_2char_hex(0.0) == "00"
    assert to_2char_hex(1.0) == "ff"
    assert to_2char_hex(0.2) == "33"
    assert to_2char_hex(0.3) == "4d"
    assert to_2char_hex(0.7) == "b3"


def test_rgb_to_hex():
    assert rgb_to_hex((1.0, 0.2, 0.0)) == "#ff3300"
    assert rgb_to_hex((2.0, -1.0, 0.0)) == "#ff0000"


def test_rgba_to_hex():
    assert rgba_to_hex((1.0, 0.2, 0.0, 1.0)) == "#ff3300ff"
    assert rgba_to_hex((0.0, 0.0, 0.0, 0.0)) == "#00000000"


def test_hex_round_trip():
    for hex_string in ["#336699", "#00ff0080", "#abcdef"]:
        rgba = hex_to_rgba(hex_string)
        result = rgba_to_hex(rgba) if len(hex_string) == 9 else rgb_to_hex(rgba[:3])
        assert result == hex_string
