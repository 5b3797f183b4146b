"""
Simple gamma encoding.

"srgb" here denotes plain power-law encoding with a caller supplied gamma,
not the piecewise sRGB transfer function.
"""

from ..types.color_types import Float3, Float4
from ..types.defaults import DEFAULT_GAMMA
from ..utils.tuples import clampf3, clampf4


def rgb_to_srgb(rgb: Float3, gamma: float = DEFAULT_GAMMA) -> Float3:
    """Raise every channel to ``gamma``."""
    r, g, b = clampf3(rgb)
    return r ** gamma, g ** gamma, b ** gamma


def srgb_to_rgb(srgb: Float3, gamma: float = DEFAULT_GAMMA) -> Float3:
    """Inverse of :func:`rgb_to_srgb`."""
    inverse = 1.0 / gamma
    r, g, b = clampf3(srgb)
    return r ** inverse, g ** inverse, b ** inverse


def rgba_to_srgba(rgba: Float4, gamma: float = DEFAULT_GAMMA) -> Float4:
    r, g, b, a = clampf4(rgba)
    return r ** gamma, g ** gamma, b ** gamma, a


def srgba_to_rgba(srgba: Float4, gamma: float = DEFAULT_GAMMA) -> Float4:
    inverse = 1.0 / gamma
    r, g, b, a = clampf4(srgba)
    return r ** inverse, g ** inverse, b ** inverse, a
