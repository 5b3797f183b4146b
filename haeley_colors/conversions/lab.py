"""
CIE-XYZ and CIE-Lab conversions for the D65/2° illuminant.

Lab components are rescaled to [0, 1] from their natural ranges
(L in [0, 100], a and b in [-128, 127]) so that Lab tuples can be used
interchangeably with the other unit-interval spaces. Rescale back before
using them as perceptual Lab values.

RGB <-> XYZ uses the Adobe RGB (1998) primaries and transfer exponent.
"""

from ..types.color_types import Float3
from ..types.defaults import ADOBE_RGB_GAMMA, D65_WHITE, LAB_EPSILON, LAB_KAPPA
from ..utils.tuples import clampf3

_OFFSET = 16.0 / 116.0


def _finv(t: float) -> float:
    t3 = t ** 3
    return t3 if t3 > LAB_EPSILON else (t - _OFFSET) / LAB_KAPPA


def _f(t: float) -> float:
    return t ** (1.0 / 3.0) if t > LAB_EPSILON else LAB_KAPPA * t + _OFFSET


def lab_to_xyz(lab: Float3) -> Float3:
    """
    Convert a (unit-scaled) CIE-Lab color to XYZ.

    Args:
        lab: (lightness, green-red, blue-yellow), each in [0, 1]

    Returns:
        Tuple[float, float, float]: (x, y, z) relative to the D65 white point
    """
    l, a, b = clampf3(lab)

    yr = (100.0 * l + 16.0) / 116.0
    xr = (256.0 * a - 128.0) / 500.0 + yr
    zr = yr - (256.0 * b - 128.0) / 200.0

    return (
        D65_WHITE[0] * _finv(xr),
        D65_WHITE[1] * _finv(yr),
        D65_WHITE[2] * _finv(zr),
    )


def xyz_to_lab(xyz: Float3) -> Float3:
    """
    Convert XYZ to (unit-scaled) CIE-Lab.

    The input is not clamped, XYZ is not a unit-interval space.

    Returns:
        Tuple[float, float, float]: (lightness, green-red, blue-yellow), each in [0, 1]
    """
    x = _f(xyz[0] / D65_WHITE[0])
    y = _f(xyz[1] / D65_WHITE[1])
    z = _f(xyz[2] / D65_WHITE[2])

    return clampf3((
        (116.0 * y - 16.0) / 100.0,
        (500.0 * (x - y) + 128.0) / 256.0,
        (200.0 * (y - z) + 128.0) / 256.0,
    ))


def rgb_to_xyz(rgb: Float3) -> Float3:
    """Convert Adobe RGB to XYZ (D65)."""
    r, g, b = (c ** ADOBE_RGB_GAMMA for c in clampf3(rgb))

    return (
        r * 0.57667 + g * 0.18555 + b * 0.18819,
        r * 0.29738 + g * 0.62735 + b * 0.07527,
        r * 0.02703 + g * 0.07069 + b * 0.99110,
    )


def xyz_to_rgb(xyz: Float3) -> Float3:
    """Convert XYZ (D65) to Adobe RGB, clamping the result to [0, 1]."""
    x, y, z = xyz

    r = x * +2.04137 + y * -0.56495 + z * -0.34469
    g = x * -0.96927 + y * +1.87601 + z * +0.04156
    b = x * +0.01345 + y * -0.11839 + z * +1.01541

    inverse = 1.0 / ADOBE_RGB_GAMMA
    return clampf3(tuple(c ** inverse if c > 0.0 else 0.0 for c in (r, g, b)))


def lab_to_rgb(lab: Float3) -> Float3:
    return xyz_to_rgb(lab_to_xyz(lab))


def rgb_to_lab(rgb: Float3) -> Float3:
    return xyz_to_lab(rgb_to_xyz(rgb))
