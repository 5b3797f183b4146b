from ..types.color_types import Float3, Float4
from ..utils.tuples import clampf3, clampf4


def cmyk_to_rgb(cmyk: Float4) -> Float3:
    """
    Convert CMYK to RGB.

    Args:
        cmyk: (cyan, magenta, yellow, key), each in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    c, m, y, k = clampf4(cmyk)
    k = 1.0 - k
    return (1.0 - c) * k, (1.0 - m) * k, (1.0 - y) * k


def rgb_to_cmyk(rgb: Float3) -> Float4:
    """
    Convert RGB to CMYK.

    Black (max channel 0) has no defined chromatic components, C, M and Y are 0.

    Returns:
        Tuple[float, float, float, float]: (cyan, magenta, yellow, key) in [0, 1]
    """
    r, g, b = clampf3(rgb)

    key = 1.0 - max(r, g, b)
    k2 = 1.0 - key
    k3 = 0.0 if k2 == 0.0 else 1.0 / k2
    return (k2 - r) * k3, (k2 - g) * k3, (k2 - b) * k3, key
