from ..types.color_types import Float3
from ..utils.tuples import clampf3

## HSL to RGB conversions

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel from the HSL helper values ``p`` and ``q``.

    Args:
        p: Lower chroma bound
        q: Upper chroma bound
        t: Hue offset for the channel, expected in [-1, 2]

    Returns:
        float: channel value in [0, 1]
    """
    if not -1.0 <= t <= 2.0:
        raise ValueError(f"t is expected to be between -1 and 2, got {t}")
    if t < 0.0:
        t += 1.0
    elif t > 1.0:
        t -= 1.0

    if 6.0 * t < 1.0:
        return p + (q - p) * 6.0 * t
    if 2.0 * t < 1.0:
        return q
    if 3.0 * t < 2.0:
        return p + (q - p) * 6.0 * (2.0 / 3.0 - t)
    return p


def hsl_to_rgb(hsl: Float3) -> Float3:
    """
    Convert HSL to RGB.

    Args:
        hsl: (hue, saturation, lightness), each in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h, s, l = clampf3(hsl)

    if s == 0.0:
        return l, l, l

    q = l * (1.0 + s) if l < 0.5 else (l + s) - (s * l)
    p = 2.0 * l - q

    return (
        hue_to_rgb(p, q, h + 1.0 / 3.0),
        hue_to_rgb(p, q, h),
        hue_to_rgb(p, q, h - 1.0 / 3.0),
    )

## RGB to HSL conversions

def rgb_to_hsl(rgb: Float3) -> Float3:
    """
    Convert RGB to HSL.

    Achromatic input (max == min) yields saturation 0 and hue 0.

    Args:
        rgb: (r, g, b), each in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0, 1), saturation [0, 1], lightness [0, 1])
    """
    r, g, b = clampf3(rgb)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) * 0.5

    if delta == 0.0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (max_c + min_c)
    else:
        saturation = delta / (2.0 - max_c - min_c)

    delta_r = (((max_c - r) / 6.0) + (delta / 2.0)) / delta
    delta_g = (((max_c - g) / 6.0) + (delta / 2.0)) / delta
    delta_b = (((max_c - b) / 6.0) + (delta / 2.0)) / delta

    if r == max_c:
        hue = delta_b - delta_g
    elif g == max_c:
        hue = delta_r - delta_b + (1.0 / 3.0)
    else:
        hue = delta_g - delta_r + (2.0 / 3.0)

    # wrap into [0, 1)
    if hue < 0.0:
        hue += 1.0
    elif hue >= 1.0:
        hue -= 1.0

    return hue, saturation, lightness
