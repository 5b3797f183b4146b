from __future__ import annotations
from typing import Callable, Dict, Sequence

import numpy as np

from .colors.color import Color
from .types.encoding import ColorSpace, get_encoding_from_space

_FACTORIES: Dict[ColorSpace, Callable[[Color, Sequence[float]], Color]] = {
    ColorSpace.rgb: lambda c, v: c.from_rgb(*v),
    ColorSpace.hsl: lambda c, v: c.from_hsl(*v),
    ColorSpace.lab: lambda c, v: c.from_lab(*v),
    ColorSpace.cmyk: lambda c, v: c.from_cmyk(*v),
}


def lerp(x: Color, y: Color, a: float, space: ColorSpace = ColorSpace.lab) -> Color:
    """
    Linearly interpolate between two colors within a color space.

    Both colors are read in the alpha-bearing variant of ``space``, all
    components (alpha included) are interpolated, and the result is rebuilt
    through that space's setter.

    Args:
        x: Color at ``a <= 0``
        y: Color at ``a >= 1``
        a: Interpolation weight
        space: Color space used for interpolation

    Returns:
        A new Color, a copy of ``x`` or ``y`` when ``a`` is out of (0, 1).
    """
    if a <= 0.0:
        return Color(x.rgba)
    if a >= 1.0:
        return Color(y.rgba)

    space = ColorSpace(space)
    encoding = get_encoding_from_space(space, True)

    start = np.asarray(x.tuple(encoding), dtype=float)
    end = np.asarray(y.tuple(encoding), dtype=float)
    mixed = start * (1.0 - a) + end * a

    return _FACTORIES[space](Color(), [float(v) for v in mixed])
