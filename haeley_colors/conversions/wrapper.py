from typing import Callable, Dict, Sequence, Tuple

from ..types.encoding import ColorSpace
from .cmyk import cmyk_to_rgb, rgb_to_cmyk
from .hsl import hsl_to_rgb, rgb_to_hsl
from .lab import lab_to_rgb, rgb_to_lab
from ..utils.tuples import clampf, clampf_n, clampf3

# Every space is converted through RGB.
TO_RGB: Dict[ColorSpace, Callable[[Tuple[float, ...]], Tuple[float, ...]]] = {
    ColorSpace.rgb: clampf3,
    ColorSpace.hsl: hsl_to_rgb,
    ColorSpace.lab: lab_to_rgb,
    ColorSpace.cmyk: cmyk_to_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[[Tuple[float, ...]], Tuple[float, ...]]] = {
    ColorSpace.rgb: clampf3,
    ColorSpace.hsl: rgb_to_hsl,
    ColorSpace.lab: rgb_to_lab,
    ColorSpace.cmyk: rgb_to_cmyk,
}

CHANNELS: Dict[ColorSpace, int] = {
    ColorSpace.rgb: 3,
    ColorSpace.hsl: 3,
    ColorSpace.lab: 3,
    ColorSpace.cmyk: 4,
}


def convert(
    color: Sequence[float],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, ...]:
    """
    Convert a unit-interval color tuple between two color spaces.

    A tuple with one component more than ``from_space`` has is treated as
    carrying alpha, which is passed through unchanged.

    Args:
        color: Input components in ``from_space``
        from_space: Source color space
        to_space: Target color space

    Returns:
        Tuple of components in ``to_space`` (plus alpha, if given)
    """
    from_space = ColorSpace(from_space)
    to_space = ColorSpace(to_space)

    channels = CHANNELS[from_space]
    if len(color) == channels:
        base, alpha = tuple(color), None
    elif len(color) == channels + 1:
        base, alpha = tuple(color[:channels]), color[channels]
    else:
        raise ValueError(
            f"{from_space.value} expects {channels} or {channels + 1} components, got {len(color)}"
        )

    if from_space == to_space:
        converted = clampf_n(base, channels)
    else:
        converted = FROM_RGB[to_space](TO_RGB[from_space](base))

    if alpha is None:
        return tuple(converted)
    return tuple(converted) + (clampf(alpha),)
