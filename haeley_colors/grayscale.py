from __future__ import annotations
from typing import Sequence, Tuple

from .types.encoding import GrayscaleAlgorithm


def gray_value(rgb: Sequence[float], algorithm: GrayscaleAlgorithm = GrayscaleAlgorithm.LINEAR_LUMINANCE) -> float:
    """
    Reduce the first three (RGB) components to a single gray value.

    Args:
        rgb: RGB or RGBA components in [0, 1]
        algorithm: Reduction to use

    Returns:
        float: gray value in [0, 1]
    """
    r, g, b = rgb[0], rgb[1], rgb[2]
    algorithm = GrayscaleAlgorithm(algorithm)

    if algorithm == GrayscaleAlgorithm.AVERAGE:
        # ignores perceived luminosity
        return (r + g + b) / 3.0
    if algorithm == GrayscaleAlgorithm.LEAST_SATURATED_VARIANT:
        # flat and dark
        return (max(r, g, b) - min(r, g, b)) * 0.5
    if algorithm == GrayscaleAlgorithm.MINIMUM_DECOMPOSITION:
        return min(r, g, b)
    if algorithm == GrayscaleAlgorithm.MAXIMUM_DECOMPOSITION:
        return max(r, g, b)
    return r * 0.2126 + g * 0.7152 + b * 0.0722


def grayscale(
    rgba: Sequence[float],
    algorithm: GrayscaleAlgorithm = GrayscaleAlgorithm.LINEAR_LUMINANCE,
) -> Tuple[float, ...]:
    """Return a gray tuple of the same arity as ``rgba``, alpha is passed through."""
    if len(rgba) not in (3, 4):
        raise ValueError(f"grayscale expects an RGB or RGBA tuple, got {len(rgba)} components")
    gray = gray_value(rgba, algorithm)
    if len(rgba) == 4:
        return gray, gray, gray, rgba[3]
    return gray, gray, gray
