"""
Dichromatic color vision simulation.

A color is projected onto its confusion line in CIE xy chromaticity space:
the line through the color and the deficiency's dichromatic convergence
point is intersected with the deficiency's boundary segment, the result is
rebuilt at the input luminance and shifted toward neutral gray until it
fits into RGB.

Based on the color_blind_sims() algorithm by Matthew Wickline and the
Human-Computer Interaction Resource Network (http://colorlab.wickline.org/colorblind/colorlab/).
"""

from __future__ import annotations
from typing import Dict, NamedTuple, Sequence, Tuple

import numpy as np
from numpy import ndarray

from .conversions.gamma import rgb_to_srgb, srgb_to_rgb
from .types.color_types import Float3
from .types.defaults import DEFAULT_GAMMA
from .types.encoding import ColorVisionDeficiency

# D65 white point in xyz chromaticity coordinates
D65_CHROMATICITY = np.array([0.312713, 0.329016, 0.358271])

# sRGB <-> XYZ for D65 (Bruce Lindbloom)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])


class ConfusionLine(NamedTuple):
    """Constants of one deficiency in xy chromaticity space."""
    convergence: Tuple[float, float]
    begin: Tuple[float, float]
    end: Tuple[float, float]
    slope: float
    intercept: float  # on the y axis


def confusion_line(convergence: Tuple[float, float], begin: Tuple[float, float],
                   end: Tuple[float, float]) -> ConfusionLine:
    slope = (end[1] - begin[1]) / (end[0] - begin[0])
    return ConfusionLine(convergence, begin, end, slope, begin[1] - slope * begin[0])


CONFUSION_LINES: Dict[ColorVisionDeficiency, ConfusionLine] = {
    ColorVisionDeficiency.PROTANOPE: confusion_line((0.735, 0.265), (0.115807, 0.073581), (0.471899, 0.527051)),
    ColorVisionDeficiency.DEUTERANOPE: confusion_line((1.140, -0.140), (0.102776, 0.102864), (0.505845, 0.493211)),
    ColorVisionDeficiency.TRITANOPE: confusion_line((0.171, -0.003), (0.045391, 0.294976), (0.665764, 0.334011)),
}


def gamut_shift(srgb: ndarray, drgb: ndarray) -> float:
    """
    Fraction of ``drgb`` to add to ``srgb`` so the simulated color fits into RGB.

    One factor is computed per channel, factors outside [0, 1] do not bind
    and count as 0, the largest remaining factor is used for all channels.
    """
    factors = [
        ((0.0 if s < 0.0 else 1.0) - s) / d if d else 0.0
        for s, d in zip(srgb, drgb)
    ]
    return max(0.0 if (f > 1.0 or f < 0.0) else float(f) for f in factors)


def daltonize(
    rgb: Sequence[float],
    deficiency: ColorVisionDeficiency,
    gamma: float = DEFAULT_GAMMA,
) -> Tuple[float, ...]:
    """
    Simulate how a dichromat perceives a color.

    Args:
        rgb: RGB or RGBA components in [0, 1], alpha is passed through
        deficiency: Simulated deficiency, ``NONE`` returns the input unchanged
        gamma: Gamma used to linearize the input and to re-encode the result

    Returns:
        Simulated components with the same arity as ``rgb``
    """
    deficiency = ColorVisionDeficiency(deficiency)
    if len(rgb) not in (3, 4):
        raise ValueError(f"daltonize expects an RGB or RGBA tuple, got {len(rgb)} components")

    line = CONFUSION_LINES.get(deficiency)
    if line is None:
        return tuple(rgb)

    simulated = _simulate(rgb_to_srgb((rgb[0], rgb[1], rgb[2]), gamma), line)
    if simulated is None:
        return tuple(rgb)

    result = srgb_to_rgb(simulated, gamma)
    if len(rgb) == 4:
        return result + (rgb[3],)
    return result


def _simulate(linear: Float3, line: ConfusionLine) -> Float3 | None:
    cxyz = SRGB_TO_XYZ @ np.asarray(linear)
    total = cxyz.sum()
    if total == 0.0:
        # black has no chromaticity
        return None

    cx, cy = cxyz[0] / total, cxyz[1] / total
    luminance = cxyz[1]

    # neutral gray at the same luminance
    nxyz = np.array([D65_CHROMATICITY[0], 0.0, D65_CHROMATICITY[2]]) * (luminance / D65_CHROMATICITY[1])

    # confusion line through the color and the convergence point
    dcp_x, dcp_y = line.convergence
    if cx < dcp_x:
        slope = (dcp_y - cy) / (dcp_x - cx)
    else:
        slope = (cy - dcp_y) / (cx - dcp_x)
    intercept = cy - cx * slope

    # intersection with the deficiency's boundary segment
    dx = (line.intercept - intercept) / (slope - line.slope)
    dy = slope * dx + intercept

    sxyz = np.array([dx * luminance / dy, luminance, (1.0 - (dx + dy)) * luminance / dy])
    srgb = XYZ_TO_SRGB @ sxyz

    # shift toward neutral to fit into RGB
    drgb = XYZ_TO_SRGB @ np.array([nxyz[0] - sxyz[0], 0.0, nxyz[2] - sxyz[2]])
    srgb = srgb + drgb * gamut_shift(srgb, drgb)

    return float(srgb[0]), float(srgb[1]), float(srgb[2])
