import math
from typing import Sequence

from boundednumbers.functions import clamp

from ..types.color_types import Byte3, Byte4, Float3, Float4
from ..types.defaults import UI8_MAX
from ..utils.tuples import clampf, clampf3, clampf4


def byte_to_unit(value: float) -> float:
    """Map a byte in [0, 255] to [0, 1], out-of-range bytes are clamped."""
    return clamp(value, 0, UI8_MAX) / UI8_MAX


def unit_to_byte(value: float) -> int:
    """Map a unit float to a byte, halves round up (255 * 0.3 -> 77)."""
    return math.floor(clampf(value) * UI8_MAX + 0.5)


def ui8_to_rgb(rgb: Sequence[float]) -> Float3:
    """Convert byte RGB in [0, 255] to unit floats."""
    if len(rgb) != 3:
        raise ValueError(f"expected a 3-tuple, got {len(rgb)} components")
    r, g, b = (byte_to_unit(c) for c in rgb)
    return r, g, b


def ui8_to_rgba(rgba: Sequence[float]) -> Float4:
    if len(rgba) != 4:
        raise ValueError(f"expected a 4-tuple, got {len(rgba)} components")
    r, g, b, a = (byte_to_unit(c) for c in rgba)
    return r, g, b, a


def rgb_to_ui8(rgb: Float3) -> Byte3:
    """Convert unit float RGB to bytes, rounding to the nearest integer."""
    r, g, b = (unit_to_byte(c) for c in clampf3(rgb))
    return r, g, b


def rgba_to_ui8(rgba: Float4) -> Byte4:
    r, g, b, a = (unit_to_byte(c) for c in clampf4(rgba))
    return r, g, b, a
