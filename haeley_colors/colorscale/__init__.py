"""
Color Scales
============

Resampled, uniformly spaced color sequences with interpolated lookup and
packed byte/float export.

>>> from haeley_colors.colorscale import ColorScale
>>> from haeley_colors.types import ColorEncoding
>>> scale = ColorScale.from_array([0, 0, 0, 255, 255, 255], ColorEncoding.RGB, 3)
>>> scale.color(0).rgb
(0.0, 0.0, 0.0)
>>> scale.invert()
>>> scale.inverted
True
"""

from .presets import SUPPORTED_ENCODINGS, Preset, find_preset, select_preset_arrays
from .scale import ColorScale

__all__ = [
    'ColorScale',

    # Presets
    'Preset',
    'SUPPORTED_ENCODINGS',
    'find_preset',
    'select_preset_arrays',
]
