"""
Color Entity
============

:class:`Color` holds one color as a canonical, clamped RGBA tuple of unit
floats and exposes setters and derived views for every supported space.

Usage
-----
>>> from haeley_colors.colors import Color
>>> color = Color().from_hsl(0.0, 1.0, 0.5)
>>> color.rgb
(1.0, 0.0, 0.0)
>>> color.hex_rgb
'#ff0000'
>>> Color("RGBa(255, 0, 0, 0.5)").rgba
(1.0, 0.0, 0.0, 0.5)

Notes
-----
- Views (``hsl``, ``lab``, ``cmyk``, ...) are recomputed on every access
- Malformed color strings emit a warning and leave the color unchanged
- ``altered`` reports whether the last mutation changed the color
"""

from .color import Color
from .parsing import COLOR_STRING_REGEX, format_components, parse_color_string

__all__ = ['Color', 'COLOR_STRING_REGEX', 'format_components', 'parse_color_string']
