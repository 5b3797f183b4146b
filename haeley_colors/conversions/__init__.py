"""
Color Space Conversions
=======================

Pure functions between the color spaces supported by :class:`~haeley_colors.Color`.
Every function clamps its unit-interval input and returns a new tuple.

Conversion Functions
-------------------

HSL:
    hsl_to_rgb(hsl), rgb_to_hsl(rgb), hue_to_rgb(p, q, t)

CIE-Lab / CIE-XYZ (D65/2°, Lab rescaled to [0, 1]):
    lab_to_xyz(lab), xyz_to_lab(xyz), rgb_to_xyz(rgb), xyz_to_rgb(xyz),
    lab_to_rgb(lab), rgb_to_lab(rgb)

CMYK:
    cmyk_to_rgb(cmyk), rgb_to_cmyk(rgb)

Gamma encoding ("srgb" = power law with caller supplied gamma):
    rgb_to_srgb(rgb, gamma), srgb_to_rgb(srgb, gamma),
    rgba_to_srgba(rgba, gamma), srgba_to_rgba(srgba, gamma)

Hexadecimal strings:
    hex_to_rgba(hex_string), rgb_to_hex(rgb), rgba_to_hex(rgba), to_2char_hex(value)

Bytes:
    ui8_to_rgb(rgb), ui8_to_rgba(rgba), rgb_to_ui8(rgb), rgba_to_ui8(rgba),
    byte_to_unit(value), unit_to_byte(value)

High-Level API
-------------
    convert(color, from_space, to_space)
        Converts between any two ColorSpace members through RGB

Examples
--------
>>> from haeley_colors.conversions import hex_to_rgba, rgb_to_cmyk
>>> hex_to_rgba("#0ff")
(0.0, 1.0, 1.0, 1.0)
>>> rgb_to_cmyk((1.0, 1.0, 1.0))
(0.0, 0.0, 0.0, 0.0)
"""

from .hsl import hue_to_rgb, hsl_to_rgb, rgb_to_hsl
from .lab import lab_to_xyz, xyz_to_lab, rgb_to_xyz, xyz_to_rgb, lab_to_rgb, rgb_to_lab
from .cmyk import cmyk_to_rgb, rgb_to_cmyk
from .gamma import rgb_to_srgb, srgb_to_rgb, rgba_to_srgba, srgba_to_rgba
from .hex import HEX_FORMAT_REGEX, hex_to_rgba, rgb_to_hex, rgba_to_hex, to_2char_hex
from .ui8 import byte_to_unit, unit_to_byte, ui8_to_rgb, ui8_to_rgba, rgb_to_ui8, rgba_to_ui8
from .wrapper import convert

__all__ = [
    # HSL
    'hue_to_rgb',
    'hsl_to_rgb',
    'rgb_to_hsl',

    # Lab / XYZ
    'lab_to_xyz',
    'xyz_to_lab',
    'rgb_to_xyz',
    'xyz_to_rgb',
    'lab_to_rgb',
    'rgb_to_lab',

    # CMYK
    'cmyk_to_rgb',
    'rgb_to_cmyk',

    # Gamma
    'rgb_to_srgb',
    'srgb_to_rgb',
    'rgba_to_srgba',
    'srgba_to_rgba',

    # Hex
    'HEX_FORMAT_REGEX',
    'hex_to_rgba',
    'rgb_to_hex',
    'rgba_to_hex',
    'to_2char_hex',

    # Bytes
    'byte_to_unit',
    'unit_to_byte',
    'ui8_to_rgb',
    'ui8_to_rgba',
    'rgb_to_ui8',
    'rgba_to_ui8',

    # High-level API
    'convert',
]
