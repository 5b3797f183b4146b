"""
Textual color encodings.

Supported forms::

    rgb(0.1, 0.2, 0.3)          rgba(0.1, 0.2, 0.3, 0.5)
    RGB(25, 50, 75)             RGBA(25, 50, 75, 128)      RGBa(25, 50, 75, 0.5)
    hsl(...)  hsla(...)         lab(...)  laba(...)        cmyk(...)  cmyka(...)
    #0ff  #0ff8  #00ffff  0x00ffff80  00ffff

The numeric payload is read as a bracketed number list, its arity must match
the encoding exactly.
"""

from __future__ import annotations
import json
import re
import warnings
from typing import Optional, Sequence, Tuple

from ..conversions.hex import HEX_FORMAT_REGEX, hex_to_rgba
from ..types.encoding import ColorEncoding, stride, uses_clamped_floats

COLOR_STRING_REGEX = re.compile(r"^(rgba?|RGBA?|RGBa?|hsla?|laba?|cmyka?)\((.*?)\)$")


def parse_color_string(string: str) -> Optional[Tuple[ColorEncoding, Tuple[float, ...]]]:
    """
    Split a color string into its encoding and numeric components.

    Hex strings are returned as ``hex``/``hexa`` with their RGBA components.

    Returns:
        ``(encoding, components)`` or ``None`` if the string is malformed, in
        which case a warning is emitted.

    Raises:
        ValueError: if the number of components does not match the encoding.
    """
    string = string.strip()

    if HEX_FORMAT_REGEX.match(string):
        digits = len(string) - (2 if string[:2].lower() == "0x" else 1 if string.startswith("#") else 0)
        encoding = ColorEncoding.hexa if digits in (4, 8) else ColorEncoding.hex
        return encoding, hex_to_rgba(string)

    match = COLOR_STRING_REGEX.match(string)
    if match is None:
        warnings.warn(f"unknown color string format, given {string!r}", stacklevel=2)
        return None

    encoding = ColorEncoding(match.group(1))
    try:
        values = json.loads(f"[{match.group(2)}]")
    except json.JSONDecodeError:
        warnings.warn(f"malformed color components in {string!r}", stacklevel=2)
        return None

    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        warnings.warn(f"expected numeric color components in {string!r}", stacklevel=2)
        return None

    expected = stride(encoding)
    if len(values) != expected:
        raise ValueError(
            f"{encoding.value} expects {expected} components, got {len(values)} in {string!r}"
        )
    return encoding, tuple(float(v) for v in values)


def _format_number(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def format_components(encoding: ColorEncoding, values: Sequence[float], precision: int) -> str:
    """
    Render components that are already in ``encoding`` as a color string.

    Byte encodings are written as integers, the alpha of ``RGBa`` as a float.
    """
    encoding = ColorEncoding(encoding)
    if uses_clamped_floats(encoding):
        parts = [_format_number(v, precision) for v in values]
    else:
        parts = [str(int(v)) for v in values[:3]]
        if encoding == ColorEncoding.RGBA:
            parts.append(str(int(values[3])))
        elif encoding == ColorEncoding.RGBa:
            parts.append(_format_number(values[3], precision))
    return f"{encoding.value}({', '.join(parts)})"
