import re
import warnings

from ..types.color_types import Float3, Float4
from ..types.defaults import DEFAULT_ALPHA, UI8_MAX
from ..utils.tuples import clampf3, clampf4
from .ui8 import unit_to_byte

HEX_FORMAT_REGEX = re.compile(r"^(#|0x)?(([0-9a-f]{3}){1,2}|([0-9a-f]{4}){1,2})$", re.IGNORECASE)


def to_2char_hex(value: float) -> str:
    """Convert a unit float to a two-character lowercase hex code in [00, ff]."""
    return f"{unit_to_byte(value):02x}"


def hex_to_rgba(hex_string: str) -> Float4:
    """
    Convert a hexadecimal color string to RGBA.

    Accepts 3, 4, 6 or 8 hex digits with an optional ``#`` or ``0x`` prefix.
    Short forms expand each digit by duplication. Colors without an alpha
    digit are opaque.

    Returns:
        Tuple[float, float, float, float]: (r, g, b, a) in [0, 1]. Malformed
        input yields opaque black and emits a warning.
    """
    if not HEX_FORMAT_REGEX.match(hex_string):
        warnings.warn(
            "hexadecimal RGBA color string must conform to either '0x0000', '#0000', '0000', "
            f"'0x00000000', '#00000000', or '00000000', given {hex_string!r}",
            stacklevel=2,
        )
        return 0.0, 0.0, 0.0, DEFAULT_ALPHA

    if hex_string[:2].lower() == "0x":
        digits = hex_string[2:]
    else:
        digits = hex_string.lstrip("#")

    width = len(digits) // 3 if len(digits) in (3, 6) else len(digits) // 4
    channels = [digits[i * width:(i + 1) * width] for i in range(len(digits) // width)]
    if width == 1:
        channels = [c * 2 for c in channels]

    values = [int(c, 16) / UI8_MAX for c in channels]
    if len(values) == 3:
        values.append(DEFAULT_ALPHA)
    return values[0], values[1], values[2], values[3]


def rgb_to_hex(rgb: Float3) -> str:
    """Convert RGB to a ``#rrggbb`` string."""
    return "#" + "".join(to_2char_hex(c) for c in clampf3(rgb))


def rgba_to_hex(rgba: Float4) -> str:
    """Convert RGBA to a ``#rrggbbaa`` string."""
    return "#" + "".join(to_2char_hex(c) for c in clampf4(rgba))
