from __future__ import annotations
from typing import Callable, ClassVar, Dict, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray

from ..conversions import (
    cmyk_to_rgb,
    hex_to_rgba,
    hsl_to_rgb,
    lab_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_srgb,
    rgb_to_ui8,
    rgba_to_hex,
    rgba_to_srgba,
    rgba_to_ui8,
    ui8_to_rgb,
    ui8_to_rgba,
    srgb_to_rgb,
)
from ..grayscale import gray_value
from ..types.color_types import ColorTuple, Float3, Float4, Float5
from ..types.defaults import DEFAULT_ALPHA, DEFAULT_GAMMA, DEFAULT_PRECISION, UI8_MAX
from ..types.encoding import ColorEncoding, GrayscaleAlgorithm
from ..utils.tuples import clampf, clampf4, equals
from .parsing import format_components, parse_color_string


class Color:
    """
    A single color stored as a canonical RGBA 4-tuple of unit floats.

    Every other representation (HSL, Lab, CMYK, gamma encoded, bytes, hex) is
    computed from the canonical tuple on each access and never cached. All
    mutators clamp before storing and update :attr:`altered`, which records
    whether the last mutation actually changed the stored value.

    Args:
        rgba: RGB or RGBA tuple in [0, 1], or a color string such as
              ``"rgba(1, 0, 0, 0.5)"``, ``"RGB(255, 0, 0)"`` or ``"#ff0000"``.
        alpha: Alpha for a 3-tuple ``rgba``.
    """

    __slots__ = ('_rgba', '_altered')

    DEFAULT_ALPHA: ClassVar[float] = DEFAULT_ALPHA

    def __init__(self, rgba: Optional[Sequence[float] | str] = None, alpha: Optional[float] = None) -> None:
        self._rgba: Float4 = (0.0, 0.0, 0.0, DEFAULT_ALPHA)
        self._altered = False

        if rgba is None:
            return
        if isinstance(rgba, str):
            if alpha is not None:
                raise ValueError("alpha cannot be combined with a color string")
            self.from_string(rgba)
        elif len(rgba) == 3:
            self.from_f32(rgba[0], rgba[1], rgba[2], DEFAULT_ALPHA if alpha is None else alpha)
        elif len(rgba) == 4:
            if alpha is not None:
                raise ValueError("expected alpha to be None when given a 4-tuple in RGBA")
            self.from_f32(rgba[0], rgba[1], rgba[2], rgba[3])
        else:
            raise ValueError(f"Color expects an RGB or RGBA tuple, got {len(rgba)} components")

    def _store(self, rgba: Float4) -> Color:
        previous = self._rgba
        self._rgba = rgba
        self._altered = not equals(rgba, previous)
        return self

    # ------------------ SETTERS ------------------

    def from_f32(self, red: float, green: float, blue: float, alpha: float = DEFAULT_ALPHA) -> Color:
        """Set the color from float components, each clamped to [0, 1]."""
        return self._store((clampf(red), clampf(green), clampf(blue), clampf(alpha)))

    def from_ui8(self, red: float, green: float, blue: float, alpha: float = UI8_MAX) -> Color:
        """Set the color from byte components, each clamped to [0, 255]."""
        return self._store(ui8_to_rgba((red, green, blue, alpha)))

    def from_rgb(self, red: float, green: float, blue: float, alpha: float = DEFAULT_ALPHA) -> Color:
        return self._store(clampf4((red, green, blue, alpha)))

    def from_hsl(self, hue: float, saturation: float, lightness: float, alpha: float = DEFAULT_ALPHA) -> Color:
        r, g, b = hsl_to_rgb((hue, saturation, lightness))
        return self._store((r, g, b, clampf(alpha)))

    def from_lab(self, lightness: float, green_red: float, blue_yellow: float,
                 alpha: float = DEFAULT_ALPHA) -> Color:
        r, g, b = lab_to_rgb((lightness, green_red, blue_yellow))
        return self._store((r, g, b, clampf(alpha)))

    def from_cmyk(self, cyan: float, magenta: float, yellow: float, key: float,
                  alpha: float = DEFAULT_ALPHA) -> Color:
        r, g, b = cmyk_to_rgb((cyan, magenta, yellow, key))
        return self._store((r, g, b, clampf(alpha)))

    def from_srgb(self, red: float, green: float, blue: float, alpha: float = DEFAULT_ALPHA,
                  gamma: float = DEFAULT_GAMMA) -> Color:
        """Set the color from gamma encoded components (see :func:`rgb_to_srgb`)."""
        r, g, b = srgb_to_rgb((red, green, blue), gamma)
        return self._store((r, g, b, clampf(alpha)))

    def from_hex(self, hex_string: str) -> Color:
        """Set the color from a hex string, malformed input results in opaque black."""
        return self._store(hex_to_rgba(hex_string))

    def from_tuple(self, values: Sequence[float], encoding: ColorEncoding) -> Color:
        """
        Set the color from components given in any numeric encoding.

        Raises:
            ValueError: if the arity does not match the encoding.
        """
        encoding = ColorEncoding(encoding)
        factory = _FACTORIES.get(encoding)
        if factory is None:
            raise ValueError(f"Cannot set a color from encoding {encoding.value!r}")
        arity = _ARITY[encoding]
        if len(values) != arity:
            raise ValueError(f"{encoding.value} expects {arity} components, got {len(values)}")
        return factory(self, values)

    def from_string(self, string: str) -> Color:
        """
        Set the color from a color string.

        Malformed strings emit a warning and leave the color unchanged.
        """
        parsed = parse_color_string(string)
        if parsed is None:
            return self
        encoding, values = parsed
        if encoding in (ColorEncoding.hex, ColorEncoding.hexa):
            return self._store(clampf4(values))
        return self.from_tuple(values, encoding)

    def deserialize(self, string: str) -> Color:
        """Counterpart of :meth:`serialize`, alpha defaults to 1 when absent."""
        return self.from_string(string)

    # ------------------ FORMATTING ------------------

    def to_string(self, encoding: ColorEncoding = ColorEncoding.rgba, precision: int = DEFAULT_PRECISION) -> str:
        encoding = ColorEncoding(encoding)
        if encoding == ColorEncoding.hex:
            return self.hex_rgb
        if encoding == ColorEncoding.hexa:
            return self.hex_rgba
        return format_components(encoding, self.tuple(encoding), precision)

    def serialize(self, precision: int = DEFAULT_PRECISION) -> str:
        return self.to_string(ColorEncoding.rgba, precision)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rgba={self._rgba!r})"

    # ------------------ COMPARISON / COPY ------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return equals(self._rgba, other._rgba)

    __hash__ = None  # type: ignore[assignment]

    def clone(self) -> Color:
        """Return an independent copy with a cleared :attr:`altered` flag."""
        copy = self.__class__()
        copy._rgba = self._rgba
        return copy

    __copy__ = clone

    # ------------------ GENERIC ACCESS ------------------

    def tuple(self, encoding: ColorEncoding = ColorEncoding.rgba) -> ColorTuple:
        """Read the color in any numeric encoding, e.g. ``ColorEncoding.laba``."""
        encoding = ColorEncoding(encoding)
        reader = _READERS.get(encoding)
        if reader is None:
            raise ValueError(f"Encoding {encoding.value!r} has no tuple representation, use hex_rgb/hex_rgba")
        return reader(self)

    def gray(self, algorithm: GrayscaleAlgorithm = GrayscaleAlgorithm.LINEAR_LUMINANCE) -> float:
        return gray_value(self._rgba, algorithm)

    # ------------------ COMPONENTS ------------------

    def _set_component(self, index: int, value: float) -> None:
        rgba = list(self._rgba)
        rgba[index] = clampf(value)
        self._store((rgba[0], rgba[1], rgba[2], rgba[3]))

    @property
    def r(self) -> float:
        return self._rgba[0]

    @r.setter
    def r(self, value: float) -> None:
        self._set_component(0, value)

    @property
    def g(self) -> float:
        return self._rgba[1]

    @g.setter
    def g(self, value: float) -> None:
        self._set_component(1, value)

    @property
    def b(self) -> float:
        return self._rgba[2]

    @b.setter
    def b(self, value: float) -> None:
        self._set_component(2, value)

    @property
    def a(self) -> float:
        return self._rgba[3]

    @a.setter
    def a(self, value: float) -> None:
        self._set_component(3, value)

    @property
    def altered(self) -> bool:
        """Whether the last mutation changed the color. Assign ``False`` to reset."""
        return self._altered

    @altered.setter
    def altered(self, status: bool) -> None:
        self._altered = bool(status)

    # ------------------ READ-ONLY VIEWS ------------------

    @property
    def rgb(self) -> Float3:
        return self._rgba[0], self._rgba[1], self._rgba[2]

    @property
    def rgba(self) -> Float4:
        return self._rgba

    @property
    def rgb_ui8(self) -> ndarray:
        return np.array(rgb_to_ui8(self.rgb), dtype=np.uint8)

    @property
    def rgba_ui8(self) -> ndarray:
        return np.array(rgba_to_ui8(self._rgba), dtype=np.uint8)

    @property
    def rgb_f32(self) -> ndarray:
        return np.array(self.rgb, dtype=np.float32)

    @property
    def rgba_f32(self) -> ndarray:
        return np.array(self._rgba, dtype=np.float32)

    @property
    def hex_rgb(self) -> str:
        return rgb_to_hex(self.rgb)

    @property
    def hex_rgba(self) -> str:
        return rgba_to_hex(self._rgba)

    @property
    def hsl(self) -> Float3:
        return rgb_to_hsl(self.rgb)

    @property
    def hsla(self) -> Float4:
        return rgb_to_hsl(self.rgb) + (self._rgba[3],)

    @property
    def lab(self) -> Float3:
        return rgb_to_lab(self.rgb)

    @property
    def laba(self) -> Float4:
        return rgb_to_lab(self.rgb) + (self._rgba[3],)

    @property
    def cmyk(self) -> Float4:
        return rgb_to_cmyk(self.rgb)

    @property
    def cmyka(self) -> Float5:
        return rgb_to_cmyk(self.rgb) + (self._rgba[3],)

    def srgb(self, gamma: float = DEFAULT_GAMMA) -> Float3:
        return rgb_to_srgb(self.rgb, gamma)

    def srgba(self, gamma: float = DEFAULT_GAMMA) -> Float4:
        return rgba_to_srgba(self._rgba, gamma)


def _from_rgba_bytes_float_alpha(color: Color, values: Sequence[float]) -> Color:
    return color._store(ui8_to_rgb(values[:3]) + (clampf(values[3]),))


_FACTORIES: Dict[ColorEncoding, Callable[[Color, Sequence[float]], Color]] = {
    ColorEncoding.rgb: lambda c, v: c.from_f32(*v),
    ColorEncoding.rgba: lambda c, v: c.from_f32(*v),
    ColorEncoding.RGB: lambda c, v: c.from_ui8(*v),
    ColorEncoding.RGBA: lambda c, v: c.from_ui8(*v),
    ColorEncoding.RGBa: _from_rgba_bytes_float_alpha,
    ColorEncoding.hsl: lambda c, v: c.from_hsl(*v),
    ColorEncoding.hsla: lambda c, v: c.from_hsl(*v),
    ColorEncoding.lab: lambda c, v: c.from_lab(*v),
    ColorEncoding.laba: lambda c, v: c.from_lab(*v),
    ColorEncoding.cmyk: lambda c, v: c.from_cmyk(*v),
    ColorEncoding.cmyka: lambda c, v: c.from_cmyk(*v),
}

_ARITY: Dict[ColorEncoding, int] = {
    ColorEncoding.rgb: 3,
    ColorEncoding.rgba: 4,
    ColorEncoding.RGB: 3,
    ColorEncoding.RGBA: 4,
    ColorEncoding.RGBa: 4,
    ColorEncoding.hsl: 3,
    ColorEncoding.hsla: 4,
    ColorEncoding.lab: 3,
    ColorEncoding.laba: 4,
    ColorEncoding.cmyk: 4,
    ColorEncoding.cmyka: 5,
}

_READERS: Dict[ColorEncoding, Callable[[Color], Tuple]] = {
    ColorEncoding.rgb: lambda c: c.rgb,
    ColorEncoding.rgba: lambda c: c.rgba,
    ColorEncoding.RGB: lambda c: rgb_to_ui8(c.rgb),
    ColorEncoding.RGBA: lambda c: rgba_to_ui8(c.rgba),
    ColorEncoding.RGBa: lambda c: rgb_to_ui8(c.rgb) + (c.a,),
    ColorEncoding.hsl: lambda c: c.hsl,
    ColorEncoding.hsla: lambda c: c.hsla,
    ColorEncoding.lab: lambda c: c.lab,
    ColorEncoding.laba: lambda c: c.laba,
    ColorEncoding.cmyk: lambda c: c.cmyk,
    ColorEncoding.cmyka: lambda c: c.cmyka,
}
