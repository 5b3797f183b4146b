from __future__ import annotations
import warnings
from typing import Any, Iterator, List, Mapping, Optional, Sequence

import numpy as np
from numpy import ndarray

from ..colors.color import Color
from ..daltonize import daltonize
from ..lerp import lerp
from ..types.defaults import DEFAULT_GAMMA
from ..types.encoding import (
    ColorEncoding,
    ColorSpace,
    ColorVisionDeficiency,
    InterpolationHint,
    get_encoding_from_space,
    stride,
    uses_clamped_floats,
)
from .presets import SUPPORTED_ENCODINGS, Preset, find_preset, select_preset_arrays


class ColorScale:
    """
    A fixed number of uniformly spaced colors for index and interpolated access.

    Scales are built from interleaved color components with :meth:`from_array`
    or from preset data with :meth:`from_preset`. Stop positions are only used
    while resampling, afterwards stop ``i`` of ``n`` sits at ``i / (n - 1)``.

    Example:
        >>> scale = ColorScale.from_array([0, 0, 0, 255, 255, 255], ColorEncoding.RGB, 5)
        >>> len(scale)
        5
        >>> scale.bits_ui8().shape
        (15,)
    """

    __slots__ = ('_colors', '_hint', '_inverted', '_deficiency', '_gamma')

    def __init__(self) -> None:
        self._colors: List[Color] = []
        self._hint = InterpolationHint.LINEAR
        self._inverted = False
        self._deficiency = ColorVisionDeficiency.NONE
        self._gamma = DEFAULT_GAMMA

    # ------------------ CONSTRUCTION ------------------

    @classmethod
    def from_array(
        cls,
        values: Sequence[float] | ndarray,
        encoding: ColorEncoding,
        step_count: int,
        positions: Optional[Sequence[float]] = None,
    ) -> ColorScale:
        """
        Create a scale of ``step_count`` colors from interleaved components.

        Without positions the given colors are spread equally. When the number
        of given colors already equals ``step_count`` and no positions are
        given, the colors are used as is. Otherwise every output color is
        interpolated in CIE-Lab between the two stops enclosing its position.

        Args:
            values: Interleaved components, e.g. ``[r0, g0, b0, r1, g1, b1]``
            encoding: One of ``rgb``, ``rgba`` (floats), ``RGB``, ``RGBA`` (bytes)
            step_count: Number of colors of the resulting scale
            positions: Optional position per given color, sorted before use

        Returns:
            ColorScale, empty if ``step_count`` is 0 or no values are given

        Raises:
            ValueError: for unsupported encodings, a value count that is not a
                multiple of the stride, or a positions count not matching the
                number of colors.
        """
        encoding = ColorEncoding(encoding)
        if encoding not in SUPPORTED_ENCODINGS:
            raise ValueError(
                f"from_array supports {', '.join(e.value for e in SUPPORTED_ENCODINGS)}, got {encoding.value!r}"
            )

        scale = cls()
        array = np.asarray(values, dtype=float).ravel()
        if step_count <= 0 or array.size == 0:
            return scale

        colors = _decode(array, encoding)
        size = len(colors)

        if positions is None and step_count == size:
            scale._colors = colors
            return scale

        if step_count == 1:
            scale._colors = [colors[0]]
            return scale

        if positions is None:
            stops = np.linspace(0.0, 1.0, size) if size > 1 else np.zeros(1)
        else:
            stops = np.asarray(positions, dtype=float)
            if stops.shape != (size,):
                raise ValueError(
                    f"expected number of positions ({stops.size}) to match number of colors ({size})"
                )
            order = np.argsort(stops, kind="stable")
            stops = stops[order]
            colors = [colors[i] for i in order]

        scale._colors = _resample(colors, stops, step_count)
        return scale

    @classmethod
    def from_preset(
        cls,
        presets: Sequence[Preset | Mapping[str, Any]],
        identifier: str,
        step_count: int,
    ) -> Optional[ColorScale]:
        """
        Create a scale from a named preset of already loaded preset data.

        If the preset offers no color array for exactly ``step_count`` colors,
        its largest array is resampled in CIE-Lab.

        Args:
            presets: Parsed preset objects (dicts or :class:`Preset`)
            identifier: Name of the preset, e.g. ``"YlGnBu"`` or ``"viridis"``
            step_count: Number of colors of the resulting scale

        Returns:
            ColorScale, or None if no preset has the given identifier
        """
        preset = find_preset(presets, identifier)
        if preset is None:
            available = ", ".join(
                p.identifier if isinstance(p, Preset) else str(p.get("identifier")) for p in presets
            )
            warnings.warn(f"unknown preset {identifier!r}, available presets: {available}", stacklevel=2)
            return None

        colors, positions = select_preset_arrays(preset, step_count)
        return cls.from_array(colors, preset.encoding, step_count, positions)

    # ------------------ ACCESS ------------------

    def lerp(self, position: float, space: ColorSpace = ColorSpace.lab) -> Optional[Color]:
        """
        Query the color at a position in [0, 1].

        Depending on :attr:`hint` the two adjacent colors are interpolated in
        ``space`` or the nearest of both is returned. Positions outside
        [0, 1] return the first or last color.

        Returns:
            Color, None for an empty scale
        """
        count = len(self._colors)
        if count == 0:
            return None
        if count == 1:
            return self._colors[0]

        if position <= 0.0:
            return self._colors[0]
        if position >= 1.0:
            return self._colors[-1]

        index = position * count
        lower = int(np.floor(index))
        upper = lower + 1
        if upper >= count:
            return self._colors[-1]

        if self._hint == InterpolationHint.NEAREST:
            return self._colors[lower if index - lower <= upper - index else upper]
        return lerp(self._colors[lower], self._colors[upper], index - lower, space)

    def color(self, index: int) -> Optional[Color]:
        """Return the color at ``index`` or None if out of range."""
        if index < 0 or index >= len(self._colors):
            return None
        return self._colors[index]

    @property
    def colors(self) -> List[Color]:
        return self._colors

    @colors.setter
    def colors(self, colors: Sequence[Color]) -> None:
        self._colors = list(colors)

    @property
    def hint(self) -> InterpolationHint:
        """Interpolation used by :meth:`lerp`."""
        return self._hint

    @hint.setter
    def hint(self, hint: InterpolationHint) -> None:
        self._hint = InterpolationHint(hint)

    @property
    def length(self) -> int:
        return len(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(length={len(self._colors)}, hint={self._hint.value!r}, "
                f"inverted={self._inverted})")

    # ------------------ STATE ------------------

    @property
    def inverted(self) -> bool:
        """Whether the scale is reversed with respect to its initial order."""
        return self._inverted

    def invert(self) -> None:
        self._colors.reverse()
        self._inverted = not self._inverted

    @property
    def deficiency(self) -> ColorVisionDeficiency:
        """Color vision deficiency simulated by :meth:`bits_ui8` and :meth:`bits_f32`."""
        return self._deficiency

    @deficiency.setter
    def deficiency(self, deficiency: ColorVisionDeficiency) -> None:
        self._deficiency = ColorVisionDeficiency(deficiency)

    @property
    def gamma(self) -> float:
        """Gamma used by the deficiency simulation."""
        return self._gamma

    @gamma.setter
    def gamma(self, gamma: float) -> None:
        self._gamma = float(gamma)

    # ------------------ EXPORT ------------------

    def bits_ui8(self, space: ColorSpace = ColorSpace.rgb, alpha: bool = False) -> ndarray:
        """
        Interleaved components of all colors as bytes.

        Args:
            space: Color space of the exported components
            alpha: Export 4 instead of 3 components per color

        Returns:
            ndarray of dtype uint8 and length ``len(self) * (4 if alpha else 3)``
        """
        bits = np.round(self._bits(space, alpha) * 255.0)
        return np.clip(bits, 0, 255).astype(np.uint8)

    def bits_f32(self, space: ColorSpace = ColorSpace.rgb, alpha: bool = False) -> ndarray:
        """
        Interleaved components of all colors as unit floats.

        Note, that CMYK exports ignore alpha, the fourth component is K.
        """
        return self._bits(space, alpha).astype(np.float32)

    def _bits(self, space: ColorSpace, alpha: bool) -> ndarray:
        space = ColorSpace(space)
        components = 4 if alpha else 3
        encoding = get_encoding_from_space(space, space != ColorSpace.cmyk and alpha)

        bits = np.zeros((len(self._colors), components), dtype=float)
        for i, color in enumerate(self._colors):
            color = color.clone()
            if self._deficiency != ColorVisionDeficiency.NONE:
                r, g, b = daltonize(color.rgb, self._deficiency, self._gamma)
                color.from_rgb(r, g, b, color.a)
            values = color.tuple(encoding)[:components]
            bits[i, :len(values)] = values
        return bits.ravel()


def _decode(array: ndarray, encoding: ColorEncoding) -> List[Color]:
    components = stride(encoding)
    if array.size % components != 0:
        raise ValueError(
            f"expected a multiple of {components} values for {encoding.value}, got {array.size}"
        )

    rows = array.reshape(-1, components)
    if uses_clamped_floats(encoding):
        return [Color().from_f32(*row) for row in rows.tolist()]
    return [Color().from_ui8(*row) for row in rows.tolist()]


def _resample(colors: List[Color], positions: ndarray, step_count: int) -> List[Color]:
    result: List[Color] = []
    last = len(colors) - 1
    lower = 0
    upper = min(1, last)

    for i in range(step_count):
        position = 0.0 if i == 0 else i / (step_count - 1)

        if position <= positions[lower]:
            result.append(colors[lower])
            continue
        if positions[last] <= position:
            result.append(colors[last])
            continue

        # forward scan, positions are sorted
        for u in range(lower + 1, last + 1):
            if positions[u] < position:
                continue
            upper = u
            lower = u - 1
            break

        a = (position - positions[lower]) / (positions[upper] - positions[lower])
        result.append(lerp(colors[lower], colors[upper], float(a), ColorSpace.lab))
    return result
