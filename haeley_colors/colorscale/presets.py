from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..types.encoding import ColorEncoding, ScaleType, stride

SUPPORTED_ENCODINGS = (ColorEncoding.rgb, ColorEncoding.rgba, ColorEncoding.RGB, ColorEncoding.RGBA)


@dataclass
class Preset:
    """A named color scale preset, as found in colorbrewer or smithwalt style preset files."""
    identifier: str
    encoding: ColorEncoding
    colors: List[List[float]]  # one interleaved array per available step count
    type: Optional[ScaleType] = None
    positions: Optional[List[List[float]]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Preset:
        """Build a preset from an already parsed and validated JSON object."""
        scale_type = data.get("type")
        return cls(
            identifier=data["identifier"],
            encoding=ColorEncoding(data["encoding"]),
            colors=[list(values) for values in data["colors"]],
            type=ScaleType(scale_type) if scale_type is not None else None,
            positions=[list(p) for p in data["positions"]] if data.get("positions") is not None else None,
        )


def find_preset(presets: Sequence[Preset | Mapping[str, Any]], identifier: str) -> Optional[Preset]:
    for item in presets:
        preset = item if isinstance(item, Preset) else Preset.from_dict(item)
        if preset.identifier == identifier:
            return preset
    return None


def select_preset_arrays(preset: Preset, step_count: int) -> Tuple[List[float], Optional[List[float]]]:
    """
    Pick the color and positions arrays best matching a step count.

    The color array holding exactly ``step_count`` colors is used, otherwise
    the last one, which is expected to be the largest. Positions are only
    returned when an array matches the number of selected colors.

    Returns:
        ``(colors, positions)`` with ``positions`` possibly None
    """
    if not preset.colors:
        raise ValueError(f"preset {preset.identifier!r} has no color arrays")

    components = stride(preset.encoding)
    colors = preset.colors[-1]
    for candidate in preset.colors:
        if len(candidate) == step_count * components:
            colors = candidate
            break

    if preset.positions is None:
        return colors, None

    count = len(colors) // components
    for candidate in preset.positions:
        if len(candidate) == count:
            return colors, candidate
    return colors, None
