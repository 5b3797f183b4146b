"""Clamping, comparison and copying of fixed-size float tuples."""

from __future__ import annotations
from typing import Sequence, Tuple

from boundednumbers.functions import clamp

from ..types.color_types import Float3, Float4


def clampf(value: float) -> float:
    """Clamp a single value to the inclusive range ``[0, 1]``."""
    return float(clamp(float(value), 0.0, 1.0))


def clampf_n(values: Sequence[float], size: int) -> Tuple[float, ...]:
    if len(values) != size:
        raise ValueError(f"expected a {size}-tuple, got {len(values)} components")
    return tuple(clampf(v) for v in values)


def clampf3(values: Sequence[float]) -> Float3:
    return clampf_n(values, 3)  # type: ignore[return-value]


def clampf4(values: Sequence[float]) -> Float4:
    return clampf_n(values, 4)  # type: ignore[return-value]


def equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Exact component-wise equality, no tolerance."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def duplicate(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(values)
