from __future__ import annotations
from typing import Tuple, Union

Float3 = Tuple[float, float, float]
Float4 = Tuple[float, float, float, float]
Float5 = Tuple[float, float, float, float, float]
Byte3 = Tuple[int, int, int]
Byte4 = Tuple[int, int, int, int]
# RGBa: bytes for the color, unit float for alpha
ByteFloat4 = Tuple[int, int, int, float]

ColorTuple = Union[Float3, Float4, Float5, Byte3, Byte4, ByteFloat4]
