from .encoding import (
    ColorEncoding,
    ColorSpace,
    ColorVisionDeficiency,
    GrayscaleAlgorithm,
    InterpolationHint,
    ScaleType,
    encodes_alpha,
    get_encoding_from_space,
    stride,
    uses_clamped_floats,
)

__all__ = [
    "ColorEncoding",
    "ColorSpace",
    "ColorVisionDeficiency",
    "GrayscaleAlgorithm",
    "InterpolationHint",
    "ScaleType",
    "encodes_alpha",
    "get_encoding_from_space",
    "stride",
    "uses_clamped_floats",
]
