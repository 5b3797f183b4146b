"""Haeley Colors: color conversion, color scales and color vision deficiency simulation."""

from .types import (
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
from .types.defaults import DEFAULT_ALPHA, DEFAULT_GAMMA, DEFAULT_PRECISION
from .conversions import (
    hsl_to_rgb,
    rgb_to_hsl,
    lab_to_rgb,
    rgb_to_lab,
    lab_to_xyz,
    xyz_to_lab,
    rgb_to_xyz,
    xyz_to_rgb,
    cmyk_to_rgb,
    rgb_to_cmyk,
    rgb_to_srgb,
    srgb_to_rgb,
    hex_to_rgba,
    rgb_to_hex,
    rgba_to_hex,
    convert,
)
from .colors import Color
from .grayscale import gray_value, grayscale
from .lerp import lerp
from .daltonize import daltonize
from .colorscale import ColorScale, Preset

__version__ = "0.1.0"

__all__ = [
    # core types
    "Color",
    "ColorScale",
    "Preset",

    # enums and encoding helpers
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

    # defaults
    "DEFAULT_ALPHA",
    "DEFAULT_GAMMA",
    "DEFAULT_PRECISION",

    # conversions
    "hsl_to_rgb",
    "rgb_to_hsl",
    "lab_to_rgb",
    "rgb_to_lab",
    "lab_to_xyz",
    "xyz_to_lab",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "cmyk_to_rgb",
    "rgb_to_cmyk",
    "rgb_to_srgb",
    "srgb_to_rgb",
    "hex_to_rgba",
    "rgb_to_hex",
    "rgba_to_hex",
    "convert",

    # operations
    "gray_value",
    "grayscale",
    "lerp",
    "daltonize",
]
