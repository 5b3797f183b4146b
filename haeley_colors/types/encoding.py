from enum import Enum, IntEnum


class ColorEncoding(str, Enum):
    """Encodings a color can be read from or written to.

    Lowercase encodings use unit floats, uppercase ``RGB``/``RGBA`` use bytes
    and ``RGBa`` uses bytes for the color with a unit float alpha.
    """
    rgb = "rgb"
    rgba = "rgba"
    RGB = "RGB"
    RGBA = "RGBA"
    RGBa = "RGBa"
    hsl = "hsl"
    hsla = "hsla"
    lab = "lab"
    laba = "laba"
    cmyk = "cmyk"
    cmyka = "cmyka"
    hex = "hex"
    hexa = "hexa"


class ColorSpace(str, Enum):
    rgb = "rgb"
    hsl = "hsl"
    lab = "lab"
    cmyk = "cmyk"


class InterpolationHint(str, Enum):
    LINEAR = "linear"
    NEAREST = "nearest"


class ScaleType(str, Enum):
    SEQUENTIAL = "sequential"
    DIVERGING = "diverging"
    QUALITATIVE = "qualitative"


class GrayscaleAlgorithm(str, Enum):
    AVERAGE = "average"
    LINEAR_LUMINANCE = "linear-luminance"  # CIE1931
    LEAST_SATURATED_VARIANT = "least-saturated-variant"
    MINIMUM_DECOMPOSITION = "minimum-decomposition"
    MAXIMUM_DECOMPOSITION = "maximum-decomposition"


class ColorVisionDeficiency(IntEnum):
    NONE = 0
    PROTANOPE = 1    # reds are greatly reduced
    DEUTERANOPE = 2  # greens are greatly reduced
    TRITANOPE = 3    # blues are greatly reduced


_NO_ALPHA = {
    ColorEncoding.rgb,
    ColorEncoding.RGB,
    ColorEncoding.hsl,
    ColorEncoding.lab,
    ColorEncoding.cmyk,
    ColorEncoding.hex,
}

_BYTE_ENCODINGS = {ColorEncoding.RGB, ColorEncoding.RGBA, ColorEncoding.RGBa}

_STRIDES = {
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

_SPACE_ENCODINGS = {
    ColorSpace.rgb: (ColorEncoding.rgb, ColorEncoding.rgba),
    ColorSpace.hsl: (ColorEncoding.hsl, ColorEncoding.hsla),
    ColorSpace.lab: (ColorEncoding.lab, ColorEncoding.laba),
    ColorSpace.cmyk: (ColorEncoding.cmyk, ColorEncoding.cmyka),
}


def encodes_alpha(encoding: ColorEncoding) -> bool:
    """Check whether the alpha channel is part of the given encoding."""
    return ColorEncoding(encoding) not in _NO_ALPHA


def uses_clamped_floats(encoding: ColorEncoding) -> bool:
    """
    Check whether an encoding stores unit floats.

    Returns:
        True for encodings in [0.0, 1.0], False for byte encodings in [0, 255].
    """
    return ColorEncoding(encoding) not in _BYTE_ENCODINGS


def stride(encoding: ColorEncoding) -> int:
    """Number of numeric components per color for the given encoding."""
    encoding = ColorEncoding(encoding)
    if encoding not in _STRIDES:
        raise ValueError(f"Encoding {encoding.value!r} has no numeric stride")
    return _STRIDES[encoding]


def get_encoding_from_space(space: ColorSpace, alpha: bool) -> ColorEncoding:
    """Derive the matching float encoding for a color space."""
    plain, with_alpha = _SPACE_ENCODINGS[ColorSpace(space)]
    return with_alpha if alpha else plain
