"""Basic Haeley Colors usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from haeley_colors import (
    Color,
    ColorEncoding,
    ColorScale,
    ColorSpace,
    ColorVisionDeficiency,
    GrayscaleAlgorithm,
    InterpolationHint,
    daltonize,
    lerp,
)


def demonstrate_colors() -> None:
    # Parse a color string and read it back in other spaces.
    accent = Color("RGB(255, 128, 64)")
    print("RGBA as floats:", accent.rgba)
    print("HSL:", accent.hsl)
    print("CMYK:", accent.cmyk)
    print("Hex:", accent.hex_rgb)
    print("As string:", accent.to_string(ColorEncoding.RGBa))

    gray = accent.gray(GrayscaleAlgorithm.LINEAR_LUMINANCE)
    print("Luminance:", round(gray, 4))


def demonstrate_interpolation() -> None:
    red = Color((1.0, 0.0, 0.0))
    blue = Color((0.0, 0.0, 1.0))

    for space in ColorSpace:
        print(f"Midpoint in {space.value}:", lerp(red, blue, 0.5, space).hex_rgb)


def demonstrate_scales() -> None:
    # Five colors resampled from three stops, interpolated in CIE-Lab.
    scale = ColorScale.from_array(
        [255, 255, 204, 65, 182, 196, 37, 52, 148],
        ColorEncoding.RGB,
        5,
    )
    print("Scale bytes:", scale.bits_ui8())

    scale.hint = InterpolationHint.NEAREST
    print("Nearest at 0.3:", scale.lerp(0.3).hex_rgb)

    scale.invert()
    print("Inverted first color:", scale.color(0).hex_rgb)

    # Export as seen by a protanope.
    scale.deficiency = ColorVisionDeficiency.PROTANOPE
    print("Protanope bytes:", scale.bits_ui8())


def demonstrate_daltonize() -> None:
    for deficiency in ColorVisionDeficiency:
        simulated = daltonize((1.0, 0.0, 0.0), deficiency)
        print(f"Red for {deficiency.name.lower()}:", Color(simulated).hex_rgb)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_interpolation()
    demonstrate_scales()
    demonstrate_daltonize()
