# Unit float RGB -> HSL
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 0.5),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 0.5),
    (1.0, 1.0, 0.0): (1 / 6, 1.0, 0.5),
    (0.0, 1.0, 1.0): (0.5, 1.0, 0.5),
    (1.0, 0.0, 1.0): (5 / 6, 1.0, 0.5),
    (0.5, 0.25, 0.25): (0.0, 1 / 3, 0.375),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# Unit float RGB -> CMYK
samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (0.0, 1.0, 1.0): (1.0, 0.0, 0.0, 0.0),
    (0.5, 0.25, 0.0): (0.0, 0.5, 1.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
}

# Hex string -> unit float RGBA
samples_hex_rgba = {
    "#0ff": (0.0, 1.0, 1.0, 1.0),
    "#0ff8": (0.0, 1.0, 1.0, 0x88 / 255),
    "#ff000080": (1.0, 0.0, 0.0, 0x80 / 255),
    "0x00ff00": (0.0, 1.0, 0.0, 1.0),
    "0XAABBCC": (0xAA / 255, 0xBB / 255, 0xCC / 255, 1.0),
    "336699": (0x33 / 255, 0x66 / 255, 0x99 / 255, 1.0),
}

# Colors whose Lab coordinates stay within the rescaled unit range
samples_lab_safe_rgb = [
    (0.8, 0.4, 0.2),
    (0.2, 0.5, 0.7),
    (0.5, 0.5, 0.5),
    (0.9, 0.85, 0.6),
    (0.1, 0.3, 0.2),
]

# RGB(48, 96, 192) reduced by each grayscale algorithm
SAMPLE_GRAY_RGB = (48 / 255, 96 / 255, 192 / 255)
samples_gray_values = {
    "average": 0.4392,
    "linear-luminance": 0.3636,
    "least-saturated-variant": 0.2824,
    "minimum-decomposition": 0.1882,
    "maximum-decomposition": 0.7529,
}

# Simulated pure red, gamma 2.2
PROTANOPE_RED = (0.558, 0.496, 0.139)
