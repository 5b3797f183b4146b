# No dependencies
DEFAULT_ALPHA = 1.0
DEFAULT_GAMMA = 2.2
DEFAULT_PRECISION = 4

# Adobe RGB (1998) transfer exponent used by the RGB <-> XYZ conversions
ADOBE_RGB_GAMMA = 2.19921875

# CIE linearization threshold and slope
LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787

# D65/2° reference white in XYZ
D65_WHITE = (0.95047, 1.0, 1.08883)

UI8_MAX = 255
