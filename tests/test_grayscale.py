import pytest

from haeley_colors import GrayscaleAlgorithm, gray_value, grayscale
from .samples import SAMPLE_GRAY_RGB, samples_gray_values


def test_gray_values():
    for algorithm, expected in samples_gray_values.items():
        assert abs(gray_value(SAMPLE_GRAY_RGB, GrayscaleAlgorithm(algorithm)) - expected) < 1e-4


def test_default_is_linear_luminance():
    assert gray_value(SAMPLE_GRAY_RGB) == gray_value(SAMPLE_GRAY_RGB, GrayscaleAlgorithm.LINEAR_LUMINANCE)


def test_grayscale_keeps_arity():
    gray = grayscale(SAMPLE_GRAY_RGB, GrayscaleAlgorithm.MAXIMUM_DECOMPOSITION)
    assert gray == (192 / 255, 192 / 255, 192 / 255)

    r, g, b, a = grayscale(SAMPLE_GRAY_RGB + (0.5,), GrayscaleAlgorithm.MINIMUM_DECOMPOSITION)
    assert r == g == b == 48 / 255
    assert a == 0.5


def test_white_stays_white():
    for algorithm in GrayscaleAlgorithm:
        if algorithm == GrayscaleAlgorithm.LEAST_SATURATED_VARIANT:
            continue
        assert abs(gray_value((1.0, 1.0, 1.0), algorithm) - 1.0) < 1e-9


def test_grayscale_rejects_wrong_arity():
    with pytest.raises(ValueError):
        grayscale((0.5, 0.5))
