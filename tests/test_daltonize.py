import numpy as np
import pytest

from haeley_colors import ColorVisionDeficiency, daltonize
from haeley_colors.daltonize import CONFUSION_LINES, gamut_shift
from .samples import PROTANOPE_RED

SAMPLES = [
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.9, 0.6, 0.1),
    (0.2, 0.7, 0.9),
    (0.5, 0.5, 0.5),
    (1.0, 1.0, 1.0),
]

DEFICIENCIES = [
    ColorVisionDeficiency.PROTANOPE,
    ColorVisionDeficiency.DEUTERANOPE,
    ColorVisionDeficiency.TRITANOPE,
]


def test_none_is_identity():
    assert daltonize((0.1, 0.2, 0.3), ColorVisionDeficiency.NONE) == (0.1, 0.2, 0.3)
    assert daltonize((0.1, 0.2, 0.3, 0.4), ColorVisionDeficiency.NONE) == (0.1, 0.2, 0.3, 0.4)


def test_black_is_unchanged():
    for deficiency in DEFICIENCIES:
        assert daltonize((0.0, 0.0, 0.0), deficiency) == (0.0, 0.0, 0.0)


def test_protanope_red():
    assert np.allclose(daltonize((1.0, 0.0, 0.0), ColorVisionDeficiency.PROTANOPE), PROTANOPE_RED, atol=1e-2)


def test_protanope_confuses_red_and_green():
    r, g, _ = daltonize((1.0, 0.0, 0.0), ColorVisionDeficiency.PROTANOPE)
    assert abs(r - g) < 0.1


def test_results_stay_in_unit_range():
    for deficiency in DEFICIENCIES:
        for rgb in SAMPLES:
            result = daltonize(rgb, deficiency)
            assert len(result) == 3
            assert all(0.0 <= c <= 1.0 for c in result)


def test_alpha_is_passed_through():
    for deficiency in DEFICIENCIES:
        result = daltonize((0.9, 0.6, 0.1, 0.3), deficiency)
        assert len(result) == 4
        assert result[3] == 0.3


def test_accepts_plain_int_deficiency():
    assert daltonize((0.9, 0.6, 0.1), 2) == daltonize((0.9, 0.6, 0.1), ColorVisionDeficiency.DEUTERANOPE)


def test_rejects_wrong_arity():
    with pytest.raises(ValueError):
        daltonize((0.5, 0.5), ColorVisionDeficiency.TRITANOPE)


def test_gamut_shift_uses_every_channel():
    # only the red channel is out of gamut, its factor must not be dropped
    srgb = np.array([1.2, 0.5, 0.5])
    drgb = np.array([-0.4, 0.1, 0.1])
    assert abs(gamut_shift(srgb, drgb) - 0.5) < 1e-9


def test_gamut_shift_picks_largest_factor():
    srgb = np.array([1.2, -0.1, 0.5])
    drgb = np.array([-0.4, 0.5, 0.0])
    # red needs 0.5, green needs 0.2
    assert abs(gamut_shift(srgb, drgb) - 0.5) < 1e-9


def test_gamut_shift_ignores_zero_delta():
    assert gamut_shift(np.array([0.5, 0.5, 0.5]), np.zeros(3)) == 0.0


def test_confusion_lines_pass_through_their_endpoints():
    for line in CONFUSION_LINES.values():
        for x, y in (line.begin, line.end):
            assert abs(line.slope * x + line.intercept - y) < 1e-9
