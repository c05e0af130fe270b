import math

from pytest import approx

from mapmath.linalg import cross, dist, interp, norm, rotate


def test_cross_sign():
    assert cross((1.0, 0.0), (0.0, 1.0)) == 1.0
    assert cross((0.0, 1.0), (1.0, 0.0)) == -1.0


def test_norm_and_dist():
    assert norm((3.0, 4.0)) == 5.0
    assert dist((1.0, 1.0), (4.0, 5.0)) == 5.0


def test_interp():
    assert interp((0.0, 0.0), (10.0, -4.0), 0.25) == (2.5, -1.0)


def test_rotate_quarter_turn_is_clockwise_on_screen():
    # y points down, so +x turns to +y
    x, y = rotate((1.0, 0.0), math.pi / 2, (0.0, 0.0))
    assert x == approx(0.0, abs=1e-12)
    assert y == approx(1.0)


def test_rotate_about_pivot():
    x, y = rotate((5.0, 1.0), math.pi, (3.0, 0.0))
    assert x == approx(1.0)
    assert y == approx(-1.0)


def test_rotate_non_finite_angle_gives_nan():
    x, y = rotate((1.0, 1.0), math.inf, (0.0, 0.0))
    assert math.isnan(x) and math.isnan(y)
