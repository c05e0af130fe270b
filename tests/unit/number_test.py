import math

from pytest import approx, mark

from mapmath.number import clamp, wrap


@mark.parametrize("value, expected", [(-1.0, 0.0), (0.5, 0.5), (2.0, 1.0)])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected


def test_clamp_passes_nan_through():
    assert math.isnan(clamp(math.nan, 0.0, 1.0))


@mark.parametrize(
    "value, expected",
    [(0.0, 0.0), (1.5, 1.5), (2 * math.pi, 0.0), (-math.pi / 2, 1.5 * math.pi), (5 * math.pi, math.pi)],
)
def test_wrap_into_tau(value, expected):
    assert wrap(value, 0.0, 2 * math.pi) == approx(expected)


def test_wrap_upper_bound_is_exclusive():
    assert wrap(10.0, 0.0, 10.0) == 0.0
    assert wrap(-10.0, -10.0, 10.0) == -10.0


def test_wrap_empty_range_is_nan():
    assert math.isnan(wrap(3.0, 1.0, 1.0))


def test_wrap_tiny_negative_stays_below_upper_bound():
    assert wrap(-1e-20, 0.0, 2 * math.pi) == 0.0
    assert wrap(-1e-20, 0.0, 1.0) == 0.0
