import math

from pytest import approx, mark

from mapmath.constants import MAX_K, MIN_K
from mapmath.geo import (
    lat_to_meters,
    lon_to_meters,
    meters_to_lat,
    meters_to_lon,
    scale_to_zoom,
    spherical_distance,
    zoom_to_scale,
)


def test_one_degree_of_latitude():
    assert lat_to_meters(1) == approx(110946.257617, rel=1e-7)
    assert meters_to_lat(110946.257617) == approx(1.0, rel=1e-7)


def test_longitude_shrinks_with_latitude():
    at_equator = meters_to_lon(1000, 0)
    at_sixty = meters_to_lon(1000, 60)
    assert at_sixty == approx(at_equator * 2)
    assert lon_to_meters(at_sixty, 60) == approx(1000)


@mark.parametrize("lat", [90, -90, 120])
def test_longitude_at_pole_is_zero(lat):
    assert meters_to_lon(1000, lat) == 0
    assert lon_to_meters(1, lat) == 0


def test_zoom_scale_round_trip():
    assert zoom_to_scale(1) == approx(256 / math.pi)
    assert zoom_to_scale(0) == MIN_K
    assert zoom_to_scale(24) == MAX_K
    for z in (0, 1.5, 17, 24):
        assert scale_to_zoom(zoom_to_scale(z)) == approx(z)


def test_zoom_with_custom_tile_size():
    assert zoom_to_scale(0, tile_size=512) == approx(512 / (2 * math.pi))
    assert scale_to_zoom(512 / (2 * math.pi), tile_size=512) == approx(0.0, abs=1e-12)


def test_scale_to_zoom_non_positive_is_nan():
    assert math.isnan(scale_to_zoom(0))


def test_spherical_distance():
    assert spherical_distance((0, 0), (0, 0)) == 0
    assert spherical_distance((0, 0), (0, 1)) == approx(lat_to_meters(1))
    assert spherical_distance((0, 0), (1, 0)) == approx(111319.490793, rel=1e-7)
