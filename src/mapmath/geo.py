from __future__ import annotations

import math
from typing import Sequence

from .constants import DEG2RAD, EQUATORIAL_RADIUS, POLAR_RADIUS, TAU, TILE_SIZE

# meters per degree along a meridian / along the equator
METERS_PER_DEG_LAT = TAU * POLAR_RADIUS / 360.0
METERS_PER_DEG_LON = TAU * EQUATORIAL_RADIUS / 360.0


def lat_to_meters(d_lat: float) -> float:
    return d_lat * METERS_PER_DEG_LAT


def lon_to_meters(d_lon: float, at_lat: float) -> float:
    if abs(at_lat) >= 90:
        return 0.0
    return d_lon * METERS_PER_DEG_LON * abs(math.cos(at_lat * DEG2RAD))


def meters_to_lat(meters: float) -> float:
    return meters / METERS_PER_DEG_LAT


def meters_to_lon(meters: float, at_lat: float) -> float:
    """Degrees of longitude spanned by `meters` at latitude `at_lat`."""
    if abs(at_lat) >= 90:
        return 0.0
    return meters / METERS_PER_DEG_LON / abs(math.cos(at_lat * DEG2RAD))


def spherical_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Approximate distance in meters between two lon/lat points.

    Equirectangular approximation, good enough for the short distances
    an editor measures on screen.
    """
    x = lon_to_meters(a[0] - b[0], (a[1] + b[1]) / 2.0)
    y = lat_to_meters(a[1] - b[1])
    return math.sqrt(x * x + y * y)


def zoom_to_scale(zoom: float, tile_size: float = TILE_SIZE) -> float:
    return tile_size * 2.0 ** zoom / TAU


def scale_to_zoom(k: float, tile_size: float = TILE_SIZE) -> float:
    if not k > 0:
        return math.nan
    return math.log2(k * TAU / tile_size)
