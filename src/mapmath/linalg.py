from __future__ import annotations

from math import cos, isfinite, nan, sin, sqrt
from typing import Sequence

Vec2 = tuple[float, float]
Point = tuple[float, float]


def as_point(p: Sequence[float]) -> Point:
    return (float(p[0]), float(p[1]))


def sub(a: Sequence[float], b: Sequence[float]) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def dot(v1: Sequence[float], v2: Sequence[float]) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1]


def cross(v1: Sequence[float], v2: Sequence[float]) -> float:
    """z-component of the 3D cross product of two planar vectors."""
    return v1[0] * v2[1] - v1[1] * v2[0]


def norm2(v: Sequence[float]) -> float:
    return dot(v, v)


def norm(v: Sequence[float]) -> float:
    return sqrt(norm2(v))


def dist(start: Sequence[float], end: Sequence[float]) -> float:
    return norm(sub(end, start))


def interp(a: Sequence[float], b: Sequence[float], t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def rotate(point: Sequence[float], angle: float, pivot: Sequence[float]) -> Point:
    """
    Rotate `point` by `angle` radians about `pivot`.

    With y pointing down (screen space) a positive angle turns clockwise.
    """
    if isfinite(angle):
        c = cos(angle)
        s = sin(angle)
    else:
        c = s = nan
    rx = point[0] - pivot[0]
    ry = point[1] - pivot[1]
    return (rx * c - ry * s + pivot[0], rx * s + ry * c + pivot[1])
