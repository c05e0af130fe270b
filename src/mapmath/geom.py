from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

from predicates import orient2d

from .constants import NUDGE_PADDING, NUDGE_STEP
from .extent import Extent
from .linalg import Point, Vec2, as_point, cross, dist, interp, norm, rotate, sub
from .tolerances import near_zero

logger = logging.getLogger(__name__)

Edge = Sequence[Sequence[float]]
Path = Sequence[Sequence[float]]
IntersectMode = Literal["lax", "strict"]


@dataclass(slots=True)
class SurroundingRectangle:
    poly: list[Point] = field(default_factory=list)
    angle: float = 0.0


def edge_equal(edge1: Sequence, edge2: Sequence) -> bool:
    """Undirected edge equality: [a, b] equals [b, a]."""
    return (edge1[0] == edge2[0] and edge1[1] == edge2[1]) or (
        edge1[0] == edge2[1] and edge1[1] == edge2[0]
    )


def rotate_points(points: Path, angle: float, around: Sequence[float]) -> list[Point]:
    return [rotate(p, angle, around) for p in points]


def line_intersection(a: Edge, b: Edge) -> Optional[Point]:
    """
    Intersection point of segments `a` and `b`, or None.

    Solves p + t*r = q + u*s for the segment parameters t and u. Parallel
    segments, colinear ones included, give None whether or not they overlap.
    """
    p, p2 = a[0], a[1]
    q, q2 = b[0], b[1]
    r = sub(p2, p)
    s = sub(q2, q)
    length = norm(r) * norm(s)
    if length == 0:
        return None
    denominator = cross(r, s)
    # sine of the angle between the segments, independent of their length
    if near_zero(denominator / length):
        return None
    qp = sub(q, p)
    t = cross(qp, s) / denominator
    u = cross(qp, r) / denominator
    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return interp(p, p2, t)
    return None


def path_intersections(path1: Path, path2: Path) -> list[Point]:
    intersections = []
    for i in range(len(path1) - 1):
        for j in range(len(path2) - 1):
            hit = line_intersection((path1[i], path1[i + 1]), (path2[j], path2[j + 1]))
            if hit is not None:
                intersections.append(hit)
    return intersections


def path_has_intersections(path1: Path, path2: Path) -> bool:
    for i in range(len(path1) - 1):
        for j in range(len(path2) - 1):
            if line_intersection((path1[i], path1[i + 1]), (path2[j], path2[j + 1])) is not None:
                return True
    return False


def _on_segment(pt: Point, a: Point, b: Point) -> bool:
    if orient2d(a, b, pt) != 0:
        return False
    return min(a[0], b[0]) <= pt[0] <= max(a[0], b[0]) and min(a[1], b[1]) <= pt[1] <= max(a[1], b[1])


def point_in_polygon(point: Sequence[float], polygon: Path) -> bool:
    """
    Crossing-number test; points on the boundary count as inside.
    """
    pt = as_point(point)
    ring = [as_point(v) for v in polygon]
    if not ring:
        return False
    x, y = pt
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if _on_segment(pt, ring[j], ring[i]):
            return True
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def polygon_contains_polygon(outer: Path, inner: Path) -> bool:
    """
    True if every vertex of `inner` is inside `outer`.

    Only vertices are sampled, so an inner edge that leaves and re-enters
    `outer` between two vertices goes unnoticed.
    """
    return all(point_in_polygon(p, outer) for p in inner)


def polygon_intersects_polygon(outer: Path, inner: Path, mode: IntersectMode = "lax") -> bool:
    """
    Lax: some vertex of `inner` lies inside `outer`.
    Strict: as lax, or some edge of `inner` crosses an edge of `outer`.
    """
    if mode not in ("lax", "strict"):
        raise ValueError(f"Unknown intersect mode: {mode}")
    if any(point_in_polygon(p, outer) for p in inner):
        return True
    return mode == "strict" and path_has_intersections(outer, inner)


def convex_hull(points: Path) -> list[Point]:
    """Counterclockwise convex hull (monotone chain), without a closing vertex."""
    pts = sorted(set(as_point(p) for p in points))
    if len(pts) <= 2:
        return pts

    def half(seq: list[Point]) -> list[Point]:
        chain: list[Point] = []
        for p in seq:
            while len(chain) >= 2 and orient2d(chain[-2], chain[-1], p) <= 0:
                chain.pop()
            chain.append(p)
        return chain

    lower = half(pts)
    upper = half(list(reversed(pts)))
    return lower[:-1] + upper[:-1]


def polygon_centroid(polygon: Path) -> Point:
    """Area-weighted centroid; the vertex mean when the area vanishes."""
    n = len(polygon)
    if n == 0:
        return (math.nan, math.nan)
    k = 0.0
    x = 0.0
    y = 0.0
    b = polygon[-1]
    for a_idx in range(n):
        a = b
        b = polygon[a_idx]
        c = a[0] * b[1] - b[0] * a[1]
        k += c
        x += (a[0] + b[0]) * c
        y += (a[1] + b[1]) * c
    if k == 0:
        logger.debug("zero area polygon of %s vertices, using vertex mean", n)
        return (sum(p[0] for p in polygon) / n, sum(p[1] for p in polygon) / n)
    k *= 3.0
    return (x / k, y / k)


def get_smallest_surrounding_rectangle(points: Path) -> SurroundingRectangle:
    """
    Minimum-area rectangle enclosing `points`.

    Each convex hull edge is tried as a rectangle side: the hull is rotated
    so that edge lies flat, and the axis-aligned extent of the result is
    measured. The first smallest extent wins and is rotated back.
    """
    hull = convex_hull(points)
    if not hull:
        return SurroundingRectangle()
    centroid = polygon_centroid(hull)

    min_area = math.inf
    ssr_extent = Extent()
    ssr_angle = 0.0
    c1 = hull[0]
    for i in range(len(hull)):
        c2 = hull[0] if i == len(hull) - 1 else hull[i + 1]
        angle = math.atan2(c2[1] - c1[1], c2[0] - c1[0])
        extent = Extent.from_points(rotate_points(hull, -angle, centroid))
        area = extent.area()
        if area < min_area:
            min_area = area
            ssr_extent = extent
            ssr_angle = angle
        c1 = c2

    return SurroundingRectangle(
        poly=rotate_points(ssr_extent.polygon(), ssr_angle, centroid),
        angle=ssr_angle,
    )


def path_length(path: Path) -> float:
    length = 0.0
    for i in range(len(path) - 1):
        length += dist(path[i], path[i + 1])
    return length


def viewport_nudge(
    point: Sequence[float],
    dimensions: Sequence[float],
    *,
    padding: Sequence[float] = NUDGE_PADDING,
    step: float = NUDGE_STEP,
) -> Optional[Vec2]:
    """
    Nudge vector pushing `point` back from the viewport edges, or None.

    `padding` is (top, right, bottom, left) in pixels. Near a corner both
    components are set.
    """
    top, right, bottom, left = padding
    x = 0.0
    y = 0.0
    if point[0] > dimensions[0] - right:
        x = -step
    if point[0] < left:
        x = step
    if point[1] > dimensions[1] - bottom:
        y = -step
    if point[1] < top:
        y = step
    if x or y:
        return (x, y)
    return None
