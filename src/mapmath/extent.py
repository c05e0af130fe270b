from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TypedDict, Union

from .geo import meters_to_lat, meters_to_lon

Point = tuple[float, float]


class BBox(TypedDict):
    minX: float
    minY: float
    maxX: float
    maxY: float


ExtentLike = Union["Extent", Sequence[float], Sequence[Sequence[float]]]


def _format_number(v: float) -> str:
    if v != v:
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == int(v):
        return str(int(v))
    return repr(float(v))


@dataclass(slots=True)
class Extent:
    """
    Axis-aligned bounding box.

    `Extent()` is the empty extent: min=(inf, inf), max=(-inf, -inf).
    It is the identity for `extend` and has infinite area.

    Extents are values: `extend` and `intersection` return new instances.
    """
    min: Point
    max: Point

    def __init__(
        self,
        other_or_min: Optional[Union["Extent", Sequence[float]]] = None,
        max: Optional[Sequence[float]] = None,
    ) -> None:
        if isinstance(other_or_min, Extent):
            lo: Optional[Sequence[float]] = other_or_min.min
            max = other_or_min.max
        else:
            lo = other_or_min

        self.min = (math.inf, math.inf)
        self.max = (-math.inf, -math.inf)
        if lo is not None and len(lo) == 2:
            self.min = (float(lo[0]), float(lo[1]))
            if max is None:
                max = lo
        if max is not None and len(max) == 2:
            self.max = (float(max[0]), float(max[1]))

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Extent":
        extent = cls()
        for p in points:
            extent = extent.extend(cls(p))
        return extent

    def equals(self, other: ExtentLike) -> bool:
        other = as_extent(other)
        return self.min == other.min and self.max == other.max

    def extend(self, other: ExtentLike) -> "Extent":
        other = as_extent(other)
        return Extent(
            (min(other.min[0], self.min[0]), min(other.min[1], self.min[1])),
            (max(other.max[0], self.max[0]), max(other.max[1], self.max[1])),
        )

    def area(self) -> float:
        return abs((self.max[0] - self.min[0]) * (self.max[1] - self.min[1]))

    def center(self) -> Point:
        return ((self.min[0] + self.max[0]) / 2.0, (self.min[1] + self.max[1]) / 2.0)

    def rectangle(self) -> tuple[float, float, float, float]:
        return (self.min[0], self.min[1], self.max[0], self.max[1])

    def bbox(self) -> BBox:
        return {"minX": self.min[0], "minY": self.min[1], "maxX": self.max[0], "maxY": self.max[1]}

    def polygon(self) -> list[Point]:
        """Closed ring, wound clockwise starting at `min`."""
        (x0, y0), (x1, y1) = self.min, self.max
        return [(x0, y0), (x0, y1), (x1, y1), (x1, y0), (x0, y0)]

    def contains(self, other: ExtentLike) -> bool:
        other = as_extent(other)
        return (
            other.min[0] >= self.min[0]
            and other.min[1] >= self.min[1]
            and other.max[0] <= self.max[0]
            and other.max[1] <= self.max[1]
        )

    def intersects(self, other: ExtentLike) -> bool:
        other = as_extent(other)
        return (
            other.min[0] <= self.max[0]
            and other.min[1] <= self.max[1]
            and other.max[0] >= self.min[0]
            and other.max[1] >= self.min[1]
        )

    def intersection(self, other: ExtentLike) -> "Extent":
        other = as_extent(other)
        if not self.intersects(other):
            return Extent()
        return Extent(
            (max(other.min[0], self.min[0]), max(other.min[1], self.min[1])),
            (min(other.max[0], self.max[0]), min(other.max[1], self.max[1])),
        )

    def percent_contained_in(self, other: ExtentLike) -> float:
        """Fraction of this extent's area that lies inside `other`."""
        a1 = self.intersection(other).area()
        a2 = self.area()
        if a1 == math.inf or a2 == math.inf or a1 == 0 or a2 == 0:
            return 0.0
        return a1 / a2

    def pad_by_meters(self, meters: float) -> "Extent":
        # lon/lat extent; the longitude delta is taken at the center latitude
        d_lat = meters_to_lat(meters)
        d_lon = meters_to_lon(meters, self.center()[1])
        return Extent(
            (self.min[0] - d_lon, self.min[1] - d_lat),
            (self.max[0] + d_lon, self.max[1] + d_lat),
        )

    def to_param(self) -> str:
        return ",".join(_format_number(v) for v in self.rectangle())


def as_extent(other: ExtentLike) -> Extent:
    if isinstance(other, Extent):
        return other
    # a (min, max) pair of points or a single point
    if len(other) == 2 and isinstance(other[0], Sequence):
        return Extent(other[0], other[1])  # type: ignore[arg-type]
    return Extent(other)  # type: ignore[arg-type]
