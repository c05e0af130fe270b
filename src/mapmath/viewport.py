from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from .constants import HALF_PI, DEG2RAD, RAD2DEG, MAX_K, MIN_K, MAX_PHI, MIN_PHI, TAU
from .extent import Extent, ExtentLike, as_extent
from .linalg import rotate
from .number import clamp, wrap
from .transform import Transform, TransformLike, transform_fields

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class Viewport:
    """
    Projection state for converting between lon/lat (λ, φ) and screen (x, y).

    The default viewport shows the world at zoom 1 centered on [0, 0], so
    (180, -85.0511287798) projects to roughly (256, 256).

    Setters return the viewport so configuration can be chained:

        view = Viewport().set_transform({"x": 150, "y": 100}).set_dimensions(((0, 0), (300, 200)))
    """

    __slots__ = ("_transform", "_dimensions", "_min_k", "_max_k")

    def __init__(
        self,
        transform: Optional[TransformLike] = None,
        dimensions: Optional[ExtentLike] = None,
        *,
        min_k: float = MIN_K,
        max_k: float = MAX_K,
    ) -> None:
        if min_k > max_k:
            logger.warning("inverted zoom scale bounds: min_k=%s max_k=%s", min_k, max_k)
            raise ValueError(f"min_k ({min_k}) must not exceed max_k ({max_k})")
        self._min_k = min_k
        self._max_k = max_k
        self._transform = Transform()
        self._transform.k = self._clamp_k(self._transform.k)
        self.set_transform(transform)
        self._dimensions = Extent(as_extent(dimensions)) if dimensions is not None else Extent((0.0, 0.0), (0.0, 0.0))

    def __repr__(self) -> str:
        return f"Viewport({self._transform!r}, {self._dimensions!r})"

    def project(self, loc: Sequence[float], include_rotation: bool = False) -> Point:
        """Project lon/lat degrees to screen coordinates (spherical mercator)."""
        t = self._transform
        lam = loc[0] * DEG2RAD
        phi = clamp(loc[1] * DEG2RAD, MIN_PHI, MAX_PHI)
        mercator_x = lam
        mercator_y = math.log(math.tan((HALF_PI + phi) / 2.0))
        point = (mercator_x * t.k + t.x, t.y - mercator_y * t.k)
        if include_rotation and t.r:
            return rotate(point, t.r, self._dimensions.center())
        return point

    def unproject(self, point: Sequence[float], include_rotation: bool = False) -> Point:
        """Inverse of `project`; screen coordinates back to lon/lat degrees."""
        t = self._transform
        if include_rotation and t.r:
            point = rotate(point, -t.r, self._dimensions.center())
        mercator_x = (point[0] - t.x) / t.k
        mercator_y = clamp((t.y - point[1]) / t.k, -math.pi, math.pi)
        lam = mercator_x
        phi = 2.0 * math.atan(math.exp(mercator_y)) - HALF_PI
        return (lam * RAD2DEG, phi * RAD2DEG)

    def get_translate(self) -> Point:
        return (self._transform.x, self._transform.y)

    def set_translate(self, val: Sequence[float]) -> "Viewport":
        self._transform.x = float(val[0])
        self._transform.y = float(val[1])
        return self

    def get_scale(self) -> float:
        return self._transform.k

    def set_scale(self, val: float) -> "Viewport":
        self._transform.k = self._clamp_k(float(val))
        return self

    def get_rotate(self) -> float:
        return self._transform.r

    def set_rotate(self, val: float) -> "Viewport":
        """Set the clockwise rotation in radians; 0 keeps north up."""
        self._transform.r = wrap(float(val), 0.0, TAU)
        return self

    def get_transform(self) -> Transform:
        return self._transform.copy()

    def set_transform(self, obj: Optional[TransformLike]) -> "Viewport":
        """Apply the fields present in `obj`; absent fields keep their value."""
        fields = transform_fields(obj)
        if "x" in fields:
            self._transform.x = fields["x"]
        if "y" in fields:
            self._transform.y = fields["y"]
        if "k" in fields:
            self._transform.k = self._clamp_k(fields["k"])
        if "r" in fields:
            self._transform.r = wrap(fields["r"], 0.0, TAU)
        return self

    def get_dimensions(self) -> tuple[Point, Point]:
        return (self._dimensions.min, self._dimensions.max)

    def set_dimensions(self, val: Sequence[Sequence[float]]) -> "Viewport":
        self._dimensions.min = (float(val[0][0]), float(val[0][1]))
        self._dimensions.max = (float(val[1][0]), float(val[1][1]))
        return self

    def extent(self) -> Extent:
        """Lon/lat extent currently visible, taking rotation into account."""
        polygon = self._dimensions.polygon()
        extent = Extent()
        for corner in polygon[:-1]:  # last point repeats the first
            extent = extent.extend(Extent(self.unproject(corner, True)))
        return extent

    def _clamp_k(self, k: float) -> float:
        clamped = clamp(k, self._min_k, self._max_k)
        if clamped != k and k == k:
            logger.debug("scale %s clamped to %s", k, clamped)
        return clamped
