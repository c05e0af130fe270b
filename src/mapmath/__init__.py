from .extent import BBox, Extent, as_extent
from .geom import (
    SurroundingRectangle,
    convex_hull,
    edge_equal,
    get_smallest_surrounding_rectangle,
    line_intersection,
    path_has_intersections,
    path_intersections,
    path_length,
    point_in_polygon,
    polygon_centroid,
    polygon_contains_polygon,
    polygon_intersects_polygon,
    rotate_points,
    viewport_nudge,
)
from .transform import Transform
from .viewport import Viewport

__all__ = [
    "BBox",
    "Extent",
    "as_extent",
    "SurroundingRectangle",
    "Transform",
    "Viewport",
    "convex_hull",
    "edge_equal",
    "get_smallest_surrounding_rectangle",
    "line_intersection",
    "path_has_intersections",
    "path_intersections",
    "path_length",
    "point_in_polygon",
    "polygon_centroid",
    "polygon_contains_polygon",
    "polygon_intersects_polygon",
    "rotate_points",
    "viewport_nudge",
]
