from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from .constants import DEFAULT_K


@dataclass(slots=True)
class Transform:
    """Translate (x, y), scale (k) and clockwise rotation in radians (r)."""
    x: float = 0.0
    y: float = 0.0
    k: float = DEFAULT_K
    r: float = 0.0

    def copy(self) -> "Transform":
        return replace(self)


TransformLike = Union[Transform, Mapping[str, Any]]


def transform_fields(obj: Optional[TransformLike]) -> dict[str, float]:
    """
    Fields explicitly present in `obj`.

    Missing keys and keys set to None are left out; zero is a real value.
    """
    if obj is None:
        return {}
    if isinstance(obj, Transform):
        return {"x": obj.x, "y": obj.y, "k": obj.k, "r": obj.r}
    return {name: float(obj[name]) for name in ("x", "y", "k", "r") if obj.get(name) is not None}
