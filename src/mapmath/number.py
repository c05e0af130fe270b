from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    if value != value:
        return value
    return min(max(value, lo), hi)


def wrap(value: float, lo: float, hi: float) -> float:
    """Wrap `value` into the half-open range [lo, hi)."""
    d = hi - lo
    if d == 0 or d != d:
        return math.nan
    result = (value - lo) % d + lo
    # float % may round a tiny negative remainder up to the divisor itself
    if result >= hi:
        return lo
    return result
