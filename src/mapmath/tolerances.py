from __future__ import annotations

# determinants below this are treated as parallel
DET_ABS_TOL = 1e-10
DET_REL_TOL = 1e-12


def is_close(a: float, b: float, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise ValueError("error tolerances must be non-negative")
    if a == b:
        return True
    diff = abs(b - a)
    return (diff <= abs(rel_tol * b)) or (diff <= abs(rel_tol * a)) or (diff <= abs_tol)


def near_zero(val: float) -> bool:
    return is_close(val, 0.0, rel_tol=DET_REL_TOL, abs_tol=DET_ABS_TOL)
