"""Point normalisation shared by the public entry points."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .errors import PreconditionError

Point = Tuple[float, float]


def as_points(points: Iterable[Sequence[float]]) -> List[Point]:
    """
    Copy any iterable of 2D points (tuples, lists, numpy rows) into a list of
    float tuples. The caller's data is never modified.
    """
    out: List[Point] = []
    for i, p in enumerate(points):
        if len(p) != 2:
            raise PreconditionError(f"Point {i} has {len(p)} coordinates, expected 2")
        out.append((float(p[0]), float(p[1])))
    return out


def swap_axes(points: Sequence[Point]) -> List[Point]:
    """Exchange x and y of every point (used to sweep along y)."""
    return [(y, x) for (x, y) in points]


def require_polygon(points: Sequence[Point], what: str = "polygon") -> None:
    if len(points) < 3:
        raise PreconditionError(f"Expected {what} with 3 or more vertices, got {len(points)}")
