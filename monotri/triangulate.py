"""
Simple-polygon triangulation in O(n log n).

The polygon is decomposed into monotone pieces (partition.py), the index
cycle is split along the resulting diagonals (split.py) and every piece is
triangulated by the linear two-chain sweep (monotone.py). The result is a
flat list of index triplets into the caller's points, 3 * (n - 2) long, with
every triangle wound like the input polygon.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .errors import PreconditionError
from .monotone import triangulate_monotone
from .orientation import polygon_is_clockwise
from .partition import decompose_polygon, split_monotone
from .points import Point, as_points, require_polygon, swap_axes

logger = logging.getLogger(__name__)

Diagonal = Tuple[int, int]
Triangle = Tuple[int, int, int]


def _check_axis(axis: int) -> None:
    if axis not in (0, 1):
        raise PreconditionError(f"Sweep axis must be 0 (x) or 1 (y), got {axis!r}")


def _sweep_view(pts: List[Point], axis: int) -> List[Point]:
    _check_axis(axis)
    return swap_axes(pts) if axis == 1 else pts


def _run(pts: List[Point], axis: int) -> Tuple[List[int], List[Diagonal], List[List[int]]]:
    """Triangles, diagonals and monotone loops of one polygon."""
    require_polygon(pts)
    # swapping x and y mirrors polygon and triangles alike, so winding
    # relative to the view is winding relative to the caller's points
    view = _sweep_view(pts, axis)
    clockwise = polygon_is_clockwise(view)

    diagonals = decompose_polygon(view, clockwise)
    loops = split_monotone(len(view), diagonals, clockwise)

    triangles: List[int] = []
    for loop in loops:
        triangulate_monotone(view, loop, clockwise, triangles)

    logger.debug("triangulated %d vertices: %d diagonals, %d monotone loops, %d triangles",
                 len(pts), len(diagonals), len(loops), len(triangles) // 3)
    return triangles, diagonals, loops


def triangulate_polygon(points: Iterable[Sequence[float]], output: Optional[List[int]] = None,
                        axis: int = 0) -> List[int]:
    """
    Triangulate a simple polygon.

    :param points: The polygon boundary (no holes), closed implicitly, in
        either winding order. Tuples, lists or an (n, 2) numpy array.
    :param output: List to append the triangle indices to. Nothing is
        appended if the call fails.
    :param axis: Sweep axis, 0 for x (default) or 1 for y.
    :returns: Flat list of 3 * (n - 2) indices into `points`; consecutive
        triplets are triangles with the same winding as the polygon.
    """
    triangles, _, _ = _run(as_points(points), axis)
    if output is None:
        return triangles
    output.extend(triangles)
    return output


def triangulate_polygon_array(points: Iterable[Sequence[float]], axis: int = 0) -> np.ndarray:
    """Like triangulate_polygon, but as an (n - 2, 3) integer array."""
    return np.asarray(triangulate_polygon(points, axis=axis), dtype=np.intp).reshape(-1, 3)


class PolygonTriangulator:
    """
    A single triangulation run that keeps its intermediate results.

    Useful for debugging and plotting; for plain triangulation call
    triangulate_polygon instead.
    """

    def __init__(self, points: Iterable[Sequence[float]], axis: int = 0):
        self.pts = as_points(points)
        require_polygon(self.pts)
        _check_axis(axis)
        self.n = len(self.pts)
        self.axis = axis
        self.clockwise = polygon_is_clockwise(self.pts)
        self.diagonals: List[Diagonal] = []
        self.loops: List[List[int]] = []
        self.indices: List[int] = []

    def triangulate(self) -> List[Triangle]:
        """Triangulate the polygon, returning a list of index triplets."""
        self.indices, self.diagonals, self.loops = _run(self.pts, self.axis)
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx), 3)]
