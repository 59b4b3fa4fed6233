"""
Correctness checks for a triangulation.

1. Triangle count: n - 2 triangles for an n-vertex polygon
2. Valid indices: every index in [0, n), no repeated index in a triangle
3. Area preservation: sum of triangle areas == polygon area
4. Winding: every triangle wound like the polygon
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np


def polygon_area(points: np.ndarray) -> float:
    """Signed area of a closed polygon, positive when counter-clockwise."""
    x, y = points[:, 0], points[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2


def triangle_areas(points: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Signed area of every triangle, positive when counter-clockwise."""
    a = points[triangles[:, 0]]
    b = points[triangles[:, 1]]
    c = points[triangles[:, 2]]
    ab = b - a
    ac = c - a
    return (ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0]) / 2


def validate(points: Iterable[Sequence[float]], indices: Sequence[int],
             rel_tol: float = 1e-6) -> Tuple[bool, str]:
    """
    Validate a flat triangle index list against its polygon.

    :returns: (ok, message); message is "OK" or describes the first failure.
    """
    pts = np.asarray(list(points), dtype=float).reshape(-1, 2)
    n = len(pts)
    flat = np.asarray(indices, dtype=np.intp)

    if flat.size % 3 != 0:
        return False, f"Index count {flat.size} is not a multiple of 3"
    tris = flat.reshape(-1, 3)

    if len(tris) != n - 2:
        return False, f"Wrong count: {len(tris)} != {n - 2}"

    if tris.size and (tris.min() < 0 or tris.max() >= n):
        bad = tris[(tris < 0) | (tris >= n)][0]
        return False, f"Invalid vertex: {int(bad)}"

    repeated = (tris[:, 0] == tris[:, 1]) | (tris[:, 1] == tris[:, 2]) | (tris[:, 0] == tris[:, 2])
    if repeated.any():
        return False, f"Repeated index in triangle {tuple(int(v) for v in tris[repeated][0])}"

    poly_area = polygon_area(pts)
    areas = triangle_areas(pts, tris)
    tri_area = float(np.abs(areas).sum())
    if abs(abs(poly_area) - tri_area) > rel_tol * max(1.0, abs(poly_area)):
        return False, f"Area mismatch: {abs(poly_area):.6f} vs {tri_area:.6f}"

    # zero-area slivers have no winding to compare
    wrong = (np.sign(areas) * np.sign(poly_area)) < 0
    if wrong.any():
        return False, f"Triangle {tuple(int(v) for v in tris[wrong][0])} wound against the polygon"

    return True, "OK"
