"""
Sweep order shared by decomposition and monotone triangulation.

The sweep runs from -X to +X, so points are ordered by x first and y second
(the textbook algorithm sweeps top to bottom, y first). Any total order
works as long as every stage uses the same one.
"""

from __future__ import annotations

from typing import List, Sequence

from .points import Point


def precedes(p: Point, q: Point) -> bool:
    """True if p is swept before q."""
    return p[0] < q[0] or (p[0] == q[0] and p[1] < q[1])


def sort_indices(points: Sequence[Point]) -> List[int]:
    """Indices of points in sweep order; exact duplicates keep index order."""
    return sorted(range(len(points)), key=lambda i: (points[i][0], points[i][1]))
