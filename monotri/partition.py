"""
Monotone decomposition of a simple polygon.

Plane sweep from "Computational Geometry: Algorithms and Applications"
(de Berg, van Kreveld, Overmars; 2nd ed., section 3.2), rotated so the sweep
runs along +X. The textbook "left" edge of a vertex becomes the edge directly
below it (smaller y), and ties are broken by the x-then-y order in
`sorting.precedes`, which behaves like an infinitesimal rotation.

The sweep assumes a counter-clockwise loop; clockwise input is walked through
a reversed index view and the results are mapped back to caller indices.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .errors import InvariantError
from .orientation import polygon_is_clockwise
from .points import Point, as_points, require_polygon
from .sorting import precedes, sort_indices
from .split import split_polygon

logger = logging.getLogger(__name__)

TAU = math.pi * 2

Diagonal = Tuple[int, int]


class VertexType(Enum):
    START = auto()      # Swept before both neighbours, convex
    END = auto()        # Swept after both neighbours, convex
    REGULAR = auto()    # One neighbour on each side of the sweep line
    SPLIT = auto()      # Swept before both neighbours, reflex
    MERGE = auto()      # Swept after both neighbours, reflex


def interior_angle(prev: Point, cur: Point, nxt: Point) -> float:
    """Interior angle at cur of a CCW polygon, in [0, 2*pi)."""
    # negated: measured clockwise from cur->prev to cur->next
    prev_angle = -math.atan2(prev[1] - cur[1], prev[0] - cur[0])
    next_angle = -math.atan2(nxt[1] - cur[1], nxt[0] - cur[0])
    return (next_angle - prev_angle) % TAU


def vertex_type(prev: Point, cur: Point, nxt: Point) -> VertexType:
    """Classify cur, assuming prev -> cur -> nxt runs counter-clockwise."""
    before_prev = precedes(cur, prev)
    before_next = precedes(cur, nxt)

    if before_prev and before_next:
        if interior_angle(prev, cur, nxt) < math.pi:
            return VertexType.START
        return VertexType.SPLIT
    if not before_prev and not before_next:
        if interior_angle(prev, cur, nxt) < math.pi:
            return VertexType.END
        return VertexType.MERGE
    return VertexType.REGULAR


def classify_vertices(points: Sequence[Point]) -> List[VertexType]:
    """Vertex types of a counter-clockwise polygon, by index."""
    n = len(points)
    return [vertex_type(points[i - 1], points[i], points[(i + 1) % n]) for i in range(n)]


def find_left_edge(points: Sequence[Point], status: Iterable[int], index: int) -> int:
    """
    Status edge directly below points[index].

    Edges are keyed by their start index; edge i runs from points[i] to
    points[i + 1]. Returns the edge whose crossing of the vertex's x is the
    highest one not above the vertex.
    """
    n = len(points)
    vx, vy = points[index]
    left_edge = -1
    left_y = -math.inf

    for start in status:
        a = points[start]
        b = points[(start + 1) % n]
        if a[0] > b[0]:
            a, b = b, a

        # parallel to the sweep line: only active while the sweep is on it
        if a[0] == b[0]:
            continue

        if a[0] <= vx <= b[0]:
            y = a[1] + (b[1] - a[1]) * (vx - a[0]) / (b[0] - a[0])
            if left_y <= y <= vy:
                left_y = y
                left_edge = start

    if left_edge < 0:
        raise InvariantError(f"No edge to the left of vertex {index}. Status: {sorted(status)}")
    return left_edge


def _sweep(points: Sequence[Point]) -> List[Diagonal]:
    """Diagonals of a counter-clockwise polygon, in its own indices."""
    n = len(points)
    # the textbook keeps the status in a BST; a set with a linear scan for
    # the left edge is enough here
    status: Set[int] = set()
    helpers: Dict[int, int] = {}
    types: Dict[int, VertexType] = {}
    diagonals: List[Diagonal] = []

    def connect_if_merge(index: int, helper: Optional[int]) -> None:
        if helper is not None and types.get(helper) is VertexType.MERGE:
            diagonals.append((index, helper))

    for index in sort_indices(points):
        prev_index = (index - 1) % n
        next_index = (index + 1) % n
        vertex = points[index]
        vtype = vertex_type(points[prev_index], vertex, points[next_index])
        types[index] = vtype

        if vtype is VertexType.START:
            status.add(index)
            helpers[index] = index

        elif vtype is VertexType.SPLIT:
            left = find_left_edge(points, status, index)
            diagonals.append((index, helpers[left]))
            helpers[left] = index
            status.add(index)
            helpers[index] = index

        elif vtype is VertexType.END:
            connect_if_merge(index, helpers.get(prev_index))
            status.discard(prev_index)

        elif vtype is VertexType.MERGE:
            connect_if_merge(index, helpers.get(prev_index))
            status.discard(prev_index)
            left = find_left_edge(points, status, index)
            connect_if_merge(index, helpers.get(left))
            helpers[left] = index

        elif vtype is VertexType.REGULAR:
            # on a CCW loop the interior lies left of every edge, so it lies
            # beyond the vertex when the next vertex is swept later
            if precedes(vertex, points[next_index]):
                connect_if_merge(index, helpers.get(prev_index))
                status.discard(prev_index)
                status.add(index)
                helpers[index] = index
            else:
                left = find_left_edge(points, status, index)
                connect_if_merge(index, helpers.get(left))
                helpers[left] = index

        else:
            raise InvariantError(f"Unhandled vertex type {vtype}")

    return diagonals


def _ccw_order(count: int, clockwise: bool) -> List[int]:
    return list(range(count - 1, -1, -1)) if clockwise else list(range(count))


def split_monotone(count: int, diagonals: Sequence[Diagonal], clockwise: bool) -> List[List[int]]:
    """Split the index cycle 0..count-1 along `diagonals`, keeping its winding."""
    return split_polygon(_ccw_order(count, clockwise), diagonals, flip=clockwise)


def decompose_polygon(points: Iterable[Sequence[float]], clockwise: Optional[bool] = None) -> List[Diagonal]:
    """
    Diagonals splitting a simple polygon into x-monotone pieces.

    :param points: The polygon, closed implicitly, in either winding order.
    :param clockwise: Winding hint; computed from the points when omitted.
    :returns: Diagonals as pairs of indices into `points`, in sweep order.
    """
    pts = as_points(points)
    require_polygon(pts)
    if clockwise is None:
        clockwise = polygon_is_clockwise(pts)

    order = _ccw_order(len(pts), clockwise)
    diagonals = _sweep([pts[i] for i in order])
    logger.debug("decomposition of %d vertices produced %d diagonals", len(pts), len(diagonals))
    return [(order[a], order[b]) for a, b in diagonals]


def partition_polygon(points: Iterable[Sequence[float]], clockwise: Optional[bool] = None) -> List[List[int]]:
    """
    Monotone index loops of a simple polygon.

    Every loop has the same winding as the input and indexes into `points`.
    """
    pts = as_points(points)
    require_polygon(pts)
    if clockwise is None:
        clockwise = polygon_is_clockwise(pts)

    return split_monotone(len(pts), decompose_polygon(pts, clockwise), clockwise)
