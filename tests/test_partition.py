import math

import pytest

from monotri.errors import InvariantError, PreconditionError
from monotri.orientation import polygon_is_clockwise
from monotri.partition import (
    VertexType,
    classify_vertices,
    decompose_polygon,
    find_left_edge,
    interior_angle,
    partition_polygon,
    split_monotone,
)
from monotri.polylines import comb_polygon, l_shape, make_circle_polyline, paper_example, star_polygon

S = VertexType.START
E = VertexType.END
R = VertexType.REGULAR
SP = VertexType.SPLIT
M = VertexType.MERGE


def as_set(diagonals):
    return {frozenset(d) for d in diagonals}


def test_interior_angle():
    assert math.isclose(interior_angle((1, -1), (1, 1), (-1, 1)), math.pi / 2)
    # reflex corner of the L
    assert math.isclose(interior_angle((2, 1), (1, 1), (1, 2)), 3 * math.pi / 2)


def test_classify_l_shape():
    assert classify_vertices(l_shape()) == [S, R, E, SP, E, R]


def test_classify_star():
    assert classify_vertices(star_polygon(5)) == [R, R, S, M, S, R, E, SP, E, R]


def test_convex_has_no_diagonals():
    assert decompose_polygon(make_circle_polyline(1.0)) == []
    assert decompose_polygon(make_circle_polyline(1.0, clockwise=True)) == []


def test_monotone_comb_has_no_diagonals():
    # the teeth point along +y, so the comb is already monotone along x
    assert decompose_polygon(comb_polygon(4)) == []


def test_l_shape_diagonal():
    assert decompose_polygon(l_shape()) == [(3, 5)]


def test_clockwise_input_uses_caller_indices():
    pts = l_shape()[::-1]
    assert decompose_polygon(pts) == [(2, 0)]
    assert decompose_polygon(pts, clockwise=True) == [(2, 0)]


def test_star_diagonals():
    assert as_set(decompose_polygon(star_polygon(5))) == {frozenset((1, 3)), frozenset((7, 9))}


def test_paper_example_split_vertex():
    # only the notch on the right side (vertex 7) opens against the sweep
    diagonals = decompose_polygon(paper_example())
    assert len(diagonals) == 1
    assert diagonals[0][0] == 7
    n = len(paper_example())
    for a, b in diagonals:
        assert (a - b) % n not in (0, 1, n - 1)


def test_partition_l_shape():
    assert partition_polygon(l_shape()) == [[3, 4, 5], [5, 0, 1, 2, 3]]


def test_partition_keeps_winding():
    pts = l_shape()[::-1]
    loops = partition_polygon(pts)
    assert loops == [[0, 1, 2], [2, 3, 4, 5, 0]]
    for loop in loops:
        assert polygon_is_clockwise([pts[i] for i in loop])


def test_partition_loops_are_monotone():
    pts = paper_example()
    for loop in partition_polygon(pts):
        xs = [pts[i][0] for i in loop]
        # an x-monotone loop changes direction along x exactly twice
        k = len(xs)
        turns = 0
        for i in range(k):
            before = xs[i] - xs[i - 1]
            after = xs[(i + 1) % k] - xs[i]
            if before * after < 0:
                turns += 1
        assert turns == 2


def test_left_edge_lookup_without_candidates():
    with pytest.raises(InvariantError):
        find_left_edge(l_shape(), set(), 3)


def test_too_few_points():
    with pytest.raises(PreconditionError):
        decompose_polygon([(0, 0), (1, 1)])
    with pytest.raises(PreconditionError):
        partition_polygon([])


def test_split_monotone_matches_partition():
    for pts in (l_shape(), l_shape()[::-1], star_polygon(5), paper_example()):
        clockwise = polygon_is_clockwise(pts)
        diagonals = decompose_polygon(pts, clockwise)
        assert split_monotone(len(pts), diagonals, clockwise) == partition_polygon(pts)
