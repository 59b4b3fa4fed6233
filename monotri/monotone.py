"""
Linear-time triangulation of a polygon that is monotone along the sweep axis.

Two-chain stack algorithm from "Computational Geometry: Algorithms and
Applications" (de Berg, van Kreveld, Overmars; 2nd ed., section 3.3).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import PreconditionError
from .orientation import polygon_is_clockwise, triangle_is_clockwise
from .points import Point
from .sorting import sort_indices


def triangulate_monotone(points: Sequence[Point], loop: Sequence[int],
                         clockwise: Optional[bool] = None,
                         output: Optional[List[int]] = None) -> List[int]:
    """
    Triangulate one monotone loop.

    :param points: Point data the loop indexes into.
    :param loop: Indices into `points` forming a monotone polygon.
    :param clockwise: Winding of the loop; computed when omitted. Every
        emitted triangle gets this winding.
    :param output: List to append triangle indices to; a new one by default.
    :returns: `output`, extended by 3 * (len(loop) - 2) indices into `points`.
    """
    count = len(loop)
    if count < 3:
        raise PreconditionError(f"Expected monotone loop with 3 or more vertices, got {count}")

    if output is None:
        output = []

    if count == 3:
        output.extend(loop)
        return output

    # no special case for 4 vertices: a quad from the splitter may be concave

    poly = [points[i] for i in loop]
    if clockwise is None:
        clockwise = polygon_is_clockwise(poly)

    def add_triangle(a: int, b: int, c: int) -> None:
        # the sweep emits triangles in no particular winding; fix each one up
        if triangle_is_clockwise(poly[a], poly[b], poly[c]) != clockwise:
            b, c = c, b
        output.extend((loop[a], loop[b], loop[c]))

    # positions in the loop, in sweep order
    order = sort_indices(poly)

    # a position is on the second chain when it lies in the cyclic interval
    # from the sweep-last vertex (included) to the sweep-first one (excluded)
    second_start = order[-1]
    second_end = order[0]

    def on_second_chain(i: int) -> bool:
        if second_start > second_end:
            return i >= second_start or i < second_end
        return second_start <= i < second_end

    stack = [order[0], order[1]]

    for k in range(2, count - 1):
        cur = order[k]
        top = stack[-1]

        if on_second_chain(cur) != on_second_chain(top):
            # opposite chains: fan over the whole stack
            for j in range(len(stack) - 1):
                add_triangle(cur, stack[j], stack[j + 1])
            stack = [top, cur]
            continue

        # same chain. top is cur's neighbour along it; whether it comes
        # before or after cur in loop order, together with the winding,
        # tells if the interior lies below (upper chain) or above cur
        upper_chain = (cur == (top + 1) % count) == clockwise
        cx, cy = poly[cur]
        last = stack.pop()

        while stack:
            nxt = stack[-1]
            lx, ly = poly[last]
            nx, ny = poly[nxt]
            turn = (lx - cx) * (ny - cy) - (ly - cy) * (nx - cx)
            # stop once the diagonal cur -> nxt would leave the polygon
            if (turn <= 0) if upper_chain else (turn >= 0):
                break
            stack.pop()
            add_triangle(cur, last, nxt)
            last = nxt

        stack.append(last)
        stack.append(cur)

    final = order[-1]
    for j in range(len(stack) - 1):
        add_triangle(final, stack[j], stack[j + 1])

    return output
