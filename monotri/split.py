"""
Split a polygon index cycle into loops along a set of diagonals.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .errors import InvariantError

logger = logging.getLogger(__name__)

Diagonal = Tuple[int, int]


def loop_between(indices: Sequence[int], start: int, end: int) -> List[int]:
    """
    Walk the cycle forward from start until end, both included.

    For example, on the cycle [0, 1, 2, 3, 4, 5], loop_between(.., 1, 4) gives
    [1, 2, 3, 4] and loop_between(.., 4, 1) gives [4, 5, 0, 1].
    """
    count = len(indices)
    try:
        i = indices.index(start)
    except ValueError:
        raise InvariantError(f"Diagonal endpoint {start} is not part of the loop {list(indices)}") from None

    out = [start]
    while True:
        i = (i + 1) % count
        index = indices[i]
        out.append(index)
        if index == end:
            return out
        if index == start:
            raise InvariantError(
                f"Walk from {start} never reached {end}; possibly invalid split diagonal ({start}, {end})"
            )


def split_polygon(indices: Sequence[int], diagonals: Sequence[Diagonal],
                  flip: bool = False) -> List[List[int]]:
    """
    Split the index cycle `indices` along `diagonals`.

    Each diagonal (a, b) adds an edge from index a to index b. Diagonals must
    not cross each other. The returned loops keep the winding of `indices`,
    or are reversed when `flip` is set. Loops come out depth-first, the
    "forward" side of each diagonal before the other one.
    """
    loops: List[List[int]] = []
    work: List[Tuple[List[int], List[Diagonal]]] = [(list(indices), list(diagonals))]

    while work:
        cycle, diags = work.pop()

        if not diags:
            loops.append(cycle[::-1] if flip else cycle)
            continue

        start, end = diags[0]
        a_loop = loop_between(cycle, start, end)
        b_loop = loop_between(cycle, end, start)
        a_set, b_set = set(a_loop), set(b_loop)

        a_diags: List[Diagonal] = []
        b_diags: List[Diagonal] = []
        for d_start, d_end in diags[1:]:
            if d_start in a_set and d_end in a_set:
                a_diags.append((d_start, d_end))
            elif d_start in b_set and d_end in b_set:
                b_diags.append((d_start, d_end))
            else:
                raise InvariantError(f"Invalid split diagonal ({d_start}, {d_end})")

        # stack: push B first so A is emitted first
        work.append((b_loop, b_diags))
        work.append((a_loop, a_diags))

    logger.debug("split %d vertices with %d diagonals into %d loops", len(indices), len(diagonals), len(loops))
    return loops
