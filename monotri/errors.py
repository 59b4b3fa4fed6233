"""Exceptions raised by the triangulation engine."""


class TriangulationError(Exception):
    """Base class for every error raised by monotri."""


class PreconditionError(TriangulationError, ValueError):
    """The caller passed input the engine cannot work with (e.g. < 3 points)."""


class InvariantError(TriangulationError, RuntimeError):
    """
    An internal invariant broke.

    For valid simple polygons this never happens; it usually means the input
    was self-intersecting or degenerate.
    """


class PolygonFormatError(TriangulationError, ValueError):
    """A .poly or .tri file could not be parsed."""
