"""
monotri: simple-polygon triangulation by monotone decomposition.

    >>> from monotri import triangulate_polygon
    >>> triangulate_polygon([(1, 1), (-1, 1), (-1, -1), (1, -1)])
    [3, 1, 2, 0, 1, 3]
"""

from .errors import InvariantError, PolygonFormatError, PreconditionError, TriangulationError
from .monotone import triangulate_monotone
from .orientation import polygon_is_clockwise, polygon_signed_area, triangle_is_clockwise, triangle_signed_area
from .partition import VertexType, classify_vertices, decompose_polygon, partition_polygon
from .sorting import sort_indices
from .split import split_polygon
from .triangulate import PolygonTriangulator, triangulate_polygon, triangulate_polygon_array

__version__ = "0.1.0"

__all__ = [
    "InvariantError",
    "PolygonFormatError",
    "PolygonTriangulator",
    "PreconditionError",
    "TriangulationError",
    "VertexType",
    "classify_vertices",
    "decompose_polygon",
    "partition_polygon",
    "polygon_is_clockwise",
    "polygon_signed_area",
    "sort_indices",
    "split_polygon",
    "triangle_is_clockwise",
    "triangle_signed_area",
    "triangulate_monotone",
    "triangulate_polygon",
    "triangulate_polygon_array",
]
