"""
grid_iters: Lazy point sequences for grid algorithms.

Traversals:
- bresenham.py: LineTraversal, points on a line between two endpoints
- perimeter.py: PerimeterTraversal, rectangle border clockwise from top-left

Both are generic over the coordinate type (see grid_core.coord).
"""

from .base import GridTraversal
from .bresenham import LineTraversal, line_points
from .perimeter import PerimeterTraversal, perimeter_points

__all__ = [
    "GridTraversal",
    "LineTraversal",
    "PerimeterTraversal",
    "line_points",
    "perimeter_points",
]
