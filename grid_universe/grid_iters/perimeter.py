"""
Rectangle perimeter traversal.

Yields the border points of an axis-aligned rectangle clockwise, starting
at the top-left corner (y grows downward):
- top edge left -> right
- right edge top -> bottom
- bottom edge right -> left
- left edge bottom -> top

Degenerate rectangles (single row or single column) walk their one line and
stop. Zero width or height yields nothing. Each border point is produced
exactly once.
"""

import logging
from typing import Optional

from grid_core.coord import CoordSpec, CoordType, resolve_coord
from grid_core.errors import CoordOverflowError, InvalidGeometryError
from grid_core.types import Dimensions, Point

from .base import GridTraversal

logger = logging.getLogger(__name__)


class PerimeterTraversal(GridTraversal):
    """
    Points on the perimeter of a rectangle, clockwise from top-left.

    Build with with_dimensions() or with_corners().
    """

    def __init__(self, left: int, top: int, width: int, height: int, coord: CoordType):
        self.coord = coord
        self._left = left
        self._top = top
        self._width = width
        self._height = height
        self._right = left + width - 1
        self._bottom = top + height - 1

        is_empty = width == 0 or height == 0
        self._current_point: Optional[Point] = None if is_empty else (left, top)

        if is_empty:
            logger.debug("PerimeterTraversal at (%s, %s) is empty (%sx%s)", left, top, width, height)
        else:
            logger.debug(
                "PerimeterTraversal (%s, %s)-(%s, %s) %sx%s (%s)",
                left, top, self._right, self._bottom, width, height, coord.name,
            )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def with_dimensions(cls, origin: Point, dimensions: Dimensions,
                        coord: CoordSpec = None) -> "PerimeterTraversal":
        """
        Rectangle from its top-left corner and (width, height).

        Raises:
            InvalidGeometryError: negative width or height
            CoordOverflowError: a value, or the far corner
                (left + width - 1, top + height - 1), does not fit the type
        """
        c = resolve_coord(coord)
        left, top = c.check_point(origin, "origin")
        width, height = dimensions

        if width < 0 or height < 0:
            raise InvalidGeometryError(
                f"width and height must be non-negative, got ({width}, {height})"
            )

        width = c.check(width, "width")
        height = c.check(height, "height")

        if width > 0 and height > 0:
            if not c.contains(left + width - 1) or not c.contains(top + height - 1):
                raise CoordOverflowError(
                    f"rectangle at ({left}, {top}) with size ({width}, {height}) "
                    f"extends past the range of {c.name}"
                )

        return cls(left, top, width, height, c)

    @classmethod
    def with_corners(cls, top_left: Point, bottom_right: Point,
                     coord: CoordSpec = None) -> "PerimeterTraversal":
        """
        Rectangle from inclusive top-left and bottom-right corners.

        Same as with_dimensions(top_left, (right - left + 1, bottom - top + 1)).

        Raises:
            InvalidGeometryError: left > right or top > bottom
            CoordOverflowError: a corner, or the resulting width/height, does
                not fit the type
        """
        c = resolve_coord(coord)
        left, top = c.check_point(top_left, "top_left")
        right, bottom = c.check_point(bottom_right, "bottom_right")

        if left > right or top > bottom:
            raise InvalidGeometryError(
                f"corners must satisfy left <= right and top <= bottom, "
                f"got ({left}, {top}) and ({right}, {bottom})"
            )

        return cls.with_dimensions((left, top), (right - left + 1, bottom - top + 1), c)

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def __next__(self) -> Point:
        if self._current_point is None:
            raise StopIteration

        current_point = self._current_point
        next_point = self._next_point(current_point)

        self._current_point = None if self._is_initial_point(next_point) else next_point

        return current_point

    def _is_initial_point(self, point: Point) -> bool:
        x, y = point
        return x == self._left and y == self._top

    def _next_point(self, current_point: Point) -> Point:
        assert self._width > 0 and self._height > 0, "assuming non-empty rect at this point"

        x, y = current_point
        assert (
            x == self._left or x == self._right or y == self._top or y == self._bottom
        ), "current point must always be on perimeter"

        degenerate = self._try_next_point_degenerate(current_point)
        if degenerate is not None:
            return degenerate

        return self._next_point_regular(current_point)

    def _try_next_point_degenerate(self, current_point: Point) -> Optional[Point]:
        x, y = current_point

        if self._width == 1:
            # Single column: walk down, wrap to top
            assert x == self._left
            return (self._left, self._top + (y - self._top + 1) % self._height)

        if self._height == 1:
            # Single row: walk right, wrap to left
            assert y == self._top
            return (self._left + (x - self._left + 1) % self._width, self._top)

        return None

    def _next_point_regular(self, current_point: Point) -> Point:
        assert self._width > 1, "regular case assumes more than one column"
        assert self._height > 1, "regular case assumes more than one row"

        left, top, right, bottom = self._left, self._top, self._right, self._bottom
        x, y = current_point

        if left < x < right:
            if y == top:
                return (x + 1, y)  # Top side, go right
            return (x - 1, y)  # Bottom side, go left

        if top < y < bottom:
            if x == left:
                return (x, y - 1)  # Left side, go up
            return (x, y + 1)  # Right side, go down

        if x == left and y == top:
            return (x + 1, y)
        if x == right and y == top:
            return (x, y + 1)
        if x == right and y == bottom:
            return (x - 1, y)

        assert x == left and y == bottom, "all options must have been exhausted"
        return (x, y - 1)

    def __repr__(self) -> str:
        return (
            f"PerimeterTraversal(coord={self.coord.name}, left={self._left}, top={self._top}, "
            f"width={self._width}, height={self._height}, current={self._current_point})"
        )


def perimeter_points(origin: Point, dimensions: Dimensions, coord: CoordSpec = None) -> list:
    """All points of PerimeterTraversal.with_dimensions(origin, dimensions, coord) as a list."""
    return list(PerimeterTraversal.with_dimensions(origin, dimensions, coord))
