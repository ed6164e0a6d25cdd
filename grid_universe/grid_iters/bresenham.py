"""
Bresenham line traversal.

Yields the integer points approximating the segment between two endpoints,
start first and end last, each exactly once.

To avoid duplicating the algorithm per octant, the axes are relabeled at
construction:
- a (driving axis): the axis with the larger absolute delta, stepped by
  exactly +-1 per point (y if the line is steep, otherwise x)
- b (following axis): the other axis, advanced by delta_b / |delta_a| in
  float32 and rounded half away from zero when a point is produced

Coordinate arithmetic goes through the CoordType, so overflow of the
difference type raises CoordOverflowError at construction.
"""

import logging

import numpy as np

from grid_core.coord import CoordSpec, resolve_coord, round_half_away
from grid_core.types import Point

from .base import GridTraversal

logger = logging.getLogger(__name__)


class LineTraversal(GridTraversal):
    """
    Points on the line from start to end (inclusive).

    Args:
        start: (x, y) start point
        end: (x, y) end point
        coord: Coordinate type (default isize)

    Raises:
        CoordOverflowError: a coordinate does not fit the type, or a delta
            does not fit the signed difference type
        TypeError: non-integer coordinates

    Examples:
        >>> list(LineTraversal((1, 5), (5, 1)))
        [(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)]
    """

    def __init__(self, start: Point, end: Point, coord: CoordSpec = None):
        c = resolve_coord(coord)
        self.coord = c

        start = c.check_point(start, "start")
        end = c.check_point(end, "end")

        delta_x = c.sub_diff(c.into_diff(end[0]), c.into_diff(start[0]))
        delta_y = c.sub_diff(c.into_diff(end[1]), c.into_diff(start[1]))

        is_line_steep = c.abs_diff(delta_y) > c.abs_diff(delta_x)

        if is_line_steep:
            start_a, end_a, delta_a, start_b, delta_b = start[1], end[1], delta_y, start[0], delta_x
        else:
            start_a, end_a, delta_a, start_b, delta_b = start[0], end[0], delta_x, start[1], delta_y

        self._has_finished = False
        self._is_line_steep = is_line_steep
        self._step_a = c.signum(delta_a)
        if delta_a == 0:
            # start == end: b never advances
            self._step_b = np.float32(0.0)
        else:
            self._step_b = c.diff_into_f32(delta_b) / c.diff_into_f32(c.abs_diff(delta_a))
        self._current_a = start_a
        self._current_b = c.into_f32(start_b)
        self._end_a = end_a

        logger.debug(
            "LineTraversal %s -> %s (%s, steep=%s, step_b=%s)",
            start, end, c.name, is_line_steep, self._step_b,
        )

    @classmethod
    def new(cls, start: Point, end: Point, coord: CoordSpec = None) -> "LineTraversal":
        return cls(start, end, coord)

    @property
    def is_line_steep(self) -> bool:
        return self._is_line_steep

    def __next__(self) -> Point:
        if self._has_finished:
            raise StopIteration

        c = self.coord
        current_b_rounded = c.from_f32(round_half_away(self._current_b))

        if self._is_line_steep:
            current_point = (current_b_rounded, self._current_a)
        else:
            current_point = (self._current_a, current_b_rounded)

        if self._current_a == self._end_a:
            self._has_finished = True
        else:
            self._current_a = c.from_diff(c.add_diff(c.into_diff(self._current_a), self._step_a))
            self._current_b = np.float32(self._current_b + self._step_b)

        return current_point

    def __repr__(self) -> str:
        return (
            f"LineTraversal(coord={self.coord.name}, steep={self._is_line_steep}, "
            f"current_a={self._current_a}, end_a={self._end_a}, finished={self._has_finished})"
        )


def line_points(start: Point, end: Point, coord: CoordSpec = None) -> list:
    """All points of LineTraversal(start, end, coord) as a list."""
    return list(LineTraversal(start, end, coord))
