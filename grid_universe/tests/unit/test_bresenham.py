"""
Unit tests for grid_iters/bresenham.py.

Coverage:
1. Known-answer sequences (horizontal, vertical, four diagonals, single point)
2. Slope properties in all eight octant directions:
   - first point is start, last point is end
   - driving axis moves by exactly +-1 per step
   - following axis is monotone and moves by at most 1 per step
3. Same results across every built-in coordinate type
4. Overflow detection on construction
5. Iterator protocol (exhaustion, copy, to_array)
"""

import copy

import numpy as np
import pytest

from grid_core.coord import COORD_TYPES, I8, I128, ISIZE, U8, U16
from grid_core.errors import CoordOverflowError
from grid_iters.bresenham import LineTraversal, line_points


# =============================================================================
# Helpers
# =============================================================================


def assert_expected_sequence(it, expected_coords):
    """Iterator yields exactly expected_coords, in order, then stops."""
    for expected in expected_coords:
        actual = next(it, None)
        assert actual == expected, f"expected {expected}, got {actual}"

    assert next(it, None) is None, "iterator must not yield any extraneous points"


def check_coords_sequence(coords_sequence, coord=None):
    """Line from first to last point yields exactly coords_sequence."""
    assert coords_sequence

    it = LineTraversal(coords_sequence[0], coords_sequence[-1], coord)
    assert_expected_sequence(it, coords_sequence)


def check_slope(start_point, end_point):
    """Property checks for a line that is neither horizontal nor vertical."""
    assert start_point[0] != end_point[0] and start_point[1] != end_point[1]

    points = list(LineTraversal(start_point, end_point))

    assert points[0] == start_point
    assert points[-1] == end_point

    delta_x = end_point[0] - start_point[0]
    delta_y = end_point[1] - start_point[1]
    is_line_steep = abs(delta_y) > abs(delta_x)

    # Driving axis visits every value between the endpoints exactly once
    assert len(points) == max(abs(delta_x), abs(delta_y)) + 1

    for last_point, point in zip(points, points[1:]):
        if is_line_steep:
            slower, last_slower, slower_delta = point[0], last_point[0], delta_x
            faster, last_faster, faster_delta = point[1], last_point[1], delta_y
        else:
            slower, last_slower, slower_delta = point[1], last_point[1], delta_y
            faster, last_faster, faster_delta = point[0], last_point[0], delta_x

        assert (slower_delta > 0 and slower >= last_slower) or (
            slower_delta < 0 and slower <= last_slower
        ), f"coordinates must change monotonically: {last_point} -> {point}"

        assert abs(slower - last_slower) <= 1, f"following axis jumped: {last_point} -> {point}"

        assert faster - last_faster == np.sign(faster_delta), (
            f"driving axis must change by exactly one unit: {last_point} -> {point}"
        )


# =============================================================================
# Known-answer sequences
# =============================================================================


class TestKnownSequences:

    def test_single_point(self):
        check_coords_sequence([(4, 6)])

    def test_horizontal_right(self):
        check_coords_sequence([(-12, 2), (-11, 2), (-10, 2), (-9, 2), (-8, 2), (-7, 2)])

    def test_horizontal_left(self):
        check_coords_sequence([(20, 8), (19, 8), (18, 8), (17, 8), (16, 8)])

    def test_vertical_up(self):
        check_coords_sequence([(5, 4), (5, 3), (5, 2)])

    def test_vertical_down(self):
        check_coords_sequence([(-9, 1), (-9, 2), (-9, 3)])

    def test_diagonal_right_up(self):
        check_coords_sequence([(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)])

    def test_diagonal_right_down(self):
        check_coords_sequence([(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)])

    def test_diagonal_left_up(self):
        check_coords_sequence([(5, 5), (4, 4), (3, 3), (2, 2), (1, 1)])

    def test_diagonal_left_down(self):
        check_coords_sequence([(5, 1), (4, 2), (3, 3), (2, 4), (1, 5)])

    def test_half_step_rounds_away_from_zero(self):
        # step_b = 0.5: b goes 0, 0.5, 1.0 -> rounded 0, 1, 1
        assert line_points((0, 0), (2, 1)) == [(0, 0), (1, 1), (2, 1)]
        assert line_points((0, 0), (2, -1)) == [(0, 0), (1, -1), (2, -1)]

    def test_gentle_slope(self):
        # step_b = 1/3: b goes 0, .33, .67, 1.0
        assert line_points((0, 0), (3, 1)) == [(0, 0), (1, 0), (2, 1), (3, 1)]

    def test_steep_slope(self):
        assert line_points((0, 0), (1, 3)) == [(0, 0), (0, 1), (1, 2), (1, 3)]

    def test_new_alias(self):
        assert list(LineTraversal.new((1, 5), (5, 1))) == [(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)]


# =============================================================================
# Slope properties
# =============================================================================


class TestSlopes:

    @pytest.mark.parametrize("start,end", [
        ((2, 5), (10, 20)),       # steep increase
        ((10, 20), (2, 5)),       # steep increase reversed
        ((11, 30), (15, -12)),    # steep decrease
        ((15, -12), (11, 30)),    # steep decrease reversed
        ((-20, 5), (-2, 6)),      # gentle increase
        ((-2, 6), (-20, 5)),      # gentle increase reversed
        ((15, 2), (30, 0)),       # gentle decrease
        ((30, 0), (15, 2)),       # gentle decrease reversed
        ((0, 0), (200, 77)),
        ((-50, 40), (13, -61)),
    ])
    def test_slope_properties(self, start, end):
        check_slope(start, end)

    @pytest.mark.parametrize("start,end,steep", [
        ((0, 0), (5, 2), False),
        ((0, 0), (2, 5), True),
        ((0, 0), (3, 3), False),   # equal deltas are not steep
        ((0, 0), (0, 4), True),
        ((0, 0), (0, 0), False),
    ])
    def test_steepness(self, start, end, steep):
        assert LineTraversal(start, end).is_line_steep is steep


# =============================================================================
# Coordinate types
# =============================================================================


class TestCoordTypes:

    @pytest.mark.parametrize("name", sorted(COORD_TYPES))
    def test_same_sequence_for_every_type(self, name):
        check_coords_sequence([(1, 5), (2, 4), (3, 3), (4, 2), (5, 1)], name)
        assert line_points((2, 5), (10, 20), name) == line_points((2, 5), (10, 20))

    def test_default_coord_is_isize(self):
        assert LineTraversal((0, 0), (1, 1)).coord is ISIZE

    def test_unsigned_walks_down_to_zero(self):
        assert line_points((3, 0), (0, 3), U8) == [(3, 0), (2, 1), (1, 2), (0, 3)]

    def test_numpy_scalar_endpoints(self):
        points = line_points((np.uint16(1), np.uint16(1)), (np.uint16(3), np.uint16(2)), U16)
        assert points == [(1, 1), (2, 2), (3, 2)]
        assert all(type(v) is int for p in points for v in p)

    def test_i128_driving_axis_stays_exact(self):
        start = (2**100, 0)
        end = (2**100 + 3, 3)
        assert line_points(start, end, I128) == [
            (2**100, 0), (2**100 + 1, 1), (2**100 + 2, 2), (2**100 + 3, 3),
        ]

    def test_i8_full_width_within_range(self):
        points = line_points((-64, 0), (63, 0), I8)
        assert len(points) == 128
        assert points[0] == (-64, 0)
        assert points[-1] == (63, 0)


# =============================================================================
# Overflow
# =============================================================================


class TestOverflow:

    def test_large_unsigned_coord(self):
        with pytest.raises(
            CoordOverflowError,
            match="unsigned coord values must be small enough to be convertible to the corresponding signed type",
        ):
            LineTraversal((250, 108), (0, 9), U8)

    def test_large_signed_coord_diff(self):
        with pytest.raises(CoordOverflowError, match="overflow"):
            LineTraversal((-120, 5), (120, 25), I8)

    def test_most_negative_delta(self):
        with pytest.raises(CoordOverflowError, match="negate with overflow"):
            LineTraversal((0, 0), (-128, 0), I8)

    def test_endpoint_out_of_type_range(self):
        with pytest.raises(CoordOverflowError, match="end x"):
            LineTraversal((0, 0), (300, 0), U8)

    def test_negative_unsigned_endpoint(self):
        with pytest.raises(CoordOverflowError):
            LineTraversal((-1, 0), (5, 0), U8)

    def test_non_integer_endpoint(self):
        with pytest.raises(TypeError):
            LineTraversal((0.5, 0), (5, 0))

    def test_overflow_is_overflow_error(self):
        with pytest.raises(OverflowError):
            LineTraversal((200, 0), (0, 0), U8)


# =============================================================================
# Iterator protocol
# =============================================================================


class TestIteratorProtocol:

    def test_iter_returns_self(self):
        it = LineTraversal((0, 0), (2, 0))
        assert iter(it) is it

    def test_exhausted_stays_exhausted(self):
        it = LineTraversal((0, 0), (1, 1))
        assert list(it) == [(0, 0), (1, 1)]
        for _ in range(5):
            with pytest.raises(StopIteration):
                next(it)

    def test_single_point_then_exhausted(self):
        it = LineTraversal((7, -3), (7, -3))
        assert next(it) == (7, -3)
        assert next(it, None) is None

    def test_copy_is_independent_snapshot(self):
        it = LineTraversal((0, 0), (6, 2))
        next(it)
        snapshot = copy.copy(it)

        rest = list(it)
        assert list(snapshot) == rest
        assert next(it, None) is None

    def test_to_array(self):
        arr = LineTraversal((1, 5), (5, 1), U8).to_array()
        assert arr.dtype == np.uint8
        np.testing.assert_array_equal(arr, [[1, 5], [2, 4], [3, 3], [4, 2], [5, 1]])

    def test_to_array_consumes_remaining(self):
        it = LineTraversal((0, 0), (3, 0))
        next(it)
        arr = it.to_array()
        np.testing.assert_array_equal(arr, [[1, 0], [2, 0], [3, 0]])
        assert it.to_array().shape == (0, 2)

    def test_repr(self):
        text = repr(LineTraversal((0, 0), (4, 1), U8))
        assert text.startswith("LineTraversal(coord=u8")
