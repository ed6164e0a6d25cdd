"""
grid_core: Coordinate primitives for grid traversal.

Provides:
- coord: CoordType capability layer and the twelve built-in integer types
- errors: CoordOverflowError, InvalidGeometryError
- types: Point, Dimensions
- log: setup_logger for scripts
"""

from .coord import (
    COORD_TYPES,
    DEFAULT_COORD,
    I8, I16, I32, I64, I128, ISIZE,
    U8, U16, U32, U64, U128, USIZE,
    CoordType,
    points_to_array,
    resolve_coord,
    round_half_away,
)
from .errors import CoordOverflowError, GridTraversalError, InvalidGeometryError

__all__ = [
    "COORD_TYPES",
    "DEFAULT_COORD",
    "I8", "I16", "I32", "I64", "I128", "ISIZE",
    "U8", "U16", "U32", "U64", "U128", "USIZE",
    "CoordType",
    "CoordOverflowError",
    "GridTraversalError",
    "InvalidGeometryError",
    "points_to_array",
    "resolve_coord",
    "round_half_away",
]
