"""
Coordinate capability layer.

A CoordType describes one fixed-width integer representation (8 to 128 bits,
signed or unsigned) and provides every conversion the traversal algorithms
need, so the same algorithm runs unmodified over any width:
- ZERO / ONE constants
- from_f32 / into_f32: truncating and widening float32 conversions
- into_diff / from_diff: bridge to the signed difference type of equal width
- signum / abs_diff / sub_diff / add_diff: checked difference arithmetic

Values themselves are plain Python ints. Python ints never wrap, so every
conversion range-checks explicitly and raises CoordOverflowError where a
fixed-width machine integer would overflow. Float math is done in
numpy.float32 to keep single-precision rounding.

Twelve built-in types are registered: U8..I128 plus the platform-width
USIZE/ISIZE (numpy uintp/intp). ISIZE is the default coordinate type.
"""

import math
import operator
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union

import numpy as np

from .errors import CoordOverflowError
from .types import Point


@dataclass(frozen=True)
class CoordType:
    """
    A fixed-width integer coordinate representation.

    Attributes:
        name: Short name ("u8", "i64", "isize", ...)
        bits: Bit width
        signed: True for two's-complement signed types
        dtype: Matching numpy dtype, or None when numpy has none (128-bit)
    """
    name: str
    bits: int
    signed: bool
    dtype: Optional[np.dtype] = None

    ZERO = 0
    ONE = 1

    # -------------------------------------------------------------------------
    # Range
    # -------------------------------------------------------------------------

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def diff(self) -> "CoordType":
        """Signed type of equal width used for deltas (self if already signed)."""
        if self.signed:
            return self
        return _SIGNED_COUNTERPART[self.name]

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def check(self, value, what: str = "coordinate") -> int:
        """
        Validate that value is an integer inside this type's range.

        Returns:
            value as a plain int

        Raises:
            TypeError: value is not an integer (floats are rejected)
            CoordOverflowError: value is outside [min, max]
        """
        value = operator.index(value)
        if not self.contains(value):
            raise CoordOverflowError(
                f"{what} {value} out of range for {self.name} [{self.min}, {self.max}]"
            )
        return value

    def check_point(self, point, what: str = "point") -> Point:
        x, y = point
        return (self.check(x, f"{what} x"), self.check(y, f"{what} y"))

    # -------------------------------------------------------------------------
    # Float conversions
    # -------------------------------------------------------------------------

    def from_f32(self, value) -> int:
        """
        Truncate a float toward zero into this type.

        Out-of-range values saturate at min/max and NaN maps to 0, matching a
        native float-to-int cast.
        """
        v = float(np.float32(value))
        if math.isnan(v):
            return 0
        if v >= self.max:
            return self.max
        if v <= self.min:
            return self.min
        return math.trunc(v)

    def into_f32(self, value: int) -> np.float32:
        return np.float32(value)

    def diff_into_f32(self, value: int) -> np.float32:
        return np.float32(value)

    # -------------------------------------------------------------------------
    # Difference bridge
    # -------------------------------------------------------------------------

    def into_diff(self, value: int) -> int:
        """
        Convert a coordinate into the signed difference type.

        Raises:
            CoordOverflowError: unsigned value above the signed maximum
                (e.g. u8 value >= 128)
        """
        value = operator.index(value)
        if not self.diff.contains(value):
            raise CoordOverflowError(
                "unsigned coord values must be small enough to be convertible "
                f"to the corresponding signed type ({value} does not fit {self.diff.name})"
            )
        return value

    def from_diff(self, value: int) -> int:
        """
        Convert a difference value back into this coordinate type.

        Raises:
            CoordOverflowError: value outside this type's range
        """
        value = operator.index(value)
        if not self.contains(value):
            raise CoordOverflowError(
                "expected difference between coord values to fall in range "
                f"of the coord type ({value} does not fit {self.name})"
            )
        return value

    def signum(self, value: int) -> int:
        return (value > 0) - (value < 0)

    def abs_diff(self, value: int) -> int:
        """
        Absolute value in the difference type.

        Raises:
            CoordOverflowError: on the most negative value, which has no
                positive counterpart in two's complement
        """
        if value == self.diff.min:
            raise CoordOverflowError(
                f"attempt to negate with overflow: abs({value}) does not fit {self.diff.name}"
            )
        return abs(value)

    def sub_diff(self, a: int, b: int) -> int:
        result = a - b
        if not self.diff.contains(result):
            raise CoordOverflowError(
                f"attempt to subtract with overflow: {a} - {b} does not fit {self.diff.name}"
            )
        return result

    def add_diff(self, a: int, b: int) -> int:
        result = a + b
        if not self.diff.contains(result):
            raise CoordOverflowError(
                f"attempt to add with overflow: {a} + {b} does not fit {self.diff.name}"
            )
        return result

    def __repr__(self) -> str:
        return f"CoordType({self.name})"


# =============================================================================
# Rounding
# =============================================================================


def round_half_away(value) -> np.float32:
    """
    Round a float32 to the nearest integer, ties away from zero.

    numpy.round rounds ties to even, which would shift line points on exact
    half steps. The addition happens in double precision so values just
    below .5 (e.g. 0.49999997) are not pushed over.
    """
    v = float(value)
    if not math.isfinite(v):
        return np.float32(v)
    return np.float32(math.copysign(math.floor(abs(v) + 0.5), v))


# =============================================================================
# Built-in types
# =============================================================================

_PTR_BITS = np.dtype(np.intp).itemsize * 8

I8 = CoordType("i8", 8, True, np.dtype(np.int8))
U8 = CoordType("u8", 8, False, np.dtype(np.uint8))
I16 = CoordType("i16", 16, True, np.dtype(np.int16))
U16 = CoordType("u16", 16, False, np.dtype(np.uint16))
I32 = CoordType("i32", 32, True, np.dtype(np.int32))
U32 = CoordType("u32", 32, False, np.dtype(np.uint32))
I64 = CoordType("i64", 64, True, np.dtype(np.int64))
U64 = CoordType("u64", 64, False, np.dtype(np.uint64))
I128 = CoordType("i128", 128, True)
U128 = CoordType("u128", 128, False)
ISIZE = CoordType("isize", _PTR_BITS, True, np.dtype(np.intp))
USIZE = CoordType("usize", _PTR_BITS, False, np.dtype(np.uintp))

DEFAULT_COORD = ISIZE

COORD_TYPES: Dict[str, CoordType] = {
    t.name: t for t in (U8, I8, U16, I16, U32, I32, U64, I64, U128, I128, USIZE, ISIZE)
}

_SIGNED_COUNTERPART = {
    "u8": I8,
    "u16": I16,
    "u32": I32,
    "u64": I64,
    "u128": I128,
    "usize": ISIZE,
}

_ALIASES = {
    "int8": "i8", "uint8": "u8",
    "int16": "i16", "uint16": "u16",
    "int32": "i32", "uint32": "u32",
    "int64": "i64", "uint64": "u64",
    "int128": "i128", "uint128": "u128",
    "intp": "isize", "uintp": "usize",
}

CoordSpec = Union[CoordType, str, type, np.dtype]


def resolve_coord(spec: CoordSpec = None) -> CoordType:
    """
    Resolve a coordinate type specification.

    Accepts:
        - None or the builtin int: DEFAULT_COORD (isize)
        - a CoordType
        - a registered name or alias ("u8", "uint8", "isize", ...)
        - a numpy integer dtype-like (np.int16, np.dtype("uint32"))

    Raises:
        ValueError: unknown name or non-integer dtype
        TypeError: unsupported spec object
    """
    if spec is None or spec is int:
        return DEFAULT_COORD
    if isinstance(spec, CoordType):
        return spec
    if isinstance(spec, str):
        name = _ALIASES.get(spec.lower(), spec.lower())
        if name in COORD_TYPES:
            return COORD_TYPES[name]
        # Fall through: numpy understands spellings like "<i4"

    try:
        dtype = np.dtype(spec)
    except TypeError as e:
        if isinstance(spec, str):
            raise ValueError(f"Unknown coordinate type: {spec!r}") from e
        raise TypeError(f"Unsupported coordinate type spec: {spec!r}") from e

    if dtype.kind not in ("i", "u"):
        raise ValueError(f"Coordinate type must be an integer dtype, got {dtype}")

    return COORD_TYPES[f"{dtype.kind}{dtype.itemsize * 8}"]


def points_to_array(points: Iterable[Point], coord: CoordSpec = None) -> np.ndarray:
    """
    Materialize points into an (N, 2) array of the coordinate dtype.

    128-bit types have no numpy dtype; they use an object array of ints.
    """
    coord = resolve_coord(coord)
    dtype = coord.dtype if coord.dtype is not None else object
    rows = [coord.check_point(p) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=dtype)
    return np.array(rows, dtype=dtype)
