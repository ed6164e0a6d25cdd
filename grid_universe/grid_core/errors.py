"""
Exception types for grid traversal.

Both classes signal broken caller contracts rather than operational failures:
- CoordOverflowError: a value does not fit its coordinate/difference type
- InvalidGeometryError: a rectangle with negative extent or swapped corners

Nothing in this project catches them; they propagate to the caller.
"""


class GridTraversalError(Exception):
    """Base class for all grid traversal errors."""


class CoordOverflowError(GridTraversalError, OverflowError):
    """Value cannot be represented in the requested integer type."""


class InvalidGeometryError(GridTraversalError, ValueError):
    """Rectangle dimensions or corners are inconsistent."""
