"""
Core type aliases for grid traversal.

Points are plain (x, y) tuples of ints so they unpack, compare and hash
like any other tuple.
"""

from typing import Tuple

# Grid point (x, y)
Point = Tuple[int, int]

# Rectangle extent (width, height)
Dimensions = Tuple[int, int]
