"""
Shared base for lazily produced point sequences.
"""

from collections.abc import Iterator

import numpy as np

from grid_core.coord import CoordType, points_to_array
from grid_core.types import Point


class GridTraversal(Iterator):
    """
    Finite, non-restartable iterator over (x, y) points of one CoordType.

    Subclasses implement __next__. copy.copy() gives an independent snapshot
    of the iteration state since all state is held in immutable values.
    """

    coord: CoordType

    def __next__(self) -> Point:
        raise NotImplementedError

    def to_array(self) -> np.ndarray:
        """Consume the remaining points into an (N, 2) array of the coord dtype."""
        return points_to_array(self, self.coord)
