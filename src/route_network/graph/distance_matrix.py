"""
Distance Matrix - symmetric, growable table of direct route distances.

Backed by a float64 numpy array that is reallocated geometrically as
airports are added. Only the top-left size x size block is meaningful.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, Tuple

import numpy as np

from src.route_network.exceptions import AirportNotFoundError, InvalidEdgeError

logger = logging.getLogger(__name__)

# =============================================================================
# SENTINEL: "no known direct route"
# =============================================================================
#
# float64 +inf. inf + x == inf for every non-negative x (finite or not) and
# inf never compares smaller than a finite distance, so the relaxation
# dist[i][k] + dist[k][j] < dist[i][j] can neither overflow nor invent a
# shortcut through an unknown edge. The one limit is saturation: a path
# whose finite legs sum above ~1.8e308 becomes indistinguishable from the
# sentinel.
UNREACHABLE: float = math.inf

DTYPE = np.float64


def _blank(capacity: int) -> np.ndarray:
    """Square array filled with the sentinel and a zero diagonal."""
    data = np.full((capacity, capacity), UNREACHABLE, dtype=DTYPE)
    np.fill_diagonal(data, 0.0)
    return data


class DistanceMatrix:
    """
    Symmetric matrix of direct route distances indexed by airport index.

    Diagonal cells are always 0, unset off-diagonal cells hold UNREACHABLE,
    and every write updates (i, j) and (j, i) together.

    Attributes:
        _data: Backing array, capacity x capacity.
        _size: Number of valid rows/columns.
    """

    def __init__(self, initial_capacity: int = 0) -> None:
        """
        Initialize an empty matrix.

        Args:
            initial_capacity: Rows/columns to preallocate. The logical size
                starts at 0 regardless.
        """
        if initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {initial_capacity}")
        self._data = _blank(initial_capacity)
        self._size = 0

    @property
    def size(self) -> int:
        """Number of valid indices (0 .. size - 1)."""
        return self._size

    @property
    def capacity(self) -> int:
        """Allocated rows/columns; always >= size."""
        return self._data.shape[0]

    def ensure_capacity(self, n: int) -> None:
        """
        Make indices up to n - 1 valid.

        Existing values are preserved. Cells that become valid read as
        UNREACHABLE off the diagonal and 0 on it. Never shrinks.

        Args:
            n: Required logical size.
        """
        if n <= self._size:
            return

        if n > self.capacity:
            new_capacity = max(n, 2 * self.capacity)
            grown = _blank(new_capacity)
            old = self.capacity
            grown[:old, :old] = self._data
            self._data = grown
            logger.debug("Distance matrix grown from %d to %d", old, new_capacity)

        self._size = n

    def set_distance(self, i: int, j: int, weight: float) -> None:
        """
        Record a direct route between i and j in both directions.

        A second call for the same pair overwrites the first.

        Raises:
            InvalidEdgeError: If i == j or weight is not a positive finite number.
            AirportNotFoundError: If i or j is outside [0, size).
        """
        self._check_index(i)
        self._check_index(j)
        if i == j:
            raise InvalidEdgeError(i, j, weight, "self-loop")
        if not math.isfinite(weight) or weight <= 0:
            raise InvalidEdgeError(i, j, weight, "weight must be positive and finite")

        self._data[i, j] = weight
        self._data[j, i] = weight

    def get_distance(self, i: int, j: int) -> float:
        """
        Direct distance between i and j.

        Returns:
            0 when i == j, UNREACHABLE if no route was set, else the weight.

        Raises:
            AirportNotFoundError: If i or j is outside [0, size).
        """
        self._check_index(i)
        self._check_index(j)
        return float(self._data[i, j])

    def snapshot(self, n: int) -> np.ndarray:
        """
        Independent copy of the top-left n x n block.

        Args:
            n: Block size, 0 <= n <= size.

        Returns:
            New writable float64 array; later writes to the matrix do not
            affect it.
        """
        if not 0 <= n <= self._size:
            raise ValueError(f"snapshot size must be in [0, {self._size}], got {n}")
        return self._data[:n, :n].copy()

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """
        Iterate known direct routes as (i, j, weight) with i < j.

        Pairs are yielded in row-major order.
        """
        block = self._data[: self._size, : self._size]
        rows, cols = np.nonzero(np.triu(np.isfinite(block), k=1))
        for i, j in zip(rows.tolist(), cols.tolist()):
            yield i, j, float(block[i, j])

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not 0 <= index < self._size:
            raise AirportNotFoundError(index, "distance matrix")
