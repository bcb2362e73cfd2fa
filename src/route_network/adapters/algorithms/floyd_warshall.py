"""
Floyd-Warshall solvers.

Both adapters run the same relaxation with the pivot k as the outermost
loop: every pass over k finishes before k + 1 starts, so paths through
pivots 0..k are visible when k + 1 is tried. They differ only in how the
(i, j) plane is swept for a given k.
"""

from typing import List

import numpy as np

from src.route_network.adapters.algorithms.immutability import make_defensive_copy
from src.route_network.ports.shortest_path_solver import ShortestPathSolver


def _check_square(weights: np.ndarray) -> None:
    if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
        raise ValueError(f"weights must be a square matrix, got shape {weights.shape}")


class FloydWarshallSolver(ShortestPathSolver):
    """
    Floyd-Warshall with the (i, j) plane relaxed as one numpy operation.

    For pivot k, dist[:, k, None] + dist[None, k, :] is the length of every
    i -> k -> j path; np.minimum keeps the shorter of that and dist[i, j].
    Row k and column k cannot improve during pass k (dist[k, k] == 0 and
    weights are non-negative), so updating dist in place is safe.

    O(n^3) arithmetic, O(n^2) extra memory, with the inner loops in C.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Floyd-Warshall (vectorized)"

    def solve(self, weights: np.ndarray) -> np.ndarray:
        """Relax every pivot in turn over a private copy of weights."""
        _check_square(weights)
        dist = make_defensive_copy(weights)
        n = dist.shape[0]

        for k in range(n):
            np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

        return dist


class IterativeFloydWarshallSolver(ShortestPathSolver):
    """
    Floyd-Warshall as a literal triple loop over Python floats.

    Slower than FloydWarshallSolver but a direct transcription of the
    relaxation rule; used as a cross-check and for tiny graphs.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Floyd-Warshall (iterative)"

    def solve(self, weights: np.ndarray) -> np.ndarray:
        """Relax every (k, i, j) triple in order."""
        _check_square(weights)
        dist: List[List[float]] = weights.tolist()
        n = len(dist)

        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                row_i = dist[i]
                d_ik = row_i[k]
                for j in range(n):
                    candidate = d_ik + row_k[j]
                    if candidate < row_i[j]:
                        row_i[j] = candidate

        return np.array(dist, dtype=np.float64).reshape(n, n)
