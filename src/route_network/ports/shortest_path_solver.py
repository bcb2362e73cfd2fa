"""
Shortest Path Solver port interface.

Defines the abstract contract for all-pairs shortest path algorithms.
"""

from abc import ABC, abstractmethod

import numpy as np


class ShortestPathSolver(ABC):
    """
    Abstract interface for all-pairs shortest path algorithms.

    Solvers work on plain index space: they receive an n x n weight matrix
    (0 on the diagonal, +inf where no direct route is known) and know
    nothing about airport names.

    Implementations:
    - FloydWarshallSolver: numpy, one vectorised relaxation per pivot
    - IterativeFloydWarshallSolver: literal triple loop
    """

    @abstractmethod
    def solve(self, weights: np.ndarray) -> np.ndarray:
        """
        Compute shortest distances between every ordered pair.

        Args:
            weights: Square float64 matrix of direct distances. Must not be
                modified.

        Returns:
            New square float64 matrix; +inf where no path exists.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
