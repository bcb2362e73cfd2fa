"""
Shortest Path Engine - all-pairs shortest distances over the route graph.

Copies the current distance matrix, hands the copy to a solver and
freezes the outcome, so a result never changes after it is returned.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from src.route_network.adapters.algorithms.floyd_warshall import FloydWarshallSolver
from src.route_network.adapters.algorithms.immutability import make_immutable
from src.route_network.graph.distance_matrix import UNREACHABLE
from src.route_network.schemas.route import format_number
from src.route_network.schemas.shortest_paths import ShortestPathResult

if TYPE_CHECKING:
    from src.route_network.graph.airport_registry import AirportRegistry
    from src.route_network.graph.distance_matrix import DistanceMatrix
    from src.route_network.ports.shortest_path_solver import ShortestPathSolver

logger = logging.getLogger(__name__)

DEFAULT_UNREACHABLE_LABEL = "INF"


class ShortestPathEngine:
    """
    Domain service computing shortest distances between all airports.

    Each compute_all() works on its own snapshot of the matrix: routes added
    afterwards never show up in a result that was already returned.

    Attributes:
        _registry: Source of airport count and names.
        _matrix: Source of direct distances.
        _solver: All-pairs algorithm adapter.
        _unreachable_label: Text rendered for the unreachable sentinel.
    """

    def __init__(
        self,
        registry: AirportRegistry,
        matrix: DistanceMatrix,
        solver: Optional[ShortestPathSolver] = None,
        unreachable_label: str = DEFAULT_UNREACHABLE_LABEL,
    ) -> None:
        """
        Initialize the engine.

        Args:
            registry: Airport registry.
            matrix: Direct distance matrix.
            solver: Algorithm to use. Defaults to FloydWarshallSolver.
            unreachable_label: Marker shown instead of the sentinel.
        """
        self._registry = registry
        self._matrix = matrix
        self._solver = solver if solver is not None else FloydWarshallSolver()
        self._unreachable_label = unreachable_label

    @property
    def solver(self) -> ShortestPathSolver:
        """Algorithm adapter in use."""
        return self._solver

    def compute_all(self) -> ShortestPathResult:
        """
        Shortest distance between every ordered pair of registered airports.

        Returns:
            Frozen ShortestPathResult; empty if no airports are registered.
        """
        n = self._registry.count()
        if n == 0:
            logger.debug("No airports registered, returning empty result")
            return ShortestPathResult.empty()

        return self.solve_snapshot(self._registry.names(), self._matrix.snapshot(n))

    def solve_snapshot(
        self, airports: Sequence[str], weights: np.ndarray
    ) -> ShortestPathResult:
        """
        Run the solver over an already-taken snapshot.

        Lets callers take the snapshot under their own lock and solve
        outside it.

        Args:
            airports: Airport names in index order.
            weights: Private n x n copy of the distance matrix.

        Returns:
            Frozen ShortestPathResult.
        """
        n = len(airports)
        if n == 0:
            return ShortestPathResult.empty()

        start_time = time.perf_counter()
        distances = make_immutable(self._solver.solve(weights))
        elapsed = time.perf_counter() - start_time

        logger.info(
            "Computed shortest paths for %d airports with %s in %.3fms",
            n,
            self._solver.name,
            elapsed * 1000,
        )
        return ShortestPathResult(airports=tuple(airports), distances=distances)

    def format(self, result: ShortestPathResult) -> List[str]:
        """
        Render a result as one display line per ordered pair.

        Lines run over i ascending, then j ascending, the diagonal
        included, e.g. "From Dhaka to Delhi: 8". The unreachable sentinel
        is shown as the configured marker.

        Args:
            result: Result from compute_all().

        Returns:
            Display lines; empty for an empty result.

        Raises:
            AirportNotFoundError: If the result covers indices this
                engine's registry never assigned.
        """
        n = result.size
        names = [self._registry.name_of(i) for i in range(n)]
        distances = result.distances.tolist()

        return [
            f"From {names[i]} to {names[j]}: {self.format_distance(distances[i][j])}"
            for i in range(n)
            for j in range(n)
        ]

    def format_distance(self, value: float) -> str:
        """Render one distance, mapping the sentinel to the marker."""
        if value == UNREACHABLE:
            return self._unreachable_label
        return format_number(value)
