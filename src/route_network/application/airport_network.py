"""
AirportNetwork Use Case - Public API for the route network.

This module provides the main entry point for callers such as a UI or the
command-line script. It wires the registry, matrix, route manager and
shortest path engine together from configuration.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple, Type

import pandas as pd

from src.route_network.adapters.algorithms.floyd_warshall import (
    FloydWarshallSolver,
    IterativeFloydWarshallSolver,
)
from src.route_network.config import (
    SOLVER_ITERATIVE,
    SOLVER_VECTORIZED,
    RouteNetworkConfig,
)
from src.route_network.exceptions import ConfigurationError, InvalidRouteError
from src.route_network.graph.airport_registry import AirportRegistry
from src.route_network.graph.distance_matrix import DistanceMatrix
from src.route_network.ports.shortest_path_solver import ShortestPathSolver
from src.route_network.schemas.route import Route
from src.route_network.schemas.shortest_paths import ShortestPathResult
from src.route_network.services.route_manager import RouteManager
from src.route_network.services.shortest_path_engine import ShortestPathEngine

logger = logging.getLogger(__name__)

REPORT_HEADER = "Shortest distances between all pairs of airports:"

SOLVERS: Dict[str, Type[ShortestPathSolver]] = {
    SOLVER_VECTORIZED: FloydWarshallSolver,
    SOLVER_ITERATIVE: IterativeFloydWarshallSolver,
}


def build_solver(name: str) -> ShortestPathSolver:
    """
    Instantiate a solver by its configuration name.

    Raises:
        ConfigurationError: If name is not a known solver.
    """
    try:
        return SOLVERS[name]()
    except KeyError:
        raise ConfigurationError("solver", name, " or ".join(SOLVERS)) from None


class AirportNetwork:
    """
    Public API for building a route network and querying shortest distances.

    Safe to share between threads: route additions and the snapshot taken
    by compute_all() are serialised by one lock, and the solver then runs
    on the private snapshot without holding it.

    Example usage:
        >>> network = AirportNetwork()
        >>> network.add_route("Dhaka", "Delhi", 5)
        >>> network.add_route("Delhi", "Dubai", 3)
        >>> result = network.compute_all()
        >>> result.distance("Dhaka", "Dubai")
        8.0

    Attributes:
        _config: Active configuration.
        _registry: Airport registry.
        _matrix: Direct distance matrix.
        _manager: Route validation and recording.
        _engine: Shortest path computation and formatting.
        _lock: Guards registry and matrix.
    """

    def __init__(
        self,
        config: Optional[RouteNetworkConfig] = None,
        solver: Optional[ShortestPathSolver] = None,
    ) -> None:
        """
        Initialize an empty network.

        Args:
            config: Settings. Defaults to RouteNetworkConfig().
            solver: Custom algorithm. If None, built from config.solver.
        """
        self._config = config or RouteNetworkConfig()

        self._registry = AirportRegistry()
        self._matrix = DistanceMatrix(initial_capacity=self._config.initial_capacity)
        self._manager = RouteManager(self._registry, self._matrix)
        self._engine = ShortestPathEngine(
            self._registry,
            self._matrix,
            solver=solver or build_solver(self._config.solver),
            unreachable_label=self._config.unreachable_label,
        )
        self._lock = threading.RLock()

        logger.info(
            "AirportNetwork initialized with %s algorithm", self._engine.solver.name
        )

    @classmethod
    def from_env(cls) -> "AirportNetwork":
        """Build a network configured from ROUTE_NETWORK_* variables."""
        return cls(config=RouteNetworkConfig.from_env())

    @property
    def config(self) -> RouteNetworkConfig:
        """Active configuration."""
        return self._config

    @property
    def airports(self) -> Tuple[str, ...]:
        """Registered airports in index order."""
        with self._lock:
            return self._registry.names()

    def add_route(self, from_airport: str, to_airport: str, distance: Any) -> Route:
        """
        Add or overwrite an undirected route.

        Args:
            from_airport: Name of one end.
            to_airport: Name of the other end.
            distance: Positive number, or a numeric string.

        Returns:
            The accepted Route.

        Raises:
            InvalidRouteError: If the route is rejected; nothing is recorded.
        """
        with self._lock:
            try:
                return self._manager.add_route(from_airport, to_airport, distance)
            except InvalidRouteError as e:
                logger.warning("Route rejected: %s", e)
                raise

    def add_routes(self, routes_df: pd.DataFrame) -> List[Route]:
        """
        Bulk-load routes from a DataFrame (from_airport, to_airport, distance).

        Raises:
            pandera.errors.SchemaError: If the frame fails validation;
                nothing is recorded.
        """
        with self._lock:
            return self._manager.add_routes(routes_df)

    def routes(self) -> List[Route]:
        """Known direct routes, each undirected pair once."""
        with self._lock:
            return self._manager.routes()

    def compute_all(self) -> ShortestPathResult:
        """
        Shortest distances between all registered airports.

        Returns:
            Frozen ShortestPathResult; empty if no routes were added yet.
        """
        with self._lock:
            airports = self._registry.names()
            weights = self._matrix.snapshot(len(airports))
        return self._engine.solve_snapshot(airports, weights)

    def format(self, result: ShortestPathResult) -> List[str]:
        """Display lines for a result, one per ordered airport pair."""
        with self._lock:
            return self._engine.format(result)

    def report(self, result: Optional[ShortestPathResult] = None) -> List[str]:
        """
        Header line followed by the formatted result.

        Args:
            result: Result to render. If None, a fresh one is computed.

        Returns:
            Report lines.
        """
        if result is None:
            result = self.compute_all()
        return [REPORT_HEADER, *self.format(result)]
