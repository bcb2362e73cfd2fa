"""
Shared fixtures for route network tests.
"""

import pytest

from src.route_network.application.airport_network import AirportNetwork
from src.route_network.graph.airport_registry import AirportRegistry
from src.route_network.graph.distance_matrix import DistanceMatrix
from src.route_network.services.route_manager import RouteManager
from src.route_network.services.shortest_path_engine import ShortestPathEngine


@pytest.fixture
def registry() -> AirportRegistry:
    """Empty airport registry."""
    return AirportRegistry()


@pytest.fixture
def matrix() -> DistanceMatrix:
    """Empty distance matrix with no preallocation."""
    return DistanceMatrix()


@pytest.fixture
def manager(registry: AirportRegistry, matrix: DistanceMatrix) -> RouteManager:
    """Route manager over the shared registry and matrix."""
    return RouteManager(registry, matrix)


@pytest.fixture
def engine(registry: AirportRegistry, matrix: DistanceMatrix) -> ShortestPathEngine:
    """Shortest path engine over the shared registry and matrix."""
    return ShortestPathEngine(registry, matrix)


@pytest.fixture
def network() -> AirportNetwork:
    """Empty network with default configuration."""
    return AirportNetwork()


@pytest.fixture
def chain_network(network: AirportNetwork) -> AirportNetwork:
    """A - B = 5, B - C = 3, no direct A - C route."""
    network.add_route("A", "B", 5)
    network.add_route("B", "C", 3)
    return network
