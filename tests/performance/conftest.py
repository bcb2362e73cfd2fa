"""
Shared fixtures for performance benchmarks.

Graphs are built once per module so only the solver is measured.
"""

import numpy as np
import pytest

from src.route_network.application.airport_network import AirportNetwork

BENCH_AIRPORTS = 120


def _random_weights(n: int, density: float, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    weights = np.full((n, n), np.inf)
    mask = np.triu(rng.random((n, n)) < density, k=1)
    values = rng.integers(1, 1000, size=(n, n)).astype(np.float64)
    weights[mask] = values[mask]
    weights = np.minimum(weights, weights.T)
    np.fill_diagonal(weights, 0.0)
    return weights


@pytest.fixture(scope="module")
def sparse_weights() -> np.ndarray:
    """120 airports, roughly 5% of pairs directly connected."""
    return _random_weights(BENCH_AIRPORTS, 0.05, seed=1)


@pytest.fixture(scope="module")
def dense_weights() -> np.ndarray:
    """120 airports, roughly 60% of pairs directly connected."""
    return _random_weights(BENCH_AIRPORTS, 0.6, seed=2)


@pytest.fixture(scope="module")
def loaded_network(sparse_weights: np.ndarray) -> AirportNetwork:
    """Network holding the sparse benchmark graph."""
    network = AirportNetwork()
    n = sparse_weights.shape[0]
    for i in range(n):
        for j in range(i + 1, n):
            if np.isfinite(sparse_weights[i, j]):
                network.add_route(f"AP{i:03d}", f"AP{j:03d}", sparse_weights[i, j])
    return network
