"""
Tests for ShortestPathEngine.

Tests cover:
- compute_all() on empty, isolated and connected networks
- Snapshot isolation, idempotence and monotonicity
- format() line order and unreachable marker
"""

import math

import numpy as np
import pytest

from src.route_network.adapters.algorithms.floyd_warshall import (
    IterativeFloydWarshallSolver,
)
from src.route_network.exceptions import AirportNotFoundError
from src.route_network.graph.airport_registry import AirportRegistry
from src.route_network.graph.distance_matrix import UNREACHABLE, DistanceMatrix
from src.route_network.schemas.shortest_paths import ShortestPathResult
from src.route_network.services.route_manager import RouteManager
from src.route_network.services.shortest_path_engine import ShortestPathEngine


class TestComputeAll:
    """Tests for compute_all()."""

    def test_empty_network(self, engine: ShortestPathEngine):
        """No airports is not an error: the result is empty."""
        result = engine.compute_all()

        assert result.size == 0
        assert engine.format(result) == []

    def test_path_through_intermediate(self, manager: RouteManager, engine: ShortestPathEngine):
        """A - B = 5, B - C = 3, no direct A - C: shortest A - C is 8."""
        manager.add_route("A", "B", 5)
        manager.add_route("B", "C", 3)

        result = engine.compute_all()

        assert result.airports == ("A", "B", "C")
        assert result.distance("A", "C") == 8.0
        assert result.distance("C", "A") == 8.0

    def test_isolated_airport(
        self,
        registry: AirportRegistry,
        matrix: DistanceMatrix,
        manager: RouteManager,
        engine: ShortestPathEngine,
    ):
        """An airport with no routes is 0 from itself and unreachable otherwise."""
        manager.add_route("A", "B", 5)
        registry.index_of("Lonely")
        matrix.ensure_capacity(registry.count())

        result = engine.compute_all()

        assert result.distance("Lonely", "Lonely") == 0.0
        assert result.distance("Lonely", "A") == UNREACHABLE
        assert result.distance("B", "Lonely") == UNREACHABLE

    def test_result_is_frozen(self, manager: RouteManager, engine: ShortestPathEngine):
        """Returned distances cannot be modified."""
        manager.add_route("A", "B", 5)
        result = engine.compute_all()

        with pytest.raises(ValueError):
            result.distances[0, 1] = 1.0

    def test_result_unaffected_by_later_routes(
        self, manager: RouteManager, engine: ShortestPathEngine
    ):
        """A result is a snapshot; later routes do not change it."""
        manager.add_route("A", "B", 5)
        result = engine.compute_all()

        manager.add_route("A", "B", 1)
        manager.add_route("B", "C", 1)

        assert result.airports == ("A", "B")
        assert result.distance("A", "B") == 5.0

    def test_source_matrix_not_modified(
        self, manager: RouteManager, matrix: DistanceMatrix, engine: ShortestPathEngine
    ):
        """Shortest distances are never written back to the direct matrix."""
        manager.add_route("A", "B", 5)
        manager.add_route("B", "C", 3)

        engine.compute_all()

        assert matrix.get_distance(0, 2) == UNREACHABLE

    def test_idempotent(self, manager: RouteManager, engine: ShortestPathEngine):
        """Two computations without new routes give identical results."""
        manager.add_route("A", "B", 5)
        manager.add_route("B", "C", 3)
        manager.add_route("C", "D", 2.5)

        assert engine.compute_all() == engine.compute_all()

    def test_monotonic_under_new_routes(self, manager: RouteManager, engine: ShortestPathEngine):
        """Adding a route never increases an existing shortest distance."""
        rng = np.random.default_rng(11)
        names = [f"N{i}" for i in range(7)]
        for i in range(len(names) - 1):
            manager.add_route(names[i], names[i + 1], int(rng.integers(10, 100)))

        before = engine.compute_all()
        for _ in range(5):
            a, b = rng.choice(names, size=2, replace=False)
            manager.add_route(str(a), str(b), int(rng.integers(1, 100)))
            after = engine.compute_all()

            n = before.size
            assert np.all(after.distances[:n, :n] <= before.distances)
            before = after

    def test_uses_injected_solver(self, registry: AirportRegistry, matrix: DistanceMatrix):
        """A custom solver is used for the computation."""
        engine = ShortestPathEngine(registry, matrix, solver=IterativeFloydWarshallSolver())
        RouteManager(registry, matrix).add_route("A", "B", 2)

        assert engine.solver.name == "Floyd-Warshall (iterative)"
        assert engine.compute_all().distance("B", "A") == 2.0


class TestFormat:
    """Tests for format()."""

    def test_lines_in_pair_order(self, manager: RouteManager, engine: ShortestPathEngine):
        """i ascending outer, j ascending inner, diagonal included."""
        manager.add_route("A", "B", 5)
        manager.add_route("B", "C", 3)

        lines = engine.format(engine.compute_all())

        assert lines == [
            "From A to A: 0",
            "From A to B: 5",
            "From A to C: 8",
            "From B to A: 5",
            "From B to B: 0",
            "From B to C: 3",
            "From C to A: 8",
            "From C to B: 3",
            "From C to C: 0",
        ]

    def test_unreachable_marker(self, manager: RouteManager, engine: ShortestPathEngine):
        """The sentinel renders as INF, never as a number."""
        manager.add_route("A", "B", 5)
        manager.add_route("C", "D", 7)

        lines = engine.format(engine.compute_all())

        assert "From A to C: INF" in lines
        assert "From D to B: INF" in lines
        assert not any("inf" in line for line in lines)

    def test_custom_marker_and_fractional_distance(
        self, registry: AirportRegistry, matrix: DistanceMatrix
    ):
        """The marker is configurable; fractions show two decimals."""
        engine = ShortestPathEngine(registry, matrix, unreachable_label="unreachable")
        manager = RouteManager(registry, matrix)
        manager.add_route("A", "B", 2.25)
        registry.index_of("C")
        matrix.ensure_capacity(3)

        lines = engine.format(engine.compute_all())

        assert "From A to B: 2.25" in lines
        assert "From A to C: unreachable" in lines

    def test_line_count(self, manager: RouteManager, engine: ShortestPathEngine):
        """n airports give n * n lines."""
        for i in range(4):
            manager.add_route(f"X{i}", f"X{i + 1}", 1)

        assert len(engine.format(engine.compute_all())) == 25

    def test_foreign_result(self, engine: ShortestPathEngine):
        """A result larger than the registry cannot be named."""
        foreign = ShortestPathResult(airports=("Q",), distances=np.zeros((1, 1)))

        with pytest.raises(AirportNotFoundError):
            engine.format(foreign)

    @pytest.mark.parametrize("value,expected", [(0.0, "0"), (math.inf, "INF"), (7.5, "7.50")])
    def test_format_distance(self, engine: ShortestPathEngine, value, expected):
        """Single values render as in the report lines."""
        assert engine.format_distance(value) == expected
