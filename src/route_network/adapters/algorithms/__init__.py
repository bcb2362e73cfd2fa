"""
All-pairs shortest path algorithm adapters.
"""

from src.route_network.adapters.algorithms.floyd_warshall import (
    FloydWarshallSolver,
    IterativeFloydWarshallSolver,
)
from src.route_network.adapters.algorithms.immutability import (
    is_immutable,
    make_defensive_copy,
    make_immutable,
)

__all__ = [
    "FloydWarshallSolver",
    "IterativeFloydWarshallSolver",
    "is_immutable",
    "make_defensive_copy",
    "make_immutable",
]
