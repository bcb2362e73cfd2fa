"""
In-memory route graph: airport indices and the direct distance matrix.
"""

from src.route_network.graph.airport_registry import AirportRegistry
from src.route_network.graph.distance_matrix import UNREACHABLE, DistanceMatrix

__all__ = [
    "AirportRegistry",
    "DistanceMatrix",
    "UNREACHABLE",
]
