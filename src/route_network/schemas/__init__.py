"""
Schema definitions for the route network.

Frozen dataclasses for single values, Pandera models for DataFrames.
"""

from .route import Route, RouteSchema, format_number
from .shortest_paths import ShortestDistanceSchema, ShortestPathResult

__all__ = [
    # Routes
    "Route",
    "RouteSchema",
    "format_number",
    # Results
    "ShortestDistanceSchema",
    "ShortestPathResult",
]
