"""
Route Manager Service - validates and records user-submitted routes.

Coordinates the interaction between:
- AirportRegistry (name -> index)
- DistanceMatrix (direct distances)
"""

from __future__ import annotations

import decimal
import logging
import math
import numbers
from typing import TYPE_CHECKING, Any, List, Optional

import pandas as pd

from src.route_network.exceptions import (
    REASON_BAD_DISTANCE,
    REASON_EMPTY_NAME,
    REASON_SAME_AIRPORT,
    InvalidRouteError,
)
from src.route_network.schemas.route import Route, RouteSchema

if TYPE_CHECKING:
    from src.route_network.graph.airport_registry import AirportRegistry
    from src.route_network.graph.distance_matrix import DistanceMatrix

logger = logging.getLogger(__name__)


def parse_distance(value: Any) -> Optional[float]:
    """
    Coerce a user-supplied distance to a positive finite float.

    Accepts real numbers (including numpy scalars), Decimal, and plain
    numeric strings such as " 250 ", "12.5" or "1e3". Strings with digit
    separators ("1_000") are not accepted. Booleans are not distances.
    Values too large for a float are rejected.

    Returns:
        The distance as float, or None if it is not usable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        candidate = value.strip()
        if "_" in candidate:
            return None
    elif isinstance(value, (numbers.Real, decimal.Decimal)):
        candidate = value
    else:
        return None

    try:
        distance = float(candidate)
    except (OverflowError, ValueError):
        return None

    if not math.isfinite(distance) or distance <= 0:
        return None
    return distance


class RouteManager:
    """
    Domain service for adding routes to the network.

    Every check runs before the registry is touched, so a rejected route
    registers neither of its airports and leaves the matrix unchanged.
    Not thread-safe; AirportNetwork serialises access.

    Attributes:
        _registry: Airport name/index registry.
        _matrix: Direct distance matrix.
    """

    def __init__(self, registry: AirportRegistry, matrix: DistanceMatrix) -> None:
        """
        Initialize the route manager.

        Args:
            registry: Registry that assigns airport indices.
            matrix: Matrix that stores direct distances.
        """
        self._registry = registry
        self._matrix = matrix

    def add_route(self, from_airport: str, to_airport: str, distance: Any) -> Route:
        """
        Record an undirected route between two airports.

        New airport names are registered. A route that already exists is
        overwritten with the new distance.

        Args:
            from_airport: Name of one end.
            to_airport: Name of the other end.
            distance: Positive number, or a string holding one.

        Returns:
            The accepted Route.

        Raises:
            InvalidRouteError: With reason "empty airport name",
                "same airport" or "bad distance".
        """
        if not _is_name(from_airport) or not _is_name(to_airport):
            raise InvalidRouteError(REASON_EMPTY_NAME, from_airport, to_airport)
        if from_airport == to_airport:
            raise InvalidRouteError(REASON_SAME_AIRPORT, from_airport, to_airport)
        weight = parse_distance(distance)
        if weight is None:
            raise InvalidRouteError(REASON_BAD_DISTANCE, from_airport, to_airport)

        # Validation passed; from here on nothing can fail.
        i = self._registry.index_of(from_airport)
        j = self._registry.index_of(to_airport)
        self._matrix.ensure_capacity(max(i, j) + 1)
        self._matrix.set_distance(i, j, weight)

        route = Route(from_airport=from_airport, to_airport=to_airport, distance=weight)
        logger.info(route.describe())
        return route

    def add_routes(self, routes_df: pd.DataFrame) -> List[Route]:
        """
        Bulk-load routes from a DataFrame.

        The whole frame is validated against RouteSchema first; if any row
        fails, nothing is recorded.

        Args:
            routes_df: Columns from_airport, to_airport, distance.

        Returns:
            Accepted routes in row order.

        Raises:
            pandera.errors.SchemaError: If the frame fails validation.
        """
        validated = RouteSchema.validate(routes_df)

        routes = [
            self.add_route(row.from_airport, row.to_airport, row.distance)
            for row in validated.itertuples(index=False)
        ]
        logger.debug("Bulk-loaded %d routes", len(routes))
        return routes

    def routes(self) -> List[Route]:
        """Known direct routes, each undirected pair listed once."""
        return [
            Route(
                from_airport=self._registry.name_of(i),
                to_airport=self._registry.name_of(j),
                distance=weight,
            )
            for i, j, weight in self._matrix.edges()
        ]


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value)
