"""
Custom exceptions for the route_network package.

Provides a hierarchy of exceptions so callers can tell a rejected route
apart from a lookup miss or a bad configuration value. Every error is
recoverable: a rejected operation leaves the network unchanged.
"""

from typing import Any

# Reasons carried by InvalidRouteError
REASON_SAME_AIRPORT = "same airport"
REASON_BAD_DISTANCE = "bad distance"
REASON_EMPTY_NAME = "empty airport name"


class RouteNetworkError(Exception):
    """Base exception for all route_network errors."""

    pass


class InvalidRouteError(RouteNetworkError):
    """Raised when a user-submitted route is rejected."""

    def __init__(
        self,
        reason: str,
        from_airport: Any = None,
        to_airport: Any = None,
    ) -> None:
        self.reason = reason
        self.from_airport = from_airport
        self.to_airport = to_airport
        message = f"Invalid route {from_airport!r} -> {to_airport!r}: {reason}"
        super().__init__(message)


class InvalidEdgeError(RouteNetworkError):
    """Raised when a matrix edge is a self-loop or has a non-positive weight."""

    def __init__(self, i: int, j: int, weight: Any, reason: str) -> None:
        self.i = i
        self.j = j
        self.weight = weight
        self.reason = reason
        message = f"Invalid edge ({i}, {j}) with weight {weight!r}: {reason}"
        super().__init__(message)


class AirportNotFoundError(RouteNetworkError):
    """Raised when an airport index or name is not registered."""

    def __init__(self, key: Any, context: str = "registry") -> None:
        self.key = key
        message = f"Airport {key!r} not found in {context}"
        super().__init__(message)


class InvalidAirportNameError(RouteNetworkError):
    """Raised when an airport name is empty or not a string."""

    def __init__(self, name: Any) -> None:
        self.name = name
        message = f"Airport name must be a non-empty string, got {name!r}"
        super().__init__(message)


class ConfigurationError(RouteNetworkError):
    """Raised when a configuration value is invalid."""

    def __init__(self, setting: str, value: Any, expected: str) -> None:
        self.setting = setting
        self.value = value
        message = f"Invalid value {value!r} for {setting}: expected {expected}"
        super().__init__(message)
