"""
Application layer for the route network.

Provides the public API: a facade that handles dependency wiring and
exposes a simple interface to presentation code.
"""

from src.route_network.application.airport_network import (
    REPORT_HEADER,
    AirportNetwork,
    build_solver,
)

__all__ = ["AirportNetwork", "REPORT_HEADER", "build_solver"]
