"""
Port interfaces for the route network.

Ports define the abstract interfaces the services depend on; adapters
provide the concrete implementations.
"""

from src.route_network.ports.shortest_path_solver import ShortestPathSolver

__all__ = ["ShortestPathSolver"]
