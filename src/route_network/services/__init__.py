"""
Domain services for the route network.

Services orchestrate the graph components and the solver ports.
"""

from src.route_network.services.route_manager import RouteManager, parse_distance
from src.route_network.services.shortest_path_engine import ShortestPathEngine

__all__ = ["RouteManager", "ShortestPathEngine", "parse_distance"]
