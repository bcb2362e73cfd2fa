"""
Route Network - Command-line Entry Point.

Builds a network from the routes given on the command line and prints the
shortest distance between every pair of airports.

Usage:
    python -m scripts.compute_shortest_paths \\
        --route Dhaka Delhi 5 --route Delhi Dubai 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.route_network.application import AirportNetwork
from src.route_network.config import (
    AIRPORT_CATALOGUE,
    LOG_LEVELS,
    SOLVER_NAMES,
    RouteNetworkConfig,
)
from src.route_network.exceptions import InvalidRouteError

# Module-level logger
logger = logging.getLogger(__name__)

_console_handler: Optional[logging.Handler] = None


def setup_logging(level: str) -> None:
    """
    Configure the root logger to write to stderr.

    stdout is left to the report so it can be piped. Calling this again
    replaces the handler installed by the previous call.
    """
    global _console_handler

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setLevel(level)
    _console_handler.setFormatter(formatter)
    root_logger.addHandler(_console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute shortest distances between all pairs of airports"
    )
    parser.add_argument(
        "--route",
        nargs=3,
        action="append",
        default=[],
        metavar=("FROM", "TO", "DISTANCE"),
        help="Undirected route; may be repeated",
    )
    parser.add_argument("--solver", choices=SOLVER_NAMES, help="All-pairs algorithm")
    parser.add_argument("--unreachable-label", help="Text shown for unreachable pairs")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging verbosity")
    parser.add_argument(
        "--list-airports",
        action="store_true",
        help="Print the airport catalogue and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Returns:
        0 on success, 1 if any route was rejected.
    """
    args = build_parser().parse_args(argv)

    if args.list_airports:
        for airport in AIRPORT_CATALOGUE:
            print(airport)
        return 0

    env_config = RouteNetworkConfig.from_env()
    config = RouteNetworkConfig(
        unreachable_label=args.unreachable_label or env_config.unreachable_label,
        solver=args.solver or env_config.solver,
        initial_capacity=env_config.initial_capacity,
        log_level=args.log_level or env_config.log_level,
    )
    setup_logging(config.log_level)

    network = AirportNetwork(config=config)

    rejected = 0
    for from_airport, to_airport, distance in args.route:
        try:
            network.add_route(from_airport, to_airport, distance)
        except InvalidRouteError as e:
            rejected += 1
            print(f"Skipping route {from_airport} -> {to_airport}: {e.reason}", file=sys.stderr)

    logger.info(
        "Loaded %d of %d routes across %d airports",
        len(args.route) - rejected,
        len(args.route),
        len(network.airports),
    )

    for line in network.report():
        print(line)

    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
