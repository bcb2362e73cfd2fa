"""
Configuration module for the route network.

Loads settings from environment variables (optionally via a .env file)
and validates them once, at construction time.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from src.route_network.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "ROUTE_NETWORK_"

SOLVER_VECTORIZED = "vectorized"
SOLVER_ITERATIVE = "iterative"
SOLVER_NAMES: Tuple[str, ...] = (SOLVER_VECTORIZED, SOLVER_ITERATIVE)

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Airports offered to route pickers. Routes are not limited to these.
AIRPORT_CATALOGUE: Tuple[str, ...] = (
    "Dhaka",
    "Sylhet",
    "Chattogram",
    "Saidpur",
    "Delhi",
    "Dubai",
    "Paris",
    "Barishal",
    "London",
    "NewYork",
)


@dataclass(frozen=True)
class RouteNetworkConfig:
    """
    Immutable route network settings.

    Attributes:
        unreachable_label: Text shown instead of the unreachable sentinel.
        solver: All-pairs solver to use ('vectorized' or 'iterative').
        initial_capacity: Rows/columns preallocated by the distance matrix.
        log_level: Root log level used by the command-line entry point.
    """

    unreachable_label: str = "INF"
    solver: str = SOLVER_VECTORIZED
    initial_capacity: int = 16
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.unreachable_label:
            raise ConfigurationError(
                "unreachable_label", self.unreachable_label, "a non-empty string"
            )
        if self.solver not in SOLVER_NAMES:
            raise ConfigurationError("solver", self.solver, " or ".join(SOLVER_NAMES))
        if self.initial_capacity < 0:
            raise ConfigurationError(
                "initial_capacity", self.initial_capacity, "an integer >= 0"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError("log_level", self.log_level, ", ".join(LOG_LEVELS))

    @classmethod
    def from_env(cls) -> "RouteNetworkConfig":
        """
        Build the configuration from ROUTE_NETWORK_* environment variables.

        Unset variables fall back to the dataclass defaults.

        Returns:
            Validated RouteNetworkConfig instance.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        defaults = cls()

        capacity_raw = _getenv("INITIAL_CAPACITY")
        if capacity_raw is None:
            initial_capacity = defaults.initial_capacity
        else:
            try:
                initial_capacity = int(capacity_raw)
            except ValueError:
                raise ConfigurationError(
                    "initial_capacity", capacity_raw, "an integer >= 0"
                ) from None

        return cls(
            unreachable_label=_getenv("UNREACHABLE_LABEL") or defaults.unreachable_label,
            solver=(_getenv("SOLVER") or defaults.solver).lower(),
            initial_capacity=initial_capacity,
            log_level=(_getenv("LOG_LEVEL") or defaults.log_level).upper(),
        )


def _getenv(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return None
    value = value.strip()
    return value or None
