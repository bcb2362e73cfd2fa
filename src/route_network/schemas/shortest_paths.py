"""
Shortest path result schemas.

ShortestPathResult is the immutable snapshot returned by every all-pairs
computation; ShortestDistanceSchema is its long-form DataFrame contract.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.route_network.exceptions import AirportNotFoundError
from src.route_network.graph.distance_matrix import UNREACHABLE


class ShortestDistanceSchema(pa.DataFrameModel):
    """
    Schema for a flattened shortest path result.

    One row per ordered airport pair, diagonal included.
    """

    from_airport: Series[str] = pa.Field(nullable=False)
    to_airport: Series[str] = pa.Field(nullable=False)
    distance: Series[float] = pa.Field(
        ge=0,
        description="Shortest distance; +inf when no path exists",
    )
    reachable: Series[bool] = pa.Field(nullable=False)

    class Config:
        strict = True
        coerce = True
        name = "ShortestDistanceSchema"
        ordered = True


@dataclass(frozen=True, eq=False)
class ShortestPathResult:
    """
    Immutable all-pairs shortest distances at one point in time.

    distances[i, j] is the shortest known distance from airports[i] to
    airports[j], or UNREACHABLE when no path existed. The array is
    read-only.

    Note: eq=False because the generated __eq__ would compare numpy arrays
    element-wise; __eq__ below compares by value instead.

    Attributes:
        airports: Airport names in index order.
        distances: Square float64 array, len(airports) on each side.
    """

    airports: Tuple[str, ...]
    distances: np.ndarray

    def __post_init__(self) -> None:
        """Validate shape against the airport list."""
        n = len(self.airports)
        if self.distances.shape != (n, n):
            raise ValueError(
                f"distances shape {self.distances.shape} does not match "
                f"{n} airports"
            )

    @classmethod
    def empty(cls) -> "ShortestPathResult":
        """Result for a network with no airports."""
        distances = np.zeros((0, 0), dtype=np.float64)
        distances.flags.writeable = False
        return cls(airports=(), distances=distances)

    @property
    def size(self) -> int:
        """Number of airports covered."""
        return len(self.airports)

    def __len__(self) -> int:
        return len(self.airports)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortestPathResult):
            return NotImplemented
        return self.airports == other.airports and np.array_equal(
            self.distances, other.distances
        )

    def __hash__(self) -> int:
        return hash((self.airports, self.distances.tobytes()))

    def distance(self, from_airport: str, to_airport: str) -> float:
        """
        Shortest distance between two airports by name.

        Raises:
            AirportNotFoundError: If either airport is not part of the result.
        """
        return float(self.distances[self._index(from_airport), self._index(to_airport)])

    def is_reachable(self, from_airport: str, to_airport: str) -> bool:
        """True if some path connected the airports at computation time."""
        return self.distance(from_airport, to_airport) != UNREACHABLE

    def to_frame(self) -> DataFrame[ShortestDistanceSchema]:
        """
        Flatten to one row per ordered pair (i ascending, then j ascending).

        Returns:
            DataFrame validated against ShortestDistanceSchema.
        """
        n = self.size
        names = np.array(self.airports, dtype=object)
        flat = self.distances.reshape(-1)
        frame = pd.DataFrame(
            {
                "from_airport": np.repeat(names, n),
                "to_airport": np.tile(names, n),
                "distance": flat,
                "reachable": flat != UNREACHABLE,
            }
        )
        return ShortestDistanceSchema.validate(frame)

    def _index(self, airport: str) -> int:
        try:
            return self.airports.index(airport)
        except ValueError:
            raise AirportNotFoundError(airport, "shortest path result") from None
