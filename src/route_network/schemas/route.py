"""
Route schemas using Pandera.

Defines the input contract for routes, both one at a time (Route) and in
bulk as a DataFrame (RouteSchema).
"""

from dataclasses import dataclass

import numpy as np
import pandera as pa
from pandera.typing import Series


class RouteSchema(pa.DataFrameModel):
    """
    Schema for bulk route loading.

    Each row is one undirected route between two distinct airports.
    """

    from_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Airport at one end of the route",
    )
    to_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Airport at the other end of the route",
    )
    distance: Series[float] = pa.Field(
        gt=0,
        nullable=False,
        description="Route distance (km in the original data)",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"

    @pa.check("distance")
    def distance_is_finite(cls, series: Series[float]) -> Series[bool]:
        """Reject infinite distances (gt=0 lets +inf through)."""
        return np.isfinite(series)

    @pa.dataframe_check
    def airports_are_distinct(cls, df) -> Series[bool]:
        """A route may not start and end at the same airport."""
        return df["from_airport"] != df["to_airport"]


@dataclass(frozen=True)
class Route:
    """
    Immutable record of an accepted route.

    Returned by RouteManager.add_route and produced when listing the
    known direct routes of a network.
    """

    from_airport: str
    to_airport: str
    distance: float

    def describe(self) -> str:
        """Human-readable confirmation line."""
        return (
            f"Route added: {self.from_airport} to {self.to_airport} "
            f"with distance {format_number(self.distance)}"
        )


def format_number(value: float) -> str:
    """Render integral values without a decimal part, others with two decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
