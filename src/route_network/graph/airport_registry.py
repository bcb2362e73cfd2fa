"""
Airport Registry - dense integer indices for airport names.

A single object owns both lookup directions, so the name <-> index
mapping stays a bijection for the registry's lifetime.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from src.route_network.exceptions import AirportNotFoundError, InvalidAirportNameError

logger = logging.getLogger(__name__)


class AirportRegistry:
    """
    Append-only mapping between airport names and indices.

    Indices are assigned in first-seen order starting at 0 and are always
    contiguous in [0, count). Names are case-sensitive; nothing is ever
    renamed, reused or removed.

    Attributes:
        _index_by_name: Name -> index lookup.
        _names: Index -> name lookup (position is the index).
    """

    def __init__(self) -> None:
        self._index_by_name: Dict[str, int] = {}
        self._names: List[str] = []

    def index_of(self, name: str) -> int:
        """
        Return the index of name, registering it first if it is new.

        Args:
            name: Airport name (any non-empty string).

        Returns:
            The airport's stable index.

        Raises:
            InvalidAirportNameError: If name is empty or not a string.
        """
        index = self.lookup(name)
        if index is not None:
            return index

        if not isinstance(name, str) or not name:
            raise InvalidAirportNameError(name)

        index = len(self._names)
        self._names.append(name)
        self._index_by_name[name] = index
        logger.debug("Registered airport %r at index %d", name, index)
        return index

    def lookup(self, name: str) -> Optional[int]:
        """Return the index of name without registering it, or None."""
        if not isinstance(name, str):
            return None
        return self._index_by_name.get(name)

    def name_of(self, index: int) -> str:
        """
        Reverse lookup of an index.

        Raises:
            AirportNotFoundError: If no airport holds that index.
        """
        if isinstance(index, bool) or not 0 <= index < len(self._names):
            raise AirportNotFoundError(index, "airport registry")
        return self._names[index]

    def count(self) -> int:
        """Number of distinct airports registered so far."""
        return len(self._names)

    def names(self) -> Tuple[str, ...]:
        """All registered names in index order."""
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._index_by_name

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))
