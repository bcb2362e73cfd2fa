"""
Immutability utilities for distance arrays.

Results handed out by the engine are shared with callers; freezing the
underlying numpy array makes any attempt to mutate them fail loudly
instead of silently corrupting a snapshot.
"""

import numpy as np


def make_immutable(array: np.ndarray) -> np.ndarray:
    """
    Make an array read-only in place (zero-copy).

    Args:
        array: Array to freeze.

    Returns:
        The same array with its writeable flag cleared.

    Example:
        >>> a = make_immutable(np.zeros((2, 2)))
        >>> a[0, 1] = 5.0  # Raises ValueError
    """
    if array.flags.writeable:
        array.flags.writeable = False
    return array


def make_defensive_copy(array: np.ndarray) -> np.ndarray:
    """
    Create a writable copy for code that needs to mutate its input.

    WARNING: O(n^2) memory and time for an n x n matrix.
    """
    return np.array(array, dtype=np.float64, copy=True)


def is_immutable(array: np.ndarray) -> bool:
    """Check whether an array is read-only."""
    return not array.flags.writeable
