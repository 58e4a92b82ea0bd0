"""
ID generation utilities for tiles.

Provides monotonic, never-reused ID generation scoped to whoever owns the
generator (a factory or a session). There is no process-wide instance.
"""

import itertools
from typing import Iterator


class IDGenerator:
    """
    Generates unique, sequential IDs for tiles.

    This is a simple wrapper around itertools.count that makes
    testing easier and provides a clear contract.
    """

    def __init__(self, start: int = 1):
        """
        Initialize the ID generator.

        Args:
            start: The first ID to generate (default: 1)
        """
        self._counter: Iterator[int] = itertools.count(start)
        self._last: int | None = None

    def next_id(self) -> int:
        """Generate the next unique ID."""
        self._last = next(self._counter)
        return self._last

    @property
    def last_id(self) -> int | None:
        """Most recently issued ID, or None if nothing was issued yet."""
        return self._last
