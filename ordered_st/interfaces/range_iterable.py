"""
RangeIterable protocol for ordered structures that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Range-bounded key listing via keys(lo, hi)

    Both bounds are inclusive. Every call starts a fresh traversal.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            start: Lowest key (inclusive). If None, starts from the beginning.
            end: Highest key (inclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, value) tuples in sorted order.
        """
        pass

    @abstractmethod
    def keys(self, lo: Any | None = None, hi: Any | None = None) -> list[Any]:
        """
        Return the keys in [lo, hi], or all keys, in ascending order.

        Args:
            lo: Lowest key (inclusive). Must be given with hi.
            hi: Highest key (inclusive). Must be given with lo.

        Raises:
            ValueError: If exactly one of lo and hi is given.

        Returns:
            A new list of keys.
        """
        pass
