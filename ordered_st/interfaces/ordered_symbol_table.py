"""
OrderedSymbolTable abstract base class for ordered key-value structures.
"""

from abc import abstractmethod
from typing import Any

from ordered_st.interfaces.range_iterable import RangeIterable
from ordered_st.models.option import Option


class OrderedSymbolTable(RangeIterable):
    """
    Abstract base class for ordered symbol tables.

    A key-value map over totally ordered, unique keys that also answers
    order-statistics queries. Inherits range iteration from RangeIterable.

    Implementations:
    - OrderedTree: size-augmented binary search tree with on-demand balancing
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key. None is a valid value.

        Time complexity: O(height)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Option:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            Option.some(value) if found, Option.absent() otherwise.

        Time complexity: O(height)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair. A missing key is not an error.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(height)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(height)
        """
        pass

    @abstractmethod
    def size(self, lo: Any | None = None, hi: Any | None = None) -> int:
        """
        Return the number of key-value pairs, or the number of keys in [lo, hi].

        Args:
            lo: Lowest key of the range (inclusive). Must be given with hi.
            hi: Highest key of the range (inclusive). Must be given with lo.

        Returns:
            The count of entries in the table or in the range.

        Time complexity: O(1) for the whole table, O(height) for a range
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    @abstractmethod
    def min(self) -> Any:
        """Return the smallest key. Raises EmptyTableError if empty."""
        pass

    @abstractmethod
    def max(self) -> Any:
        """Return the largest key. Raises EmptyTableError if empty."""
        pass

    @abstractmethod
    def delete_min(self) -> None:
        """Remove the smallest key. Raises EmptyTableError if empty."""
        pass

    @abstractmethod
    def delete_max(self) -> None:
        """Remove the largest key. Raises EmptyTableError if empty."""
        pass

    @abstractmethod
    def floor(self, key: Any) -> Option:
        """Return the greatest key less than or equal to key, if any."""
        pass

    @abstractmethod
    def ceiling(self, key: Any) -> Option:
        """Return the least key greater than or equal to key, if any."""
        pass

    @abstractmethod
    def rank(self, key: Any) -> int:
        """Return the number of keys strictly less than key."""
        pass

    @abstractmethod
    def select(self, k: int) -> Any:
        """
        Return the key with exactly k smaller keys.

        Raises:
            SelectIndexError: If k is outside [0, size()).
        """
        pass
