"""
Ordered symbol table backed by a size-augmented binary search tree.

This package provides a key-value map over totally ordered keys with:
- put(key, value) / get(key) / delete(key) - O(height) point operations
- min() / max() / floor(key) / ceiling(key) - ordered lookups
- rank(key) / select(k) - order statistics via cached subtree sizes
- size(lo, hi) / keys(lo, hi) - range count and range enumeration
- balance() - on-demand rebuild into a minimum-height tree
"""

from ordered_st.models import (
    EmptyTableError,
    Option,
    OrderedTableError,
    SelectIndexError,
)
from ordered_st.models.sortedcontainers import OrderedTree

__all__ = [
    "OrderedTree",
    "Option",
    "OrderedTableError",
    "EmptyTableError",
    "SelectIndexError",
]
