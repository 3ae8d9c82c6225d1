"""
Ordered symbol table implementations.
"""

from ordered_st.models.sortedcontainers.binary_search_tree import OrderedTree

__all__ = ["OrderedTree"]
