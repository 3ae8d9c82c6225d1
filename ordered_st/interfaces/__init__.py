"""
Abstract base classes and protocols for ordered symbol tables.
"""

from ordered_st.interfaces.ordered_symbol_table import OrderedSymbolTable
from ordered_st.interfaces.range_iterable import RangeIterable

__all__ = ["RangeIterable", "OrderedSymbolTable"]
