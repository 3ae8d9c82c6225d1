"""
Data models for the ordered symbol table.
"""

from ordered_st.models.exceptions import (
    EmptyTableError,
    OrderedTableError,
    SelectIndexError,
)
from ordered_st.models.option import Option, OptionType

__all__ = [
    "Option",
    "OptionType",
    "OrderedTableError",
    "EmptyTableError",
    "SelectIndexError",
]
