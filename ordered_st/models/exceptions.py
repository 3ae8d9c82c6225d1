"""
Custom exceptions for the ordered symbol table.
"""


class OrderedTableError(Exception):
    """Base class for contract violations on an ordered symbol table."""


class EmptyTableError(OrderedTableError):
    """
    Raised when an operation that needs at least one key runs on an empty table.

    This is a caller error: check is_empty() first.
    """

    def __init__(self, operation: str):
        """
        Initialize empty table error.

        Args:
            operation: Name of the operation that was called.
        """
        self.operation = operation
        super().__init__(f"{operation}() called on an empty table")


class SelectIndexError(OrderedTableError, IndexError):
    """Raised when select() is asked for a rank outside [0, size)."""

    def __init__(self, index: int, size: int):
        """
        Initialize select index error.

        Args:
            index: The requested rank.
            size: Number of keys in the table at the time of the call.
        """
        self.index = index
        self.size = size
        super().__init__(
            f"select index {index} out of range for table of size {size}: "
            f"expected 0 <= index < {size}"
        )
