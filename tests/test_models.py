"""
Tests for data models: Option and the exception types.
"""

import pytest

from ordered_st.models import (
    EmptyTableError,
    Option,
    OptionType,
    OrderedTableError,
    SelectIndexError,
)


class TestOption:
    """Tests for Option and OptionType."""

    def test_some(self):
        """Test creating a present option."""
        option = Option.some("data")
        assert option.value == "data"
        assert option.type == OptionType.PRESENT
        assert option.is_present()
        assert not option.is_absent()

    def test_absent(self):
        """Test creating an absent option."""
        option = Option.absent()
        assert option.value is None
        assert option.type == OptionType.ABSENT
        assert option.is_absent()

    def test_some_none_is_not_absent(self):
        """Test that a present None is distinguishable from absence."""
        option = Option.some(None)
        assert option.is_present()
        assert option != Option.absent()
        assert bool(option)
        assert not bool(Option.absent())

    def test_unwrap(self):
        """Test unwrapping present and absent options."""
        assert Option.some(3).unwrap() == 3

        with pytest.raises(ValueError):
            Option.absent().unwrap()

    def test_unwrap_or(self):
        """Test the default fallback."""
        assert Option.some(0).unwrap_or(9) == 0
        assert Option.absent().unwrap_or(9) == 9

    def test_direct_construction_is_validated(self):
        """Test that an absent option cannot carry a value."""
        with pytest.raises(TypeError):
            Option(5)
        with pytest.raises(ValueError):
            Option(5, OptionType.ABSENT)

        assert Option(None, OptionType.ABSENT) == Option.absent()
        assert Option(5, OptionType.PRESENT) == Option.some(5)

    def test_equality(self):
        """Test value equality between options."""
        assert Option.some("a") == Option.some("a")
        assert Option.some("a") != Option.some("b")
        assert Option.absent() == Option.absent()


class TestExceptions:
    """Tests for the error taxonomy."""

    def test_empty_table_error(self):
        """Test EmptyTableError carries the operation name."""
        error = EmptyTableError("min")
        assert error.operation == "min"
        assert "min()" in str(error)
        assert "empty table" in str(error)
        assert isinstance(error, OrderedTableError)

    def test_select_index_error(self):
        """Test SelectIndexError carries index and size."""
        error = SelectIndexError(7, 3)
        assert error.index == 7
        assert error.size == 3
        assert "7" in str(error)
        assert isinstance(error, OrderedTableError)
        assert isinstance(error, IndexError)
