"""
Option and OptionType for lookups that may miss.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class OptionType(IntEnum):
    """Whether a lookup found something."""

    PRESENT = 0  # Holds a value, possibly None
    ABSENT = 1  # Nothing was found


@dataclass(frozen=True)
class Option:
    """
    Result of a query that can miss.

    Keeps "no such key" apart from "key bound to None": a stored None comes
    back as Option.some(None), a missing key as Option.absent().

    Attributes:
        value: The found value (always None when absent).
        type: Whether the option is present or absent.
    """

    value: Any
    type: OptionType

    def __post_init__(self) -> None:
        if self.type == OptionType.ABSENT and self.value is not None:
            raise ValueError("an absent Option cannot hold a value")

    @classmethod
    def some(cls, value: Any) -> "Option":
        return cls(value=value, type=OptionType.PRESENT)

    @classmethod
    def absent(cls) -> "Option":
        return cls(value=None, type=OptionType.ABSENT)

    def is_present(self) -> bool:
        return self.type == OptionType.PRESENT

    def is_absent(self) -> bool:
        return self.type == OptionType.ABSENT

    def unwrap(self) -> Any:
        """
        Return the held value.

        Raises:
            ValueError: If the option is absent.
        """
        if self.is_absent():
            raise ValueError("unwrap() called on an absent Option")
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.is_present() else default

    def __bool__(self) -> bool:
        return self.is_present()
