"""Rendering granularity.

Six levels from millennium (coarsest) to day (finest). The numeric rank
is the only external serialization of a precision; it is stable and
contiguous over 6..11.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

MIN_RANK = 6
MAX_RANK = 11


class InvalidPrecision(ValueError):
    """Raised when a value does not name a supported precision."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Unsupported precision value {value!r}; values {MIN_RANK}-{MAX_RANK} are supported"
        )


class Precision(IntEnum):
    """Granularity at which a date is rendered. Higher rank is finer."""

    MILLENNIUM = 6
    CENTURY = 7
    DECADE = 8
    YEAR = 9
    MONTH = 10
    DAY = 11

    @property
    def rank(self) -> int:
        return int(self.value)

    @classmethod
    def from_rank(cls, value: int) -> Precision:
        """Return the precision with rank *value*.

        Raises:
            InvalidPrecision: *value* is not an integer in 6..11.
        """
        # bool is an int subclass but never a rank
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPrecision(value)
        if not MIN_RANK <= value <= MAX_RANK:
            raise InvalidPrecision(value)
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> Precision:
        """Resolve a case-insensitive member name such as ``"century"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidPrecision(name) from None

    def __str__(self) -> str:
        return str(self.rank)
