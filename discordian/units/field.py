"""Date fields and their valid ranges.

This module provides:
    - DiscordianField: the symbolic fields a date can be read or set by
    - ValueRange: an inclusive integer interval with validation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from discordian.errors import OutOfRangeError


class DiscordianField(Enum):
    """Fields of a Discordian date.

    SEASON, DAY_OF_SEASON and DAY_OF_WEEK are 0 on St. Tib's Day.
    DAY_OF_YEAR and EPOCH_DAY are read from the underlying ISO date.
    MONTH_OF_YEAR and DAY_OF_MONTH are aliases for SEASON and
    DAY_OF_SEASON.

    Examples:
        >>> DiscordianField.MONTH_OF_YEAR is DiscordianField.SEASON
        True
    """

    YEAR = "year"
    YEAR_OF_ERA = "year_of_era"
    ERA = "era"
    SEASON = "season"
    MONTH_OF_YEAR = "season"
    DAY_OF_SEASON = "day_of_season"
    DAY_OF_MONTH = "day_of_season"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_YEAR = "day_of_year"
    EPOCH_DAY = "epoch_day"


@dataclass(frozen=True)
class ValueRange:
    """Inclusive range of valid values for a field.

    Attributes:
        minimum: Smallest valid value.
        maximum: Largest valid value.

    Examples:
        >>> r = ValueRange(1, 5)
        >>> r.is_valid_value(5)
        True
        >>> r.is_valid_value(0)
        False
    """

    minimum: int
    maximum: int

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies within the range."""
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, field: DiscordianField | str) -> int:
        """Return value unchanged if valid.

        Raises:
            OutOfRangeError: If value lies outside the range.
        """
        if not self.is_valid_value(value):
            name = field.value if isinstance(field, DiscordianField) else field
            raise OutOfRangeError(value, self.minimum, self.maximum, name)
        return value

    def __str__(self) -> str:
        return f"{self.minimum} - {self.maximum}"


__all__ = [
    "DiscordianField",
    "ValueRange",
]
