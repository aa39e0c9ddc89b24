"""DiscordianUnit enumeration for date arithmetic.

This module provides the units accepted by ``DiscordianDate.plus`` and
``DiscordianDate.until``.
"""

from __future__ import annotations

from enum import Enum

from discordian._internal.constants import DAYS_PER_SEASON, DAYS_PER_WEEK


class DiscordianUnit(Enum):
    """Units of Discordian date arithmetic.

    WEEKS and SEASONS have a fixed length in this calendar (5 and 73
    days), so arithmetic in those units is plain day counting. YEARS and
    longer units follow the ISO calendar. MONTHS is an alias of SEASONS.

    Examples:
        >>> DiscordianUnit.SEASONS.days_in_unit()
        73

        >>> DiscordianUnit.MONTHS is DiscordianUnit.SEASONS
        True

        >>> DiscordianUnit.YEARS.days_in_unit() is None
        True
    """

    DAYS = "days"
    WEEKS = "weeks"
    SEASONS = "seasons"
    MONTHS = "seasons"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"

    def days_in_unit(self) -> int | None:
        """Return the number of days in one unit.

        Returns:
            The exact day count, or None for units whose length
            depends on leap years (YEARS and longer, ERAS).
        """
        conversions: dict[DiscordianUnit, int | None] = {
            DiscordianUnit.DAYS: 1,
            DiscordianUnit.WEEKS: DAYS_PER_WEEK,
            DiscordianUnit.SEASONS: DAYS_PER_SEASON,
            DiscordianUnit.YEARS: None,  # Variable length (leap years)
            DiscordianUnit.DECADES: None,
            DiscordianUnit.CENTURIES: None,
            DiscordianUnit.MILLENNIA: None,
            DiscordianUnit.ERAS: None,
        }
        return conversions[self]

    def years_in_unit(self) -> int | None:
        """Return the number of ISO years in one unit, or None."""
        return _YEARS_IN_UNIT.get(self)


_YEARS_IN_UNIT: dict[DiscordianUnit, int] = {
    DiscordianUnit.YEARS: 1,
    DiscordianUnit.DECADES: 10,
    DiscordianUnit.CENTURIES: 100,
    DiscordianUnit.MILLENNIA: 1000,
}


__all__ = ["DiscordianUnit"]
