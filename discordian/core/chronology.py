"""DiscordianChronology: the Discordian calendar system.

This module provides the calendar-system object shared by every
DiscordianDate. There is exactly one instance,
``DiscordianChronology.INSTANCE``; it holds no mutable state and is safe
to share between threads.
"""

from __future__ import annotations

import datetime as _datetime
import logging

from discordian import calendar
from discordian._internal import iso
from discordian._internal.constants import (
    DAYS_PER_SEASON,
    DAYS_PER_WEEK,
    MAX_YEAR,
    MIN_YEAR,
    SEASONS_PER_YEAR,
)
from discordian.core.date import DiscordianDate
from discordian.errors import (
    IncompatibleTypeError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from discordian.units.era import DiscordianEra
from discordian.units.field import DiscordianField, ValueRange

logger = logging.getLogger(__name__)

# Ranges over all years; a single date narrows the first three
# to start at 1 when its year has no St. Tib's Day.
_RANGES: dict[DiscordianField, ValueRange] = {
    DiscordianField.YEAR: ValueRange(MIN_YEAR, MAX_YEAR),
    DiscordianField.YEAR_OF_ERA: ValueRange(MIN_YEAR, MAX_YEAR),
    DiscordianField.ERA: ValueRange(1, 1),
    DiscordianField.SEASON: ValueRange(0, SEASONS_PER_YEAR),
    DiscordianField.DAY_OF_SEASON: ValueRange(0, DAYS_PER_SEASON),
    DiscordianField.DAY_OF_WEEK: ValueRange(0, DAYS_PER_WEEK),
    DiscordianField.DAY_OF_YEAR: ValueRange(1, 366),
    DiscordianField.EPOCH_DAY: ValueRange(iso.MIN_EPOCH_DAY, iso.MAX_EPOCH_DAY),
}


class DiscordianChronology:
    """The Discordian calendar system.

    Factories here mirror the DiscordianDate constructors and accept
    dates from other calendars through ``date_from``.

    Examples:
        >>> chrono = DiscordianChronology.INSTANCE
        >>> chrono.id
        'Discordian'
        >>> chrono.is_leap_year(3178)
        True
        >>> DiscordianChronology() is chrono
        True
    """

    __slots__ = ()

    INSTANCE: DiscordianChronology

    def __new__(cls) -> DiscordianChronology:
        try:
            return cls.INSTANCE
        except AttributeError:
            return super().__new__(cls)

    @property
    def id(self) -> str:
        """Return the identifier of this calendar system."""
        return "Discordian"

    # ------------------------------------------------------------------
    # Date factories
    # ------------------------------------------------------------------

    def date(self, year: int, season: int, day_of_season: int) -> DiscordianDate:
        """Create a date from year, season and day-of-season."""
        return DiscordianDate.of(year, season, day_of_season)

    def date_year_day(self, year: int, day_of_year: int) -> DiscordianDate:
        """Create a date from year and day-of-year."""
        return DiscordianDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> DiscordianDate:
        """Create a date from an epoch day."""
        return DiscordianDate.of_epoch_day(epoch_day)

    def date_now(self) -> DiscordianDate:
        """Return today's date in the local timezone."""
        return DiscordianDate.today()

    def date_from(self, value: object) -> DiscordianDate:
        """Convert another date to a DiscordianDate.

        Args:
            value: A DiscordianDate (returned unchanged) or a standard
                library ``date``/``datetime``.

        Raises:
            IncompatibleTypeError: If value is not a supported date.

        Examples:
            >>> import datetime
            >>> DiscordianChronology.INSTANCE.date_from(datetime.date(1994, 1, 1))
            DiscordianDate.of(3160, 1, 1)
        """
        if isinstance(value, DiscordianDate):
            return value
        if isinstance(value, _datetime.date):
            logger.debug("Converting %s %s to DiscordianDate", type(value).__name__, value)
            return DiscordianDate.from_iso_date(value)
        raise IncompatibleTypeError(
            f"Unable to obtain DiscordianDate from {type(value).__name__}"
        )

    # ------------------------------------------------------------------
    # Calendar rules
    # ------------------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        """Return True if the Discordian year contains St. Tib's Day."""
        return calendar.is_leap_year(year)

    def length_of_year(self, year: int) -> int:
        """Return the number of days in a Discordian year."""
        return iso.days_in_year(calendar.discordian_year_to_iso(year))

    def iso_year_to_discordian(self, iso_year: int) -> int:
        """Convert an ISO year to a Discordian year."""
        return calendar.iso_year_to_discordian(iso_year)

    def discordian_year_to_iso(self, discordian_year: int) -> int:
        """Convert a Discordian year to an ISO year."""
        return calendar.discordian_year_to_iso(discordian_year)

    def eras(self) -> list[DiscordianEra]:
        """Return the eras of this calendar."""
        return list(DiscordianEra)

    def era_of(self, value: int) -> DiscordianEra:
        """Return the era with the given numeric value.

        Raises:
            OutOfRangeError: If value is not 1.
        """
        if value != DiscordianEra.YOLD.number:
            raise OutOfRangeError(value, 1, 1, "era")
        return DiscordianEra.YOLD

    def proleptic_year(self, era: DiscordianEra, year_of_era: int) -> int:
        """Return the proleptic year; with a single era they are equal."""
        if not isinstance(era, DiscordianEra):
            raise IncompatibleTypeError(f"Era must be DiscordianEra, got {era!r}")
        return year_of_era

    def range(self, field: DiscordianField) -> ValueRange:
        """Return the range of a field across all years.

        Examples:
            >>> DiscordianChronology.INSTANCE.range(DiscordianField.DAY_OF_SEASON)
            ValueRange(minimum=0, maximum=73)
        """
        try:
            return _RANGES[field]
        except KeyError:
            raise UnsupportedOperationError(f"Unsupported field: {field!r}") from None

    def season_name(self, season: int) -> str:
        """Return the name of a season (1-5)."""
        return calendar.season_name(season)

    def day_name(self, day_of_week: int) -> str:
        """Return the name of a day of the week (1-5)."""
        return calendar.day_name(day_of_week)

    def __reduce__(self) -> str:
        return "_INSTANCE"

    def __repr__(self) -> str:
        return "DiscordianChronology.INSTANCE"

    def __str__(self) -> str:
        return self.id


DiscordianChronology.INSTANCE = DiscordianChronology()
_INSTANCE = DiscordianChronology.INSTANCE


__all__ = ["DiscordianChronology"]
