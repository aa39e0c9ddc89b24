"""DiscordianDate class representing a Discordian calendar date.

This module provides the DiscordianDate class, an immutable date in the
Discordian calendar backed by a single epoch-day integer.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, overload

from discordian import calendar
from discordian._internal import iso
from discordian._internal.arithmetic import div_trunc, mod_trunc, safe_multiply
from discordian._internal.constants import (
    DAYS_PER_SEASON,
    DAYS_PER_WEEK,
    MAX_YEAR,
    MIN_YEAR,
    SEASONS_PER_YEAR,
    ST_TIBS_DAY,
    UNIX_EPOCH_ORDINAL,
)
from discordian.core.period import DiscordianPeriod
from discordian.errors import (
    IncompatibleChronologyError,
    IncompatibleTypeError,
    OutOfRangeError,
    OverflowError,
    UnsupportedOperationError,
)
from discordian.units.era import DiscordianEra
from discordian.units.field import DiscordianField, ValueRange
from discordian.units.unit import DiscordianUnit

if TYPE_CHECKING:
    from discordian.core.chronology import DiscordianChronology

logger = logging.getLogger(__name__)


class DiscordianDate:
    """A date in the Discordian calendar.

    The Discordian year has five seasons of 73 days and a five-day week.
    In years where the ISO calendar has February 29, the Discordian
    calendar has St. Tib's Day instead: a day outside any season or week.
    On St. Tib's Day season, day_of_season and day_of_week are all 0.

    Internal representation is the epoch day (days since 1970-01-01),
    so dates convert to and from the ISO calendar exactly. Every field is
    decoded from it on demand.

    Attributes:
        year: The Discordian year (ISO year + 1166).
        season: The season (1-5, 0 on St. Tib's Day).
        day_of_season: The day of the season (1-73, 0 on St. Tib's Day).
        day_of_week: The day of the week (1-5, 0 on St. Tib's Day).

    Examples:
        >>> d = DiscordianDate.of(3160, 1, 1)
        >>> str(d)
        'Sweetmorn, Chaos 1, 3160 YOLD'

        >>> str(DiscordianDate.of_leap_day(3178))
        "St. Tib's Day! 3178 YOLD"

        >>> DiscordianDate.of(3178, 1, 60) == DiscordianDate.of_year_day(3178, 61)
        True
    """

    __slots__ = ("_epoch_day",)

    _epoch_day: int

    def __init__(self, epoch_day: int) -> None:
        """Wrap an epoch day.

        Prefer the ``of*`` factories; this constructor performs no
        validation because every epoch day is a valid date.

        Args:
            epoch_day: Days since 1970-01-01.
        """
        object.__setattr__(self, "_epoch_day", epoch_day)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, season: int, day_of_season: int) -> DiscordianDate:
        """Create a date from year, season and day-of-season.

        St. Tib's Day cannot be created this way; use ``of_leap_day``.

        Args:
            year: The Discordian year.
            season: The season (1-5).
            day_of_season: The day of the season (1-73).

        Returns:
            The corresponding DiscordianDate.

        Raises:
            OutOfRangeError: If any component is out of range.

        Examples:
            >>> DiscordianDate.of(3178, 5, 73)
            DiscordianDate.of(3178, 5, 73)
        """
        calendar.check_valid_season(season)
        calendar.check_valid_day_of_season(day_of_season)
        iso_year = calendar.discordian_year_to_iso(year)
        day_of_year = calendar.day_of_discordian_year(year, season, day_of_season)
        return cls(iso.year_day_to_epoch_day(iso_year, day_of_year))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> DiscordianDate:
        """Create a date from year and day-of-year.

        Day-of-year counts St. Tib's Day, so it matches the ISO
        day-of-year of the same date.

        Args:
            year: The Discordian year.
            day_of_year: Day of year (1-365, or 1-366 in leap years).

        Raises:
            OutOfRangeError: If the day-of-year does not exist in the year.

        Examples:
            >>> DiscordianDate.of_year_day(3178, 60).is_leap_day
            True
        """
        iso_year = calendar.discordian_year_to_iso(year)
        return cls(iso.year_day_to_epoch_day(iso_year, day_of_year))

    @classmethod
    def of_leap_day(cls, year: int) -> DiscordianDate:
        """Create St. Tib's Day of the given year.

        The year is not checked for being a leap year. In a non-leap
        year the result is the 60th day of the year, Chaos 60.

        Examples:
            >>> str(DiscordianDate.of_leap_day(3179))
            'Setting Orange, Chaos 60, 3179 YOLD'
        """
        return cls.of_year_day(year, ST_TIBS_DAY)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> DiscordianDate:
        """Create a date from an epoch day (days since 1970-01-01).

        Examples:
            >>> str(DiscordianDate.of_epoch_day(0))
            'Sweetmorn, Chaos 1, 3136 YOLD'
        """
        return cls(epoch_day)

    @classmethod
    def from_iso_date(cls, value: _datetime.date) -> DiscordianDate:
        """Create a date from a standard library ``date`` or ``datetime``.

        The time of day, if any, is ignored.

        Examples:
            >>> import datetime
            >>> str(DiscordianDate.from_iso_date(datetime.date(2012, 2, 29)))
            "St. Tib's Day! 3178 YOLD"
        """
        return cls(value.toordinal() - UNIX_EPOCH_ORDINAL)

    @classmethod
    def today(cls) -> DiscordianDate:
        """Return today's date in the local timezone."""
        return cls.from_iso_date(_datetime.date.today())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def epoch_day(self) -> int:
        """Return the number of days since 1970-01-01."""
        return self._epoch_day

    @property
    def chronology(self) -> DiscordianChronology:
        """Return the calendar system of this date."""
        from discordian.core.chronology import DiscordianChronology

        return DiscordianChronology.INSTANCE

    @property
    def era(self) -> DiscordianEra:
        """Return the era, which is always YOLD."""
        return DiscordianEra.YOLD

    @property
    def year(self) -> int:
        """Return the Discordian year.

        Examples:
            >>> DiscordianDate.of_year_day(3160, 1).year
            3160
        """
        iso_year, _ = iso.epoch_day_to_year_day(self._epoch_day)
        return calendar.iso_year_to_discordian(iso_year)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year, counting St. Tib's Day (1-366)."""
        _, day_of_year = iso.epoch_day_to_year_day(self._epoch_day)
        return day_of_year

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date's year contains St. Tib's Day."""
        iso_year, _ = iso.epoch_day_to_year_day(self._epoch_day)
        return iso.is_leap_year(iso_year)

    @property
    def is_leap_day(self) -> bool:
        """Return True if this date is St. Tib's Day.

        Examples:
            >>> DiscordianDate.of_leap_day(3178).is_leap_day
            True
            >>> DiscordianDate.of_leap_day(3179).is_leap_day
            False
        """
        iso_year, day_of_year = iso.epoch_day_to_year_day(self._epoch_day)
        return iso.is_leap_year(iso_year) and day_of_year == ST_TIBS_DAY

    def _fields(self) -> tuple[int, int, int]:
        iso_year, day_of_year = iso.epoch_day_to_year_day(self._epoch_day)
        return calendar.decompose(day_of_year, iso.is_leap_year(iso_year))

    @property
    def season(self) -> int:
        """Return the season (1-5), or 0 on St. Tib's Day."""
        return self._fields()[0]

    @property
    def day_of_season(self) -> int:
        """Return the day of the season (1-73), or 0 on St. Tib's Day."""
        return self._fields()[1]

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (1-5), or 0 on St. Tib's Day.

        Day 1 is Sweetmorn. Every year starts on Sweetmorn.
        """
        return self._fields()[2]

    @property
    def season_name(self) -> str:
        """Return the name of the season.

        Raises:
            OutOfRangeError: On St. Tib's Day, which has no season.

        Examples:
            >>> DiscordianDate.of(3178, 4, 1).season_name
            'Bureaucracy'
        """
        return calendar.season_name(self.season)

    @property
    def day_name(self) -> str:
        """Return the name of the day of the week.

        Raises:
            OutOfRangeError: On St. Tib's Day, which has no weekday.
        """
        return calendar.day_name(self.day_of_week)

    @property
    def length_of_month(self) -> int:
        """Return the length of a season, always 73."""
        return DAYS_PER_SEASON

    @property
    def length_of_year(self) -> int:
        """Return 366 in leap years, 365 otherwise."""
        return 366 if self.is_leap_year else 365

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _with_epoch_day(self, epoch_day: int) -> DiscordianDate:
        if epoch_day < iso.MIN_EPOCH_DAY or epoch_day > iso.MAX_EPOCH_DAY:
            raise OverflowError(
                f"epoch day must be between {iso.MIN_EPOCH_DAY} and "
                f"{iso.MAX_EPOCH_DAY}, got {epoch_day}"
            )
        return DiscordianDate(epoch_day)

    def plus(self, amount: int, unit: DiscordianUnit) -> DiscordianDate:
        """Return a new date offset by an amount of a unit.

        WEEKS and SEASONS are fixed multiples of days (5 and 73), so they
        never clamp or snap to a season boundary. YEARS and longer units
        use ISO year arithmetic: February 29 moves to February 28 when
        the target year is not a leap year.

        Args:
            amount: Number of units to add (can be negative).
            unit: The unit of the amount.

        Returns:
            A new DiscordianDate.

        Raises:
            UnsupportedOperationError: If unit is ERAS.
            OverflowError: If the result is out of the supported range.

        Examples:
            >>> d = DiscordianDate.of(3179, 1, 1)
            >>> d.plus(5, DiscordianUnit.WEEKS) == d.plus(25, DiscordianUnit.DAYS)
            True
            >>> str(d.plus(1, DiscordianUnit.SEASONS))
            'Prickle-Prickle, Discord 1, 3179 YOLD'
        """
        if unit is DiscordianUnit.ERAS:
            raise UnsupportedOperationError(
                "Unable to add era, Discordian calendar system only has one era"
            )
        if unit is DiscordianUnit.DAYS:
            return self._with_epoch_day(self._epoch_day + amount)
        if unit is DiscordianUnit.WEEKS:
            return self.plus(safe_multiply(amount, DAYS_PER_WEEK), DiscordianUnit.DAYS)
        if unit is DiscordianUnit.SEASONS:
            return self.plus(
                safe_multiply(amount, DAYS_PER_SEASON), DiscordianUnit.DAYS
            )
        years = unit.years_in_unit()
        if years is None:
            raise UnsupportedOperationError(f"Unsupported unit: {unit!r}")
        return self._with_epoch_day(
            iso.plus_years(self._epoch_day, safe_multiply(amount, years))
        )

    def minus(self, amount: int, unit: DiscordianUnit) -> DiscordianDate:
        """Return a new date offset backwards by an amount of a unit."""
        return self.plus(-amount, unit)

    def _epoch_month(self) -> int:
        # St. Tib's Day counts as part of Chaos here
        season = 1 if self.is_leap_day else self.season
        return self.year * SEASONS_PER_YEAR + (season - 1)

    def _effective_day_of_season(self) -> int:
        return ST_TIBS_DAY if self.is_leap_day else self.day_of_season

    @overload
    def until(self, other: DiscordianDate | _datetime.date) -> DiscordianPeriod: ...

    @overload
    def until(self, other: DiscordianDate, unit: DiscordianUnit) -> int: ...

    def until(
        self,
        other: DiscordianDate | _datetime.date,
        unit: DiscordianUnit | None = None,
    ) -> DiscordianPeriod | int:
        """Return the amount of time from this date until another.

        Without a unit, returns a DiscordianPeriod of years, seasons and
        days. This is a best-effort calendar decomposition: the same
        distance can decompose differently depending on direction, so
        ``a.until(b)`` is not always the negation of ``b.until(a)``.

        With a unit, returns the whole number of that unit between the
        dates. WEEKS and SEASONS divide the day count by 5 and 73,
        truncating toward zero; ERAS is always 0.

        Args:
            other: The end date (exclusive).
            unit: Optional unit to measure in.

        Returns:
            A DiscordianPeriod, or an int when a unit is given.

        Raises:
            IncompatibleTypeError: If a unit is given and other is not a
                DiscordianDate.
            IncompatibleChronologyError: If other belongs to a different
                calendar system.

        Examples:
            >>> a = DiscordianDate.of(3179, 1, 10)
            >>> a.until(DiscordianDate.of(3179, 3, 5))
            DiscordianPeriod(years=0, months=1, days=68)
            >>> a.until(a.minus(12, DiscordianUnit.DAYS), DiscordianUnit.WEEKS)
            -2
        """
        if unit is None:
            return self._period_until(other)
        return self._amount_until(other, unit)

    def _period_until(self, other: DiscordianDate | _datetime.date) -> DiscordianPeriod:
        end = self.chronology.date_from(other)
        total_months = end._epoch_month() - self._epoch_month()
        days = end._effective_day_of_season() - self._effective_day_of_season()
        if total_months > 0 and days < 0:
            total_months -= 1
            calc_date = self.plus(total_months, DiscordianUnit.SEASONS)
            days = end._epoch_day - calc_date._epoch_day
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month
        years = div_trunc(total_months, SEASONS_PER_YEAR)
        months = mod_trunc(total_months, SEASONS_PER_YEAR)
        return DiscordianPeriod(years, months, days)

    def _amount_until(self, other: DiscordianDate, unit: DiscordianUnit) -> int:
        if not isinstance(other, DiscordianDate):
            raise IncompatibleTypeError(
                "Unable to calculate period between objects of two different types"
            )
        if other.chronology is not self.chronology:
            raise IncompatibleChronologyError(
                "Unable to calculate period between two different chronologies"
            )
        days = other._epoch_day - self._epoch_day
        if unit is DiscordianUnit.ERAS:
            return 0
        length = unit.days_in_unit()
        if length is not None:
            return div_trunc(days, length)
        years = unit.years_in_unit()
        if years is None:
            raise UnsupportedOperationError(f"Unsupported unit: {unit!r}")
        return div_trunc(iso.months_until(self._epoch_day, other._epoch_day), 12 * years)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def field_value(self, field: DiscordianField) -> int:
        """Return the integer value of a field.

        Examples:
            >>> DiscordianDate.of_leap_day(3178).field_value(DiscordianField.SEASON)
            0
        """
        if field is DiscordianField.YEAR or field is DiscordianField.YEAR_OF_ERA:
            return self.year
        if field is DiscordianField.ERA:
            return DiscordianEra.YOLD.number
        if field is DiscordianField.SEASON:
            return self.season
        if field is DiscordianField.DAY_OF_SEASON:
            return self.day_of_season
        if field is DiscordianField.DAY_OF_WEEK:
            return self.day_of_week
        if field is DiscordianField.DAY_OF_YEAR:
            return self.day_of_year
        if field is DiscordianField.EPOCH_DAY:
            return self._epoch_day
        raise UnsupportedOperationError(f"Unsupported field: {field!r}")

    def valid_range(self, field: DiscordianField) -> ValueRange:
        """Return the range of valid values for a field of this date.

        In leap years season, day-of-season and day-of-week admit 0 for
        St. Tib's Day.

        Examples:
            >>> DiscordianDate.of(3178, 1, 1).valid_range(DiscordianField.SEASON)
            ValueRange(minimum=0, maximum=5)
            >>> DiscordianDate.of(3179, 1, 1).valid_range(DiscordianField.SEASON)
            ValueRange(minimum=1, maximum=5)
        """
        minimum = 0 if self.is_leap_year else 1
        if field is DiscordianField.SEASON:
            return ValueRange(minimum, SEASONS_PER_YEAR)
        if field is DiscordianField.DAY_OF_SEASON:
            return ValueRange(minimum, DAYS_PER_SEASON)
        if field is DiscordianField.DAY_OF_WEEK:
            return ValueRange(minimum, DAYS_PER_WEEK)
        if field is DiscordianField.DAY_OF_YEAR:
            return ValueRange(1, self.length_of_year)
        return self.chronology.range(field)

    def with_field(self, field: DiscordianField, value: int) -> DiscordianDate:
        """Return a copy of this date with one field changed.

        Setting DAY_OF_SEASON on St. Tib's Day targets Chaos, so the
        result is ``of(year, 1, value)``. Setting SEASON on St. Tib's Day
        keeps day-of-season 60, and setting YEAR keeps the position in
        the year (St. Tib's Day moves to day-of-year 60 of the new year).

        Args:
            field: The field to change.
            value: The new value.

        Returns:
            A DiscordianDate, or self if the value is unchanged.

        Raises:
            OutOfRangeError: If value is invalid for the field.
            UnsupportedOperationError: If DAY_OF_WEEK is set on
                St. Tib's Day.

        Examples:
            >>> d = DiscordianDate.of(3179, 2, 10)
            >>> str(d.with_field(DiscordianField.DAY_OF_SEASON, 1))
            'Prickle-Prickle, Discord 1, 3179 YOLD'
        """
        if self.field_value(field) == value:
            return self
        if field is DiscordianField.YEAR or field is DiscordianField.YEAR_OF_ERA:
            ValueRange(MIN_YEAR, MAX_YEAR).check_valid_value(value, field)
            if self.is_leap_day:
                return DiscordianDate.of_leap_day(value)
            return DiscordianDate.of(value, self.season, self.day_of_season)
        if field is DiscordianField.ERA:
            raise OutOfRangeError(value, 1, 1, field.value)
        if field is DiscordianField.SEASON:
            if self.is_leap_day:
                return DiscordianDate.of(self.year, value, ST_TIBS_DAY)
            return DiscordianDate.of(self.year, value, self.day_of_season)
        if field is DiscordianField.DAY_OF_SEASON:
            if self.is_leap_day:
                logger.debug(
                    "St. Tib's Day %s: day_of_season=%d resolves in Chaos",
                    self.year,
                    value,
                )
                return DiscordianDate.of(self.year, 1, value)
            return DiscordianDate.of(self.year, self.season, value)
        if field is DiscordianField.DAY_OF_WEEK:
            calendar.check_valid_day_of_week(value)
            if self.is_leap_day:
                raise UnsupportedOperationError(
                    "St. Tib's Day is not part of any week"
                )
            # Counted in ordinary days so St. Tib's Day is skipped; a week
            # can span two seasons but never two years.
            ordinary = (self.season - 1) * DAYS_PER_SEASON + self.day_of_season
            target = ordinary + (value - self.day_of_week)
            season, day_of_season = divmod(target - 1, DAYS_PER_SEASON)
            return DiscordianDate.of(self.year, season + 1, day_of_season + 1)
        if field is DiscordianField.DAY_OF_YEAR:
            return DiscordianDate.of_year_day(self.year, value)
        if field is DiscordianField.EPOCH_DAY:
            self.valid_range(field).check_valid_value(value, field)
            return DiscordianDate(value)
        raise UnsupportedOperationError(f"Unsupported field: {field!r}")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_iso_date(self) -> _datetime.date:
        """Return the equivalent standard library ``date``.

        Raises:
            OverflowError: If the ISO year is outside 1-9999, the range
                of ``datetime.date``.

        Examples:
            >>> DiscordianDate.of_leap_day(3178).to_iso_date()
            datetime.date(2012, 2, 29)
        """
        ordinal = self._epoch_day + UNIX_EPOCH_ORDINAL
        if not _datetime.date.min.toordinal() <= ordinal <= _datetime.date.max.toordinal():
            raise OverflowError(f"{self!r} is outside the range of datetime.date")
        return _datetime.date.fromordinal(ordinal)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    @overload
    def __add__(self, other: _datetime.timedelta) -> DiscordianDate: ...

    @overload
    def __add__(self, other: object) -> DiscordianDate: ...

    def __add__(self, other: object) -> DiscordianDate:
        """Add the whole days of a ``timedelta`` to this date.

        Examples:
            >>> import datetime
            >>> d = DiscordianDate.of(3179, 1, 73) + datetime.timedelta(days=1)
            >>> str(d)
            'Prickle-Prickle, Discord 1, 3179 YOLD'
        """
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented  # type: ignore[return-value]
        return self.plus(other.days, DiscordianUnit.DAYS)

    def __radd__(self, other: object) -> DiscordianDate:
        return self.__add__(other)

    @overload
    def __sub__(self, other: _datetime.timedelta) -> DiscordianDate: ...

    @overload
    def __sub__(self, other: DiscordianDate) -> _datetime.timedelta: ...

    @overload
    def __sub__(self, other: object) -> DiscordianDate | _datetime.timedelta: ...

    def __sub__(self, other: object) -> DiscordianDate | _datetime.timedelta:
        """Subtract a ``timedelta`` or another date.

        Subtracting a timedelta returns a new date; subtracting a date
        returns the day difference as a timedelta.

        Raises:
            OverflowError: If the difference exceeds the range of
                ``timedelta`` (999,999,999 days).
        """
        if isinstance(other, _datetime.timedelta):
            return self.plus(-other.days, DiscordianUnit.DAYS)
        if isinstance(other, DiscordianDate):
            days = self._epoch_day - other._epoch_day
            if abs(days) > _datetime.timedelta.max.days:
                raise OverflowError(
                    f"difference of {days} days is outside the range of timedelta"
                )
            return _datetime.timedelta(days=days)
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        """Check equality with another date."""
        if not isinstance(other, DiscordianDate):
            return NotImplemented
        return self._epoch_day == other._epoch_day

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, DiscordianDate):
            return NotImplemented
        return self._epoch_day < other._epoch_day

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DiscordianDate):
            return NotImplemented
        return self._epoch_day <= other._epoch_day

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DiscordianDate):
            return NotImplemented
        return self._epoch_day > other._epoch_day

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DiscordianDate):
            return NotImplemented
        return self._epoch_day >= other._epoch_day

    def __hash__(self) -> int:
        """Return a hash based on the epoch day."""
        return hash(self._epoch_day)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[DiscordianDate], tuple[int]]:
        return (DiscordianDate, (self._epoch_day,))

    def __repr__(self) -> str:
        """Return a string that evaluates back to this date.

        Returns:
            String like 'DiscordianDate.of(3178, 1, 1)', or
            'DiscordianDate.of_leap_day(3178)' on St. Tib's Day.
        """
        if self.is_leap_day:
            return f"DiscordianDate.of_leap_day({self.year})"
        season, day_of_season, _ = self._fields()
        return f"DiscordianDate.of({self.year}, {season}, {day_of_season})"

    def __str__(self) -> str:
        """Return the ddate-style rendering.

        Returns:
            "<DayName>, <SeasonName> <DayOfSeason>, <Year> YOLD", or
            "St. Tib's Day! <Year> YOLD". The output does not sort
            lexically in date order.
        """
        if self.is_leap_day:
            return f"St. Tib's Day! {self.year} {self.era}"
        return (
            f"{self.day_name}, {self.season_name} {self.day_of_season}, "
            f"{self.year} {self.era}"
        )

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["DiscordianDate"]
