"""ISO calendar primitives for Discordian.

This module provides the host calendar that Discordian dates are mapped
onto: the proleptic Gregorian calendar with astronomical year numbering,
addressed by epoch day (days since 1970-01-01).

Epoch day 0 = 1970-01-01 (a Thursday)

This module is not part of the public API.
"""

from __future__ import annotations

from discordian._internal.arithmetic import div_trunc
from discordian._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    MAX_ISO_YEAR,
    MIN_ISO_YEAR,
    UNIX_EPOCH_ORDINAL,
)
from discordian.errors import OutOfRangeError, OverflowError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The ISO year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2012)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given ISO month."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _days_before_year(year: int) -> int:
    # Python's // floors toward negative infinity, which keeps the
    # formula valid for year 0 and negative years.
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def check_year(year: int) -> None:
    """Validate that an ISO year is within the supported range.

    Raises:
        OutOfRangeError: If year is outside MIN_ISO_YEAR to MAX_ISO_YEAR.
    """
    if year < MIN_ISO_YEAR or year > MAX_ISO_YEAR:
        raise OutOfRangeError(year, MIN_ISO_YEAR, MAX_ISO_YEAR, "iso_year")


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert an ISO year, month, day to an epoch day.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2012, 2, 29)
        15399
    """
    ordinal = _days_before_year(year) + days_before_month(year, month) + day
    return ordinal - UNIX_EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to ISO year, month, day.

    Works on 400-year cycles of 146097 days. ``divmod`` floors, so the
    remainder is never negative and dates before year 1 need no special
    casing.

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).
    """
    n = epoch_day + UNIX_EPOCH_ORDINAL - 1

    n400, n = divmod(n, 146097)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    # Should never reach here for valid doy
    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def year_day_to_epoch_day(year: int, day_of_year: int) -> int:
    """Resolve an ISO year and day-of-year to an epoch day.

    Args:
        year: The ISO year.
        day_of_year: Day of year (1-365, or 1-366 in leap years).

    Returns:
        Days since 1970-01-01.

    Raises:
        OutOfRangeError: If the year is unsupported or the day-of-year
            does not exist in that year.

    Examples:
        >>> year_day_to_epoch_day(1970, 1)
        0
        >>> year_day_to_epoch_day(2012, 60)
        15399
    """
    check_year(year)
    length = days_in_year(year)
    if day_of_year < 1 or day_of_year > length:
        raise OutOfRangeError(day_of_year, 1, length, "day_of_year")
    return _days_before_year(year) + day_of_year - UNIX_EPOCH_ORDINAL


def epoch_day_to_year_day(epoch_day: int) -> tuple[int, int]:
    """Convert an epoch day to (ISO year, day-of-year)."""
    year, month, day = epoch_day_to_ymd(epoch_day)
    return (year, days_before_month(year, month) + day)


def plus_months(epoch_day: int, months: int) -> int:
    """Add ISO months, clamping the day to the end of the target month.

    Raises:
        OverflowError: If the result leaves the supported year range.
    """
    year, month, day = epoch_day_to_ymd(epoch_day)
    new_year, new_month = divmod(year * 12 + (month - 1) + months, 12)
    new_month += 1
    if new_year < MIN_ISO_YEAR or new_year > MAX_ISO_YEAR:
        raise OverflowError(
            f"year must be between {MIN_ISO_YEAR} and {MAX_ISO_YEAR}, "
            f"got {new_year}"
        )
    new_day = min(day, days_in_month(new_year, new_month))
    return ymd_to_epoch_day(new_year, new_month, new_day)


def plus_years(epoch_day: int, years: int) -> int:
    """Add ISO years; February 29 becomes February 28 in non-leap years.

    Examples:
        >>> plus_years(ymd_to_epoch_day(2012, 2, 29), 1) == ymd_to_epoch_day(2013, 2, 28)
        True
    """
    return plus_months(epoch_day, years * 12)


def months_until(start: int, end: int) -> int:
    """Return the number of complete ISO months between two epoch days.

    A month is complete once the end day-of-month reaches the start
    day-of-month. The result is negative when ``end`` precedes ``start``.
    """
    y1, m1, d1 = epoch_day_to_ymd(start)
    y2, m2, d2 = epoch_day_to_ymd(end)
    packed1 = (y1 * 12 + m1 - 1) * 32 + d1
    packed2 = (y2 * 12 + m2 - 1) * 32 + d2
    return div_trunc(packed2 - packed1, 32)


MIN_EPOCH_DAY: int = ymd_to_epoch_day(MIN_ISO_YEAR, 1, 1)
MAX_EPOCH_DAY: int = ymd_to_epoch_day(MAX_ISO_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "check_year",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "year_day_to_epoch_day",
    "epoch_day_to_year_day",
    "plus_months",
    "plus_years",
    "months_until",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
]
