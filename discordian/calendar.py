"""Discordian calendar arithmetic.

Stateless functions that convert between ISO and Discordian numbering
and split a day-of-year into season, day-of-season and day-of-week.

The Discordian year has five seasons of 73 days and a five-day week.
In ISO leap years St. Tib's Day is spliced in as day-of-year 60; it
belongs to no season and no week, so the day after it carries on the
numbering as if it had not happened.

Examples:
    >>> iso_year_to_discordian(2012)
    3178
    >>> decompose(1, is_leap=False)
    (1, 1, 1)
    >>> decompose(60, is_leap=True)
    (0, 0, 0)
"""

from __future__ import annotations

from discordian._internal import iso
from discordian._internal.constants import (
    DAY_NAMES,
    DAYS_PER_SEASON,
    DAYS_PER_WEEK,
    ISO_YEAR_OFFSET,
    SEASON_NAMES,
    SEASONS_PER_YEAR,
    ST_TIBS_DAY,
)
from discordian._internal.validation import check_value_in_range, validate_range


def iso_year_to_discordian(iso_year: int) -> int:
    """Convert an ISO year to the Discordian year (YOLD).

    Examples:
        >>> iso_year_to_discordian(1994)
        3160
    """
    return iso_year + ISO_YEAR_OFFSET


def discordian_year_to_iso(discordian_year: int) -> int:
    """Convert a Discordian year (YOLD) to the ISO year.

    Examples:
        >>> discordian_year_to_iso(3160)
        1994
    """
    return discordian_year - ISO_YEAR_OFFSET


def is_leap_year(discordian_year: int) -> bool:
    """Return True if the Discordian year contains St. Tib's Day.

    This is the Gregorian rule applied to the equivalent ISO year.

    Examples:
        >>> is_leap_year(3178)  # ISO 2012
        True
        >>> is_leap_year(3066)  # ISO 1900
        False
    """
    return iso.is_leap_year(discordian_year_to_iso(discordian_year))


@validate_range(season=(1, SEASONS_PER_YEAR), day_of_season=(1, DAYS_PER_SEASON))
def day_of_discordian_year(year: int, season: int, day_of_season: int) -> int:
    """Return the ISO day-of-year for a season and day-of-season.

    In a leap year every day from the 60th ordinary day onwards is
    pushed back by one to make room for St. Tib's Day.

    Args:
        year: The Discordian year.
        season: The season (1-5).
        day_of_season: The day within the season (1-73).

    Returns:
        Day of year (1-366).

    Raises:
        OutOfRangeError: If season or day_of_season is out of range.

    Examples:
        >>> day_of_discordian_year(3178, 1, 59)
        59
        >>> day_of_discordian_year(3178, 1, 60)  # after St. Tib's Day
        61
        >>> day_of_discordian_year(3179, 1, 60)
        60
    """
    day_of_year = (season - 1) * DAYS_PER_SEASON + day_of_season
    if is_leap_year(year) and day_of_year >= ST_TIBS_DAY:
        day_of_year += 1
    return day_of_year


def decompose(day_of_year: int, is_leap: bool) -> tuple[int, int, int]:
    """Split an ISO day-of-year into Discordian fields.

    Args:
        day_of_year: Day of year (1-366).
        is_leap: Whether the year is a leap year.

    Returns:
        Tuple of (season, day_of_season, day_of_week). St. Tib's Day
        yields (0, 0, 0).

    Examples:
        >>> decompose(73, is_leap=False)
        (1, 73, 3)
        >>> decompose(74, is_leap=False)
        (2, 1, 4)
        >>> decompose(61, is_leap=True)
        (1, 60, 5)
    """
    if is_leap:
        if day_of_year == ST_TIBS_DAY:
            return (0, 0, 0)
        if day_of_year > ST_TIBS_DAY:
            day_of_year -= 1
    index = day_of_year - 1
    return (
        index // DAYS_PER_SEASON + 1,
        index % DAYS_PER_SEASON + 1,
        index % DAYS_PER_WEEK + 1,
    )


def validate(value: int, minimum: int, maximum: int, field: str = "value") -> None:
    """Raise OutOfRangeError unless ``minimum <= value <= maximum``."""
    check_value_in_range(value, minimum, maximum, field)


def check_valid_season(season: int) -> None:
    """Validate a season number (1-5)."""
    validate(season, 1, SEASONS_PER_YEAR, "season")


def check_valid_day_of_season(day_of_season: int) -> None:
    """Validate a day-of-season (1-73)."""
    validate(day_of_season, 1, DAYS_PER_SEASON, "day_of_season")


def check_valid_day_of_week(day_of_week: int) -> None:
    """Validate a day-of-week (1-5)."""
    validate(day_of_week, 1, DAYS_PER_WEEK, "day_of_week")


def season_name(season: int) -> str:
    """Return the name of a season.

    St. Tib's Day (season 0) has no season name; check for it before
    calling.

    Raises:
        OutOfRangeError: If season is not 1-5.

    Examples:
        >>> season_name(5)
        'The Aftermath'
    """
    check_valid_season(season)
    return SEASON_NAMES[season - 1]


def day_name(day_of_week: int) -> str:
    """Return the name of a day of the week.

    Raises:
        OutOfRangeError: If day_of_week is not 1-5.

    Examples:
        >>> day_name(4)
        'Prickle-Prickle'
    """
    check_valid_day_of_week(day_of_week)
    return DAY_NAMES[day_of_week - 1]


__all__ = [
    "DAY_NAMES",
    "DAYS_PER_SEASON",
    "DAYS_PER_WEEK",
    "ISO_YEAR_OFFSET",
    "SEASON_NAMES",
    "SEASONS_PER_YEAR",
    "ST_TIBS_DAY",
    "iso_year_to_discordian",
    "discordian_year_to_iso",
    "is_leap_year",
    "day_of_discordian_year",
    "decompose",
    "validate",
    "check_valid_season",
    "check_valid_day_of_season",
    "check_valid_day_of_week",
    "season_name",
    "day_name",
]
