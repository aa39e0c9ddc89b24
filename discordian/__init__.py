"""Discordian: the Discordian calendar as a Python date type.

Discordian maps the Discordian calendar to and from the proleptic
Gregorian calendar through a shared epoch-day count, and provides the
arithmetic and field access needed to use it as a first-class date.

Core Types:
    DiscordianDate: Immutable date (year, season, day-of-season)
    DiscordianChronology: The calendar-system singleton
    DiscordianPeriod: (years, seasons, days) between two dates

Units:
    DiscordianEra: The single YOLD era
    DiscordianUnit: Arithmetic units (DAYS, WEEKS, SEASONS, ...)
    DiscordianField: Date fields (YEAR, SEASON, DAY_OF_SEASON, ...)
    ValueRange: Inclusive range of valid field values

Exceptions:
    DiscordianError: Base exception
    ValidationError: Invalid input values
    OutOfRangeError: Field value outside its valid interval
    UnsupportedOperationError: Operation meaningless for this calendar
    OverflowError: Arithmetic overflow
    IncompatibleTypeError: Operand is not a Discordian date
    IncompatibleChronologyError: Operand from another calendar system
    ParseError: Malformed serialized input

Example:
    >>> from discordian import DiscordianDate, DiscordianUnit
    >>> d = DiscordianDate.of(3178, 1, 59)
    >>> str(d.plus(1, DiscordianUnit.DAYS))
    "St. Tib's Day! 3178 YOLD"
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from discordian.core.chronology import DiscordianChronology
from discordian.core.date import DiscordianDate
from discordian.core.period import DiscordianPeriod

# Units
from discordian.units.era import DiscordianEra
from discordian.units.field import DiscordianField, ValueRange
from discordian.units.unit import DiscordianUnit

# Exceptions
from discordian.errors import (
    DiscordianError,
    IncompatibleChronologyError,
    IncompatibleTypeError,
    OutOfRangeError,
    OverflowError,
    ParseError,
    UnsupportedOperationError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DiscordianChronology",
    "DiscordianDate",
    "DiscordianPeriod",
    # Units
    "DiscordianEra",
    "DiscordianField",
    "DiscordianUnit",
    "ValueRange",
    # Exceptions
    "DiscordianError",
    "ValidationError",
    "OutOfRangeError",
    "UnsupportedOperationError",
    "OverflowError",
    "IncompatibleTypeError",
    "IncompatibleChronologyError",
    "ParseError",
]
