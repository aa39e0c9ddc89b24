"""Internal constants for Discordian.

These constants define the calendar shape and the limits used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Calendar shape
SEASONS_PER_YEAR: int = 5
DAYS_PER_SEASON: int = 73
DAYS_PER_WEEK: int = 5

# Day-of-year of St. Tib's Day in a leap year (ISO February 29)
ST_TIBS_DAY: int = 60

# Discordian year = ISO year + offset (ISO year 0 is 1166 YOLD)
ISO_YEAR_OFFSET: int = 1166

SEASON_NAMES: tuple[str, ...] = (
    "Chaos",
    "Discord",
    "Confusion",
    "Bureaucracy",
    "The Aftermath",
)

DAY_NAMES: tuple[str, ...] = (
    "Sweetmorn",
    "Boomtime",
    "Pungenday",
    "Prickle-Prickle",
    "Setting Orange",
)

# ISO year limits
MIN_ISO_YEAR: int = -999_999_999
MAX_ISO_YEAR: int = 999_999_999

MIN_YEAR: int = MIN_ISO_YEAR + ISO_YEAR_OFFSET
MAX_YEAR: int = MAX_ISO_YEAR + ISO_YEAR_OFFSET

# Signed 64-bit bounds for scaled amounts in plus()
MIN_LONG: int = -(2**63)
MAX_LONG: int = 2**63 - 1

# Days before each ISO month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334
)

# Days in each ISO month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (0001-01-01 = 1) of the epoch day origin 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

SECONDS_PER_DAY: int = 86_400
MILLIS_PER_DAY: int = SECONDS_PER_DAY * 1_000


__all__ = [
    "SEASONS_PER_YEAR",
    "DAYS_PER_SEASON",
    "DAYS_PER_WEEK",
    "ST_TIBS_DAY",
    "ISO_YEAR_OFFSET",
    "SEASON_NAMES",
    "DAY_NAMES",
    "MIN_ISO_YEAR",
    "MAX_ISO_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_LONG",
    "MAX_LONG",
    "DAYS_BEFORE_MONTH",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "SECONDS_PER_DAY",
    "MILLIS_PER_DAY",
]
