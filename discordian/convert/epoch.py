"""Unix epoch conversion utilities for Discordian dates.

This module provides functions for converting between DiscordianDate and
Unix timestamps (seconds or milliseconds since 1970-01-01 00:00:00 UTC).

Functions:
    to_unix_seconds: Timestamp of the date's midnight UTC, in seconds.
    from_unix_seconds: The date containing a timestamp in seconds.
    to_unix_millis: Timestamp of the date's midnight UTC, in milliseconds.
    from_unix_millis: The date containing a timestamp in milliseconds.

Timestamps are interpreted in UTC and floored to whole days, so negative
timestamps belong to the day before the epoch.

Examples:
    >>> from discordian.convert import to_unix_seconds, from_unix_seconds

    >>> str(from_unix_seconds(0))
    'Sweetmorn, Chaos 1, 3136 YOLD'

    >>> to_unix_seconds(from_unix_seconds(86_399))
    0
"""

from __future__ import annotations

from discordian._internal.constants import MILLIS_PER_DAY, SECONDS_PER_DAY
from discordian.core.date import DiscordianDate


def to_unix_seconds(date: DiscordianDate) -> int:
    """Return the Unix timestamp of midnight UTC at the start of the date.

    Examples:
        >>> from discordian import DiscordianDate
        >>> to_unix_seconds(DiscordianDate.of_leap_day(3178))
        1330473600
    """
    return date.epoch_day * SECONDS_PER_DAY


def from_unix_seconds(seconds: int) -> DiscordianDate:
    """Return the date containing a Unix timestamp in seconds.

    Examples:
        >>> str(from_unix_seconds(-1))
        'Setting Orange, The Aftermath 73, 3135 YOLD'
    """
    return DiscordianDate.of_epoch_day(seconds // SECONDS_PER_DAY)


def to_unix_millis(date: DiscordianDate) -> int:
    """Return the Unix timestamp of midnight UTC in milliseconds."""
    return date.epoch_day * MILLIS_PER_DAY


def from_unix_millis(millis: int) -> DiscordianDate:
    """Return the date containing a Unix timestamp in milliseconds."""
    return DiscordianDate.of_epoch_day(millis // MILLIS_PER_DAY)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
