"""Conversion utilities.

This module provides functions for converting Discordian objects to and
from other representations:
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds)

Examples:
    >>> from discordian import DiscordianDate
    >>> from discordian.convert import to_json, from_json

    >>> d = DiscordianDate.of_leap_day(3178)
    >>> from_json(to_json(d)) == d
    True
"""

from __future__ import annotations

from discordian.convert.json import from_json, to_json
from discordian.convert.epoch import (
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
