"""Core Discordian types.

This module provides:
    - DiscordianDate: immutable date backed by an epoch day
    - DiscordianChronology: the calendar-system singleton
    - DiscordianPeriod: (years, seasons, days) returned by until()
"""

from __future__ import annotations

from discordian.core.chronology import DiscordianChronology
from discordian.core.date import DiscordianDate
from discordian.core.period import DiscordianPeriod

__all__: list[str] = [
    "DiscordianChronology",
    "DiscordianDate",
    "DiscordianPeriod",
]
