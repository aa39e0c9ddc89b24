"""Units, fields and eras.

This module provides:
    - DiscordianEra: the single YOLD era
    - DiscordianUnit: arithmetic units (DAYS, WEEKS, SEASONS, ...)
    - DiscordianField: readable and settable date fields
    - ValueRange: inclusive range of valid field values
"""

from __future__ import annotations

from discordian.units.era import DiscordianEra
from discordian.units.field import DiscordianField, ValueRange
from discordian.units.unit import DiscordianUnit

__all__: list[str] = [
    "DiscordianEra",
    "DiscordianField",
    "DiscordianUnit",
    "ValueRange",
]
