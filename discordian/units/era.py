"""Era enumeration for the Discordian calendar.

The Discordian calendar counts every year in a single era, YOLD
("Year of Our Lady of Discord").
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discordian.core.chronology import DiscordianChronology


class DiscordianEra(Enum):
    """Historical era designation.

    There is exactly one member. Its numeric field value is 1, the
    value reported by ``DiscordianDate.field_value(DiscordianField.ERA)``.

    Examples:
        >>> DiscordianEra.YOLD.number
        1
        >>> str(DiscordianEra.YOLD)
        'YOLD'
    """

    YOLD = "YOLD"  # Year of Our Lady of Discord

    @property
    def number(self) -> int:
        """Return the numeric value of this era."""
        return 1

    @property
    def chronology(self) -> DiscordianChronology:
        """Return the calendar system this era belongs to."""
        from discordian.core.chronology import DiscordianChronology

        return DiscordianChronology.INSTANCE

    def __str__(self) -> str:
        return self.value


__all__ = ["DiscordianEra"]
