"""DiscordianPeriod: the result of ``DiscordianDate.until``.

A period is a (years, months, days) triple in Discordian terms, where a
month is a season. Components are stored as computed, without
normalization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

from discordian._internal.constants import SEASONS_PER_YEAR


@dataclass(frozen=True)
class DiscordianPeriod:
    """A calendar-based amount of time in years, seasons and days.

    Attributes:
        years: Number of years (can be negative).
        months: Number of seasons (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> p = DiscordianPeriod(1, 2, 10)
        >>> p.total_months
        7
        >>> p.negated()
        DiscordianPeriod(years=-1, months=-2, days=-10)
    """

    ZERO: ClassVar[DiscordianPeriod]

    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_months(self) -> int:
        """Return years and months combined as a number of seasons."""
        return self.years * SEASONS_PER_YEAR + self.months

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self.years < 0 or self.months < 0 or self.days < 0

    def negated(self) -> DiscordianPeriod:
        """Return a period with every component negated."""
        return DiscordianPeriod(-self.years, -self.months, -self.days)

    def __neg__(self) -> DiscordianPeriod:
        return self.negated()

    def __iter__(self) -> Iterator[int]:
        return iter((self.years, self.months, self.days))

    def __str__(self) -> str:
        if self.is_zero:
            return "P0D"
        parts = ["P"]
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return "".join(parts)


DiscordianPeriod.ZERO = DiscordianPeriod()


__all__ = ["DiscordianPeriod"]
