"""Discordian exception hierarchy.

All Discordian-specific exceptions inherit from DiscordianError.
"""

from __future__ import annotations


class DiscordianError(Exception):
    """Base exception for all Discordian errors."""

    pass


class ValidationError(DiscordianError):
    """Invalid input values.

    Raised when a calendar value is out of range or invalid.
    """

    pass


class OutOfRangeError(ValidationError):
    """A field value lies outside its valid interval.

    The offending value and the inclusive bounds are kept on the
    exception so callers can build their own messages.

    Examples:
        - Season value outside 1-5
        - Day-of-season value outside 1-73
        - Day-of-year 366 in a non-leap year

    Attributes:
        value: The rejected value.
        minimum: Smallest valid value (inclusive).
        maximum: Largest valid value (inclusive).
        field: Name of the field being validated.
    """

    def __init__(self, value: int, minimum: int, maximum: int, field: str) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.field = field
        super().__init__(
            f"{field} must be between {minimum} and {maximum}, got {value}"
        )


class UnsupportedOperationError(DiscordianError):
    """Operation has no meaning in the Discordian calendar.

    Examples:
        - Adding eras (there is only one)
        - Setting the day of week on St. Tib's Day
    """

    pass


class OverflowError(DiscordianError):
    """Arithmetic operation exceeded representable range.

    Examples:
        - Scaling an amount of seasons beyond a signed 64-bit day count
        - Adding days past the last supported year
    """

    pass


class IncompatibleTypeError(DiscordianError, TypeError):
    """The other operand is not a Discordian date."""

    pass


class IncompatibleChronologyError(DiscordianError):
    """The other operand belongs to a different calendar system."""

    pass


class ParseError(DiscordianError):
    """Failed to read a serialized representation.

    Examples:
        - JSON payload that is not a dict
        - Missing or non-integer ``epoch_day`` field
    """

    pass


__all__ = [
    "DiscordianError",
    "ValidationError",
    "OutOfRangeError",
    "UnsupportedOperationError",
    "OverflowError",
    "IncompatibleTypeError",
    "IncompatibleChronologyError",
    "ParseError",
]
