"""JSON serialization and deserialization for Discordian objects.

This module provides functions for converting Discordian objects to and
from JSON-serializable dictionaries.

Functions:
    to_json: Convert a DiscordianDate or DiscordianPeriod to a dict.
    from_json: Create a DiscordianDate or DiscordianPeriod from a dict.

The JSON format uses type tags for polymorphic deserialization. Dates
are stored by epoch day; the rendered string is included for readers
and ignored when loading:

    {"_type": "DiscordianDate", "epoch_day": 15399, "value": "St. Tib's Day! 3178 YOLD"}
    {"_type": "DiscordianPeriod", "years": 0, "months": 1, "days": 68}

Examples:
    >>> from discordian import DiscordianDate
    >>> from discordian.convert import to_json, from_json

    >>> d = DiscordianDate.of(3160, 1, 1)
    >>> data = to_json(d)
    >>> data['_type']
    'DiscordianDate'

    >>> from_json(data) == d
    True
"""

from __future__ import annotations

from typing import Any, Union

from discordian.core.date import DiscordianDate
from discordian.core.period import DiscordianPeriod
from discordian.errors import ParseError

# Type alias for serializable objects
DiscordianType = Union[DiscordianDate, DiscordianPeriod]


def to_json(value: DiscordianType) -> dict[str, Any]:
    """Convert a Discordian object to a JSON-serializable dictionary.

    Args:
        value: A DiscordianDate or DiscordianPeriod.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from discordian import DiscordianDate
        >>> to_json(DiscordianDate.of_epoch_day(0))
        {'_type': 'DiscordianDate', 'epoch_day': 0, 'value': 'Sweetmorn, Chaos 1, 3136 YOLD'}
    """
    if isinstance(value, DiscordianDate):
        return {
            "_type": "DiscordianDate",
            "epoch_day": value.epoch_day,
            "value": str(value),
        }
    elif isinstance(value, DiscordianPeriod):
        return {
            "_type": "DiscordianPeriod",
            "years": value.years,
            "months": value.months,
            "days": value.days,
        }
    else:
        raise TypeError(
            f"expected DiscordianDate or DiscordianPeriod, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> DiscordianType:
    """Create a Discordian object from a JSON dictionary.

    Args:
        data: Dictionary with a ``_type`` tag as produced by ``to_json``.

    Returns:
        A DiscordianDate or DiscordianPeriod.

    Raises:
        ParseError: If the dictionary is malformed or the type is unknown.
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise ParseError("missing '_type' field in JSON data")

    if type_name == "DiscordianDate":
        return DiscordianDate.of_epoch_day(_int_field(data, "epoch_day", type_name))
    elif type_name == "DiscordianPeriod":
        return DiscordianPeriod(
            _int_field(data, "years", type_name),
            _int_field(data, "months", type_name),
            _int_field(data, "days", type_name),
        )
    else:
        raise ParseError(f"unknown type: {type_name!r}")


def _int_field(data: dict[str, Any], key: str, type_name: str) -> int:
    value = data.get(key)
    if value is None:
        raise ParseError(f"missing '{key}' field for {type_name}")
    # bool is an int subclass but never a valid count
    if not isinstance(value, int) or isinstance(value, bool):
        raise ParseError(
            f"'{key}' must be an integer for {type_name}, got {type(value).__name__}"
        )
    return value


__all__ = [
    "to_json",
    "from_json",
]
