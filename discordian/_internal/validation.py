"""Validation utilities for Discordian.

This module provides the range check shared by every field validator,
plus a decorator form for functions whose preconditions are plain
integer intervals.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from discordian.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def check_value_in_range(value: int, minimum: int, maximum: int, field: str) -> None:
    """Validate that ``minimum <= value <= maximum``.

    Args:
        value: The value to check.
        minimum: Smallest valid value (inclusive).
        maximum: Largest valid value (inclusive).
        field: Field name used in the error message.

    Raises:
        OutOfRangeError: If value lies outside the interval.
    """
    if value < minimum or value > maximum:
        raise OutOfRangeError(value, minimum, maximum, field)


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising OutOfRangeError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(season=(1, 5))
        ... def first_day(year: int, season: int) -> int:
        ...     return (season - 1) * 73 + 1

        >>> first_day(3178, 6)
        Traceback (most recent call last):
        ...
        discordian.errors.OutOfRangeError: season must be between 1 and 5, got 6
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None:
                    check_value_in_range(value, min_val, max_val, param_name)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "check_value_in_range",
    "validate_range",
]
