"""Integer helpers with fixed-width semantics.

Python integers never overflow and ``//``/``%`` round toward negative
infinity. The calendar arithmetic is specified in terms of signed 64-bit
amounts and division that truncates toward zero, so these helpers make
both explicit.

This module is not part of the public API.
"""

from __future__ import annotations

from discordian._internal.constants import MAX_LONG, MIN_LONG
from discordian.errors import OverflowError


def safe_multiply(value: int, multiplier: int) -> int:
    """Multiply two integers, failing if the product leaves the 64-bit range.

    Args:
        value: The amount to scale.
        multiplier: The scale factor.

    Returns:
        The exact product.

    Raises:
        OverflowError: If the product does not fit a signed 64-bit integer.

    Examples:
        >>> safe_multiply(3, 73)
        219
    """
    result = value * multiplier
    if result < MIN_LONG or result > MAX_LONG:
        raise OverflowError(
            f"multiplication overflows a 64-bit integer: {value} * {multiplier}"
        )
    return result


def div_trunc(dividend: int, divisor: int) -> int:
    """Divide, rounding toward zero.

    Examples:
        >>> div_trunc(7, 5)
        1
        >>> div_trunc(-7, 5)
        -1
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def mod_trunc(dividend: int, divisor: int) -> int:
    """Remainder matching ``div_trunc``; takes the sign of the dividend.

    Examples:
        >>> mod_trunc(-7, 5)
        -2
    """
    return dividend - divisor * div_trunc(dividend, divisor)


__all__ = [
    "safe_multiply",
    "div_trunc",
    "mod_trunc",
]
