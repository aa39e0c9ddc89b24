"""Internal utilities for Discordian.

This module contains private implementation details:
    - ISO calendar primitives (epoch day conversions, leap years)
    - Range validation helpers
    - Fixed-width integer arithmetic
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from discordian._internal.arithmetic import div_trunc, mod_trunc, safe_multiply
from discordian._internal.validation import check_value_in_range, validate_range

__all__: list[str] = [
    "check_value_in_range",
    "div_trunc",
    "mod_trunc",
    "safe_multiply",
    "validate_range",
]
