"""Edge case tests: error hierarchy, validation helpers and range limits."""

from __future__ import annotations

import pytest

from discordian import DiscordianDate, DiscordianUnit
from discordian._internal import (
    check_value_in_range,
    div_trunc,
    mod_trunc,
    safe_multiply,
    validate_range,
)
from discordian._internal.constants import MAX_LONG, MAX_YEAR, MIN_LONG, MIN_YEAR
from discordian.errors import (
    DiscordianError,
    IncompatibleChronologyError,
    IncompatibleTypeError,
    OutOfRangeError,
    OverflowError,
    ParseError,
    UnsupportedOperationError,
    ValidationError,
)


class TestErrorHierarchy:
    """Tests for the exception classes."""

    def test_all_derive_from_base(self) -> None:
        """Every error is a DiscordianError."""
        for cls in (
            ValidationError,
            OutOfRangeError,
            UnsupportedOperationError,
            OverflowError,
            IncompatibleTypeError,
            IncompatibleChronologyError,
            ParseError,
        ):
            assert issubclass(cls, DiscordianError)

    def test_out_of_range_is_validation_error(self) -> None:
        """OutOfRangeError is a ValidationError."""
        assert issubclass(OutOfRangeError, ValidationError)

    def test_incompatible_type_is_type_error(self) -> None:
        """IncompatibleTypeError is also a builtin TypeError."""
        assert issubclass(IncompatibleTypeError, TypeError)

    def test_overflow_shadows_builtin(self) -> None:
        """The package OverflowError is its own class."""
        import builtins

        assert OverflowError is not builtins.OverflowError


class TestValidateRange:
    """Tests for the validate_range decorator."""

    def test_positional_and_keyword(self) -> None:
        """Arguments are checked however they are passed."""

        @validate_range(season=(1, 5))
        def first_day(year: int, season: int) -> int:
            return (season - 1) * 73 + 1

        assert first_day(3178, 2) == 74
        assert first_day(3178, season=5) == 293
        with pytest.raises(OutOfRangeError, match="season must be between 1 and 5, got 6"):
            first_day(3178, 6)
        with pytest.raises(OutOfRangeError):
            first_day(year=3178, season=0)

    def test_defaults_are_not_checked(self) -> None:
        """Parameters left at their default are not validated."""

        @validate_range(day=(1, 73))
        def pick(day: int | None = None) -> int | None:
            return day

        assert pick() is None

    def test_preserves_metadata(self) -> None:
        """The wrapper keeps the function name."""

        @validate_range(day=(1, 73))
        def pick_day(day: int) -> int:
            return day

        assert pick_day.__name__ == "pick_day"

    def test_check_value_in_range(self) -> None:
        """The plain helper reports the field name."""
        check_value_in_range(0, 0, 0, "era")
        with pytest.raises(OutOfRangeError, match="era"):
            check_value_in_range(2, 1, 1, "era")

    def test_docstring_examples(self) -> None:
        """The decorator's docstring example runs as written."""
        import doctest

        from discordian._internal import validation

        result = doctest.testmod(validation)
        assert result.attempted > 0
        assert result.failed == 0


class TestIntegerHelpers:
    """Tests for the fixed-width integer helpers."""

    def test_safe_multiply(self) -> None:
        """Products inside 64 bits are exact."""
        assert safe_multiply(3, 73) == 219
        assert safe_multiply(-3, 5) == -15
        assert safe_multiply(MAX_LONG, 1) == MAX_LONG
        assert safe_multiply(MIN_LONG, 1) == MIN_LONG

    def test_safe_multiply_overflow(self) -> None:
        """Products outside 64 bits raise OverflowError."""
        with pytest.raises(OverflowError):
            safe_multiply(MAX_LONG, 2)
        with pytest.raises(OverflowError):
            safe_multiply(MIN_LONG, -1)

    def test_div_trunc(self) -> None:
        """Division rounds toward zero."""
        assert div_trunc(7, 5) == 1
        assert div_trunc(-7, 5) == -1
        assert div_trunc(7, -5) == -1
        assert div_trunc(-7, -5) == 1
        assert div_trunc(0, 5) == 0

    def test_mod_trunc(self) -> None:
        """The remainder takes the sign of the dividend."""
        assert mod_trunc(7, 5) == 2
        assert mod_trunc(-7, 5) == -2
        assert mod_trunc(-10, 5) == 0


class TestRangeLimits:
    """Tests at the ends of the supported range."""

    def test_last_supported_day(self) -> None:
        """The last day of the last year exists and cannot be passed."""
        last = DiscordianDate.of(MAX_YEAR, 5, 73)
        assert last.year == MAX_YEAR
        with pytest.raises(OverflowError):
            last.plus(1, DiscordianUnit.DAYS)

    def test_first_supported_day(self) -> None:
        """The first day of the first year exists and cannot be passed."""
        first = DiscordianDate.of(MIN_YEAR, 1, 1)
        assert first.year == MIN_YEAR
        assert first.day_of_week == 1
        with pytest.raises(OverflowError):
            first.minus(1, DiscordianUnit.DAYS)

    def test_year_beyond_limit(self) -> None:
        """Years past the limits are rejected at construction."""
        with pytest.raises(OutOfRangeError):
            DiscordianDate.of(MAX_YEAR + 1, 1, 1)
        with pytest.raises(OutOfRangeError):
            DiscordianDate.of_year_day(MIN_YEAR - 1, 1)

    def test_far_past_renders(self) -> None:
        """Negative Discordian years render like any other."""
        d = DiscordianDate.of(-5, 3, 3)
        assert str(d) == "Prickle-Prickle, Confusion 3, -5 YOLD"
        assert d.year == -5
