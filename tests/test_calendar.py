"""Tests for the calendar conversion and validation functions."""

from __future__ import annotations

import pytest

from discordian import calendar
from discordian.errors import OutOfRangeError


class TestYearConversion:
    """Tests for ISO <-> Discordian year conversion."""

    def test_iso_to_discordian(self) -> None:
        """ISO 1994 is 3160 YOLD."""
        assert calendar.iso_year_to_discordian(1994) == 3160

    def test_discordian_to_iso(self) -> None:
        """3178 YOLD is ISO 2012."""
        assert calendar.discordian_year_to_iso(3178) == 2012

    def test_iso_year_zero(self) -> None:
        """ISO year 0 is 1166 YOLD."""
        assert calendar.iso_year_to_discordian(0) == 1166

    def test_conversions_are_inverses(self) -> None:
        """Converting there and back is the identity."""
        for year in [-(10**12), -1_000_000_000, -1, 0, 1, 1166, 2024, 10**12]:
            assert calendar.discordian_year_to_iso(
                calendar.iso_year_to_discordian(year)
            ) == year
            assert calendar.iso_year_to_discordian(
                calendar.discordian_year_to_iso(year)
            ) == year


class TestIsLeapYear:
    """Tests for the Discordian leap year rule."""

    def test_divisible_by_four(self) -> None:
        """3178 (ISO 2012) is a leap year."""
        assert calendar.is_leap_year(3178) is True

    def test_not_divisible_by_four(self) -> None:
        """3179 (ISO 2013) is not a leap year."""
        assert calendar.is_leap_year(3179) is False

    def test_century_not_leap(self) -> None:
        """3066 (ISO 1900) is not a leap year."""
        assert calendar.is_leap_year(3066) is False

    def test_four_hundred_leap(self) -> None:
        """3166 (ISO 2000) is a leap year."""
        assert calendar.is_leap_year(3166) is True

    def test_year_divisible_by_four_in_yold_is_not_enough(self) -> None:
        """3180 is divisible by 4 but ISO 2014 is not a leap year."""
        assert calendar.is_leap_year(3180) is False


class TestDayOfDiscordianYear:
    """Tests for season/day-of-season to day-of-year conversion."""

    def test_first_day(self) -> None:
        """Chaos 1 is day 1."""
        assert calendar.day_of_discordian_year(3179, 1, 1) == 1

    def test_last_day_non_leap(self) -> None:
        """The Aftermath 73 is day 365 in a non-leap year."""
        assert calendar.day_of_discordian_year(3179, 5, 73) == 365

    def test_last_day_leap(self) -> None:
        """The Aftermath 73 is day 366 in a leap year."""
        assert calendar.day_of_discordian_year(3178, 5, 73) == 366

    def test_before_st_tibs_day(self) -> None:
        """Chaos 59 is unaffected by the leap day."""
        assert calendar.day_of_discordian_year(3178, 1, 59) == 59

    def test_chaos_60_skips_leap_slot(self) -> None:
        """Chaos 60 in a leap year lands after St. Tib's Day."""
        assert calendar.day_of_discordian_year(3178, 1, 60) == 61

    def test_chaos_60_non_leap(self) -> None:
        """Chaos 60 in a non-leap year is day 60."""
        assert calendar.day_of_discordian_year(3179, 1, 60) == 60

    def test_discord_1_leap(self) -> None:
        """Discord 1 is day 75 in a leap year."""
        assert calendar.day_of_discordian_year(3178, 2, 1) == 75

    def test_non_leap_matches_plain_formula(self) -> None:
        """In a non-leap year day-of-year is (season - 1) * 73 + day."""
        for season in range(1, 6):
            for day in (1, 37, 59, 60, 73):
                expected = (season - 1) * 73 + day
                assert calendar.day_of_discordian_year(3179, season, day) == expected

    def test_invalid_season(self) -> None:
        """Season 0 and 6 are rejected."""
        with pytest.raises(OutOfRangeError, match="season must be between 1 and 5"):
            calendar.day_of_discordian_year(3179, 0, 1)
        with pytest.raises(OutOfRangeError, match="season must be between 1 and 5"):
            calendar.day_of_discordian_year(3179, 6, 1)

    def test_invalid_day_of_season(self) -> None:
        """Day-of-season 0 and 74 are rejected."""
        with pytest.raises(OutOfRangeError, match="day_of_season must be between 1 and 73"):
            calendar.day_of_discordian_year(3179, 1, 0)
        with pytest.raises(OutOfRangeError, match="got 74"):
            calendar.day_of_discordian_year(3179, 1, 74)

    def test_keyword_arguments_are_validated(self) -> None:
        """Validation applies when arguments are passed by keyword."""
        with pytest.raises(OutOfRangeError, match="got 9"):
            calendar.day_of_discordian_year(year=3179, season=9, day_of_season=1)


class TestDecompose:
    """Tests for splitting a day-of-year into Discordian fields."""

    def test_first_day(self) -> None:
        """Day 1 is Sweetmorn, Chaos 1."""
        assert calendar.decompose(1, is_leap=False) == (1, 1, 1)

    def test_st_tibs_day(self) -> None:
        """Day 60 of a leap year is the sentinel (0, 0, 0)."""
        assert calendar.decompose(60, is_leap=True) == (0, 0, 0)

    def test_day_60_non_leap(self) -> None:
        """Day 60 of a non-leap year is Chaos 60."""
        assert calendar.decompose(60, is_leap=False) == (1, 60, 5)

    def test_day_before_st_tibs_day(self) -> None:
        """Day 59 of a leap year is Prickle-Prickle, Chaos 59."""
        assert calendar.decompose(59, is_leap=True) == (1, 59, 4)

    def test_day_after_st_tibs_day(self) -> None:
        """Day 61 of a leap year continues the week where day 59 stopped."""
        assert calendar.decompose(61, is_leap=True) == (1, 60, 5)

    def test_season_boundary(self) -> None:
        """Day 73 ends Chaos and day 74 starts Discord."""
        assert calendar.decompose(73, is_leap=False) == (1, 73, 3)
        assert calendar.decompose(74, is_leap=False) == (2, 1, 4)

    def test_last_day_non_leap(self) -> None:
        """Day 365 of a non-leap year is Setting Orange, The Aftermath 73."""
        assert calendar.decompose(365, is_leap=False) == (5, 73, 5)

    def test_last_day_leap(self) -> None:
        """Day 366 of a leap year is Setting Orange, The Aftermath 73."""
        assert calendar.decompose(366, is_leap=True) == (5, 73, 5)

    def test_total_over_year(self) -> None:
        """Every day of a leap year decodes to in-range fields."""
        for day_of_year in range(1, 367):
            season, day, weekday = calendar.decompose(day_of_year, is_leap=True)
            if day_of_year == 60:
                assert (season, day, weekday) == (0, 0, 0)
            else:
                assert 1 <= season <= 5
                assert 1 <= day <= 73
                assert 1 <= weekday <= 5


class TestValidation:
    """Tests for the range validators."""

    def test_validate_accepts_bounds(self) -> None:
        """Both bounds are inclusive."""
        calendar.validate(1, 1, 5, "season")
        calendar.validate(5, 1, 5, "season")

    def test_validate_error_carries_context(self) -> None:
        """The error keeps value, bounds and field name."""
        with pytest.raises(OutOfRangeError) as exc_info:
            calendar.validate(7, 1, 5, "season")
        err = exc_info.value
        assert err.value == 7
        assert err.minimum == 1
        assert err.maximum == 5
        assert err.field == "season"
        assert str(err) == "season must be between 1 and 5, got 7"

    def test_check_valid_season(self) -> None:
        """Seasons 1-5 are valid, 0 and 6 are not."""
        for season in range(1, 6):
            calendar.check_valid_season(season)
        for season in (0, 6, -1):
            with pytest.raises(OutOfRangeError):
                calendar.check_valid_season(season)

    def test_check_valid_day_of_season(self) -> None:
        """Days 1-73 are valid; negatives and 74 are not."""
        calendar.check_valid_day_of_season(1)
        calendar.check_valid_day_of_season(73)
        for day in (-1, 0, 74):
            with pytest.raises(OutOfRangeError, match="day_of_season"):
                calendar.check_valid_day_of_season(day)

    def test_check_valid_day_of_week(self) -> None:
        """Weekdays 1-5 are valid, 0 and 6 are not."""
        calendar.check_valid_day_of_week(5)
        for day in (0, 6):
            with pytest.raises(OutOfRangeError, match="day_of_week"):
                calendar.check_valid_day_of_week(day)


class TestNames:
    """Tests for season and day names."""

    def test_season_names(self) -> None:
        """Each season has its name."""
        names = [calendar.season_name(s) for s in range(1, 6)]
        assert names == ["Chaos", "Discord", "Confusion", "Bureaucracy", "The Aftermath"]

    def test_day_names(self) -> None:
        """Each weekday has its name."""
        names = [calendar.day_name(d) for d in range(1, 6)]
        assert names == [
            "Sweetmorn",
            "Boomtime",
            "Pungenday",
            "Prickle-Prickle",
            "Setting Orange",
        ]

    def test_leap_sentinel_has_no_season_name(self) -> None:
        """Season 0 has no name."""
        with pytest.raises(OutOfRangeError):
            calendar.season_name(0)

    def test_leap_sentinel_has_no_day_name(self) -> None:
        """Weekday 0 has no name."""
        with pytest.raises(OutOfRangeError):
            calendar.day_name(0)
