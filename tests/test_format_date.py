"""Tests for format_date() rendering.

Validates every token against fixed dates and the documented scenarios.
"""

from datetime import UTC, date, datetime

import pytest

from dateformatter import InvalidFormatError, format_date

SUNDAY = date(2024, 3, 17)
FRIDAY = date(2024, 1, 5)


class TestScenarios:
    """Documented end-to-end examples."""

    def test_day_month_name_year(self) -> None:
        """2024-03-17 as 'dd mmmm yyyy'."""
        assert format_date(SUNDAY, "dd mmmm yyyy") == "17 March 2024"

    def test_us_short_date(self) -> None:
        """2024-01-05 as 'm/d/yy'."""
        assert format_date(FRIDAY, "m/d/yy") == "1/5/24"

    def test_weekday_month_year(self) -> None:
        """Weekday, abbreviated month and short year."""
        assert format_date(SUNDAY, "dddd mmm yy") == "Sunday Mar 24"

    def test_month_day_year(self) -> None:
        assert format_date(SUNDAY, "mmm d yy") == "Mar 17 24"

    def test_four_part_weekday_pattern_rejected(self) -> None:
        """Four parts with two day tokens is outside the grammar."""
        with pytest.raises(InvalidFormatError):
            format_date(SUNDAY, "dddd mmm d yy")

    def test_comma_is_not_a_separator(self) -> None:
        with pytest.raises(InvalidFormatError):
            format_date(SUNDAY, "dddd, mmm yy")

    def test_iso_layout(self) -> None:
        assert format_date(FRIDAY, "yyyy-mm-dd") == "2024-01-05"

    def test_european_layout(self) -> None:
        assert format_date(FRIDAY, "dd.mm.yyyy") == "05.01.2024"

    def test_weekday_abbreviation_with_period(self) -> None:
        assert format_date(FRIDAY, "ddd.mm.yyyy") == "Fri.01.2024"


class TestYearTokens:
    """yy and yyyy."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2024, "24"), (2005, "05"), (2000, "00"), (1999, "99"), (1, "01"), (9999, "99")],
    )
    def test_two_digit_year(self, year: int, expected: str) -> None:
        """yy keeps the last two digits, zero-padded."""
        assert format_date(date(year, 6, 1), "yy-mm-dd").split("-")[0] == expected

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(2024, "2024"), (987, "0987"), (42, "0042"), (1, "0001"), (9999, "9999")],
    )
    def test_four_digit_year(self, year: int, expected: str) -> None:
        """yyyy zero-pads to width 4."""
        assert format_date(date(year, 6, 1), "yyyy-mm-dd").split("-")[0] == expected


class TestMonthTokens:
    """m, mm, mmm and mmmm."""

    def test_numeric_month_unpadded(self) -> None:
        assert format_date(date(2024, 3, 1), "m/d/yyyy") == "3/1/2024"
        assert format_date(date(2024, 11, 1), "m/d/yyyy") == "11/1/2024"

    def test_padded_month(self) -> None:
        assert format_date(date(2024, 3, 1), "mm/dd/yyyy") == "03/01/2024"
        assert format_date(date(2024, 12, 1), "mm/dd/yyyy") == "12/01/2024"

    @pytest.mark.parametrize(
        ("month", "short", "long"),
        [
            (1, "Jan", "January"),
            (2, "Feb", "February"),
            (3, "Mar", "March"),
            (4, "Apr", "April"),
            (5, "May", "May"),
            (6, "Jun", "June"),
            (7, "Jul", "July"),
            (8, "Aug", "August"),
            (9, "Sep", "September"),
            (10, "Oct", "October"),
            (11, "Nov", "November"),
            (12, "Dec", "December"),
        ],
    )
    def test_month_names(self, month: int, short: str, long: str) -> None:
        value = date(2023, month, 1)
        assert format_date(value, "mmm d yyyy") == f"{short} 1 2023"
        assert format_date(value, "mmmm d yyyy") == f"{long} 1 2023"


class TestDayTokens:
    """d, dd, ddd and dddd."""

    def test_numeric_day_unpadded(self) -> None:
        assert format_date(FRIDAY, "d.m.yy") == "5.1.24"
        assert format_date(date(2024, 1, 31), "d.m.yy") == "31.1.24"

    def test_padded_day(self) -> None:
        assert format_date(FRIDAY, "dd.mm.yy") == "05.01.24"

    @pytest.mark.parametrize(
        ("day", "short", "long"),
        [
            (1, "Mon", "Monday"),
            (2, "Tue", "Tuesday"),
            (3, "Wed", "Wednesday"),
            (4, "Thu", "Thursday"),
            (5, "Fri", "Friday"),
            (6, "Sat", "Saturday"),
            (7, "Sun", "Sunday"),
        ],
    )
    def test_weekday_names(self, day: int, short: str, long: str) -> None:
        """2024-01-01 is a Monday."""
        value = date(2024, 1, day)
        assert format_date(value, "ddd mm yyyy") == f"{short} 01 2024"
        assert format_date(value, "dddd mm yyyy") == f"{long} 01 2024"


class TestOrderAndSeparators:
    """Parts render in pattern order, joined by the pattern separator."""

    @pytest.mark.parametrize("separator", ["/", ".", "-", " "])
    def test_separator_preserved(self, separator: str) -> None:
        pattern = separator.join(["mmm", "yyyy", "dd"])
        assert format_date(SUNDAY, pattern) == separator.join(["Mar", "2024", "17"])

    def test_any_order(self) -> None:
        assert format_date(SUNDAY, "yyyy/dd/mm") == "2024/17/03"
        assert format_date(SUNDAY, "dd/yyyy/mm") == "17/2024/03"
        assert format_date(SUNDAY, "mm/dd/yyyy") == "03/17/2024"


class TestInputValues:
    """Accepted and rejected date values."""

    def test_datetime_time_part_ignored(self) -> None:
        value = datetime(2024, 3, 17, 23, 59, 59, tzinfo=UTC)
        assert format_date(value, "dd mmmm yyyy") == "17 March 2024"

    def test_naive_datetime(self) -> None:
        assert format_date(datetime(2024, 1, 5, 8, 30), "m/d/yy") == "1/5/24"

    def test_leap_day(self) -> None:
        assert format_date(date(2024, 2, 29), "dd mmmm yyyy") == "29 February 2024"
        assert format_date(date(2024, 2, 29), "ddd.mm.yy") == "Thu.02.24"

    def test_non_date_rejected(self) -> None:
        with pytest.raises(TypeError, match="Expected date or datetime, got str"):
            format_date("2024-03-17", "yyyy-mm-dd")  # type: ignore[arg-type]

    def test_repeated_calls_identical(self) -> None:
        first = format_date(SUNDAY, "dddd mmmm yyyy")
        second = format_date(SUNDAY, "dddd mmmm yyyy")
        assert first == second == "Sunday March 2024"
