"""Unit tests for date string parsing into UTC intervals."""

import dataclasses
from datetime import UTC, datetime

import pytest

from app.analytics.services.date_range import Interval, RangeMode, parse_date_range
from app.core.exceptions import InvalidDateFormatError, InvalidDateValueError


class TestDayRange:
    """Tests for single-day intervals."""

    def test_year_first_date(self):
        interval = parse_date_range("2023-01-01", RangeMode.DAY)

        assert interval.start_date == datetime(2023, 1, 1, 0, 0, 0, 0, tzinfo=UTC)
        assert interval.end_date == datetime(2023, 1, 1, 23, 59, 59, 999000, tzinfo=UTC)

    def test_defaults_to_day_mode(self):
        assert parse_date_range("2023-06-10") == parse_date_range("2023-06-10", "day")

    @pytest.mark.parametrize("date_str", ["2023-01-15", "15-01-2023", "2023/01/15", "15/01/2023"])
    def test_formats_for_same_day_are_equivalent(self, date_str):
        expected = Interval(
            start_date=datetime(2023, 1, 15, tzinfo=UTC),
            end_date=datetime(2023, 1, 15, 23, 59, 59, 999000, tzinfo=UTC),
        )

        assert parse_date_range(date_str, RangeMode.DAY) == expected

    def test_single_digit_day_and_month(self):
        interval = parse_date_range("5-3-2023")

        assert interval.start_date == datetime(2023, 3, 5, tzinfo=UTC)

    def test_leap_day(self):
        interval = parse_date_range("29-02-2024")

        assert interval.start_day == "2024-02-29"
        assert interval.end_day == "2024-02-29"


class TestMonthRange:
    """Tests for trailing monthly windows."""

    def test_window_starts_31_days_earlier_at_midnight(self):
        interval = parse_date_range("2023-03-15", RangeMode.MONTH)

        assert interval.start_date == datetime(2023, 2, 12, 0, 0, 0, 0, tzinfo=UTC)
        assert interval.end_date == datetime(2023, 3, 15, 23, 59, 59, 999000, tzinfo=UTC)

    def test_window_crosses_year_boundary(self):
        interval = parse_date_range("01-01-2023", RangeMode.MONTH)

        assert interval.start_date == datetime(2022, 12, 1, tzinfo=UTC)

    def test_month_and_day_share_end_date(self):
        day = parse_date_range("2023-07-31", RangeMode.DAY)
        month = parse_date_range("2023-07-31", RangeMode.MONTH)

        assert day.end_date == month.end_date
        assert month.start_date < day.start_date


class TestInvalidDates:
    """Tests for rejected inputs."""

    @pytest.mark.parametrize("date_str", ["2023/01", "20230101", "2023-01-01-01", "", "2023-01/01"])
    def test_wrong_part_count(self, date_str):
        with pytest.raises(InvalidDateFormatError):
            parse_date_range(date_str, RangeMode.DAY)

    @pytest.mark.parametrize("date_str", ["2023-ab-01", "xx-01-2023", "2023--01", "1.5-01-2023"])
    def test_non_numeric_parts(self, date_str):
        with pytest.raises(InvalidDateValueError):
            parse_date_range(date_str, RangeMode.DAY)

    @pytest.mark.parametrize(
        "date_str", ["32-01-2023", "2023-13-01", "2023-02-29", "31-04-2023", "00-01-2023"]
    )
    def test_impossible_calendar_dates(self, date_str):
        with pytest.raises(InvalidDateValueError):
            parse_date_range(date_str, RangeMode.DAY)

    @pytest.mark.parametrize("date_str", ["01-01-23", "23-01-01", "01-01-0999", "0023-01-01"])
    def test_short_years_rejected(self, date_str):
        with pytest.raises(InvalidDateValueError):
            parse_date_range(date_str, RangeMode.DAY)

    def test_earliest_accepted_year(self):
        interval = parse_date_range("01-01-1000", RangeMode.MONTH)

        assert interval.end_day == "1000-01-01"
        assert interval.start_day == "0999-12-01"

    def test_impossible_date_in_month_mode(self):
        with pytest.raises(InvalidDateValueError):
            parse_date_range("32-01-2023", RangeMode.MONTH)

    def test_error_carries_input(self):
        with pytest.raises(InvalidDateValueError) as exc_info:
            parse_date_range("32-01-2023")

        assert exc_info.value.details == {"value": "32-01-2023"}
        assert exc_info.value.status_code == 400

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            parse_date_range("2023-01-01", "year")


class TestInterval:
    """Tests for the Interval value object."""

    def test_is_immutable(self):
        interval = parse_date_range("2023-01-01")

        with pytest.raises(dataclasses.FrozenInstanceError):
            interval.start_date = datetime(2020, 1, 1, tzinfo=UTC)  # type: ignore[misc]

    def test_rejects_reversed_bounds(self):
        with pytest.raises(ValueError):
            Interval(
                start_date=datetime(2023, 1, 2, tzinfo=UTC),
                end_date=datetime(2023, 1, 1, tzinfo=UTC),
            )

    def test_day_labels(self):
        interval = parse_date_range("2023-01-31", RangeMode.MONTH)

        assert interval.start_day == "2022-12-31"
        assert interval.end_day == "2023-01-31"
