"""Resolve client-supplied date strings into UTC query intervals."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

from app.core.constants import (
    DATE_SEPARATORS,
    END_OF_DAY_MICROSECOND,
    MIN_YEAR,
    MONTHLY_WINDOW_DAYS,
)
from app.core.datetime_utils import iso_day
from app.core.exceptions import InvalidDateFormatError, InvalidDateValueError


class RangeMode(str, Enum):
    """Width of the interval ending on the requested day."""

    DAY = "day"
    MONTH = "month"


@dataclass(frozen=True)
class Interval:
    """Closed UTC interval; both bounds are inclusive."""

    start_date: datetime
    end_date: datetime

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")

    @property
    def start_day(self) -> str:
        return iso_day(self.start_date)

    @property
    def end_day(self) -> str:
        return iso_day(self.end_date)


def _split_date(date_str: str) -> list[str]:
    for separator in DATE_SEPARATORS:
        if separator in date_str:
            return date_str.split(separator)
    return [date_str]


def _to_number(part: str, date_str: str) -> int:
    part = part.strip()
    if not part.isascii() or not part.isdigit():
        raise InvalidDateValueError(date_str)
    return int(part)


def parse_date_range(date_str: str, mode: RangeMode | str = RangeMode.DAY) -> Interval:
    """Parse a date string and return the UTC interval ending on that day.

    Args:
        date_str: ``YYYY-MM-DD`` or ``DD-MM-YYYY``; ``/`` is accepted in
            place of ``-``. A four-character first part means year first.
        mode: ``day`` for that calendar day only, ``month`` for the trailing
            window starting ``MONTHLY_WINDOW_DAYS`` days before it.

    Returns:
        Interval whose end is 23:59:59.999 UTC on the requested day.

    Raises:
        InvalidDateFormatError: The string does not have exactly three parts.
        InvalidDateValueError: A part is not numeric or the parts do not
            form a real calendar date, or the year has fewer than four
            digits.
    """
    mode = RangeMode(mode)

    parts = _split_date(date_str)
    if len(parts) != 3:
        raise InvalidDateFormatError(date_str)

    if len(parts[0].strip()) == 4:
        year_part, month_part, day_part = parts
    else:
        day_part, month_part, year_part = parts

    year = _to_number(year_part, date_str)
    month = _to_number(month_part, date_str)
    day = _to_number(day_part, date_str)
    if year < MIN_YEAR:
        raise InvalidDateValueError(date_str)

    try:
        day_start = datetime(year, month, day, tzinfo=UTC)
    except ValueError as e:
        raise InvalidDateValueError(date_str) from e

    end_date = day_start.replace(hour=23, minute=59, second=59, microsecond=END_OF_DAY_MICROSECOND)

    if mode is RangeMode.MONTH:
        window_start = end_date - timedelta(days=MONTHLY_WINDOW_DAYS)
        start_date = window_start.replace(hour=0, minute=0, second=0, microsecond=0)
    else:
        start_date = day_start

    return Interval(start_date=start_date, end_date=end_date)
