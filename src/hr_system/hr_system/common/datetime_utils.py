from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month_year(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    parsed = datetime.strptime(value, "%Y-%m")
    return parsed.year, parsed.month


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_utc_date(value: DateLike) -> date:
    """Drop time-of-day and offset, keeping the UTC calendar date.

    Naive datetimes are taken to already be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def sunday_based_weekday(d: date) -> int:
    """Weekday number with 0=Sunday ... 6=Saturday."""
    return d.isoweekday() % 7


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar date of a month (both inclusive)."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"
