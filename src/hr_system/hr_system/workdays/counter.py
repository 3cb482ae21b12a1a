from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from .model import DateRange, WorkingDayCalendar


def iter_dates(date_range: DateRange) -> Iterator[date]:
    # Never computes a date past ``end``; ranges ending on date.max are valid.
    for offset in range((date_range.end - date_range.start).days + 1):
        yield date_range.start + timedelta(days=offset)


def count_working_days(date_range: DateRange, calendar: WorkingDayCalendar) -> int:
    """Number of working days in ``date_range`` (inclusive); 0 when end < start."""
    return sum(1 for d in iter_dates(date_range) if calendar.is_working_day(d))
