from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..common.datetime_utils import to_utc_date
from .counter import count_working_days
from .model import DateRange, WorkingDayCalendar


@dataclass(frozen=True)
class LeaveInterval:
    """Inclusive leave span of one approved request."""

    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_utc_date(self.start))
        object.__setattr__(self, "end", to_utc_date(self.end))


def clip_to_range(interval: LeaveInterval, reporting_range: DateRange) -> DateRange:
    return DateRange(
        start=max(interval.start, reporting_range.start),
        end=min(interval.end, reporting_range.end),
    )


def accumulate_leave_days(
    intervals: Iterable[LeaveInterval],
    reporting_range: DateRange,
    calendar: WorkingDayCalendar,
) -> int:
    """Working days of the given leave intervals that fall inside ``reporting_range``.

    Intervals must already be filtered to one employee's approved requests.
    Inverted intervals clip to an empty range and contribute nothing.
    """
    total = 0
    for interval in intervals:
        if interval.end < reporting_range.start:
            continue
        clipped = clip_to_range(interval, reporting_range)
        if clipped.is_empty:
            continue
        total += count_working_days(clipped, calendar)
    return total
