from __future__ import annotations

from datetime import date

from src.hr_system.hr_system.workdays.accumulator import LeaveInterval, accumulate_leave_days, clip_to_range
from src.hr_system.hr_system.workdays.model import DateRange, WorkingDayCalendar

MARCH_2024 = DateRange.for_month(2024, 3)


def test_interval_starting_in_previous_month_is_clipped():
    # Only 2024-03-01..05 count: Fri 1st and Sat 2nd are weekend, so Sun..Tue = 3.
    interval = LeaveInterval(date(2024, 2, 20), date(2024, 3, 5))
    assert clip_to_range(interval, MARCH_2024) == DateRange(date(2024, 3, 1), date(2024, 3, 5))
    assert accumulate_leave_days([interval], MARCH_2024, WorkingDayCalendar.default()) == 3


def test_interval_ending_in_next_month_is_clipped():
    # 2024-03-28 (Thu) .. 2024-04-03: only Thu 28th and Sun 31st fall inside March.
    interval = LeaveInterval(date(2024, 3, 28), date(2024, 4, 3))
    assert accumulate_leave_days([interval], MARCH_2024, WorkingDayCalendar.default()) == 2


def test_intervals_outside_the_range_contribute_nothing():
    intervals = [
        LeaveInterval(date(2024, 1, 10), date(2024, 2, 29)),
        LeaveInterval(date(2024, 4, 1), date(2024, 4, 10)),
    ]
    assert accumulate_leave_days(intervals, MARCH_2024, WorkingDayCalendar.default()) == 0


def test_inverted_interval_contributes_nothing():
    interval = LeaveInterval(date(2024, 3, 20), date(2024, 3, 10))
    assert accumulate_leave_days([interval], MARCH_2024, WorkingDayCalendar.default()) == 0


def test_holidays_inside_leave_are_not_counted():
    # 2024-03-10 (Sun) .. 2024-03-14 (Thu) = 5 working days, minus the holiday on the 12th.
    cal = WorkingDayCalendar(holidays={date(2024, 3, 12)})
    interval = LeaveInterval(date(2024, 3, 10), date(2024, 3, 14))
    assert accumulate_leave_days([interval], MARCH_2024, cal) == 4


def test_multiple_intervals_are_summed():
    intervals = [
        LeaveInterval(date(2024, 3, 3), date(2024, 3, 3)),
        LeaveInterval(date(2024, 3, 10), date(2024, 3, 11)),
    ]
    assert accumulate_leave_days(intervals, MARCH_2024, WorkingDayCalendar.default()) == 3


def test_no_intervals_is_zero():
    assert accumulate_leave_days([], MARCH_2024, WorkingDayCalendar.default()) == 0
