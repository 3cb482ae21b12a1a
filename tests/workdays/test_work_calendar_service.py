from __future__ import annotations

import logging
from datetime import date, datetime

from src.hr_system.hr_system.core.constants import DEFAULT_WEEKEND_WEEKDAYS
from src.hr_system.hr_system.core.exceptions import StorageError
from src.hr_system.hr_system.settings.model import Holiday
from src.hr_system.hr_system.workdays.model import DateRange
from src.hr_system.hr_system.workdays.service import WorkCalendarService, weekend_from_setting


class FakeSettingsRepo:
    def __init__(self, weekend=None, *, fail=False):
        self.weekend = weekend
        self.fail = fail

    def get_weekend_days(self):
        if self.fail:
            raise StorageError("settings table unreachable")
        return self.weekend


class FakeHolidayRepo:
    def __init__(self, holidays=(), *, fail=False):
        self.holidays = list(holidays)
        self.fail = fail
        self.calls = 0

    def list_between(self, *, start_date, end_date):
        self.calls += 1
        if self.fail:
            raise StorageError("holidays table unreachable")
        return [h for h in self.holidays if start_date <= h.holiday_date <= end_date]


def _holiday(hid, d):
    return Holiday(holiday_id=hid, name=f"Holiday {hid}", holiday_date=d)


def test_weekend_from_setting_accepts_only_weekday_lists():
    assert weekend_from_setting([0, 6]) == frozenset({0, 6})
    assert weekend_from_setting([]) == frozenset()
    assert weekend_from_setting("5,6") is None
    assert weekend_from_setting([5, 7]) is None
    assert weekend_from_setting([True]) is None
    assert weekend_from_setting({"days": [5]}) is None


def test_stored_weekend_and_holidays_are_used():
    svc = WorkCalendarService(FakeSettingsRepo([0, 6]), FakeHolidayRepo([_holiday(1, date(2024, 1, 3))]))
    # Mon 1st .. Sun 7th with a Sat/Sun weekend and Wed 3rd off.
    result = svc.count_working_days(DateRange(date(2024, 1, 1), date(2024, 1, 7)))
    assert result.days == 4
    assert result.warnings == ()


def test_missing_weekend_setting_uses_default_without_warning(caplog):
    svc = WorkCalendarService(FakeSettingsRepo(None), FakeHolidayRepo())
    with caplog.at_level(logging.WARNING):
        weekend, warnings = svc.weekend_weekdays()
    assert weekend == DEFAULT_WEEKEND_WEEKDAYS
    assert warnings == ()
    assert not caplog.records


def test_unreadable_weekend_setting_falls_back_and_warns(caplog):
    svc = WorkCalendarService(FakeSettingsRepo(fail=True), FakeHolidayRepo())
    with caplog.at_level(logging.WARNING):
        lookup = svc.calendar_for(DateRange.for_month(2024, 1))
    assert lookup.calendar.weekend_weekdays == DEFAULT_WEEKEND_WEEKDAYS
    assert lookup.degraded
    assert "Weekend settings could not be loaded" in lookup.warnings[0]
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_malformed_weekend_setting_falls_back_and_warns():
    svc = WorkCalendarService(FakeSettingsRepo("friday"), FakeHolidayRepo())
    weekend, warnings = svc.weekend_weekdays()
    assert weekend == DEFAULT_WEEKEND_WEEKDAYS
    assert len(warnings) == 1
    assert "malformed" in warnings[0]


def test_unreadable_holidays_count_without_them_and_warn(caplog):
    svc = WorkCalendarService(FakeSettingsRepo([5, 6]), FakeHolidayRepo(fail=True))
    with caplog.at_level(logging.WARNING):
        result = svc.count_working_days(DateRange(date(2024, 1, 1), date(2024, 1, 7)))
    assert result.days == 5
    assert len(result.warnings) == 1
    assert "2024-01-01 and 2024-01-07" in result.warnings[0]
    assert "counting without holidays" in caplog.text


def test_empty_range_does_not_query_holidays():
    holidays = FakeHolidayRepo()
    svc = WorkCalendarService(FakeSettingsRepo([5, 6]), holidays)
    result = svc.count_working_days(DateRange(date(2024, 3, 10), date(2024, 3, 5)))
    assert result.days == 0
    assert holidays.calls == 0


def test_holiday_datetimes_are_normalised():
    holidays = FakeHolidayRepo()
    holidays.list_between = lambda *, start_date, end_date: [_holiday(1, datetime(2024, 1, 2, 0, 0))]
    svc = WorkCalendarService(FakeSettingsRepo(None), holidays)
    lookup = svc.calendar_for(DateRange(date(2024, 1, 1), date(2024, 1, 7)))
    assert lookup.calendar.holidays == frozenset({date(2024, 1, 2)})
