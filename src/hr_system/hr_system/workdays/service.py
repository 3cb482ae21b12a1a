from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import to_utc_date
from ..core.constants import DEFAULT_WEEKEND_WEEKDAYS
from ..core.exceptions import StorageError
from ..settings.repository import HolidayRepository, SettingsRepository
from .counter import count_working_days
from .model import CalendarLookup, DateRange, WorkingDayCalendar, WorkingDayCount

logger = logging.getLogger(__name__)


def weekend_from_setting(value: object) -> Optional[frozenset[int]]:
    """Validated weekend set from a stored value, or None if it is malformed."""
    if not isinstance(value, (list, tuple)):
        return None
    days: set[int] = set()
    for v in value:
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 6:
            return None
        days.add(v)
    return frozenset(days)


class WorkCalendarService:
    """Builds a WorkingDayCalendar from the current weekend settings and holidays.

    Lookups that fail fall back to the default weekend and/or no holidays; each
    fallback is logged at WARNING level and returned in ``CalendarLookup.warnings``.
    """

    def __init__(self, settings: SettingsRepository, holidays: HolidayRepository):
        self._settings = settings
        self._holidays = holidays

    def weekend_weekdays(self) -> tuple[frozenset[int], tuple[str, ...]]:
        try:
            stored = self._settings.get_weekend_days()
        except StorageError as e:
            message = "Weekend settings could not be loaded; using default weekend (Friday, Saturday)."
            logger.warning("%s cause=%s", message, e)
            return DEFAULT_WEEKEND_WEEKDAYS, (message,)

        if stored is None:
            return DEFAULT_WEEKEND_WEEKDAYS, ()

        weekend = weekend_from_setting(stored)
        if weekend is None:
            message = "Weekend settings are malformed; using default weekend (Friday, Saturday)."
            logger.warning("%s stored=%r", message, stored)
            return DEFAULT_WEEKEND_WEEKDAYS, (message,)
        return weekend, ()

    def holidays_between(self, date_range: DateRange) -> tuple[frozenset[date], tuple[str, ...]]:
        if date_range.is_empty:
            return frozenset(), ()
        try:
            rows = self._holidays.list_between(start_date=date_range.start, end_date=date_range.end)
        except StorageError as e:
            message = (
                f"Holidays between {date_range.start.isoformat()} and {date_range.end.isoformat()} "
                "could not be loaded; counting without holidays."
            )
            logger.warning("%s cause=%s", message, e)
            return frozenset(), (message,)
        days = (to_utc_date(h.holiday_date) for h in rows)
        return frozenset(d for d in days if date_range.contains(d)), ()

    def calendar_for(self, date_range: DateRange) -> CalendarLookup:
        weekend, weekend_warnings = self.weekend_weekdays()
        holidays, holiday_warnings = self.holidays_between(date_range)
        return CalendarLookup(
            calendar=WorkingDayCalendar(weekend_weekdays=weekend, holidays=holidays),
            warnings=weekend_warnings + holiday_warnings,
        )

    def count_working_days(self, date_range: DateRange) -> WorkingDayCount:
        lookup = self.calendar_for(date_range)
        return WorkingDayCount(days=count_working_days(date_range, lookup.calendar), warnings=lookup.warnings)
