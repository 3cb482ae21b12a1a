from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import AbstractSet, Iterable

from ..common.datetime_utils import DateLike, month_bounds, sunday_based_weekday, to_utc_date
from ..core.constants import DEFAULT_WEEKEND_WEEKDAYS


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range.

    ``end < start`` is allowed and simply contains no dates.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_utc_date(self.start))
        object.__setattr__(self, "end", to_utc_date(self.end))

    @classmethod
    def for_month(cls, year: int, month: int) -> "DateRange":
        first, last = month_bounds(year, month)
        return cls(start=first, end=last)

    @classmethod
    def for_year(cls, year: int) -> "DateRange":
        return cls(start=date(year, 1, 1), end=date(year, 12, 31))

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end


@dataclass(frozen=True)
class WorkingDayCalendar:
    """Weekend pattern plus holiday dates for one calculation.

    ``weekend_weekdays`` uses 0=Sunday ... 6=Saturday. A date is a working day
    when it is neither a weekend weekday nor a holiday.
    """

    weekend_weekdays: AbstractSet[int] = DEFAULT_WEEKEND_WEEKDAYS
    holidays: AbstractSet[date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        weekend = frozenset(int(d) for d in self.weekend_weekdays)
        invalid = sorted(d for d in weekend if not 0 <= d <= 6)
        if invalid:
            raise ValueError(f"Weekend weekdays must be within 0..6, got {invalid}")
        object.__setattr__(self, "weekend_weekdays", weekend)
        object.__setattr__(self, "holidays", frozenset(to_utc_date(h) for h in self.holidays))

    @classmethod
    def default(cls) -> "WorkingDayCalendar":
        return cls(weekend_weekdays=DEFAULT_WEEKEND_WEEKDAYS, holidays=frozenset())

    @classmethod
    def build(cls, weekend_weekdays: Iterable[int], holidays: Iterable[DateLike]) -> "WorkingDayCalendar":
        return cls(weekend_weekdays=frozenset(weekend_weekdays), holidays=frozenset(holidays))

    def is_weekend(self, d: DateLike) -> bool:
        return sunday_based_weekday(to_utc_date(d)) in self.weekend_weekdays

    def is_holiday(self, d: DateLike) -> bool:
        return to_utc_date(d) in self.holidays

    def is_working_day(self, d: DateLike) -> bool:
        day = to_utc_date(d)
        return not (self.is_weekend(day) or self.is_holiday(day))


@dataclass(frozen=True)
class CalendarLookup:
    """A calendar plus any warnings raised while loading its configuration."""

    calendar: WorkingDayCalendar
    warnings: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class WorkingDayCount:
    days: int
    warnings: tuple[str, ...] = ()
