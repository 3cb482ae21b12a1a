from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday, ListItem


class HolidayRepository(Protocol):
    def create(self, *, name: str, holiday_date: date) -> int:
        raise NotImplementedError

    def exists_on(self, *, holiday_date: date) -> bool:
        raise NotImplementedError

    def delete(self, *, holiday_id: int) -> bool:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        """Holidays whose date falls within [start_date, end_date]."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError


class SettingsRepository(Protocol):
    """Key/value organization settings.

    Getters return the raw stored value, or None when nothing is stored.
    """

    def get_weekend_days(self) -> Optional[object]:
        raise NotImplementedError

    def save_weekend_days(self, days: Sequence[int]) -> None:
        raise NotImplementedError

    def get_standard_hours(self) -> Optional[object]:
        raise NotImplementedError

    def save_standard_hours(self, hours: float) -> None:
        raise NotImplementedError


class OrganizationListRepository(Protocol):
    def list_items(self, *, list_name: str) -> Sequence[ListItem]:
        raise NotImplementedError

    def find_by_name(self, *, list_name: str, name: str) -> Optional[ListItem]:
        raise NotImplementedError

    def add(self, *, list_name: str, name: str) -> int:
        raise NotImplementedError

    def rename(self, *, list_name: str, item_id: int, name: str) -> bool:
        raise NotImplementedError

    def delete(self, *, list_name: str, item_id: int) -> bool:
        raise NotImplementedError
