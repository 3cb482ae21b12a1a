from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.audit import Actor, log_system_event
from ..common.datetime_utils import DateLike, to_utc_date
from ..common.validators import (
    parse_non_negative_number,
    parse_weekdays,
    require_email,
    require_min_length,
    require_non_empty,
)
from ..core.constants import (
    DEFAULT_STANDARD_HOURS,
    DEFAULT_WEEKEND_WEEKDAYS,
    HOLIDAY_NAME_MIN_LENGTH,
    MAX_STANDARD_HOURS,
    MIN_STANDARD_HOURS,
)
from ..core.enums import ListOperation, OrganizationList, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..workdays.service import weekend_from_setting
from ..system_logs.repository import SystemLogRepository
from .model import Holiday, ListItem
from .repository import HolidayRepository, OrganizationListRepository, SettingsRepository


def standard_hours_from_setting(value: object) -> Optional[float]:
    """Validated standard hours per day from a stored value, or None if unset or malformed."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not MIN_STANDARD_HOURS <= value <= MAX_STANDARD_HOURS:
        return None
    return float(value)


def _require_admin(current_role: Role) -> None:
    if current_role != Role.ADMIN:
        raise AuthorizationError("You do not have permission to change settings.")


class SettingsService:
    def __init__(
        self,
        holidays: HolidayRepository,
        settings: SettingsRepository,
        lists: OrganizationListRepository,
        *,
        system_logs: Optional[SystemLogRepository] = None,
    ):
        self._holidays = holidays
        self._settings = settings
        self._lists = lists
        self._system_logs = system_logs

    # -------- Holidays --------
    def add_holiday(
        self,
        *,
        current_role: Role,
        actor: Actor,
        name: str,
        holiday_date: Optional[DateLike],
    ) -> int:
        _require_admin(current_role)
        name = require_min_length(name, "Holiday name", HOLIDAY_NAME_MIN_LENGTH, field="name")
        if holiday_date is None:
            raise ValidationError("A valid date is required.", "date")
        day = to_utc_date(holiday_date)

        if self._holidays.exists_on(holiday_date=day):
            raise ValidationError("A holiday on this date already exists.")

        holiday_id = self._holidays.create(name=name, holiday_date=day)
        log_system_event(
            "Add Holiday",
            actor,
            store=self._system_logs,
            holiday_name=name,
            holiday_date=day.isoformat(),
        )
        return holiday_id

    def delete_holiday(self, *, current_role: Role, actor: Actor, holiday_id: int) -> None:
        _require_admin(current_role)
        if not self._holidays.delete(holiday_id=int(holiday_id)):
            raise NotFoundError("Holiday not found.")
        log_system_event("Delete Holiday", actor, store=self._system_logs, holiday_id=int(holiday_id))

    def list_holidays(self, *, year: Optional[int] = None) -> Sequence[Holiday]:
        if year is None:
            return self._holidays.list_all()
        return self._holidays.list_between(start_date=date(year, 1, 1), end_date=date(year, 12, 31))

    # -------- Weekend --------
    def update_weekend_days(self, *, current_role: Role, actor: Actor, values: Iterable[object]) -> list[int]:
        _require_admin(current_role)
        days = parse_weekdays(values)
        self._settings.save_weekend_days(days)
        log_system_event("Update Weekend Settings", actor, store=self._system_logs, new_weekend_days=days)
        return days

    def get_weekend_days(self) -> list[int]:
        """Stored weekend days, or the default when unset or malformed."""
        weekend = weekend_from_setting(self._settings.get_weekend_days())
        return sorted(weekend if weekend is not None else DEFAULT_WEEKEND_WEEKDAYS)

    # -------- Workday --------
    def update_standard_hours(self, *, current_role: Role, actor: Actor, hours: object) -> float:
        _require_admin(current_role)
        value = parse_non_negative_number(hours, "Hours", field="hours")
        if not MIN_STANDARD_HOURS <= value <= MAX_STANDARD_HOURS:
            raise ValidationError(
                f"Hours must be between {MIN_STANDARD_HOURS} and {MAX_STANDARD_HOURS}.", "hours"
            )
        self._settings.save_standard_hours(value)
        log_system_event("Update Workday Settings", actor, store=self._system_logs, new_standard_hours=value)
        return value

    def get_standard_hours(self) -> float:
        hours = standard_hours_from_setting(self._settings.get_standard_hours())
        return hours if hours is not None else DEFAULT_STANDARD_HOURS

    # -------- Organization lists --------
    @staticmethod
    def _parse_list_name(list_name: str) -> OrganizationList:
        try:
            return OrganizationList(list_name)
        except ValueError:
            raise ValidationError("Invalid data submitted.")

    def list_items(self, *, list_name: str) -> Sequence[ListItem]:
        return self._lists.list_items(list_name=self._parse_list_name(list_name).value)

    def manage_list_item(
        self,
        *,
        current_role: Role,
        actor: Actor,
        list_name: str,
        operation: str,
        name: Optional[str] = None,
        item_id: Optional[int] = None,
    ) -> str:
        """Add, rename or delete a list entry; returns a user-facing message."""
        _require_admin(current_role)
        target = self._parse_list_name(list_name)
        try:
            op = ListOperation(operation)
        except ValueError:
            raise ValidationError("Invalid operation.")

        if op is not ListOperation.DELETE and (name or "").strip():
            if target is OrganizationList.REPORT_LINES_1:
                name = require_email(name, field="name")
            else:
                name = require_non_empty(name, "Name", field="name")

        if op is ListOperation.ADD:
            if not name:
                raise ValidationError("Name is required.", "name")
            if self._lists.find_by_name(list_name=target.value, name=name):
                raise ValidationError(f'An item with the name "{name}" already exists.')
            self._lists.add(list_name=target.value, name=name)
            log_system_event(
                "Manage List Item",
                actor,
                store=self._system_logs,
                operation=op.value,
                list_name=target.value,
                item_name=name,
            )
            return f'"{name}" added successfully.'

        if op is ListOperation.UPDATE:
            if not item_id or not name:
                raise ValidationError("ID and name are required for update.")
            existing = self._lists.find_by_name(list_name=target.value, name=name)
            if existing and existing.item_id != int(item_id):
                raise ValidationError(f'An item with the name "{name}" already exists.')
            if not existing and not self._lists.rename(list_name=target.value, item_id=int(item_id), name=name):
                raise NotFoundError("Item not found.")
            log_system_event(
                "Manage List Item",
                actor,
                store=self._system_logs,
                operation=op.value,
                list_name=target.value,
                item_id=int(item_id),
                new_item_name=name,
            )
            return f'Item updated to "{name}" successfully.'

        if not item_id:
            raise ValidationError("ID is required for deletion.")
        if not self._lists.delete(list_name=target.value, item_id=int(item_id)):
            raise NotFoundError("Item not found.")
        log_system_event(
            "Manage List Item",
            actor,
            store=self._system_logs,
            operation=op.value,
            list_name=target.value,
            item_id=int(item_id),
        )
        return "Item deleted successfully."
