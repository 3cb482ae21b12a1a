from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.audit import Actor, log_system_event
from ..common.datetime_utils import DateLike, to_utc_date
from ..common.validators import optional_url, require_length_between, require_non_empty
from ..core.constants import (
    DEFAULT_LIST_LIMIT,
    LEAVE_REASON_MAX_LENGTH,
    LEAVE_REASON_MIN_LENGTH,
    MAX_WORKDAY_RANGE_DAYS,
)
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..system_logs.repository import SystemLogRepository
from ..workdays.model import DateRange
from ..workdays.service import WorkCalendarService
from .repository import LeaveRepository


@dataclass(frozen=True)
class LeaveSubmission:
    request_id: int
    number_of_days: int
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class _LeaveFields:
    leave_type: str
    start_date: date
    end_date: date
    reason: str


def _parse_status(value: str, allowed: set[LeaveStatus]) -> LeaveStatus:
    try:
        status = LeaveStatus(value)
    except ValueError:
        raise ValidationError("Status is required.", "status")
    if status not in allowed:
        raise ValidationError("Status is required.", "status")
    return status


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        work_calendar: WorkCalendarService,
        *,
        system_logs: Optional[SystemLogRepository] = None,
    ):
        self._leaves = leaves
        self._employees = employees
        self._work_calendar = work_calendar
        self._system_logs = system_logs

    @staticmethod
    def _validate(
        leave_type: str,
        start_date: Optional[DateLike],
        end_date: Optional[DateLike],
        reason: str,
    ) -> _LeaveFields:
        leave_type = require_non_empty(leave_type, "Leave type", field="leave_type")
        if start_date is None:
            raise ValidationError("Start date is required.", "start_date")
        if end_date is None:
            raise ValidationError("End date is required.", "end_date")
        start = to_utc_date(start_date)
        end = to_utc_date(end_date)
        if end < start:
            raise ValidationError("End date cannot be before start date.", "end_date")
        if (end - start).days + 1 > MAX_WORKDAY_RANGE_DAYS:
            raise ValidationError(f"Leave cannot be longer than {MAX_WORKDAY_RANGE_DAYS} days.", "end_date")
        reason = require_length_between(
            reason, "Reason", LEAVE_REASON_MIN_LENGTH, LEAVE_REASON_MAX_LENGTH, field="reason"
        )
        return _LeaveFields(leave_type=leave_type, start_date=start, end_date=end, reason=reason)

    def submit_leave(
        self,
        *,
        employee_id: Optional[int],
        leave_type: str,
        start_date: Optional[DateLike],
        end_date: Optional[DateLike],
        reason: str,
        attachment_url: str = "",
    ) -> LeaveSubmission:
        if not employee_id:
            raise ValidationError("Employee document ID is required.", "employee_id")
        fields = self._validate(leave_type, start_date, end_date, reason)
        url = optional_url(attachment_url, field="attachment_url")

        employee = self._employees.get(int(employee_id))
        if not employee:
            raise ValidationError("Employee record not found.")

        count = self._work_calendar.count_working_days(DateRange(fields.start_date, fields.end_date))
        request_id = self._leaves.create(
            employee_id=employee.employee_id,
            employee_name=employee.name or "Unknown Employee",
            leave_type=fields.leave_type,
            start_date=fields.start_date,
            end_date=fields.end_date,
            reason=fields.reason,
            number_of_days=count.days,
            attachment_url=url,
        )
        return LeaveSubmission(request_id=request_id, number_of_days=count.days, warnings=count.warnings)

    def update_status(
        self,
        *,
        current_role: Role,
        actor: Actor,
        request_id: int,
        new_status: str,
        manager_notes: str = "",
    ) -> LeaveStatus:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to review leave requests.")

        status = _parse_status(new_status, {LeaveStatus.APPROVED, LeaveStatus.REJECTED})
        if not self._leaves.get(request_id=int(request_id)):
            raise NotFoundError("Leave request not found.")

        self._leaves.update_status(
            request_id=int(request_id),
            status=status,
            manager_notes=(manager_notes or "").strip(),
        )
        log_system_event(
            "Update Leave Status",
            actor,
            store=self._system_logs,
            request_id=int(request_id),
            new_status=status.value,
        )
        return status

    def edit_leave(
        self,
        *,
        current_role: Role,
        actor: Actor,
        request_id: int,
        leave_type: str,
        start_date: Optional[DateLike],
        end_date: Optional[DateLike],
        reason: str,
        status: str,
    ) -> LeaveSubmission:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to edit leave requests.")

        fields = self._validate(leave_type, start_date, end_date, reason)
        new_status = _parse_status(status, set(LeaveStatus))
        if not self._leaves.get(request_id=int(request_id)):
            raise NotFoundError("Leave request not found.")

        count = self._work_calendar.count_working_days(DateRange(fields.start_date, fields.end_date))
        self._leaves.update(
            request_id=int(request_id),
            leave_type=fields.leave_type,
            start_date=fields.start_date,
            end_date=fields.end_date,
            reason=fields.reason,
            status=new_status,
            number_of_days=count.days,
        )
        log_system_event(
            "Edit Leave Request",
            actor,
            store=self._system_logs,
            request_id=int(request_id),
            number_of_days=count.days,
        )
        return LeaveSubmission(request_id=int(request_id), number_of_days=count.days, warnings=count.warnings)

    def delete_leave(self, *, current_role: Role, actor: Actor, request_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to delete leave requests.")

        if not self._leaves.delete(request_id=int(request_id)):
            raise NotFoundError("Leave request not found.")
        log_system_event("Delete Leave Request", actor, store=self._system_logs, request_id=int(request_id))

    def list_for_employee(self, *, employee_id: int) -> Sequence[dict]:
        return self._leaves.list_requests(employee_id=int(employee_id), limit=DEFAULT_LIST_LIMIT)

    def list_requests(self, *, status: Optional[str] = None) -> Sequence[dict]:
        parsed = _parse_status(status, set(LeaveStatus)) if status else None
        return self._leaves.list_requests(status=parsed, limit=DEFAULT_LIST_LIMIT)
