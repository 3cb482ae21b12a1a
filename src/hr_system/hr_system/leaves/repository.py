from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        leave_type: str,
        start_date: date,
        end_date: date,
        reason: str,
        number_of_days: int,
        attachment_url: Optional[str],
    ) -> int:
        """Insert a Pending request and return its id."""

        raise NotImplementedError

    def get(self, *, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def update(
        self,
        *,
        request_id: int,
        leave_type: str,
        start_date: date,
        end_date: date,
        reason: str,
        status: LeaveStatus,
        number_of_days: int,
    ) -> bool:
        raise NotImplementedError

    def update_status(self, *, request_id: int, status: LeaveStatus, manager_notes: str) -> bool:
        raise NotImplementedError

    def delete(self, *, request_id: int) -> bool:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[dict]:
        """Return UI rows, newest first."""

        raise NotImplementedError

    def list_approved_overlapping(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[LeaveRequest]:
        """Approved requests of one employee that overlap [start_date, end_date]."""

        raise NotImplementedError
