from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    employee_name: str
    leave_type: str
    start_date: date
    end_date: date
    reason: str
    number_of_days: int
    status: LeaveStatus
    submitted_at: Optional[datetime] = None
    attachment_url: Optional[str] = None
    manager_notes: str = ""
    updated_at: Optional[datetime] = None
