from __future__ import annotations

from datetime import date
from typing import Protocol


class AttendanceRepository(Protocol):
    def sum_completed_minutes(self, *, employee_id: int, start_date: date, end_date: date) -> int:
        """Total work minutes of completed attendance records dated within [start_date, end_date]."""

        raise NotImplementedError
