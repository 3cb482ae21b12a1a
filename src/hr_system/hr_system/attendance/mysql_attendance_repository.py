from __future__ import annotations

from datetime import date

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def sum_completed_minutes(self, *, employee_id: int, start_date: date, end_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(work_duration_minutes), 0) AS total_minutes
                FROM attendance_records
                WHERE employee_id=%s
                  AND work_date BETWEEN %s AND %s
                  AND status=%s
                  AND work_duration_minutes IS NOT NULL
                """,
                (int(employee_id), start_date, end_date, AttendanceStatus.COMPLETED.value),
            )
            r = fetchone(cur)
            return int(r["total_minutes"]) if r else 0
