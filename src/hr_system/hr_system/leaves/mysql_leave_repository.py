from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, format_datetime
from .model import LeaveRequest
from .repository import LeaveRepository

_COLUMNS = """
    request_id, employee_id, employee_name, leave_type, start_date, end_date,
    reason, number_of_days, status, submitted_at, attachment_url, manager_notes, updated_at
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        leave_type=r["leave_type"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r["reason"],
        number_of_days=int(r["number_of_days"] or 0),
        status=LeaveStatus(r["status"]),
        submitted_at=r.get("submitted_at"),
        attachment_url=r.get("attachment_url"),
        manager_notes=r.get("manager_notes") or "",
        updated_at=r.get("updated_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(
                    employee_id, employee_name, leave_type, start_date, end_date,
                    reason, number_of_days, status, attachment_url, manager_notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,'')
                """,
                (
                    int(employee_id),
                    employee_name,
                    leave_type,
                    start_date,
                    end_date,
                    reason,
                    int(number_of_days),
                    LeaveStatus.PENDING.value,
                    attachment_url,
                ),
            )
            return int(cur.lastrowid)

    def get(self, *, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_leave(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET leave_type=%s, start_date=%s, end_date=%s, reason=%s,
                    status=%s, number_of_days=%s, updated_at=NOW()
                WHERE request_id=%s
                """,
                (leave_type, start_date, end_date, reason, status.value, int(number_of_days), int(request_id)),
            )
            return cur.rowcount > 0

    def update_status(self, *, request_id: int, status: LeaveStatus, manager_notes: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, manager_notes=%s, updated_at=NOW()
                WHERE request_id=%s
                """,
                (status.value, manager_notes, int(request_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, request_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leave_requests WHERE request_id=%s", (int(request_id),))
            return cur.rowcount > 0

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE {where}
                ORDER BY submitted_at DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                out.append(
                    {
                        "request_id": int(r["request_id"]),
                        "employee_id": int(r["employee_id"]),
                        "employee_name": r["employee_name"],
                        "leave_type": r["leave_type"],
                        "start_date": r["start_date"].strftime("%Y-%m-%d"),
                        "end_date": r["end_date"].strftime("%Y-%m-%d"),
                        "reason": r["reason"],
                        "number_of_days": int(r["number_of_days"] or 0),
                        "status": r["status"],
                        "attachment_url": r.get("attachment_url"),
                        "submitted_at": format_datetime(r.get("submitted_at")),
                        "manager_notes": r.get("manager_notes") or "",
                    }
                )
            return out

    def list_approved_overlapping(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_requests
                WHERE employee_id=%s AND status=%s
                  AND start_date <= %s AND end_date >= %s
                ORDER BY start_date
                """,
                (int(employee_id), LeaveStatus.APPROVED.value, end_date, start_date),
            )
            return [_to_leave(r) for r in fetchall(cur)]
