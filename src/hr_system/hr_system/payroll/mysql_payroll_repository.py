from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollRecord, PayrollValues
from .repository import PayrollRepository

_COLUMNS = """
    record_id, employee_id, employee_name, month_year, hourly_rate_used, total_work_hours,
    base_salary_calculated, bonus_added, deductions_applied, net_salary_calculated,
    net_salary_final, notes, calculated_at, last_updated_at
"""


def _to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        record_id=int(r["record_id"]),
        values=PayrollValues(
            employee_id=int(r["employee_id"]),
            employee_name=r["employee_name"],
            month_year=r["month_year"],
            hourly_rate_used=float(r["hourly_rate_used"]),
            total_work_hours=float(r["total_work_hours"]),
            base_salary_calculated=float(r["base_salary_calculated"]),
            bonus_added=float(r["bonus_added"]),
            deductions_applied=float(r["deductions_applied"]),
            net_salary_calculated=float(r["net_salary_calculated"]),
            net_salary_final=float(r["net_salary_final"]),
            notes=r.get("notes") or "",
        ),
        calculated_at=r.get("calculated_at"),
        last_updated_at=r.get("last_updated_at"),
    )


def _params(values: PayrollValues) -> tuple:
    return (
        values.employee_name,
        values.hourly_rate_used,
        values.total_work_hours,
        values.base_salary_calculated,
        values.bonus_added,
        values.deductions_applied,
        values.net_salary_calculated,
        values.net_salary_final,
        values.notes,
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_month(self, *, employee_id: int, month_year: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM monthly_payrolls WHERE employee_id=%s AND month_year=%s LIMIT 1",
                (int(employee_id), month_year),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, *, values: PayrollValues) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO monthly_payrolls(
                    employee_id, month_year, employee_name, hourly_rate_used, total_work_hours,
                    base_salary_calculated, bonus_added, deductions_applied,
                    net_salary_calculated, net_salary_final, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(values.employee_id), values.month_year) + _params(values),
            )
            return int(cur.lastrowid)

    def update(self, *, record_id: int, values: PayrollValues) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE monthly_payrolls
                SET employee_name=%s, hourly_rate_used=%s, total_work_hours=%s,
                    base_salary_calculated=%s, bonus_added=%s, deductions_applied=%s,
                    net_salary_calculated=%s, net_salary_final=%s, notes=%s,
                    last_updated_at=NOW()
                WHERE record_id=%s
                """,
                _params(values) + (int(record_id),),
            )
            return cur.rowcount > 0

    def list_for_year(self, *, employee_id: int, year: int) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM monthly_payrolls
                WHERE employee_id=%s AND month_year BETWEEN %s AND %s
                ORDER BY month_year
                """,
                (int(employee_id), f"{year:04d}-01", f"{year:04d}-12"),
            )
            return [_to_record(r) for r in fetchall(cur)]
