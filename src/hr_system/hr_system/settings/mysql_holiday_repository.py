from __future__ import annotations

from datetime import date
from typing import Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=int(r["holiday_id"]),
        name=r["name"],
        holiday_date=r["holiday_date"],
        created_at=r.get("created_at"),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, holiday_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO holidays(name, holiday_date) VALUES(%s,%s)",
                    (name, holiday_date),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == errorcode.ER_DUP_ENTRY:
                    raise ValidationError("A holiday on this date already exists.") from e
                raise
            return int(cur.lastrowid)

    def exists_on(self, *, holiday_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_id FROM holidays WHERE holiday_date=%s LIMIT 1", (holiday_date,))
            return fetchone(cur) is not None

    def delete(self, *, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, name, holiday_date, created_at
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (start_date, end_date),
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_id, name, holiday_date, created_at FROM holidays ORDER BY holiday_date")
            return [_to_holiday(r) for r in fetchall(cur)]
