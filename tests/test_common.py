from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import mysql.connector
import pytest

from src.hr_system.hr_system.common.datetime_utils import (
    month_bounds,
    month_key,
    parse_month_year,
    sunday_based_weekday,
    to_utc_date,
)
from src.hr_system.hr_system.common.validators import (
    optional_url,
    parse_non_negative_number,
    parse_weekdays,
    require_email,
)
from src.hr_system.hr_system.core.exceptions import StorageError, ValidationError
from src.hr_system.hr_system.database.bootstrap import split_sql_statements
from src.hr_system.hr_system.database.mysql_base import db_cursor


def test_sunday_based_weekday():
    assert sunday_based_weekday(date(2024, 1, 7)) == 0
    assert sunday_based_weekday(date(2024, 1, 5)) == 5
    assert sunday_based_weekday(date(2024, 1, 6)) == 6


def test_to_utc_date():
    assert to_utc_date(date(2024, 1, 1)) == date(2024, 1, 1)
    assert to_utc_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)
    assert to_utc_date(datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))) == date(2023, 12, 31)


def test_month_helpers():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31))
    assert month_key(2024, 3) == "2024-03"
    assert parse_month_year("2024-03") == (2024, 3)
    with pytest.raises(ValueError):
        parse_month_year("2024-13")


def test_validators():
    assert optional_url("") is None
    assert optional_url(" https://x.example.com/a.pdf ") == "https://x.example.com/a.pdf"
    with pytest.raises(ValidationError):
        optional_url("ftp://x.example.com/a.pdf")

    assert require_email("a@b.co") == "a@b.co"
    with pytest.raises(ValidationError):
        require_email("a@b")

    assert parse_non_negative_number("2.5", "Bonus") == 2.5
    with pytest.raises(ValidationError, match="must be a number"):
        parse_non_negative_number(None, "Bonus")
    with pytest.raises(ValidationError, match="non-negative"):
        parse_non_negative_number("nan", "Bonus")

    assert parse_weekdays(["5", 6, "5"]) == [5, 6]


def test_split_sql_statements_ignores_semicolons_in_strings():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES ('it''s');\n"
    assert list(split_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        "INSERT INTO t VALUES ('it''s')",
    ]


class FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def execute(self, *_):
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, error=None):
        self.cursor_obj = FakeCursor(error)
        self.committed = self.rolled_back = self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn=None, connect_error=None):
        self.conn = conn
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


def test_db_cursor_commits_on_success():
    conn = FakeConn()
    with db_cursor(FakeConnFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")
    assert conn.committed and conn.closed and cur.closed
    assert not conn.rolled_back


def test_db_cursor_translates_driver_errors():
    conn = FakeConn(error=mysql.connector.Error("table missing"))
    with pytest.raises(StorageError):
        with db_cursor(FakeConnFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")
    assert conn.rolled_back and conn.closed
    assert not conn.committed


def test_db_cursor_reraises_other_errors_after_rollback():
    conn = FakeConn()
    with pytest.raises(KeyError):
        with db_cursor(FakeConnFactory(conn)):
            raise KeyError("x")
    assert conn.rolled_back


def test_db_cursor_connect_failure_is_storage_error():
    with pytest.raises(StorageError, match="unavailable"):
        with db_cursor(FakeConnFactory(connect_error=mysql.connector.Error("refused"))):
            pass
