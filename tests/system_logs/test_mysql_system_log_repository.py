from __future__ import annotations

import json
from datetime import date, datetime

from src.hr_system.hr_system.system_logs.mysql_system_log_repository import MySQLSystemLogRepository


class FakeCursor:
    def __init__(self, rows=()):
        self.rows = list(rows)
        self.lastrowid = 5
        self.executed = []

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        pass


class FakeConn:
    def __init__(self, cur):
        self.cur = cur
        self.committed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, cur):
        self.conn = FakeConn(cur)

    def connect(self):
        return self.conn


def test_add_stores_details_as_json():
    cur = FakeCursor()
    factory = FakeConnFactory(cur)
    repo = MySQLSystemLogRepository(factory)

    log_id = repo.add(
        action="Add Holiday",
        actor_id="1",
        actor_email="admin@example.com",
        actor_role="admin",
        details={"holiday_date": date(2026, 5, 1), "holiday_name": "Labour Day"},
    )

    assert log_id == 5
    assert factory.conn.committed
    _, params = cur.executed[0]
    assert params[:4] == ("Add Holiday", "1", "admin@example.com", "admin")
    assert json.loads(params[4]) == {"holiday_date": "2026-05-01", "holiday_name": "Labour Day"}


def test_list_filters_by_action_and_day():
    row = {
        "log_id": 3,
        "action": "Save Payroll",
        "actor_id": "1",
        "actor_email": "admin@example.com",
        "actor_role": "admin",
        "details": b'{"employee_id": 7}',
        "created_at": datetime(2026, 5, 1, 9, 30),
    }
    cur = FakeCursor([row])
    repo = MySQLSystemLogRepository(FakeConnFactory(cur))

    [log] = repo.list_logs(action="Save Payroll", on_date=date(2026, 5, 1), limit=50)

    assert log.log_id == 3
    assert log.details == {"employee_id": 7}
    _, params = cur.executed[0]
    assert params == ("Save Payroll", date(2026, 5, 1), date(2026, 5, 2), 50)


def test_get_missing_log_is_none():
    repo = MySQLSystemLogRepository(FakeConnFactory(FakeCursor()))
    assert repo.get(log_id=99) is None
