from __future__ import annotations

import json
from datetime import date, timedelta
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SystemLog
from .repository import SystemLogRepository

_COLUMNS = "log_id, action, actor_id, actor_email, actor_role, details, created_at"


def _load_details(raw: Any) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    doc = json.loads(raw)
    return doc if isinstance(doc, dict) else {"value": doc}


def _to_log(r: dict) -> SystemLog:
    return SystemLog(
        log_id=int(r["log_id"]),
        action=r["action"],
        actor_id=r.get("actor_id"),
        actor_email=r.get("actor_email"),
        actor_role=r.get("actor_role"),
        details=_load_details(r.get("details")),
        created_at=r.get("created_at"),
    )


class MySQLSystemLogRepository(SystemLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(
        self,
        *,
        action: str,
        actor_id: Optional[str],
        actor_email: Optional[str],
        actor_role: Optional[str],
        details: dict[str, Any],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO system_logs(action, actor_id, actor_email, actor_role, details)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (action, actor_id, actor_email, actor_role, json.dumps(details, default=str)),
            )
            return int(cur.lastrowid)

    def get(self, *, log_id: int) -> Optional[SystemLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM system_logs WHERE log_id=%s", (int(log_id),))
            r = fetchone(cur)
            return _to_log(r) if r else None

    def list_logs(self, *, action: Optional[str] = None, on_date: Optional[date] = None, limit: int = 200) -> Sequence[SystemLog]:
        clauses = ["1=1"]
        params: list[object] = []

        if action:
            clauses.append("action=%s")
            params.append(action)
        if on_date is not None:
            clauses.append("created_at >= %s AND created_at < %s")
            params.extend([on_date, on_date + timedelta(days=1)])

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM system_logs
                WHERE {where}
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_log(r) for r in fetchall(cur)]
