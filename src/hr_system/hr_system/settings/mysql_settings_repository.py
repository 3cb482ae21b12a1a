from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SettingsRepository

WEEKEND_KEY = "weekend"
WORKDAY_KEY = "workday"


class MySQLSettingsRepository(SettingsRepository):
    """Settings stored as JSON documents keyed by name (``weekend``, ``workday``).

    Unparseable documents are returned as their raw text so the caller can
    report them as malformed.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, key: str) -> Any:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_value FROM app_settings WHERE setting_key=%s", (key,))
            r = fetchone(cur)
        if not r or r["setting_value"] is None:
            return None
        raw = r["setting_value"]
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    def _get_field(self, key: str, field: str) -> Optional[object]:
        doc = self._get(key)
        if isinstance(doc, dict):
            return doc.get(field)
        return doc

    def _merge(self, key: str, values: dict) -> None:
        current = self._get(key)
        doc = dict(current) if isinstance(current, dict) else {}
        doc.update(values)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_settings(setting_key, setting_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value), updated_at=NOW()
                """,
                (key, json.dumps(doc)),
            )

    def get_weekend_days(self) -> Optional[object]:
        return self._get_field(WEEKEND_KEY, "days")

    def save_weekend_days(self, days: Sequence[int]) -> None:
        self._merge(WEEKEND_KEY, {"days": [int(d) for d in days]})

    def get_standard_hours(self) -> Optional[object]:
        return self._get_field(WORKDAY_KEY, "standard_hours")

    def save_standard_hours(self, hours: float) -> None:
        self._merge(WORKDAY_KEY, {"standard_hours": float(hours)})
