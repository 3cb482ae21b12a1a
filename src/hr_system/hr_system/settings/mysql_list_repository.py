from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ListItem
from .repository import OrganizationListRepository


@contextmanager
def _unique_name(name: str):
    try:
        yield
    except mysql.connector.IntegrityError as e:
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise ValidationError(f'An item with the name "{name}" already exists.') from e
        raise


class MySQLOrganizationListRepository(OrganizationListRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_items(self, *, list_name: str) -> Sequence[ListItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT item_id, list_name, name FROM organization_list_items WHERE list_name=%s ORDER BY name",
                (list_name,),
            )
            return [ListItem(item_id=int(r["item_id"]), list_name=r["list_name"], name=r["name"]) for r in fetchall(cur)]

    def find_by_name(self, *, list_name: str, name: str) -> Optional[ListItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT item_id, list_name, name FROM organization_list_items WHERE list_name=%s AND name=%s LIMIT 1",
                (list_name, name),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ListItem(item_id=int(r["item_id"]), list_name=r["list_name"], name=r["name"])

    def add(self, *, list_name: str, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur), _unique_name(name):
            cur.execute(
                "INSERT INTO organization_list_items(list_name, name) VALUES(%s,%s)",
                (list_name, name),
            )
            return int(cur.lastrowid)

    def rename(self, *, list_name: str, item_id: int, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur), _unique_name(name):
            cur.execute(
                "UPDATE organization_list_items SET name=%s WHERE item_id=%s AND list_name=%s",
                (name, int(item_id), list_name),
            )
            return cur.rowcount > 0

    def delete(self, *, list_name: str, item_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM organization_list_items WHERE item_id=%s AND list_name=%s",
                (int(item_id), list_name),
            )
            return cur.rowcount > 0
