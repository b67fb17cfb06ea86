from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageError
from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .backend import StorageBackend


class MySQLBackend(StorageBackend):
    """Key-value rows in a single MySQL table (see database.bootstrap)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"SELECT storage_value FROM {KV_TABLE} WHERE storage_key=%s",
                    (key,),
                )
                row = fetchone(cur)
        except mysql.connector.Error as exc:
            raise StorageError(f"Cannot read {key}: {exc}") from exc
        return str(row["storage_value"]) if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO {KV_TABLE}(storage_key, storage_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as exc:
            raise StorageError(f"Cannot write {key}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"DELETE FROM {KV_TABLE} WHERE storage_key=%s", (key,))
        except mysql.connector.Error as exc:
            raise StorageError(f"Cannot remove {key}: {exc}") from exc
