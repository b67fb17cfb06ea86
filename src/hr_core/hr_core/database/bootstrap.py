from __future__ import annotations

from typing import List

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

KV_TABLE = "hr_core_kv"

KV_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    storage_key VARCHAR(191) NOT NULL PRIMARY KEY,
    storage_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4
"""


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the key-value table (idempotent: CREATE IF NOT EXISTS)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(KV_SCHEMA)


def list_tables(conn_factory: DatabaseConnection) -> List[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [str(row[0]) for row in fetchall(cur)]


def list_keys(conn_factory: DatabaseConnection) -> List[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(f"SELECT storage_key FROM {KV_TABLE} ORDER BY storage_key")
        return [str(row["storage_key"]) for row in fetchall(cur)]
