from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_core.hr_core.database.bootstrap import apply_schema, list_keys, list_tables
from src.hr_core.hr_core.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection.get_instance(config)

    apply_schema(conn)
    tables = list_tables(conn)
    keys = list_keys(conn)
    print(
        "OK: Key-value table ready -> "
        f"{config.user}@{config.host}:{config.port}/{config.database} "
        f"(tables={len(tables)}, stored keys={len(keys)})"
    )


if __name__ == "__main__":
    main()
