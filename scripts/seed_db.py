"""Reset every collection to the bundled demo data and log out."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_core.hr_core.container import build_backend
from src.hr_core.hr_core.core.constants import COLLECTION_KEYS, SESSION_KEY
from src.hr_core.hr_core.storage.adapter import KeyValueStorage
from src.hr_core.hr_core.store.store import HRStore


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = KeyValueStorage(build_backend(settings))

    failed = [key for key in (*COLLECTION_KEYS, SESSION_KEY) if not storage.remove(key).ok]
    if failed:
        raise SystemExit(f"Could not clear: {', '.join(failed)}")

    # Constructing the store on empty storage writes the seed back.
    store = HRStore(storage, restore_session=False)
    print(f"OK: Seeded {len(COLLECTION_KEYS)} collections ({len(store.employees)} employees)")


if __name__ == "__main__":
    main()
