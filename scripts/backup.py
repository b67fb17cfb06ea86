"""Backup every persisted collection into one JSON file.

Note: works for any STORAGE_BACKEND since it reads through the same adapter
the application uses.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_core.hr_core.container import build_backend
from src.hr_core.hr_core.core.constants import COLLECTION_KEYS
from src.hr_core.hr_core.core.enums import Outcome
from src.hr_core.hr_core.storage.adapter import KeyValueStorage


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    storage = KeyValueStorage(build_backend(settings))

    snapshot = {}
    for key in COLLECTION_KEYS:
        result = storage.load(key)
        if result.outcome == Outcome.UNAVAILABLE:
            raise SystemExit(f"Storage unavailable while reading {key}: {result.error}")
        if result.outcome == Outcome.OK:
            snapshot[key] = result.value

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"hr_core_{ts}.json"
    out_file.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(snapshot)} collections)")


if __name__ == "__main__":
    main()
