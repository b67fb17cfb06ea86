from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageError
from .backend import StorageBackend

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileBackend(StorageBackend):
    """One `<key>.json` file per key under a data directory.

    Writes land in a temp file first and are then renamed over the target,
    so a reader sees either the old or the new value.
    """

    def __init__(self, directory: Path | str):
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key or ""):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc
