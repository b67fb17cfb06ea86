from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from ..core.enums import Outcome
from ..core.exceptions import StorageError
from .backend import StorageBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StorageResult:
    outcome: Outcome
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK


class KeyValueStorage:
    """JSON adapter over a StorageBackend.

    This is the only persistence boundary. `read`, `write` and `remove` never
    raise: faults are logged and masked (reads fall back to the default,
    writes are dropped). `load` reports the same faults as a StorageResult
    for callers that want to tell "missing" from "unavailable".
    """

    def __init__(self, backend: StorageBackend):
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def load(self, key: str) -> StorageResult:
        try:
            raw = self._backend.get_item(key)
            if raw is None or raw == "":
                return StorageResult(Outcome.NOT_FOUND)
            return StorageResult(Outcome.OK, value=json.loads(raw))
        except (StorageError, ValueError) as exc:
            logger.warning("Error reading storage key %r: %s", key, exc, extra={"storage_key": key})
            return StorageResult(Outcome.UNAVAILABLE, error=str(exc))

    def read(self, key: str, default: T) -> T:
        result = self.load(key)
        if result.outcome != Outcome.OK:
            return default
        return result.value

    def write(self, key: str, value: Any) -> StorageResult:
        try:
            raw = json.dumps(value, ensure_ascii=False)
            self._backend.set_item(key, raw)
        except (StorageError, TypeError, ValueError) as exc:
            logger.error("Error writing storage key %r: %s", key, exc, extra={"storage_key": key})
            return StorageResult(Outcome.UNAVAILABLE, error=str(exc))
        return StorageResult(Outcome.OK)

    def remove(self, key: str) -> StorageResult:
        try:
            self._backend.remove_item(key)
        except StorageError as exc:
            logger.error("Error removing storage key %r: %s", key, exc, extra={"storage_key": key})
            return StorageResult(Outcome.UNAVAILABLE, error=str(exc))
        return StorageResult(Outcome.OK)
