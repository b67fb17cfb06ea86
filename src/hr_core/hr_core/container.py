from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import httpx

from .advisory.client import AdvisoryClient
from .core.constants import DEFAULT_ADVISORY_TIMEOUT_SECONDS, DEFAULT_DEBOUNCE_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .leave.draft import LeaveRequestDraft
from .leave.service import LeaveService
from .storage.adapter import KeyValueStorage
from .storage.backend import MemoryBackend, StorageBackend
from .storage.file_backend import JsonFileBackend
from .storage.mysql_backend import MySQLBackend
from .store.store import HRStore


@dataclass(frozen=True)
class Container:
    backend: StorageBackend
    storage: KeyValueStorage
    store: HRStore

    advisory_client: AdvisoryClient
    leave_service: LeaveService

    def new_leave_draft(self, *, on_advisory=None, delay: Optional[float] = None) -> LeaveRequestDraft:
        return LeaveRequestDraft(self.leave_service, session=self.store.session, on_advisory=on_advisory, delay=delay)

    async def close(self) -> None:
        await self.advisory_client.close()


def build_backend(settings: Any) -> StorageBackend:
    kind = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    if kind == "memory":
        return MemoryBackend()
    if kind == "file":
        return JsonFileBackend(Path(getattr(settings, "STORAGE_DIR", ".hr_core_data")))
    if kind == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLBackend(conn)
    raise ValueError(f"Unknown STORAGE_BACKEND: {kind!r}")


def build_container(
    *,
    settings: Any,
    backend: Optional[StorageBackend] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Container:
    backend = backend or build_backend(settings)
    storage = KeyValueStorage(backend)
    store = HRStore(storage)

    advisory_client = AdvisoryClient(
        base_url=str(getattr(settings, "ADVISORY_API_URL", "")),
        model=str(getattr(settings, "ADVISORY_MODEL", "")),
        api_key=str(getattr(settings, "ADVISORY_API_KEY", "") or ""),
        timeout=float(getattr(settings, "ADVISORY_TIMEOUT_SECONDS", DEFAULT_ADVISORY_TIMEOUT_SECONDS)),
        transport=transport,
    )
    leave_service = LeaveService(
        store,
        advisory_client,
        debounce_seconds=float(getattr(settings, "ADVISORY_DEBOUNCE_SECONDS", DEFAULT_DEBOUNCE_SECONDS)),
    )

    return Container(
        backend=backend,
        storage=storage,
        store=store,
        advisory_client=advisory_client,
        leave_service=leave_service,
    )
