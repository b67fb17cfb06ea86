from __future__ import annotations

from datetime import date

import pytest

from src.hr_core.hr_core.storage.adapter import KeyValueStorage
from src.hr_core.hr_core.storage.backend import MemoryBackend
from src.hr_core.hr_core.store.store import HRStore

FIXED_TODAY = date(2024, 7, 22)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def storage(backend) -> KeyValueStorage:
    return KeyValueStorage(backend)


@pytest.fixture
def store(storage) -> HRStore:
    return HRStore(storage, today=FIXED_TODAY)
