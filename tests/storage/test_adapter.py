from __future__ import annotations

import logging

from src.hr_core.hr_core.core.enums import Outcome
from src.hr_core.hr_core.core.exceptions import StorageError
from src.hr_core.hr_core.storage.adapter import KeyValueStorage
from src.hr_core.hr_core.storage.backend import MemoryBackend


class FailingBackend:
    """Every access raises, like a browser with storage disabled."""

    def __init__(self):
        self.calls = []

    def get_item(self, key):
        self.calls.append(("get", key))
        raise StorageError("storage disabled")

    def set_item(self, key, value):
        self.calls.append(("set", key))
        raise StorageError("quota exceeded")

    def remove_item(self, key):
        self.calls.append(("remove", key))
        raise StorageError("storage disabled")


def test_round_trip_is_deep_equal():
    storage = KeyValueStorage(MemoryBackend())
    value = [
        {"id": 1, "name": "John Doe", "accessible_modules": ["dashboard", "profile"], "supervisor_id": None},
        {"id": 2, "name": "Jane Smith", "leave_credits": {"vacation": 15, "sick": 10, "personal": 5}},
    ]

    assert storage.write("hr_core_employees", value).ok
    assert storage.read("hr_core_employees", []) == value


def test_missing_key_returns_default_and_reports_not_found():
    storage = KeyValueStorage(MemoryBackend())
    default = [{"id": 99}]

    assert storage.read("hr_core_schedules", default) is default
    assert storage.load("hr_core_schedules").outcome == Outcome.NOT_FOUND


def test_read_fault_returns_exactly_default(caplog):
    caplog.set_level(logging.WARNING)
    storage = KeyValueStorage(FailingBackend())
    default = []

    result = storage.read("hr_core_employees", default)

    assert result is default
    assert "hr_core_employees" in caplog.text


def test_load_fault_reports_unavailable():
    storage = KeyValueStorage(FailingBackend())

    result = storage.load("hr_core_employees")

    assert result.outcome == Outcome.UNAVAILABLE
    assert result.value is None
    assert "storage disabled" in result.error


def test_corrupt_json_falls_back_to_default():
    backend = MemoryBackend({"hr_core_employees": "{not json"})
    storage = KeyValueStorage(backend)

    assert storage.read("hr_core_employees", ["seed"]) == ["seed"]
    assert storage.load("hr_core_employees").outcome == Outcome.UNAVAILABLE


def test_write_fault_is_dropped_not_raised():
    backend = FailingBackend()
    storage = KeyValueStorage(backend)

    result = storage.write("hr_core_leave_requests", [{"id": 1}])

    assert result.outcome == Outcome.UNAVAILABLE
    assert backend.calls == [("set", "hr_core_leave_requests")]


def test_unserializable_value_is_dropped():
    backend = MemoryBackend()
    storage = KeyValueStorage(backend)

    result = storage.write("hr_core_session", {"user_id": object()})

    assert result.outcome == Outcome.UNAVAILABLE
    assert backend.get_item("hr_core_session") is None


def test_remove_is_best_effort():
    backend = MemoryBackend({"hr_core_session": '{"user_id": 1}'})
    storage = KeyValueStorage(backend)

    assert storage.remove("hr_core_session").ok
    assert storage.remove("hr_core_session").ok
    assert backend.get_item("hr_core_session") is None

    assert KeyValueStorage(FailingBackend()).remove("hr_core_session").outcome == Outcome.UNAVAILABLE
