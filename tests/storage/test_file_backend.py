from __future__ import annotations

import pytest

from src.hr_core.hr_core.core.exceptions import StorageError
from src.hr_core.hr_core.storage.adapter import KeyValueStorage
from src.hr_core.hr_core.storage.file_backend import JsonFileBackend


def test_set_get_remove(tmp_path):
    backend = JsonFileBackend(tmp_path / "data")

    assert backend.get_item("hr_core_session") is None

    backend.set_item("hr_core_session", '{"user_id": 3}')
    assert (tmp_path / "data" / "hr_core_session.json").exists()
    assert backend.get_item("hr_core_session") == '{"user_id": 3}'

    backend.remove_item("hr_core_session")
    backend.remove_item("hr_core_session")
    assert backend.get_item("hr_core_session") is None


def test_overwrite_leaves_no_temp_file(tmp_path):
    backend = JsonFileBackend(tmp_path)

    backend.set_item("hr_core_employees", "[1]")
    backend.set_item("hr_core_employees", "[1, 2]")

    assert backend.get_item("hr_core_employees") == "[1, 2]"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["hr_core_employees.json"]


@pytest.mark.parametrize("key", ["", "../escape", "a/b", "with space"])
def test_rejects_unsafe_keys(tmp_path, key):
    backend = JsonFileBackend(tmp_path)

    with pytest.raises(StorageError):
        backend.get_item(key)


def test_unreadable_file_becomes_storage_error(tmp_path):
    (tmp_path / "hr_core_employees.json").mkdir()
    backend = JsonFileBackend(tmp_path)

    with pytest.raises(StorageError):
        backend.get_item("hr_core_employees")

    # ... which the adapter masks.
    assert KeyValueStorage(backend).read("hr_core_employees", []) == []


def test_adapter_round_trip_through_files(tmp_path):
    storage = KeyValueStorage(JsonFileBackend(tmp_path))
    value = [{"id": 1, "employee_name": "Zoë Ångström", "type": "Vacation"}]

    storage.write("hr_core_leave_requests", value)

    assert KeyValueStorage(JsonFileBackend(tmp_path)).read("hr_core_leave_requests", []) == value
