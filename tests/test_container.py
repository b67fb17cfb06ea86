from __future__ import annotations

import json
import logging
from datetime import date
from types import SimpleNamespace

import httpx
import pytest

import config.testing as testing_settings
from config import get_settings_module
from src.hr_core.hr_core import main
from src.hr_core.hr_core.container import build_backend, build_container
from src.hr_core.hr_core.core.enums import LeaveType, Verdict
from src.hr_core.hr_core.logging_utils import JsonFormatter
from src.hr_core.hr_core.storage.backend import MemoryBackend
from src.hr_core.hr_core.storage.file_backend import JsonFileBackend


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("TESTING", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_build_backend_kinds(tmp_path):
    assert isinstance(build_backend(SimpleNamespace(STORAGE_BACKEND="memory")), MemoryBackend)

    backend = build_backend(SimpleNamespace(STORAGE_BACKEND="File", STORAGE_DIR=str(tmp_path)))
    assert isinstance(backend, JsonFileBackend)
    assert backend.directory == tmp_path

    with pytest.raises(ValueError):
        build_backend(SimpleNamespace(STORAGE_BACKEND="redis"))


@pytest.mark.asyncio
async def test_container_wires_draft_to_advisory():
    def handler(request):
        reply = {"candidates": [{"content": {"parts": [{"text": "WARNING: check the team calendar"}]}}]}
        return httpx.Response(200, json=reply)

    container = build_container(settings=testing_settings, transport=httpx.MockTransport(handler))
    assert container.advisory_client.enabled
    assert container.leave_service.debounce_seconds == testing_settings.ADVISORY_DEBOUNCE_SECONDS

    container.store.login(1)
    draft = container.new_leave_draft()
    draft.update(leave_type=LeaveType.SICK, start_date=date(2024, 8, 5), end_date=date(2024, 8, 6))

    advisory = await draft.wait_for_advisory()
    assert advisory.verdict == Verdict.WARNING
    assert draft.submit().employee_id == 1

    await container.close()


def test_create_app_uses_testing_settings(monkeypatch):
    calls = []
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: calls.append(kwargs))

    container = main.create_app()

    assert calls == [{"level": "WARNING", "json_output": False}]
    assert isinstance(container.backend, MemoryBackend)
    assert container.store.session is None
    assert len(container.store.employees) == 5


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("hr_core.test", logging.WARNING, __file__, 1, "Error reading %s", ("key",), None)
    record.storage_key = "hr_core_employees"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "Error reading key"
    assert payload["storage_key"] == "hr_core_employees"
