from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from src.hr_core.hr_core.advisory.client import AdvisoryClient
from src.hr_core.hr_core.core.enums import LeaveType, Verdict
from src.hr_core.hr_core.core.exceptions import AdvisoryUnavailableError
from src.hr_core.hr_core.employees.model import LeaveCredits

CREDITS = LeaveCredits(vacation=12, sick=8, personal=5)


def _reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _client(handler, api_key="test-key"):
    return AdvisoryClient(
        base_url="http://advisory.test/v1beta/",
        model="test-model",
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


async def _check(client):
    return await client.check_leave_availability(
        "John Doe", CREDITS, LeaveType.VACATION, date(2024, 8, 5), date(2024, 8, 9)
    )


@pytest.mark.asyncio
async def test_request_shape_and_confirmed_reply():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_reply("CONFIRMED: 5 of 12 vacation days."))

    client = _client(handler)
    advisory = await _check(client)
    await client.close()

    assert advisory.verdict == Verdict.CONFIRMED
    assert advisory.text == "CONFIRMED: 5 of 12 vacation days."

    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/test-model:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    body = json.loads(request.content)
    assert "John Doe" in body["contents"][0]["parts"][0]["text"]


@pytest.mark.asyncio
async def test_multi_part_reply_is_joined():
    def handler(request):
        reply = {"candidates": [{"content": {"parts": [{"text": "WARNING: "}, {"text": "close to the limit"}]}}]}
        return httpx.Response(200, json=reply)

    advisory = await _check(_client(handler))

    assert advisory.verdict == Verdict.WARNING
    assert advisory.text == "WARNING: close to the limit"


@pytest.mark.asyncio
async def test_reply_without_prefix_is_no_advisory():
    advisory = await _check(_client(lambda request: httpx.Response(200, json=_reply("Looks fine to me."))))

    assert advisory is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "boom"}),
        httpx.Response(429, json={"error": "rate limited"}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, json=_reply("   ")),
    ],
)
async def test_faults_become_unavailable(response):
    client = _client(lambda request: response)

    with pytest.raises(AdvisoryUnavailableError):
        await _check(client)


@pytest.mark.asyncio
async def test_transport_error_becomes_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AdvisoryUnavailableError):
        await _check(_client(handler))


@pytest.mark.asyncio
async def test_missing_key_never_calls_out():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=_reply("CONFIRMED: ok"))

    client = _client(handler, api_key="")

    assert not client.enabled
    with pytest.raises(AdvisoryUnavailableError):
        await _check(client)
    assert calls == []
