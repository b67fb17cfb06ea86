from __future__ import annotations

import asyncio
from datetime import date

import pytest

from src.hr_core.hr_core.advisory.debounce import AdvisoryDebouncer
from src.hr_core.hr_core.advisory.model import Advisory, LeaveQuery
from src.hr_core.hr_core.core.enums import LeaveType, Verdict
from src.hr_core.hr_core.core.exceptions import AdvisoryUnavailableError
from src.hr_core.hr_core.employees.model import LeaveCredits

DELAY = 0.01


def _query(end_day: int) -> LeaveQuery:
    return LeaveQuery("John Doe", LeaveCredits(12, 8, 5), LeaveType.VACATION, date(2024, 8, 5), date(2024, 8, end_day))


class FakeAdvisor:
    """Answers CONFIRMED with the end date; selected queries block until released."""

    def __init__(self):
        self.calls = []
        self.started = {}
        self.release = {}

    def hold(self, query):
        self.started[query] = asyncio.Event()
        self.release[query] = asyncio.Event()

    async def __call__(self, query):
        self.calls.append(query)
        if query in self.release:
            self.started[query].set()
            await self.release[query].wait()
        return Advisory(Verdict.CONFIRMED, f"CONFIRMED: until {query.end_date.isoformat()}")


@pytest.mark.asyncio
async def test_rapid_submits_make_one_call():
    advisor = FakeAdvisor()
    results = []
    debouncer = AdvisoryDebouncer(advisor, delay=DELAY, on_result=results.append)

    debouncer.submit(_query(6))
    debouncer.submit(_query(7))
    assert debouncer.is_checking
    await debouncer.drain()

    assert advisor.calls == [_query(7)]
    assert [r.text for r in results] == ["CONFIRMED: until 2024-08-07"]
    assert debouncer.result == results[0]
    assert not debouncer.is_checking


@pytest.mark.asyncio
async def test_stale_reply_is_discarded():
    advisor = FakeAdvisor()
    slow = _query(6)
    advisor.hold(slow)
    results = []
    debouncer = AdvisoryDebouncer(advisor, delay=DELAY, on_result=results.append)

    debouncer.submit(slow)
    await advisor.started[slow].wait()

    debouncer.submit(_query(9))
    while not results:
        await asyncio.sleep(DELAY)

    advisor.release[slow].set()
    await debouncer.drain()

    assert advisor.calls == [slow, _query(9)]
    assert [r.text for r in results] == ["CONFIRMED: until 2024-08-09"]
    assert debouncer.result.text == "CONFIRMED: until 2024-08-09"


@pytest.mark.asyncio
async def test_unavailable_advisory_becomes_none():
    results = []

    async def failing(query):
        raise AdvisoryUnavailableError("down")

    debouncer = AdvisoryDebouncer(failing, delay=DELAY, on_result=results.append)
    debouncer.submit(_query(6))
    await debouncer.drain()

    assert results == [None]
    assert debouncer.result is None


@pytest.mark.asyncio
async def test_reset_cancels_pending_lookup():
    advisor = FakeAdvisor()
    debouncer = AdvisoryDebouncer(advisor, delay=DELAY)

    debouncer.submit(_query(6))
    debouncer.reset()
    await debouncer.drain()
    await asyncio.sleep(DELAY * 2)

    assert advisor.calls == []
    assert debouncer.result is None


@pytest.mark.asyncio
async def test_close_discards_waiting_and_inflight_lookups():
    advisor = FakeAdvisor()
    held = _query(6)
    advisor.hold(held)
    results = []
    debouncer = AdvisoryDebouncer(advisor, delay=DELAY, on_result=results.append)

    debouncer.submit(held)
    await advisor.started[held].wait()
    debouncer.close()
    advisor.release[held].set()
    await asyncio.sleep(DELAY * 2)

    assert results == []
    assert debouncer.result is None
    assert debouncer.closed
    with pytest.raises(RuntimeError):
        debouncer.submit(_query(7))


@pytest.mark.asyncio
async def test_new_submit_clears_previous_result():
    advisor = FakeAdvisor()
    debouncer = AdvisoryDebouncer(advisor, delay=DELAY)

    debouncer.submit(_query(6))
    await debouncer.drain()
    assert debouncer.result is not None

    debouncer.submit(_query(7))
    assert debouncer.result is None
    await debouncer.drain()
    assert debouncer.result.text == "CONFIRMED: until 2024-08-07"


@pytest.mark.asyncio
async def test_unexpected_fetch_error_becomes_none(caplog):
    results = []

    async def broken(query):
        raise RuntimeError("boom")

    debouncer = AdvisoryDebouncer(broken, delay=DELAY, on_result=results.append)
    debouncer.submit(_query(6))
    await debouncer.drain()

    assert results == [None]
    assert debouncer.result is None
    assert not debouncer.is_checking
    assert "boom" in caplog.text
