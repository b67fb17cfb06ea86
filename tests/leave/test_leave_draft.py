from __future__ import annotations

from datetime import date

import pytest

from src.hr_core.hr_core.advisory.model import Advisory
from src.hr_core.hr_core.core.enums import LeaveStatus, LeaveType, Verdict
from src.hr_core.hr_core.core.exceptions import LeaveSubmissionBlocked, ValidationError
from src.hr_core.hr_core.leave.draft import LeaveRequestDraft
from src.hr_core.hr_core.leave.service import LeaveService

DELAY = 0.01


class FakeAdvisoryClient:
    """Refuses anything longer than the available balance."""

    def __init__(self):
        self.queries = []

    async def check(self, query):
        self.queries.append(query)
        if query.requested_days > query.available_days:
            return Advisory(Verdict.ERROR, f"ERROR: only {query.available_days} days available")
        return Advisory(Verdict.CONFIRMED, "CONFIRMED: balance covers it")


@pytest.fixture
def client():
    return FakeAdvisoryClient()


@pytest.fixture
def service(store, client):
    return LeaveService(store, client, debounce_seconds=DELAY)


@pytest.mark.asyncio
async def test_draft_blocks_on_error_then_submits_after_fix(store, service, client):
    store.login(4)
    seen = []
    draft = LeaveRequestDraft(service, session=store.session, on_advisory=seen.append)

    draft.update(leave_type=LeaveType.PERSONAL, start_date=date(2024, 9, 2), end_date=date(2024, 9, 6))
    assert draft.is_checking
    advisory = await draft.wait_for_advisory()

    assert advisory.verdict == Verdict.ERROR
    assert draft.is_blocked
    assert not draft.can_submit
    with pytest.raises(LeaveSubmissionBlocked):
        draft.submit()

    draft.update(end_date=date(2024, 9, 3))
    assert draft.advisory is None
    await draft.wait_for_advisory()

    assert draft.can_submit
    request = draft.submit()
    assert request.status == LeaveStatus.PENDING
    assert request.employee_id == 4
    assert [a.verdict for a in seen] == [Verdict.ERROR, Verdict.CONFIRMED]
    assert len(client.queries) == 2
    assert not draft.can_submit


@pytest.mark.asyncio
async def test_incomplete_draft_never_queries(store, service, client):
    store.login(1)
    draft = LeaveRequestDraft(service, session=store.session)

    draft.update(start_date=date(2024, 8, 5))
    await draft.wait_for_advisory()

    assert client.queries == []
    assert not draft.is_complete
    with pytest.raises(ValidationError):
        draft.submit()
    draft.close()


@pytest.mark.asyncio
async def test_clearing_a_field_drops_the_advisory(store, service):
    store.login(1)
    draft = LeaveRequestDraft(service, session=store.session)

    draft.update(start_date=date(2024, 8, 5), end_date=date(2024, 8, 6))
    await draft.wait_for_advisory()
    assert draft.advisory is not None

    draft.update(end_date=None)
    assert draft.advisory is None
    draft.close()


@pytest.mark.asyncio
async def test_no_advisory_does_not_block(store):
    store.login(1)
    draft = LeaveRequestDraft(LeaveService(store, debounce_seconds=DELAY), session=store.session)

    draft.update(start_date=date(2024, 8, 5), end_date=date(2024, 8, 30))
    assert await draft.wait_for_advisory() is None

    assert draft.can_submit
    assert draft.submit().employee_name == "John Doe"


@pytest.mark.asyncio
async def test_logged_out_draft_is_incomplete(service):
    draft = LeaveRequestDraft(service, session=None)

    draft.update(start_date=date(2024, 8, 5), end_date=date(2024, 8, 6))

    assert draft.employee_id is None
    assert not draft.is_complete
    draft.close()
