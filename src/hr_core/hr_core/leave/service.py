from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..advisory.client import AdvisoryClient
from ..advisory.model import Advisory, LeaveQuery
from ..auth.session import Session
from ..common.validators import require_date_range
from ..core.constants import DEFAULT_DEBOUNCE_SECONDS
from ..core.enums import LeaveStatus, LeaveType, Outcome
from ..core.exceptions import AdvisoryUnavailableError, AuthorizationError, LeaveSubmissionBlocked, ValidationError
from ..store.store import HRStore
from .model import LeaveRequest, NewLeaveRequest

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: file, approve and reject leave requests.

    Leave credits are not touched here; approving a request and adjusting a
    balance are separate decisions.
    """

    def __init__(
        self,
        store: HRStore,
        advisory: Optional[AdvisoryClient] = None,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        self._store = store
        self._advisory = advisory
        self.debounce_seconds = debounce_seconds

    @property
    def store(self) -> HRStore:
        return self._store

    async def check(self, query: LeaveQuery) -> Optional[Advisory]:
        if self._advisory is None:
            raise AdvisoryUnavailableError("No advisory client configured")
        return await self._advisory.check(query)

    def query_for(
        self,
        *,
        employee_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
    ) -> Optional[LeaveQuery]:
        employee = self._store.get_employee(employee_id)
        if employee is None:
            return None
        return LeaveQuery(
            employee_name=employee.name,
            leave_credits=employee.leave_credits,
            leave_type=LeaveType(leave_type),
            start_date=start_date,
            end_date=end_date,
        )

    def submit(
        self,
        *,
        session: Optional[Session],
        employee_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        advisory: Optional[Advisory] = None,
    ) -> LeaveRequest:
        if session is None:
            raise AuthorizationError("Please log in first")
        if not session.is_admin and int(employee_id) != session.employee_id:
            raise AuthorizationError("Employees can only request leave for themselves")

        employee = self._store.get_employee(employee_id)
        if employee is None:
            raise ValidationError("Employee does not exist")
        if not employee.is_active:
            raise ValidationError("Employee is not active")

        require_date_range(start_date, end_date)

        if advisory is not None and advisory.blocks_submission:
            raise LeaveSubmissionBlocked("Please resolve the errors before submitting")

        request = self._store.add_leave_request(
            NewLeaveRequest(
                employee_id=employee.id,
                employee_name=employee.name,
                type=LeaveType(leave_type),
                start_date=start_date,
                end_date=end_date,
            )
        )
        logger.info("Leave request %s filed for employee %s", request.id, employee.id)
        return request

    def approve(self, *, session: Optional[Session], request_id: int) -> None:
        self._decide(session=session, request_id=request_id, status=LeaveStatus.APPROVED)

    def reject(self, *, session: Optional[Session], request_id: int) -> None:
        self._decide(session=session, request_id=request_id, status=LeaveStatus.REJECTED)

    def _decide(self, *, session: Optional[Session], request_id: int, status: LeaveStatus) -> None:
        if session is None or not session.is_admin:
            raise AuthorizationError("Only administrators can decide leave requests")

        request = self._store.get_leave_request(request_id)
        if request is None:
            raise ValidationError("Leave request does not exist")
        if request.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request was already decided")

        outcome = self._store.update_leave_request_status(request_id, status)
        if outcome == Outcome.UNAVAILABLE:
            logger.warning("Leave request %s set to %s but not persisted", request_id, status.value)
