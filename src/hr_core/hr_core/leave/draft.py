from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..advisory.debounce import AdvisoryDebouncer, ResultCallback
from ..advisory.model import Advisory
from ..auth.session import Session
from ..core.enums import LeaveType
from ..core.exceptions import ValidationError
from .model import LeaveRequest
from .service import LeaveService

_UNSET: Any = object()


class LeaveRequestDraft:
    """State of the "request time off" form.

    Every change that leaves all inputs filled schedules a debounced advisory
    lookup. Only an ERROR verdict blocks `submit`; a warning, a missing
    reply or a failed lookup does not.
    """

    def __init__(
        self,
        service: LeaveService,
        *,
        session: Optional[Session],
        on_advisory: Optional[ResultCallback] = None,
        delay: Optional[float] = None,
    ):
        self._service = service
        self._session = session
        self._debouncer = AdvisoryDebouncer(
            service.check,
            delay=service.debounce_seconds if delay is None else delay,
            on_result=on_advisory,
        )
        self.employee_id: Optional[int] = session.employee_id if session else None
        self.leave_type: LeaveType = LeaveType.VACATION
        self.start_date: Optional[date] = None
        self.end_date: Optional[date] = None

    @property
    def advisory(self) -> Optional[Advisory]:
        return self._debouncer.result

    @property
    def is_checking(self) -> bool:
        return self._debouncer.is_checking

    @property
    def is_complete(self) -> bool:
        return self.employee_id is not None and self.start_date is not None and self.end_date is not None

    @property
    def is_blocked(self) -> bool:
        return self.advisory is not None and self.advisory.blocks_submission

    @property
    def can_submit(self) -> bool:
        return self.is_complete and not self.is_blocked and not self._debouncer.closed

    def update(
        self,
        *,
        employee_id: Optional[int] = _UNSET,
        leave_type: LeaveType = _UNSET,
        start_date: Optional[date] = _UNSET,
        end_date: Optional[date] = _UNSET,
    ) -> None:
        if employee_id is not _UNSET:
            self.employee_id = int(employee_id) if employee_id is not None else None
        if leave_type is not _UNSET:
            self.leave_type = LeaveType(leave_type)
        if start_date is not _UNSET:
            self.start_date = start_date
        if end_date is not _UNSET:
            self.end_date = end_date

        if not self.is_complete:
            self._debouncer.reset()
            return

        query = self._service.query_for(
            employee_id=self.employee_id,
            leave_type=self.leave_type,
            start_date=self.start_date,
            end_date=self.end_date,
        )
        if query is None:
            self._debouncer.reset()
            return
        self._debouncer.submit(query)

    async def wait_for_advisory(self) -> Optional[Advisory]:
        await self._debouncer.drain()
        return self.advisory

    def submit(self) -> LeaveRequest:
        if not self.is_complete:
            raise ValidationError("Please fill in every field")
        request = self._service.submit(
            session=self._session,
            employee_id=self.employee_id,
            leave_type=self.leave_type,
            start_date=self.start_date,
            end_date=self.end_date,
            advisory=self.advisory,
        )
        self.close()
        return request

    def close(self) -> None:
        self._debouncer.close()
