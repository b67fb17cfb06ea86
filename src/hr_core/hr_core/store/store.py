from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Any, Callable, Optional, Sequence, Tuple, TypeVar, Union

from ..attendance.model import EmployeeSchedule, TimeRecord
from ..auth.session import Session, resolve_access
from ..common.datetime_utils import parse_iso_date, today_local
from ..core.constants import (
    DEFAULT_MODULE,
    EMPLOYEES_KEY,
    JOB_POSTINGS_KEY,
    LEAVE_REQUESTS_KEY,
    ONBOARDING_PLANS_KEY,
    PERFORMANCE_REVIEWS_KEY,
    SCHEDULES_KEY,
    SESSION_KEY,
    TIME_RECORDS_KEY,
)
from ..core.enums import LeaveStatus, LeaveType, Outcome, Role
from ..employees.model import Employee
from ..leave.model import LeaveRequest, NewLeaveRequest
from ..performance.model import PerformanceReview
from ..recruitment.model import JobPosting, OnboardingPlan
from ..storage.adapter import KeyValueStorage
from . import seed
from .ids import IdGenerator

logger = logging.getLogger(__name__)

R = TypeVar("R")


class HRStore:
    """Holder of every entity collection plus session and navigation state.

    Collections are tuples of frozen records. Each mutation builds a new
    tuple, swaps it in and writes the whole collection through the storage
    adapter before returning. Nothing coordinates two processes writing the
    same storage; the last write wins.
    """

    def __init__(self, storage: KeyValueStorage, *, today: Optional[date] = None, restore_session: bool = True):
        self._storage = storage
        today = today or today_local()

        self._employees: Tuple[Employee, ...] = self._load(EMPLOYEES_KEY, Employee.from_dict, seed.seed_employees())
        self._job_postings: Tuple[JobPosting, ...] = self._load(
            JOB_POSTINGS_KEY, JobPosting.from_dict, seed.seed_job_postings()
        )
        self._onboarding_plans: Tuple[OnboardingPlan, ...] = self._load(
            ONBOARDING_PLANS_KEY, OnboardingPlan.from_dict, seed.seed_onboarding_plans()
        )
        self._performance_reviews: Tuple[PerformanceReview, ...] = self._load(
            PERFORMANCE_REVIEWS_KEY, PerformanceReview.from_dict, seed.seed_performance_reviews()
        )
        self._leave_requests: Tuple[LeaveRequest, ...] = self._load(
            LEAVE_REQUESTS_KEY, LeaveRequest.from_dict, seed.seed_leave_requests()
        )
        self._time_records: Tuple[TimeRecord, ...] = self._load(
            TIME_RECORDS_KEY, TimeRecord.from_dict, seed.seed_time_records(today)
        )
        self._schedules: Tuple[EmployeeSchedule, ...] = self._load(
            SCHEDULES_KEY, EmployeeSchedule.from_dict, seed.seed_schedules()
        )

        # First run: the seed only exists in memory until written back.
        self._persist(EMPLOYEES_KEY, self._employees)
        self._persist(JOB_POSTINGS_KEY, self._job_postings)
        self._persist(ONBOARDING_PLANS_KEY, self._onboarding_plans)
        self._persist(PERFORMANCE_REVIEWS_KEY, self._performance_reviews)
        self._persist(LEAVE_REQUESTS_KEY, self._leave_requests)
        self._persist(TIME_RECORDS_KEY, self._time_records)
        self._persist(SCHEDULES_KEY, self._schedules)

        self._employee_ids = IdGenerator(e.id for e in self._employees)
        self._leave_ids = IdGenerator(r.id for r in self._leave_requests)

        self._session: Optional[Session] = None
        self._active_module = DEFAULT_MODULE
        self._active_sub_module: Optional[str] = None
        self._viewing_employee_id: Optional[int] = None

        if restore_session:
            self._restore_session()

    # -------- Persistence helpers --------
    def _load(self, key: str, decode: Callable[[dict], R], default: Sequence[Any]) -> Tuple[R, ...]:
        raw = self._storage.read(key, [record.to_dict() for record in default])
        try:
            if not isinstance(raw, list):
                raise TypeError(f"expected a list, got {type(raw).__name__}")
            return tuple(decode(item) for item in raw)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Stored collection %r is unreadable, using seed data: %s", key, exc, extra={"storage_key": key})
            return tuple(default)

    def _persist(self, key: str, records: Sequence[Any]) -> Outcome:
        result = self._storage.write(key, [record.to_dict() for record in records])
        return Outcome.OK if result.ok else Outcome.UNAVAILABLE

    def _commit(self, key: str, attr: str, records: Tuple[Any, ...]) -> Outcome:
        """Swap `records` in as the collection held in `attr` and write it through.

        Records are serialized before the swap, so a record that cannot be
        encoded raises here and leaves the collection untouched.
        """
        payload = [record.to_dict() for record in records]
        setattr(self, attr, records)
        result = self._storage.write(key, payload)
        return Outcome.OK if result.ok else Outcome.UNAVAILABLE

    def _restore_session(self) -> None:
        pointer = self._storage.read(SESSION_KEY, None)
        if pointer is None:
            return
        try:
            employee_id = int(pointer["user_id"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Ignoring malformed session pointer: %r", pointer)
            return
        outcome = self.login(employee_id)
        if outcome not in {Outcome.OK, Outcome.UNAVAILABLE}:
            logger.info("Stored session for employee %s not restored (%s)", employee_id, outcome.value)

    # -------- Collections (read-only snapshots) --------
    @property
    def employees(self) -> Tuple[Employee, ...]:
        return self._employees

    @property
    def job_postings(self) -> Tuple[JobPosting, ...]:
        return self._job_postings

    @property
    def onboarding_plans(self) -> Tuple[OnboardingPlan, ...]:
        return self._onboarding_plans

    @property
    def performance_reviews(self) -> Tuple[PerformanceReview, ...]:
        return self._performance_reviews

    @property
    def leave_requests(self) -> Tuple[LeaveRequest, ...]:
        return self._leave_requests

    @property
    def time_records(self) -> Tuple[TimeRecord, ...]:
        return self._time_records

    @property
    def schedules(self) -> Tuple[EmployeeSchedule, ...]:
        return self._schedules

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.id == int(employee_id):
                return employee
        return None

    def get_leave_request(self, request_id: int) -> Optional[LeaveRequest]:
        for request in self._leave_requests:
            if request.id == int(request_id):
                return request
        return None

    # -------- Employees --------
    def add_employee(self, employee: Employee) -> Employee:
        """Append a copy of `employee` under a freshly issued id."""
        created = dataclasses.replace(employee, id=self._employee_ids.next_id())
        self._commit(EMPLOYEES_KEY, "_employees", self._employees + (created,))
        return created

    def update_employee(self, employee: Employee) -> Outcome:
        if self.get_employee(employee.id) is None:
            return Outcome.NOT_FOUND
        return self._commit(
            EMPLOYEES_KEY,
            "_employees",
            tuple(employee if e.id == employee.id else e for e in self._employees),
        )

    # -------- Leave requests --------
    def add_leave_request(self, request: Union[NewLeaveRequest, LeaveRequest]) -> LeaveRequest:
        """Prepend a new Pending request; any id or status on the input is ignored."""
        name = request.employee_name
        if not name:
            employee = self.get_employee(request.employee_id)
            name = employee.name if employee else ""

        created = LeaveRequest(
            id=self._leave_ids.next_id(),
            employee_id=int(request.employee_id),
            employee_name=name,
            type=LeaveType(request.type),
            start_date=_as_date(request.start_date),
            end_date=_as_date(request.end_date),
            status=LeaveStatus.PENDING,
        )
        self._commit(LEAVE_REQUESTS_KEY, "_leave_requests", (created,) + self._leave_requests)
        return created

    def update_leave_request_status(self, request_id: int, status: LeaveStatus) -> Outcome:
        if self.get_leave_request(request_id) is None:
            return Outcome.NOT_FOUND
        return self._commit(
            LEAVE_REQUESTS_KEY,
            "_leave_requests",
            tuple(
                dataclasses.replace(r, status=LeaveStatus(status)) if r.id == int(request_id) else r
                for r in self._leave_requests
            ),
        )

    # -------- Session --------
    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def user_role(self) -> Optional[Role]:
        return self._session.role if self._session else None

    @property
    def current_user(self) -> Optional[Employee]:
        if self._session is None:
            return None
        return self.get_employee(self._session.employee_id)

    def login(self, employee_id: int) -> Outcome:
        employee = self.get_employee(employee_id)
        if employee is None:
            return Outcome.NOT_FOUND
        if not employee.is_active:
            return Outcome.INACTIVE

        self._session = Session(employee_id=employee.id, access=resolve_access(employee))
        logger.info("Employee %s logged in as %s", employee.id, self._session.role.value)
        result = self._storage.write(SESSION_KEY, self._session.to_pointer())
        return Outcome.OK if result.ok else Outcome.UNAVAILABLE

    def logout(self) -> Outcome:
        self._session = None
        self._active_module = DEFAULT_MODULE
        self._active_sub_module = None
        result = self._storage.remove(SESSION_KEY)
        return Outcome.OK if result.ok else Outcome.UNAVAILABLE

    # -------- Navigation --------
    @property
    def active_module(self) -> str:
        return self._active_module

    def set_active_module(self, module_id: str) -> None:
        self._active_module = module_id

    @property
    def active_sub_module(self) -> Optional[str]:
        return self._active_sub_module

    def set_active_sub_module(self, sub_module: Optional[str]) -> None:
        self._active_sub_module = sub_module

    def clear_sub_module(self) -> None:
        self._active_sub_module = None

    @property
    def viewing_employee_id(self) -> Optional[int]:
        return self._viewing_employee_id

    def set_viewing_employee_id(self, employee_id: Optional[int]) -> None:
        self._viewing_employee_id = employee_id


def _as_date(value: Union[date, str]) -> date:
    if isinstance(value, str):
        return parse_iso_date(value)
    return value
