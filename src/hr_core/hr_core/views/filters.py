"""Read-only projections over the store.

Everything here is recomputed on each call; nothing is cached, so a view is
always consistent with the collections it was handed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from ..attendance.model import EmployeeSchedule, TimeRecord
from ..core.constants import DASHBOARD_LIST_LIMIT
from ..core.enums import PostingStatus, ReviewStatus
from ..employees.model import Contract, Employee, LeaveCredits
from ..leave.model import LeaveRequest
from ..performance.model import PerformanceReview
from ..recruitment.model import JobPosting, OnboardingPlan
from ..store.store import HRStore


def active_employees(employees: Iterable[Employee]) -> Tuple[Employee, ...]:
    return tuple(e for e in employees if e.is_active)


def active_employee_ids(employees: Iterable[Employee]) -> FrozenSet[int]:
    return frozenset(e.id for e in employees if e.is_active)


def leave_requests_for_active(requests: Iterable[LeaveRequest], employees: Iterable[Employee]) -> Tuple[LeaveRequest, ...]:
    ids = active_employee_ids(employees)
    return tuple(r for r in requests if r.employee_id in ids)


def leave_requests_for_inactive(requests: Iterable[LeaveRequest], employees: Iterable[Employee]) -> Tuple[LeaveRequest, ...]:
    """Complement of `leave_requests_for_active`, including dangling references."""
    ids = active_employee_ids(employees)
    return tuple(r for r in requests if r.employee_id not in ids)


def schedules_for_active(schedules: Iterable[EmployeeSchedule], employees: Iterable[Employee]) -> Tuple[EmployeeSchedule, ...]:
    ids = active_employee_ids(employees)
    return tuple(s for s in schedules if s.employee_id in ids)


def schedules_for_inactive(schedules: Iterable[EmployeeSchedule], employees: Iterable[Employee]) -> Tuple[EmployeeSchedule, ...]:
    ids = active_employee_ids(employees)
    return tuple(s for s in schedules if s.employee_id not in ids)


def requests_for_user(requests: Iterable[LeaveRequest], employee_id: int) -> Tuple[LeaveRequest, ...]:
    return tuple(r for r in requests if r.employee_id == int(employee_id))


def schedule_for(schedules: Iterable[EmployeeSchedule], employee_id: int) -> Optional[EmployeeSchedule]:
    for schedule in schedules:
        if schedule.employee_id == int(employee_id):
            return schedule
    return None


def time_records_on(records: Iterable[TimeRecord], day: date) -> Tuple[TimeRecord, ...]:
    return tuple(r for r in records if r.date == day)


def pending_reviews(reviews: Iterable[PerformanceReview]) -> Tuple[PerformanceReview, ...]:
    return tuple(r for r in reviews if r.status == ReviewStatus.PENDING)


def open_postings(postings: Iterable[JobPosting]) -> Tuple[JobPosting, ...]:
    return tuple(p for p in postings if p.status == PostingStatus.OPEN)


def my_leave_requests(store: HRStore) -> Tuple[LeaveRequest, ...]:
    """Requests filed for the logged-in employee; empty when logged out."""
    if store.session is None:
        return ()
    return requests_for_user(store.leave_requests, store.session.employee_id)


@dataclass(frozen=True)
class AdminSummary:
    active_employee_count: int
    open_position_count: int
    pending_review_count: int
    upcoming_reviews: Tuple[PerformanceReview, ...]
    onboarding: Tuple[OnboardingPlan, ...]


@dataclass(frozen=True)
class EmployeeSummary:
    employee: Employee
    leave_credits: LeaveCredits
    recent_requests: Tuple[LeaveRequest, ...]
    schedule: Optional[EmployeeSchedule]


@dataclass(frozen=True)
class ProfileView:
    employee: Employee
    supervisor: Optional[Employee]
    latest_contract: Optional[Contract]
    is_admin_viewing_other: bool


def admin_summary(store: HRStore, *, limit: int = DASHBOARD_LIST_LIMIT) -> AdminSummary:
    pending = pending_reviews(store.performance_reviews)
    return AdminSummary(
        active_employee_count=len(active_employees(store.employees)),
        open_position_count=len(open_postings(store.job_postings)),
        pending_review_count=len(pending),
        upcoming_reviews=_head(pending, limit),
        onboarding=_head(store.onboarding_plans, limit),
    )


def employee_summary(store: HRStore, *, limit: int = DASHBOARD_LIST_LIMIT) -> Optional[EmployeeSummary]:
    user = store.current_user
    if user is None:
        return None
    return EmployeeSummary(
        employee=user,
        leave_credits=user.leave_credits,
        recent_requests=_head(requests_for_user(store.leave_requests, user.id), limit),
        schedule=schedule_for(store.schedules, user.id),
    )


def profile_view(store: HRStore) -> Optional[ProfileView]:
    """Profile page data.

    Admins see the employee picked in `viewing_employee_id` (their own record
    when nothing is picked); everyone else only ever sees themselves. None
    when logged out or when the picked employee no longer exists.
    """
    session = store.session
    if session is None:
        return None

    if session.is_admin and store.viewing_employee_id is not None:
        employee = store.get_employee(store.viewing_employee_id)
    else:
        employee = store.current_user
    if employee is None:
        return None

    supervisor = store.get_employee(employee.supervisor_id) if employee.supervisor_id is not None else None
    return ProfileView(
        employee=employee,
        supervisor=supervisor,
        latest_contract=employee.contracts[-1] if employee.contracts else None,
        is_admin_viewing_other=session.is_admin and employee.id != session.employee_id,
    )


def _head(items: Sequence, limit: int) -> tuple:
    return tuple(items[:limit])
