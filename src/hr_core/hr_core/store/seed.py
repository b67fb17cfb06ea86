"""Bundled demo dataset written to storage on first run."""

from __future__ import annotations

from datetime import date, time
from typing import Tuple

from ..attendance.model import EmployeeSchedule, TimeRecord
from ..core.enums import (
    ContractType,
    EmployeeStatus,
    Gender,
    LeaveStatus,
    LeaveType,
    PostingStatus,
    ReviewStatus,
    TimeRecordStatus,
)
from ..employees.model import Address, Contract, Employee, LeaveCredits, Performance
from ..leave.model import LeaveRequest
from ..performance.model import PerformanceReview
from ..recruitment.model import JobPosting, OnboardingPlan


def seed_employees() -> Tuple[Employee, ...]:
    return (
        Employee(
            id=1,
            name="John Doe",
            position="Software Engineer",
            department="Technology",
            email="john.doe@example.com",
            avatar="https://i.pravatar.cc/150?u=1",
            gender=Gender.MALE,
            supervisor_id=3,
            address=Address("123 Main St", "Techville", "CA", "90210"),
            contracts=(Contract(ContractType.FULL_TIME, date(2022, 1, 15)),),
            performance=Performance(
                last_review=date(2023, 12, 1),
                achievements=("Launched new feature ahead of schedule",),
                areas_for_improvement=("Improve documentation for complex code sections",),
            ),
            leave_credits=LeaveCredits(vacation=12, sick=8, personal=5),
            accessible_modules=frozenset({"dashboard", "attendance", "assistant", "profile"}),
        ),
        Employee(
            id=2,
            name="Jane Smith",
            position="Product Manager",
            department="Product",
            email="jane.smith@example.com",
            avatar="https://i.pravatar.cc/150?u=2",
            gender=Gender.FEMALE,
            supervisor_id=3,
            address=Address("456 Oak Ave", "Productburg", "CA", "90211"),
            contracts=(Contract(ContractType.FULL_TIME, date(2021, 6, 1)),),
            performance=Performance(
                last_review=date(2024, 1, 15),
                achievements=("Successfully managed Q4 product roadmap",),
                areas_for_improvement=("Increase frequency of stakeholder updates",),
            ),
            leave_credits=LeaveCredits(vacation=15, sick=10, personal=5),
            accessible_modules=frozenset({"dashboard", "attendance"}),
        ),
        Employee(
            id=3,
            name="Alice Johnson",
            position="Engineering Manager",
            department="Technology",
            email="admin@hr-core.com",
            avatar="https://i.pravatar.cc/150?u=3",
            gender=Gender.FEMALE,
            supervisor_id=None,
            address=Address("789 Pine Ln", "Techville", "CA", "90210"),
            contracts=(Contract(ContractType.FULL_TIME, date(2020, 3, 10)),),
            performance=Performance(
                last_review=date(2024, 2, 1),
                achievements=("Mentored junior developers", "Improved team velocity by 15%"),
                areas_for_improvement=("Delegate more tasks to senior engineers",),
            ),
            leave_credits=LeaveCredits(vacation=20, sick=10, personal=5),
            accessible_modules=frozenset(
                {"dashboard", "employees", "recruitment", "performance", "attendance", "reporting", "assistant", "profile"}
            ),
        ),
        Employee(
            id=4,
            name="Bob Brown",
            position="UX Designer",
            department="Design",
            email="bob.brown@example.com",
            avatar="https://i.pravatar.cc/150?u=4",
            gender=Gender.MALE,
            supervisor_id=2,
            address=Address("101 Maple Dr", "Design City", "CA", "90212"),
            contracts=(Contract(ContractType.FULL_TIME, date(2023, 2, 20)),),
            performance=Performance(
                last_review=date(2023, 11, 20),
                achievements=("Redesigned the user onboarding flow, increasing completion rate",),
                areas_for_improvement=("Contribute more to design system documentation",),
            ),
            leave_credits=LeaveCredits(vacation=10, sick=5, personal=2),
            accessible_modules=frozenset({"dashboard", "assistant"}),
        ),
        Employee(
            id=5,
            name="Charlie Davis",
            position="HR Specialist",
            department="Human Resources",
            email="charlie.d@example.com",
            avatar="https://i.pravatar.cc/150?u=5",
            status=EmployeeStatus.INACTIVE,
            gender=Gender.UNDISCLOSED,
            supervisor_id=None,
            address=Address("212 Birch Rd", "HR Town", "CA", "90213"),
            performance=Performance(last_review=date(2023, 5, 10)),
        ),
    )


def seed_job_postings() -> Tuple[JobPosting, ...]:
    return (
        JobPosting(1, "Senior Backend Engineer", "Technology", PostingStatus.OPEN, 42),
        JobPosting(2, "Marketing Coordinator", "Marketing", PostingStatus.OPEN, 78),
        JobPosting(3, "Data Scientist", "Data", PostingStatus.CLOSED, 112),
    )


def seed_onboarding_plans() -> Tuple[OnboardingPlan, ...]:
    return (
        OnboardingPlan(1, "Emily White", "Junior Frontend Developer", date(2024, 7, 1), "Alice Johnson", 75),
        OnboardingPlan(2, "Michael Green", "Sales Development Rep", date(2024, 7, 15), "Jane Smith", 25),
    )


def seed_performance_reviews() -> Tuple[PerformanceReview, ...]:
    return (
        PerformanceReview(1, 1, "John Doe", date(2024, 6, 1), ReviewStatus.COMPLETED),
        PerformanceReview(2, 2, "Jane Smith", date(2024, 7, 15), ReviewStatus.PENDING),
        PerformanceReview(4, 4, "Bob Brown", date(2024, 5, 20), ReviewStatus.COMPLETED),
    )


def seed_leave_requests() -> Tuple[LeaveRequest, ...]:
    return (
        LeaveRequest(1, 1, "John Doe", LeaveType.VACATION, date(2024, 8, 5), date(2024, 8, 9), LeaveStatus.APPROVED),
        LeaveRequest(2, 2, "Jane Smith", LeaveType.SICK, date(2024, 7, 22), date(2024, 7, 22), LeaveStatus.APPROVED),
        LeaveRequest(3, 4, "Bob Brown", LeaveType.PERSONAL, date(2024, 9, 2), date(2024, 9, 2), LeaveStatus.PENDING),
        LeaveRequest(4, 5, "Charlie Davis", LeaveType.VACATION, date(2023, 4, 10), date(2023, 4, 14), LeaveStatus.APPROVED),
    )


def seed_time_records(today: date) -> Tuple[TimeRecord, ...]:
    return (
        TimeRecord(1, 1, "John Doe", today, time(9, 5), time(17, 2), TimeRecordStatus.ON_TIME),
        TimeRecord(2, 2, "Jane Smith", today, time(9, 15), time(17, 30), TimeRecordStatus.LATE),
        TimeRecord(3, 3, "Alice Johnson", today, time(8, 58), time(17, 5), TimeRecordStatus.ON_TIME),
        TimeRecord(4, 4, "Bob Brown", today, time(9, 0), time(16, 55), TimeRecordStatus.ON_TIME),
    )


def seed_schedules() -> Tuple[EmployeeSchedule, ...]:
    return (
        EmployeeSchedule(1, 1, "John Doe", "9-5", "9-5", "9-5", "9-5", "9-5"),
        EmployeeSchedule(2, 2, "Jane Smith", "9-5", "9-5", "9-5", "9-5", "9-5"),
        EmployeeSchedule(3, 3, "Alice Johnson", "9-5", "9-5", "9-5", "9-5", "9-5"),
        EmployeeSchedule(4, 4, "Bob Brown", "10-6", "10-6", "10-6", "10-6", "Day Off"),
    )
