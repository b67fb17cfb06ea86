from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role resolved at login, used for navigation gating."""

    ADMIN = "Admin"
    EMPLOYEE = "Employee"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    UNDISCLOSED = "Prefer not to say"


class ContractType(str, Enum):
    FULL_TIME = "Full-Time"
    PART_TIME = "Part-Time"
    CONTRACT = "Contract"


class LeaveType(str, Enum):
    VACATION = "Vacation"
    SICK = "Sick Leave"
    PERSONAL = "Personal"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TimeRecordStatus(str, Enum):
    ON_TIME = "On Time"
    LATE = "Late"
    ABSENT = "Absent"


class PostingStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


class ReviewStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


class Verdict(str, Enum):
    """Machine-readable prefix of an advisory reply."""

    CONFIRMED = "CONFIRMED"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Outcome(str, Enum):
    """Result of a store operation."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    INACTIVE = "INACTIVE"
    UNAVAILABLE = "UNAVAILABLE"
