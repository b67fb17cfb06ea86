from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..common.datetime_utils import parse_iso_date
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class NewLeaveRequest:
    """Create payload: the store assigns the id and the initial status."""

    employee_id: int
    type: LeaveType
    start_date: date
    end_date: date
    employee_name: str = ""


@dataclass(frozen=True)
class LeaveRequest:
    id: int
    employee_id: int
    employee_name: str
    type: LeaveType
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "type": self.type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LeaveRequest":
        return cls(
            id=int(data["id"]),
            employee_id=int(data["employee_id"]),
            employee_name=str(data.get("employee_name", "")),
            type=LeaveType(data["type"]),
            start_date=parse_iso_date(data["start_date"]),
            end_date=parse_iso_date(data["end_date"]),
            status=LeaveStatus(data.get("status", LeaveStatus.PENDING.value)),
        )
