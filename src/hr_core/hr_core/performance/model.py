from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..common.datetime_utils import parse_iso_date
from ..core.enums import ReviewStatus


@dataclass(frozen=True)
class PerformanceReview:
    id: int
    employee_id: int
    employee_name: str
    date: date
    status: ReviewStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.date.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PerformanceReview":
        return cls(
            id=int(data["id"]),
            employee_id=int(data["employee_id"]),
            employee_name=str(data.get("employee_name", "")),
            date=parse_iso_date(data["date"]),
            status=ReviewStatus(data["status"]),
        )
