from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..common.datetime_utils import parse_iso_date
from ..core.enums import PostingStatus


@dataclass(frozen=True)
class JobPosting:
    id: int
    title: str
    department: str
    status: PostingStatus
    candidates: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "department": self.department,
            "status": self.status.value,
            "candidates": self.candidates,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobPosting":
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            department=str(data.get("department", "")),
            status=PostingStatus(data["status"]),
            candidates=int(data.get("candidates", 0)),
        )


@dataclass(frozen=True)
class OnboardingPlan:
    id: int
    employee_name: str
    role: str
    start_date: date
    manager: str
    progress: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employee_name": self.employee_name,
            "role": self.role,
            "start_date": self.start_date.isoformat(),
            "manager": self.manager,
            "progress": self.progress,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OnboardingPlan":
        return cls(
            id=int(data["id"]),
            employee_name=str(data["employee_name"]),
            role=str(data.get("role", "")),
            start_date=parse_iso_date(data["start_date"]),
            manager=str(data.get("manager", "")),
            progress=int(data.get("progress", 0)),
        )
