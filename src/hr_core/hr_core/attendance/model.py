from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Optional

from ..common.datetime_utils import format_clock, parse_clock, parse_iso_date
from ..core.enums import TimeRecordStatus

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")


@dataclass(frozen=True)
class TimeRecord:
    """One row per employee per day. Status is stored, not derived from the times."""

    id: int
    employee_id: int
    employee_name: str
    date: date
    time_in: Optional[time]
    time_out: Optional[time]
    status: TimeRecordStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.date.isoformat(),
            "time_in": format_clock(self.time_in),
            "time_out": format_clock(self.time_out),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeRecord":
        return cls(
            id=int(data["id"]),
            employee_id=int(data["employee_id"]),
            employee_name=str(data.get("employee_name", "")),
            date=parse_iso_date(data["date"]),
            time_in=parse_clock(data.get("time_in")),
            time_out=parse_clock(data.get("time_out")),
            status=TimeRecordStatus(data["status"]),
        )


@dataclass(frozen=True)
class EmployeeSchedule:
    id: int
    employee_id: int
    employee_name: str
    monday: str = ""
    tuesday: str = ""
    wednesday: str = ""
    thursday: str = ""
    friday: str = ""

    def shift_for(self, weekday: str) -> str:
        if weekday not in WEEKDAYS:
            raise KeyError(weekday)
        return getattr(self, weekday)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
        }
        for day in WEEKDAYS:
            data[day] = getattr(self, day)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmployeeSchedule":
        return cls(
            id=int(data["id"]),
            employee_id=int(data["employee_id"]),
            employee_name=str(data.get("employee_name", "")),
            **{day: str(data.get(day, "")) for day in WEEKDAYS},
        )
