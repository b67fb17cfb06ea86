from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, FrozenSet, Optional, Tuple

from ..common.datetime_utils import format_optional_date, parse_iso_date, parse_optional_date
from ..core.enums import ContractType, EmployeeStatus, Gender


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"street": self.street, "city": self.city, "state": self.state, "zip": self.zip}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Address":
        return cls(
            street=str(data.get("street", "")),
            city=str(data.get("city", "")),
            state=str(data.get("state", "")),
            zip=str(data.get("zip", "")),
        )


@dataclass(frozen=True)
class EmploymentHistory:
    company: str
    position: str
    start_date: date
    end_date: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "company": self.company,
            "position": self.position,
            "start_date": self.start_date.isoformat(),
            "end_date": format_optional_date(self.end_date),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmploymentHistory":
        return cls(
            company=str(data["company"]),
            position=str(data["position"]),
            start_date=parse_iso_date(data["start_date"]),
            end_date=parse_optional_date(data.get("end_date")),
        )


@dataclass(frozen=True)
class Contract:
    type: ContractType
    start_date: date
    end_date: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": format_optional_date(self.end_date),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contract":
        return cls(
            type=ContractType(data["type"]),
            start_date=parse_iso_date(data["start_date"]),
            end_date=parse_optional_date(data.get("end_date")),
        )


@dataclass(frozen=True)
class Performance:
    last_review: Optional[date] = None
    achievements: Tuple[str, ...] = ()
    areas_for_improvement: Tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "last_review": format_optional_date(self.last_review),
            "achievements": list(self.achievements),
            "areas_for_improvement": list(self.areas_for_improvement),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Performance":
        return cls(
            last_review=parse_optional_date(data.get("last_review")),
            achievements=tuple(data.get("achievements") or ()),
            areas_for_improvement=tuple(data.get("areas_for_improvement") or ()),
        )


@dataclass(frozen=True)
class LeaveCredits:
    """Remaining days per leave type. Only changed by a person, never by approval."""

    vacation: int = 0
    sick: int = 0
    personal: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"vacation": self.vacation, "sick": self.sick, "personal": self.personal}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LeaveCredits":
        return cls(
            vacation=int(data.get("vacation", 0)),
            sick=int(data.get("sick", 0)),
            personal=int(data.get("personal", 0)),
        )


@dataclass(frozen=True)
class Employee:
    """Directory entry.

    `supervisor_id` is None for top-of-tree staff; `accessible_modules` drives
    navigation for the Employee role and is ignored for Admin.
    """

    id: int
    name: str
    position: str
    department: str
    email: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    gender: Gender = Gender.UNDISCLOSED
    supervisor_id: Optional[int] = None
    avatar: str = ""
    address: Address = field(default_factory=Address)
    employment_history: Tuple[EmploymentHistory, ...] = ()
    contracts: Tuple[Contract, ...] = ()
    performance: Performance = field(default_factory=Performance)
    leave_credits: LeaveCredits = field(default_factory=LeaveCredits)
    accessible_modules: FrozenSet[str] = frozenset()

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "email": self.email,
            "avatar": self.avatar,
            "status": self.status.value,
            "gender": self.gender.value,
            "supervisor_id": self.supervisor_id,
            "address": self.address.to_dict(),
            "employment_history": [h.to_dict() for h in self.employment_history],
            "contracts": [c.to_dict() for c in self.contracts],
            "performance": self.performance.to_dict(),
            "leave_credits": self.leave_credits.to_dict(),
            "accessible_modules": sorted(self.accessible_modules),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Employee":
        supervisor_id = data.get("supervisor_id")
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            position=str(data.get("position", "")),
            department=str(data.get("department", "")),
            email=str(data.get("email", "")),
            avatar=str(data.get("avatar", "")),
            status=EmployeeStatus(data.get("status", EmployeeStatus.ACTIVE.value)),
            gender=Gender(data.get("gender", Gender.UNDISCLOSED.value)),
            supervisor_id=int(supervisor_id) if supervisor_id is not None else None,
            address=Address.from_dict(data.get("address") or {}),
            employment_history=tuple(EmploymentHistory.from_dict(h) for h in data.get("employment_history") or ()),
            contracts=tuple(Contract.from_dict(c) for c in data.get("contracts") or ()),
            performance=Performance.from_dict(data.get("performance") or {}),
            leave_credits=LeaveCredits.from_dict(data.get("leave_credits") or {}),
            accessible_modules=frozenset(data.get("accessible_modules") or ()),
        )
