from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Union

from ..core.enums import Role
from ..employees.model import Employee


@dataclass(frozen=True)
class AdminAccess:
    """Sees every navigation target whose role list includes Admin."""

    @property
    def role(self) -> Role:
        return Role.ADMIN


@dataclass(frozen=True)
class EmployeeAccess:
    """Sees only role-permitted targets that are also in the allow-list."""

    accessible_modules: FrozenSet[str] = frozenset()

    @property
    def role(self) -> Role:
        return Role.EMPLOYEE


Access = Union[AdminAccess, EmployeeAccess]


@dataclass(frozen=True)
class Session:
    """Authenticated user pointer plus the access computed at login."""

    employee_id: int
    access: Access

    @property
    def role(self) -> Role:
        return self.access.role

    @property
    def is_admin(self) -> bool:
        return isinstance(self.access, AdminAccess)

    def to_pointer(self) -> dict:
        return {"user_id": self.employee_id}


def resolve_access(employee: Employee) -> Access:
    """Employees without a supervisor are administrators.

    This is the only place that rule lives; callers read `Session.access`
    instead of re-checking `supervisor_id`.
    """
    if employee.supervisor_id is None:
        return AdminAccess()
    return EmployeeAccess(accessible_modules=frozenset(employee.accessible_modules))
