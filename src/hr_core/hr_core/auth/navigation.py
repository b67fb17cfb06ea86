from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from ..core.enums import Role
from .session import EmployeeAccess, Session


@dataclass(frozen=True)
class NavItem:
    id: str
    label: str
    roles: FrozenSet[Role]
    sub_items: Tuple["NavItem", ...] = ()


_BOTH = frozenset({Role.ADMIN, Role.EMPLOYEE})
_ADMIN = frozenset({Role.ADMIN})

NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem("dashboard", "Dashboard", _BOTH),
    NavItem("profile", "Profile", _BOTH),
    NavItem("employees", "Employees", _ADMIN),
    NavItem(
        "recruitment",
        "Recruitment",
        _ADMIN,
        sub_items=(
            NavItem("postings", "Job Postings", _ADMIN),
            NavItem("onboarding", "Onboarding Plans", _ADMIN),
        ),
    ),
    NavItem("performance", "Performance", _ADMIN),
    NavItem("attendance", "Attendance", _BOTH),
    NavItem("reporting", "Reporting", _ADMIN),
    NavItem("assistant", "AI Assistant", _BOTH),
)

MODULE_IDS = frozenset(item.id for item in NAV_ITEMS)


def find_nav_item(module_id: str) -> Optional[NavItem]:
    for item in NAV_ITEMS:
        if item.id == module_id:
            return item
    return None


def _item_visible(session: Session, item: NavItem) -> bool:
    if session.role not in item.roles:
        return False
    if isinstance(session.access, EmployeeAccess):
        return item.id in session.access.accessible_modules
    return True


def can_view(session: Optional[Session], module_id: str) -> bool:
    """UI gating only; nothing here is enforced on the data itself."""
    if session is None:
        return False
    item = find_nav_item(module_id)
    if item is None:
        return False
    return _item_visible(session, item)


def visible_nav_items(session: Optional[Session]) -> Tuple[NavItem, ...]:
    if session is None:
        return ()
    return tuple(item for item in NAV_ITEMS if _item_visible(session, item))
