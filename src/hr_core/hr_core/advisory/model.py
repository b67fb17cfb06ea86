from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import inclusive_days
from ..core.enums import LeaveType, Verdict
from ..employees.model import LeaveCredits


@dataclass(frozen=True)
class LeaveQuery:
    employee_name: str
    leave_credits: LeaveCredits
    leave_type: LeaveType
    start_date: date
    end_date: date

    @property
    def requested_days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)

    @property
    def available_days(self) -> int:
        return balance_for(self.leave_credits, self.leave_type)


@dataclass(frozen=True)
class Advisory:
    """Non-authoritative reply; only `verdict` is machine-readable."""

    verdict: Verdict
    text: str

    @property
    def blocks_submission(self) -> bool:
        return self.verdict == Verdict.ERROR


def balance_for(credits: LeaveCredits, leave_type: LeaveType) -> int:
    if leave_type == LeaveType.VACATION:
        return credits.vacation
    if leave_type == LeaveType.SICK:
        return credits.sick
    return credits.personal


def classify(text: str) -> Optional[Verdict]:
    stripped = (text or "").lstrip()
    for verdict in Verdict:
        if stripped.startswith(f"{verdict.value}:"):
            return verdict
    return None


def parse_advisory(text: str) -> Optional[Advisory]:
    """Advisory for a well-formed reply, None for anything without a known prefix."""
    verdict = classify(text)
    if verdict is None:
        return None
    return Advisory(verdict=verdict, text=text.strip())


def build_prompt(query: LeaveQuery) -> str:
    credits = query.leave_credits
    return (
        "You are an HR assistant checking a leave request against the employee's balance.\n"
        f"Employee: {query.employee_name}\n"
        f"Leave balances (days): vacation={credits.vacation}, sick={credits.sick}, personal={credits.personal}\n"
        f"Requested: {query.leave_type.value} from {query.start_date.isoformat()} to {query.end_date.isoformat()} "
        f"({query.requested_days} calendar days, {query.available_days} days available for this type)\n"
        "Reply with one short paragraph that starts with exactly one of these prefixes:\n"
        "CONFIRMED: the balance covers the request.\n"
        "WARNING: the request is possible but worth a second look (e.g. it uses most of the balance "
        "or falls on weekends).\n"
        "ERROR: the request cannot be granted as entered (insufficient balance or end date before start date)."
    )
