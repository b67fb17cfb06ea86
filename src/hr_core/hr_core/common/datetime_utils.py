from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return parse_iso_date(value)


def format_optional_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def parse_clock(value: Optional[str]) -> Optional[time]:
    """Parse HH:MM into time; empty means the employee never clocked."""
    if not value:
        return None
    return datetime.strptime(value, "%H:%M").time()


def format_clock(value: Optional[time]) -> str:
    return value.strftime("%H:%M") if value else ""


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1
