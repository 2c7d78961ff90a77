from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}") from None


def now_local() -> datetime:
    """Current local time truncated to whole seconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().replace(microsecond=0)


def compact_date(value: date) -> str:
    return value.strftime("%Y%m%d")


def week_bounds(any_day: date) -> tuple[date, date]:
    """Monday..Sunday of the ISO week containing ``any_day``."""
    monday = any_day - timedelta(days=any_day.weekday())
    return monday, monday + timedelta(days=6)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year out of range: {year}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
