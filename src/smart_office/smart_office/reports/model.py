from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from ..core.enums import ReportPeriod
from ..core.failures import IOFailure

DAILY_COLUMNS = ("empId", "empName", "firstCheckIn", "lastCheckOut", "totalHours", "notes")
PERIOD_COLUMNS = ("empId", "empName", "daysPresent", "totalHours", "notes")


@dataclass(frozen=True)
class DaySummary:
    """One employee's events on one calendar date, reduced to first-in/last-out."""

    work_date: date
    first_check_in: Optional[datetime]
    last_check_out: Optional[datetime]


@dataclass
class EmployeeSummary:
    employee_id: int
    employee_name: str
    days: list[DaySummary] = field(default_factory=list)
    total_hours: float = 0.0
    notes: str = ""

    @property
    def days_present(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class ReportOutput:
    """Read-model of a generated report (text block + CSV rows)."""

    period: ReportPeriod
    start: date
    end: date
    title: str
    columns: tuple[str, ...]
    rows: list[dict]
    text: str
    csv_path: Path
    failure: Optional[IOFailure] = None

    @property
    def written(self) -> bool:
        return self.failure is None
