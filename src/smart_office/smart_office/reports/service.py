from __future__ import annotations

import csv
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import compact_date, month_bounds, week_bounds
from ..core.constants import DEFAULT_REPORT_DIR, MISSING_PUNCH_NOTE
from ..core.enums import ReportPeriod
from ..core.failures import IOFailure
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .model import DAILY_COLUMNS, PERIOD_COLUMNS, DaySummary, EmployeeSummary, ReportOutput

logger = logging.getLogger(__name__)


class AttendanceReportService:
    """Daily / weekly / monthly attendance reports.

    Every report runs the same pipeline over a date window: filter the store,
    group by employee (first appearance order), group each employee by date,
    reduce each date to first check-in / last check-out and sum worked hours.
    The text block is always returned; the CSV copy is best-effort.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        report_dir: str | Path = DEFAULT_REPORT_DIR,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._attendance = attendance
        self._report_dir = Path(report_dir)
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def daily_report(self, day: date) -> ReportOutput:
        summaries = self.summarize(day, day)

        rows: list[dict] = []
        for s in summaries:
            only_day = s.days[0] if s.days else None
            rows.append(
                {
                    "empId": s.employee_id,
                    "empName": s.employee_name,
                    "firstCheckIn": _fmt_time(only_day.first_check_in) if only_day else "",
                    "lastCheckOut": _fmt_time(only_day.last_check_out) if only_day else "",
                    "totalHours": f"{s.total_hours:.2f}",
                    "notes": s.notes,
                }
            )

        return self._render(
            period=ReportPeriod.DAILY,
            start=day,
            end=day,
            title=f"Daily Attendance Report for {day.isoformat()}",
            columns=DAILY_COLUMNS,
            rows=rows,
            filename=f"attendance-report-{compact_date(day)}.csv",
        )

    def weekly_report(self, any_day_in_week: date) -> ReportOutput:
        monday, sunday = week_bounds(any_day_in_week)
        return self._render(
            period=ReportPeriod.WEEKLY,
            start=monday,
            end=sunday,
            title=f"Weekly Attendance Report for {monday.isoformat()} to {sunday.isoformat()}",
            columns=PERIOD_COLUMNS,
            rows=self._period_rows(self.summarize(monday, sunday)),
            filename=f"attendance-report-week-{compact_date(monday)}.csv",
        )

    def monthly_report(self, year: int, month: int) -> ReportOutput:
        start, end = month_bounds(year, month)
        return self._render(
            period=ReportPeriod.MONTHLY,
            start=start,
            end=end,
            title=f"Monthly Attendance Report for {year:04d}-{month:02d}",
            columns=PERIOD_COLUMNS,
            rows=self._period_rows(self.summarize(start, end)),
            filename=f"attendance-report-month-{year:04d}{month:02d}.csv",
        )

    def summarize(self, start: date, end: date) -> list[EmployeeSummary]:
        """Group the window's events per employee and per date."""

        window = self._attendance.records_between(start, end)

        by_employee: dict[int, list[AttendanceEvent]] = {}
        for e in window:
            by_employee.setdefault(e.employee_id, []).append(e)

        summaries: list[EmployeeSummary] = []
        for employee_id, events in by_employee.items():
            summary = EmployeeSummary(employee_id=employee_id, employee_name=events[0].employee_name)

            by_date: dict[date, list[AttendanceEvent]] = {}
            for e in events:
                by_date.setdefault(e.work_date, []).append(e)

            for work_date in sorted(by_date):
                day = _reduce_day(work_date, by_date[work_date])
                summary.days.append(day)

                minutes = self._calculator.worked_minutes(day)
                if minutes is None:
                    summary.notes = MISSING_PUNCH_NOTE
                    continue
                summary.total_hours += minutes / 60.0

            summaries.append(summary)
        return summaries

    def _period_rows(self, summaries: Sequence[EmployeeSummary]) -> list[dict]:
        return [
            {
                "empId": s.employee_id,
                "empName": s.employee_name,
                "daysPresent": s.days_present,
                "totalHours": f"{s.total_hours:.2f}",
                "notes": s.notes,
            }
            for s in summaries
        ]

    def _render(
        self,
        *,
        period: ReportPeriod,
        start: date,
        end: date,
        title: str,
        columns: tuple[str, ...],
        rows: list[dict],
        filename: str,
    ) -> ReportOutput:
        lines = [title, ",".join(_text_header(columns))]
        for row in rows:
            lines.append(",".join(str(row[c]) for c in columns))

        csv_path = self._report_dir / filename
        failure = self._write_csv(csv_path, columns, rows)
        if failure:
            lines.append(f"Failed to write {period.value} report CSV: {failure.reason}")

        return ReportOutput(
            period=period,
            start=start,
            end=end,
            title=title,
            columns=columns,
            rows=rows,
            text="\n".join(lines) + "\n",
            csv_path=csv_path,
            failure=failure,
        )

    def _write_csv(self, path: Path, columns: tuple[str, ...], rows: list[dict]) -> Optional[IOFailure]:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=list(columns), lineterminator="\n")
                writer.writeheader()
                for row in rows:
                    writer.writerow(row)
        except OSError as e:
            failure = IOFailure(path=path, reason=str(e))
            logger.warning("Failed to write report CSV: %s", failure.describe())
            return failure
        return None


def _reduce_day(work_date: date, events: list[AttendanceEvent]) -> DaySummary:
    ordered = sorted(events, key=lambda e: e.timestamp)
    first_in = None
    last_out = None
    for e in ordered:
        if e.is_check_in:
            if first_in is None:
                first_in = e.timestamp
        else:
            last_out = e.timestamp
    return DaySummary(
        work_date=work_date,
        first_check_in=first_in,
        last_check_out=last_out,
    )


def _text_header(columns: tuple[str, ...]) -> list[str]:
    return ["totalHours (approx)" if c == "totalHours" else c for c in columns]


def _fmt_time(value) -> str:
    return value.strftime("%H:%M:%S") if value else ""
