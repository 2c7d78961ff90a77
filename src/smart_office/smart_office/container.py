from __future__ import annotations

from dataclasses import dataclass

from .attendance.csv_attendance_repository import CsvAttendanceRepository
from .attendance.service import AttendanceService
from .common.logging_setup import get_activity_logger
from .directory.in_memory_directory import InMemoryEmployeeDirectory, load_roster_csv
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    directory: InMemoryEmployeeDirectory
    attendance_repo: CsvAttendanceRepository

    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_container(*, settings: dict) -> Container:
    directory = load_roster_csv(settings.get("EMPLOYEE_ROSTER_PATH") or None)
    attendance_repo = CsvAttendanceRepository(str(settings["ATTENDANCE_CSV_PATH"]))

    attendance_service = AttendanceService(
        attendance_repo,
        directory,
        activity_logger=get_activity_logger(),
    )
    report_service = AttendanceReportService(
        attendance_repo,
        report_dir=str(settings.get("REPORT_DIR") or "."),
    )

    return Container(
        directory=directory,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        report_service=report_service,
    )
