from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import (
    ACTIVITY_ATTEND_PREFIX,
    ACTIVITY_LOGGER_NAME,
    SCAN_METHOD_RFID,
    UNKNOWN_EMPLOYEE_PREFIX,
)
from ..core.enums import Direction
from ..core.exceptions import ValidationError
from ..core.failures import IOFailure
from ..directory.repository import EmployeeDirectory
from .model import AttendanceEvent
from .repository import AttendanceRepository


@dataclass(frozen=True)
class ScanResult:
    event: AttendanceEvent
    failure: Optional[IOFailure] = None

    @property
    def persisted(self) -> bool:
        return self.failure is None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        directory: EmployeeDirectory,
        *,
        activity_logger: logging.Logger | None = None,
    ):
        self._attendance = attendance
        self._directory = directory
        self._activity = activity_logger or logging.getLogger(ACTIVITY_LOGGER_NAME)

    def resolve_name(self, employee_id: int) -> str:
        employee = self._directory.get_by_id(employee_id)
        if employee and employee.name:
            return employee.name
        return f"{UNKNOWN_EMPLOYEE_PREFIX}{employee_id}"

    def simulate_scan(self, employee_id: int, *, check_in: bool, now: datetime | None = None) -> ScanResult:
        """Record an RFID scan for ``employee_id``.

        Unknown ids are still recorded under a placeholder name.
        """

        if isinstance(employee_id, bool) or not isinstance(employee_id, int):
            raise ValidationError(f"employee_id must be an integer, got {employee_id!r}")

        timestamp = (now or now_local()).replace(microsecond=0)
        event = AttendanceEvent(
            employee_id=employee_id,
            employee_name=self.resolve_name(employee_id),
            method=SCAN_METHOD_RFID,
            direction=Direction.CHECK_IN if check_in else Direction.CHECK_OUT,
            timestamp=timestamp,
        )
        failure = self._attendance.append(event)
        self._activity.info("%s%s", ACTIVITY_ATTEND_PREFIX, event.describe())
        return ScanResult(event=event, failure=failure)

    def all_records(self) -> Sequence[AttendanceEvent]:
        return self._attendance.all_records()

    def records_on(self, day: date) -> Sequence[AttendanceEvent]:
        return self._attendance.records_on(day)

    def records_between(self, start: date, end: date) -> Sequence[AttendanceEvent]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return self._attendance.records_between(start, end)

    def to_ui(self, event: AttendanceEvent) -> dict:
        return {
            "employee_id": event.employee_id,
            "employee_name": event.employee_name,
            "method": event.method,
            "direction": event.direction.value,
            "date": event.work_date.strftime("%Y-%m-%d"),
            "time": event.timestamp.strftime("%H:%M:%S"),
        }
