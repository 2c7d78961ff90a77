from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import Direction


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one check-in or check-out scan."""

    employee_id: int
    employee_name: str
    method: str
    direction: Direction
    timestamp: datetime

    @property
    def is_check_in(self) -> bool:
        return self.direction is Direction.CHECK_IN

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    def describe(self) -> str:
        return (
            f"AttendanceEvent[empId={self.employee_id}, name={self.employee_name}, "
            f"method={self.method}, type={self.direction.value}, "
            f"time={self.timestamp.isoformat(timespec='seconds')}]"
        )
