from __future__ import annotations

from typing import Optional

from ..model import DaySummary
from .base import WorkedTimeCalculator


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: last check-out - first check-in, truncated to whole minutes."""

    def worked_minutes(self, day: DaySummary) -> Optional[int]:
        if day.first_check_in is None or day.last_check_out is None:
            return None
        if day.last_check_out <= day.first_check_in:
            return None
        return int((day.last_check_out - day.first_check_in).total_seconds() // 60)
