from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import DaySummary


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, day: DaySummary) -> Optional[int]:
        """Whole minutes worked on ``day``, or ``None`` when the day is incomplete."""

        raise NotImplementedError
