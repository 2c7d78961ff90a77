from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.failures import IOFailure
from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    """Append-only attendance event log."""

    def append(self, event: AttendanceEvent) -> Optional[IOFailure]:
        """Store ``event``; a returned failure means only the durable copy failed."""

        raise NotImplementedError

    def all_records(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def records_on(self, day: date) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def records_between(self, start: date, end: date) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
