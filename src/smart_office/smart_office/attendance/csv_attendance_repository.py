from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..core.failures import IOFailure, ParseFailure
from .codec import decode, encode
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class CsvAttendanceRepository(AttendanceRepository):
    """In-memory event list mirrored line-for-line to a CSV file.

    Note: the file is opened per call (append mode for writes), no handle is
    kept between calls. Durability is best-effort: a failed write is reported
    but the in-memory event stays.
    """

    def __init__(self, csv_path: str | Path):
        self._path = Path(csv_path)
        self._records: list[AttendanceEvent] = []
        self.skipped: list[ParseFailure] = []
        self.load_failure: Optional[IOFailure] = None
        self.load_all()

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> None:
        if not self._path.exists():
            return

        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                for raw in f:
                    line = raw.rstrip("\r\n")
                    if not line.strip():
                        continue
                    result = decode(line)
                    if isinstance(result, ParseFailure):
                        logger.debug("Skipping attendance line: %s", result.reason)
                        self.skipped.append(result)
                        continue
                    self._records.append(result)
        except OSError as e:
            self.load_failure = IOFailure(path=self._path, reason=str(e))
            logger.warning("Failed to read attendance CSV: %s", self.load_failure.describe())

    def append(self, event: AttendanceEvent) -> Optional[IOFailure]:
        self._records.append(event)
        try:
            with self._path.open("a", encoding="utf-8", newline="") as f:
                f.write(encode(event) + "\n")
                f.flush()
        except OSError as e:
            failure = IOFailure(path=self._path, reason=str(e))
            logger.warning("Failed to append attendance CSV: %s", failure.describe())
            return failure
        return None

    def all_records(self) -> Sequence[AttendanceEvent]:
        return list(self._records)

    def records_on(self, day: date) -> Sequence[AttendanceEvent]:
        return [r for r in self._records if r.work_date == day]

    def records_between(self, start: date, end: date) -> Sequence[AttendanceEvent]:
        return [r for r in self._records if start <= r.work_date <= end]
