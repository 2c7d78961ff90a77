from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Whether an attendance event is a check-in or a check-out."""

    CHECK_IN = "IN"
    CHECK_OUT = "OUT"

    @property
    def csv_flag(self) -> str:
        return "1" if self is Direction.CHECK_IN else "0"

    @classmethod
    def from_csv_flag(cls, flag: str) -> "Direction":
        return cls.CHECK_IN if flag == "1" else cls.CHECK_OUT


class ReportPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class FailureKind(str, Enum):
    """Non-fatal failure kinds returned as values instead of raised."""

    PARSE = "PARSE"
    IO = "IO"
