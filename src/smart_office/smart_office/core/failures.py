from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .enums import FailureKind


@dataclass(frozen=True)
class ParseFailure:
    """A CSV line that could not be decoded into an event."""

    line: str
    reason: str
    kind: FailureKind = field(default=FailureKind.PARSE, init=False)


@dataclass(frozen=True)
class IOFailure:
    """A file that could not be opened, read or written."""

    path: Optional[Path]
    reason: str
    kind: FailureKind = field(default=FailureKind.IO, init=False)

    def describe(self) -> str:
        return f"{self.path}: {self.reason}" if self.path else self.reason
