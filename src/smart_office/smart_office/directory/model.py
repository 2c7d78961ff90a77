from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an office employee known to the directory."""

    employee_id: int
    name: str
    department: Optional[str] = None
