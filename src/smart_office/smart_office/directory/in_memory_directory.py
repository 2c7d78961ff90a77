from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .model import Employee
from .repository import EmployeeDirectory

logger = logging.getLogger(__name__)

DEMO_ROSTER = (
    Employee(employee_id=1, name="Alice", department="Engineering"),
    Employee(employee_id=2, name="Bob", department="Design"),
    Employee(employee_id=3, name="Carol", department="QA"),
)


class InMemoryEmployeeDirectory(EmployeeDirectory):
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[int, Employee] = {}
        for e in employees:
            self._by_id[int(e.employee_id)] = e

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())


def load_roster_csv(path: Optional[str | Path]) -> InMemoryEmployeeDirectory:
    """Build a directory from an ``employee_id,name,department`` CSV.

    Falls back to the demo roster when no path is configured or the file is
    missing. Rows with a non-integer id are skipped.
    """

    if not path:
        return InMemoryEmployeeDirectory(DEMO_ROSTER)

    roster = Path(path)
    if not roster.exists():
        logger.info("Roster %s not found, using demo roster", roster)
        return InMemoryEmployeeDirectory(DEMO_ROSTER)

    employees: list[Employee] = []
    with roster.open("r", encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            try:
                employee_id = int((row.get("employee_id") or "").strip())
            except ValueError:
                logger.warning("Skipping roster row with bad employee_id: %r", row)
                continue
            employees.append(
                Employee(
                    employee_id=employee_id,
                    name=(row.get("name") or "").strip(),
                    department=(row.get("department") or "").strip() or None,
                )
            )
    return InMemoryEmployeeDirectory(employees)
