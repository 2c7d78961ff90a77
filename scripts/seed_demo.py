"""Seed the attendance CSV with one demo work week for every roster employee."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from smart_office.common.datetime_utils import week_bounds
from smart_office.container import build_container
from smart_office.main import load_settings


def main() -> None:
    settings = load_settings()
    container = build_container(settings=settings)
    service = container.attendance_service

    monday, _ = week_bounds(date.today() - timedelta(days=7))
    for employee in container.directory.list_all():
        for offset in range(5):
            day = monday + timedelta(days=offset)
            service.simulate_scan(employee.employee_id, check_in=True, now=datetime.combine(day, time(9, 0)))
            service.simulate_scan(employee.employee_id, check_in=False, now=datetime.combine(day, time(17, 30)))

    print(f"OK: Seeded demo week starting {monday.isoformat()} -> {container.attendance_repo.path}")


if __name__ == "__main__":
    main()
