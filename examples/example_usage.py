"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; scanning and reporting live in the services.
"""

from datetime import date

from smart_office.common.logging_setup import configure_logging
from smart_office.container import build_container
from smart_office.main import load_settings


def main():
    settings = load_settings()
    configure_logging(level=settings["LOG_LEVEL"] or "INFO", activity_log_path=settings["ACTIVITY_LOG_PATH"] or None)
    container = build_container(settings=settings)

    result = container.attendance_service.simulate_scan(1, check_in=True)
    print("Recorded:", result.event.describe())

    print(container.report_service.daily_report(date.today()).text)


if __name__ == "__main__":
    main()
