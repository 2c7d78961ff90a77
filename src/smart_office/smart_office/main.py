from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_setup import configure_logging
from .container import build_container
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "ATTENDANCE_CSV_PATH",
    "REPORT_DIR",
    "EMPLOYEE_ROSTER_PATH",
    "ACTIVITY_LOG_PATH",
    "LOG_LEVEL",
)


def load_settings(overrides: dict | None = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name, "") for name in SETTING_NAMES}
    settings["SECRET_KEY"] = getattr(module, "SECRET_KEY")
    settings["DEBUG"] = bool(getattr(module, "DEBUG", False))
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(overrides: dict | None = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)

    configure_logging(level=settings["LOG_LEVEL"] or "INFO", activity_log_path=settings["ACTIVITY_LOG_PATH"] or None)

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = settings["DEBUG"]

    container = build_container(settings=settings)
    logger.info(
        "settings=%s attendance_csv=%s records=%d skipped=%d",
        settings["SETTINGS_MODULE"],
        container.attendance_repo.path,
        len(container.attendance_repo.all_records()),
        len(container.attendance_repo.skipped),
    )

    register_attendance(app, container)
    register_reports(app, container)

    return app
