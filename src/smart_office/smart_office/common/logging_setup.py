"""Logging setup shared by the app factory and scripts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..core.constants import ACTIVITY_LOGGER_NAME

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "smart_office"


def configure_logging(*, level: str = "INFO", activity_log_path: Optional[str] = None) -> None:
    root = logging.getLogger("smart_office")
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    if activity_log_path:
        activity = logging.getLogger(ACTIVITY_LOGGER_NAME)
        target = str(Path(activity_log_path).resolve())
        already = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target for h in activity.handlers
        )
        if not already:
            # Activity lines are written bare, one per line.
            file_handler = logging.FileHandler(target, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter("%(message)s"))
            activity.addHandler(file_handler)


def get_activity_logger() -> logging.Logger:
    return logging.getLogger(ACTIVITY_LOGGER_NAME)
