"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

SCAN_METHOD_RFID = "RFID"
UNKNOWN_EMPLOYEE_PREFIX = "Unknown-"
MISSING_PUNCH_NOTE = "missing check-in or check-out"

ACTIVITY_LOGGER_NAME = "smart_office.activity"
ACTIVITY_ATTEND_PREFIX = "ATTEND: "

DEFAULT_ATTENDANCE_CSV = "attendance.csv"
DEFAULT_REPORT_DIR = "."
