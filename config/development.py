import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ATTENDANCE_CSV_PATH = os.getenv("ATTENDANCE_CSV_PATH", "attendance.csv")
REPORT_DIR = os.getenv("REPORT_DIR", ".")

# Optional roster CSV (employee_id,name,department); demo roster when unset
EMPLOYEE_ROSTER_PATH = os.getenv("EMPLOYEE_ROSTER_PATH", "")

ACTIVITY_LOG_PATH = os.getenv("ACTIVITY_LOG_PATH", "activity.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
