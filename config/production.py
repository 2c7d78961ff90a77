import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ATTENDANCE_CSV_PATH = os.getenv("ATTENDANCE_CSV_PATH", "attendance.csv")
REPORT_DIR = os.getenv("REPORT_DIR", "reports")

EMPLOYEE_ROSTER_PATH = os.getenv("EMPLOYEE_ROSTER_PATH", "")

ACTIVITY_LOG_PATH = os.getenv("ACTIVITY_LOG_PATH", "activity.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
