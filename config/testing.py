import os

SECRET_KEY = "test-secret"

ATTENDANCE_CSV_PATH = os.getenv("ATTENDANCE_CSV_PATH", "attendance-test.csv")
REPORT_DIR = os.getenv("REPORT_DIR", ".")

EMPLOYEE_ROSTER_PATH = os.getenv("EMPLOYEE_ROSTER_PATH", "")

# No activity file while testing; records still go to the logger
ACTIVITY_LOG_PATH = os.getenv("ACTIVITY_LOG_PATH", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
