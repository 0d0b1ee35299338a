import os

EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "data/employees.csv")
ATTENDANCE_FILE = os.getenv("ATTENDANCE_FILE", "data/attendance.csv")

# Must be provided via environment; the placeholder never verifies.
LOGIN_USERNAME = os.getenv("LOGIN_USERNAME", "")
LOGIN_PASSWORD_HASH = os.getenv("LOGIN_PASSWORD_HASH", "CHANGE_ME")
MAX_LOGIN_ATTEMPTS = int(os.getenv("MAX_LOGIN_ATTEMPTS", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/payroll.log")

DEBUG = False
REQUIRED_ENV = ("LOGIN_USERNAME", "LOGIN_PASSWORD_HASH")
