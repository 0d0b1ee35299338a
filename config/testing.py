import os

from werkzeug.security import generate_password_hash

EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "tests/data/employees.csv")
ATTENDANCE_FILE = os.getenv("ATTENDANCE_FILE", "tests/data/attendance.csv")

LOGIN_USERNAME = "tester"
LOGIN_PASSWORD_HASH = generate_password_hash("test-password")
MAX_LOGIN_ATTEMPTS = 3

LOG_LEVEL = "DEBUG"
LOG_FILE = None

DEBUG = False
TESTING = True
