import os

from werkzeug.security import generate_password_hash

EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "data/employees.csv")
ATTENDANCE_FILE = os.getenv("ATTENDANCE_FILE", "data/attendance.csv")

# Demo operator account; override with LOGIN_USERNAME / LOGIN_PASSWORD_HASH
LOGIN_USERNAME = os.getenv("LOGIN_USERNAME", "validaccount")
LOGIN_PASSWORD_HASH = os.getenv("LOGIN_PASSWORD_HASH") or generate_password_hash("password1234")
MAX_LOGIN_ATTEMPTS = int(os.getenv("MAX_LOGIN_ATTEMPTS", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

DEBUG = True
