"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

REQUIRED_LOGIN_TIME = time(8, 11)
LUNCH_BREAK_HOURS = 1.0

DAYS_PER_WEEK = 5
DAYS_PER_PERIOD = 20
REGULAR_WEEKLY_HOURS = 40.0
OVERTIME_MULTIPLIER = 1.25

# Allowance paid each period is a quarter of the monthly basic salary
ALLOWANCE_DIVISOR = 4

DEFAULT_MAX_LOGIN_ATTEMPTS = 3

EMPLOYEE_COLUMN_COUNT = 19
ATTENDANCE_COLUMN_COUNT = 6
