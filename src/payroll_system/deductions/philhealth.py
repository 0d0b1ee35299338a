"""PhilHealth premium: 3% of monthly basic salary, floored at 300 and capped at 1,800."""

from __future__ import annotations

from ..common.validators import require_non_negative_salary

PREMIUM_RATE = 0.03
MIN_MONTHLY_PREMIUM = 300.0
MAX_MONTHLY_PREMIUM = 1_800.0
MIN_SALARY_FOR_MIN_PREMIUM = 10_000.0
MAX_SALARY_FOR_MAX_PREMIUM = 60_000.0


def calculate_monthly_premium(monthly_salary: float) -> float:
    """Total monthly premium (employee + employer)."""
    salary = require_non_negative_salary(monthly_salary)

    if salary <= MIN_SALARY_FOR_MIN_PREMIUM:
        return MIN_MONTHLY_PREMIUM
    if salary >= MAX_SALARY_FOR_MAX_PREMIUM:
        return MAX_MONTHLY_PREMIUM
    return salary * PREMIUM_RATE


def calculate_employee_share(monthly_salary: float) -> float:
    return calculate_monthly_premium(monthly_salary) / 2


def calculate_employer_share(monthly_salary: float) -> float:
    return calculate_monthly_premium(monthly_salary) / 2
