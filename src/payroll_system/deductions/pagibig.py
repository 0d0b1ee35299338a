from __future__ import annotations

from typing import NamedTuple

from ..common.validators import require_non_negative_salary

LOW_BRACKET_MIN = 1_000.0
LOW_BRACKET_MAX = 1_500.0
LOW_EMPLOYEE_RATE = 0.01
EMPLOYEE_RATE = 0.02
EMPLOYER_RATE = 0.02
MAX_CONTRIBUTION = 100.0


class PagIbigContribution(NamedTuple):
    employee: float
    employer: float
    total: float


def calculate_pagibig_contribution(monthly_salary: float) -> PagIbigContribution:
    """Split the Pag-IBIG (HDMF) contribution into employee, employer and total.

    Employee rate is 1% for salaries in [1,000, 1,500], 2% above 1,500 and
    nothing below 1,000 (in which case the employer pays nothing either).
    When the combined amount exceeds 100.00 both shares are scaled down
    proportionally so the total is exactly the cap.
    """
    salary = require_non_negative_salary(monthly_salary)

    if LOW_BRACKET_MIN <= salary <= LOW_BRACKET_MAX:
        employee = salary * LOW_EMPLOYEE_RATE
        employer = salary * EMPLOYER_RATE
    elif salary > LOW_BRACKET_MAX:
        employee = salary * EMPLOYEE_RATE
        employer = salary * EMPLOYER_RATE
    else:
        employee = 0.0
        employer = 0.0

    total = employee + employer
    if total > MAX_CONTRIBUTION:
        employee = MAX_CONTRIBUTION * (employee / total)
        employer = MAX_CONTRIBUTION * (employer / total)
        total = MAX_CONTRIBUTION

    return PagIbigContribution(employee=employee, employer=employer, total=total)
