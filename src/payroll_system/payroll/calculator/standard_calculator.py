from __future__ import annotations

from ...attendance.model import PeriodAggregate
from ...core.constants import ALLOWANCE_DIVISOR
from ...deductions import (
    calculate_employee_share,
    calculate_employer_share,
    calculate_monthly_premium,
    calculate_pagibig_contribution,
    calculate_sss_contribution,
    calculate_withholding_tax,
)
from ...employees.model import Employee
from ..model import PayPeriodResult
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hours x hourly rate plus weekly overtime, statutory deductions on basic salary.

    Deductions and allowance are a flat per-period charge derived from the
    monthly basic salary, not from what was actually earned in the period.
    """

    def calculate_period(self, employee: Employee, period: PeriodAggregate) -> PayPeriodResult:
        basic_salary = employee.basic_salary
        base_pay = period.total_hours * employee.hourly_rate
        gross_pay = base_pay + period.total_overtime_pay

        return PayPeriodResult(
            employee_number=employee.employee_number,
            employee_name=employee.full_name,
            period_number=period.period_number,
            start_date=period.start_date,
            end_date=period.end_date,
            total_hours=period.total_hours,
            total_overtime_pay=period.total_overtime_pay,
            base_pay=base_pay,
            gross_pay=gross_pay,
            sss=calculate_sss_contribution(basic_salary),
            philhealth_premium=calculate_monthly_premium(basic_salary),
            philhealth_employee_share=calculate_employee_share(basic_salary),
            philhealth_employer_share=calculate_employer_share(basic_salary),
            pagibig=calculate_pagibig_contribution(basic_salary),
            withholding_tax=calculate_withholding_tax(basic_salary),
            allowance=basic_salary / ALLOWANCE_DIVISOR,
            late_count=period.late_count,
        )
