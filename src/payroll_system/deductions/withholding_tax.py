from __future__ import annotations

from ..common.validators import require_non_negative_salary

# (upper_bound_exclusive, base_tax, excess_over, rate)
TAX_TABLE: tuple[tuple[float, float, float, float], ...] = (
    (20_833.0, 0.0, 0.0, 0.0),
    (33_334.0, 0.0, 20_833.0, 0.20),
    (66_668.0, 2_500.0, 33_333.0, 0.25),
    (166_668.0, 10_833.0, 66_667.0, 0.30),
    (666_668.0, 40_833.33, 166_667.0, 0.32),
)
TOP_BRACKET = (200_833.33, 666_667.0, 0.35)


def calculate_withholding_tax(monthly_salary: float) -> float:
    """Monthly withholding tax on a basic salary (progressive brackets)."""
    salary = require_non_negative_salary(monthly_salary)

    for upper_bound, base_tax, excess_over, rate in TAX_TABLE:
        if salary < upper_bound:
            return base_tax + rate * (salary - excess_over)

    base_tax, excess_over, rate = TOP_BRACKET
    return base_tax + rate * (salary - excess_over)
