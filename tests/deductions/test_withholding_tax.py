import pytest

from payroll_system.core.exceptions import InvalidArgumentError, ValidationError
from payroll_system.deductions import (
    calculate_monthly_premium,
    calculate_pagibig_contribution,
    calculate_sss_contribution,
    calculate_withholding_tax,
)


@pytest.mark.parametrize(
    "salary, expected",
    [
        (0, 0),
        (15_000, 0),
        (20_832.99, 0),
        (20_833, 0),
        (25_000, 833.40),
        (33_333, 2_500),
        (50_000, 2_500 + 0.25 * 16_667),
        (100_000, 10_833 + 0.30 * 33_333),
        (200_000, 40_833.33 + 0.32 * 33_333),
        (1_000_000, 200_833.33 + 0.35 * 333_333),
    ],
)
def test_withholding_tax_brackets(salary, expected):
    assert calculate_withholding_tax(salary) == pytest.approx(expected)


def test_withholding_tax_is_monotonic():
    values = [calculate_withholding_tax(s) for s in range(0, 1_000_001, 1_000)]
    assert values == sorted(values)


@pytest.mark.parametrize(
    "func",
    [calculate_sss_contribution, calculate_monthly_premium, calculate_pagibig_contribution, calculate_withholding_tax],
)
@pytest.mark.parametrize("salary", [-1, -0.5, -1_000_000])
def test_every_calculator_rejects_negative_salary(func, salary):
    with pytest.raises(InvalidArgumentError):
        func(salary)


@pytest.mark.parametrize("bad", ["20000", None, float("nan")])
def test_non_numeric_salary_is_rejected(bad):
    with pytest.raises(ValidationError):
        calculate_withholding_tax(bad)
