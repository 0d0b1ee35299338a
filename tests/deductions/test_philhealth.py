import pytest

from payroll_system.core.exceptions import InvalidArgumentError
from payroll_system.deductions.philhealth import (
    calculate_employee_share,
    calculate_employer_share,
    calculate_monthly_premium,
)


@pytest.mark.parametrize(
    "salary, expected",
    [
        (0, 300),
        (5_000, 300),
        (10_000, 300),
        (20_000, 600),
        (25_000, 750),
        (59_999, 1_799.97),
        (60_000, 1_800),
        (150_000, 1_800),
    ],
)
def test_monthly_premium(salary, expected):
    assert calculate_monthly_premium(salary) == pytest.approx(expected)


def test_premium_split_evenly():
    assert calculate_employee_share(25_000) == pytest.approx(375)
    assert calculate_employer_share(25_000) == pytest.approx(375)


@pytest.mark.parametrize("func", [calculate_monthly_premium, calculate_employee_share, calculate_employer_share])
def test_philhealth_rejects_negative_salary(func):
    with pytest.raises(InvalidArgumentError, match="negative"):
        func(-1)
