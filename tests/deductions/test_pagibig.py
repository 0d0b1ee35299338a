import pytest

from payroll_system.core.exceptions import InvalidArgumentError
from payroll_system.deductions.pagibig import MAX_CONTRIBUTION, calculate_pagibig_contribution


def test_low_bracket_uses_one_percent_employee_rate():
    result = calculate_pagibig_contribution(1_000)
    assert list(result) == pytest.approx([10, 20, 30])


def test_upper_edge_of_low_bracket():
    result = calculate_pagibig_contribution(1_500)
    assert list(result) == pytest.approx([15, 30, 45])


def test_below_minimum_pays_nothing():
    assert list(calculate_pagibig_contribution(999.99)) == [0, 0, 0]


def test_total_is_capped_and_ratio_preserved():
    result = calculate_pagibig_contribution(20_000)

    assert result.total == MAX_CONTRIBUTION
    assert result.employee + result.employer == pytest.approx(MAX_CONTRIBUTION)
    # Uncapped shares were 400 / 400
    assert result.employee / result.employer == pytest.approx(1.0)
    assert result.employee == pytest.approx(50)


def test_just_under_the_cap_is_not_scaled():
    result = calculate_pagibig_contribution(2_500)
    assert list(result) == pytest.approx([50, 50, 100])


def test_pagibig_rejects_negative_salary():
    with pytest.raises(InvalidArgumentError):
        calculate_pagibig_contribution(-100)
