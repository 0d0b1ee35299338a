from __future__ import annotations

import pytest

from payroll_system.attendance.aggregator import AttendanceAggregator
from payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_full_period(employee_factory, entries_factory):
    employee = employee_factory(basic_salary=20_000, hourly_rate=100)
    aggregation = AttendanceAggregator().aggregate(entries_factory(20), employee.hourly_rate)

    [result] = StandardPayrollCalculator().calculate(employee, aggregation)

    assert result.total_hours == pytest.approx(160)
    assert result.base_pay == pytest.approx(160 * 100)
    assert result.total_overtime_pay == 0
    assert result.gross_pay == pytest.approx(16_000)
    assert result.sss == pytest.approx(900)
    assert result.philhealth_premium == pytest.approx(600)
    assert result.philhealth_employee_share == pytest.approx(300)
    assert result.pagibig.total == pytest.approx(100)
    assert result.pagibig.employee == pytest.approx(50)
    assert result.withholding_tax == 0
    assert result.allowance == pytest.approx(5_000)
    assert result.late_count == 0
    assert result.net_pay == pytest.approx(16_000 - 900 - 300 - 50 - 0 + 5_000)


def test_net_pay_with_overtime_and_tax(employee_factory, entries_factory):
    employee = employee_factory(basic_salary=90_000, hourly_rate=535.71)
    aggregation = AttendanceAggregator().aggregate(entries_factory(7, log_in="7:00", log_out="19:00"), employee.hourly_rate)

    [result] = StandardPayrollCalculator().calculate(employee, aggregation)

    # Week 1: 5 x 11h = 55h (15h overtime), week 2: 2 x 11h = 22h
    assert result.total_hours == pytest.approx(77)
    assert result.total_overtime_pay == pytest.approx(15 * 535.71 * 1.25)
    assert result.gross_pay == pytest.approx(77 * 535.71 + 15 * 535.71 * 1.25)
    assert result.withholding_tax == pytest.approx(10_833 + 0.30 * (90_000 - 66_667))
    assert result.total_deductions == pytest.approx(
        result.sss + result.philhealth_employee_share + result.pagibig.employee + result.withholding_tax
    )
    assert result.net_pay == pytest.approx(result.gross_pay - result.total_deductions + result.allowance)


def test_one_result_per_period_in_order(employee_factory, entries_factory):
    employee = employee_factory()
    aggregation = AttendanceAggregator().aggregate(entries_factory(45), employee.hourly_rate)

    results = StandardPayrollCalculator().calculate(employee, aggregation)

    assert [r.period_number for r in results] == [1, 2, 3]
    assert results[-1].total_hours == pytest.approx(5 * 8)
    # Deductions are a flat per-period charge
    assert {r.sss for r in results} == {900}
