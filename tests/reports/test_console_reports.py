from __future__ import annotations

from datetime import time

from payroll_system.attendance.aggregator import AttendanceAggregator
from payroll_system.attendance.model import AttendanceEntry
from payroll_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from payroll_system.reports.console import (
    format_employee_details,
    format_employee_table,
    format_period_breakdown,
    format_receipt,
    format_work_log,
)


def test_receipt_lists_every_deduction_and_net(employee_factory, entries_factory):
    employee = employee_factory(basic_salary=20_000, hourly_rate=100)
    aggregation = AttendanceAggregator().aggregate(entries_factory(20), employee.hourly_rate)
    [result] = StandardPayrollCalculator().calculate(employee, aggregation)

    text = format_receipt(result)

    assert "PAYROLL RECEIPT" in text
    assert "Employee: Manuel Garcia" in text
    assert "Total Salary: 16000.00" in text
    assert "SSS Contribution: 900.00" in text
    assert "PhilHealth Employee Share: 300.00" in text
    assert "Pag-IBIG Employee Contribution: 50.00" in text
    assert "Pag-IBIG Employer Contribution: 50.00" in text
    assert "Total Pag-IBIG Contribution: 100.00" in text
    assert "Withholding Tax : 0.00" in text
    assert "Allowance : 5000.00" in text
    assert "Net Salary: 19750.00" in text


def test_period_breakdown_lists_days_and_weeks(entries_factory):
    entries = entries_factory(4) + entries_factory(1, log_in="8:30", log_out="19:30")
    [period] = AttendanceAggregator().aggregate(entries, hourly_rate=100).periods

    text = format_period_breakdown(period)

    assert "Worked Hours for day-1: 8.00, Is Late: false" in text
    assert "Is Late: true" in text
    assert "Week 1: Total Hours = 42.00, Overtime Hours = 2.00, Overtime Pay = 250.00" in text


def test_employee_table_and_details(employee_factory):
    employee = employee_factory("10001")

    table = format_employee_table([employee])
    details = format_employee_details(employee)

    assert "EMPLOYEE DATA" in table
    assert "10001" in table
    assert "P20000.00" in table
    assert "Name: Manuel Garcia" in details
    assert "Hourly Rate: P100.00" in details


def test_work_log_lists_raw_entries():
    entries = [
        AttendanceEntry(employee_number="10001", work_date="06/03/2024", log_in="8:59", log_out="18:31", first_name="Manuel", last_name="Garcia"),
        AttendanceEntry(employee_number="10001", work_date="06/04/2024", log_in=time(9, 5), log_out=time(18, 0)),
    ]

    text = format_work_log(entries)

    assert "Date: 06/03/2024, Log In: 8:59, Log Out: 18:31" in text
    assert "Log In: 9:05, Log Out: 18:00" in text
    assert format_work_log([]) == "No work logs found."
