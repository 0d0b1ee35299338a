"""Plain-text renderings for the console menu."""

from __future__ import annotations

from datetime import time
from typing import Iterable, List, Sequence

from ..attendance.model import AttendanceEntry, PeriodAggregate
from ..common.datetime_utils import format_clock_time
from ..common.tabular import cell_text
from ..employees.model import Employee
from ..payroll.model import PayPeriodResult

RULE = "=" * 41
THIN_RULE = "-" * 41
TABLE_RULE = "=" * 60


def format_receipt(result: PayPeriodResult) -> str:
    lines = [
        RULE,
        "               PAYROLL RECEIPT           ",
        RULE,
        f"Employee: {result.employee_name}",
        f"Employee Number: {result.employee_number}",
        f"Pay Period: {result.period_number} ({result.start_date} - {result.end_date})",
        THIN_RULE,
        f"Total Salary: {result.gross_pay:.2f}",
        THIN_RULE,
        f"SSS Contribution: {result.sss:.2f}",
        f"PhilHealth Employee Share: {result.philhealth_employee_share:.2f}",
        f"Pag-IBIG Employee Contribution: {result.pagibig.employee:.2f}",
        f"Pag-IBIG Employer Contribution: {result.pagibig.employer:.2f}",
        f"Total Pag-IBIG Contribution: {result.pagibig.total:.2f}",
        f"Withholding Tax : {result.withholding_tax:.2f}",
        f"Allowance : {result.allowance:.2f}",
        THIN_RULE,
        f"Net Salary: {result.net_pay:.2f}",
        RULE,
    ]
    return "\n".join(lines)


def format_period_breakdown(period: PeriodAggregate) -> str:
    lines: List[str] = []
    for record in period.records:
        lines.append(f"Worked Hours for {record.work_date}: {record.worked_hours:.2f}, Is Late: {str(record.is_late).lower()}")
    for week in period.weeks:
        lines.append(
            f"Week {week.week_number}: Total Hours = {week.total_hours:.2f}, "
            f"Overtime Hours = {week.overtime_hours:.2f}, Overtime Pay = {week.overtime_pay:.2f}"
        )
    return "\n".join(lines)


def format_employee_table(employees: Iterable[Employee]) -> str:
    lines = [
        "======================= EMPLOYEE DATA =======================",
        f"{'EMP #':<10} {'NAME':<20} {'BIRTHDAY':<15} {'BASIC SALARY':<15} {'HOURLY RATE':<15}",
        TABLE_RULE,
    ]
    for e in employees:
        lines.append(f"{e.employee_number:<10} {e.full_name:<20} {e.birthday:<15} P{e.basic_salary:<14.2f} P{e.hourly_rate:<14.2f}")
    lines.append(TABLE_RULE)
    return "\n".join(lines)


def format_employee_details(employee: Employee) -> str:
    return "\n".join(
        [
            "",
            "================= EMPLOYEE DETAILED INFO =================",
            f"Employee Number: {employee.employee_number}",
            f"Name: {employee.full_name}",
            f"Birthday: {employee.birthday}",
            f"Address: {employee.address}",
            f"Phone Number: {employee.phone_number}",
            f"SSS Number: {employee.sss_number}",
            f"PhilHealth Number: {employee.philhealth_number}",
            f"TIN Number: {employee.tin_number}",
            f"Pag-IBIG Number: {employee.pagibig_number}",
            f"Position: {employee.position}",
            "",
            "Salary Information:",
            f"Basic Salary: P{employee.basic_salary:.2f}",
            f"Hourly Rate: P{employee.hourly_rate:.2f}",
            "===========================================================",
        ]
    )


def format_work_log(entries: Sequence[AttendanceEntry]) -> str:
    def _fmt(value) -> str:
        # xlsx cells come back as datetime.time, csv cells as raw "H:mm" text
        if isinstance(value, time):
            return format_clock_time(value)
        return cell_text(value)

    lines = [
        f"Employee #: {e.employee_number}, Name: {e.first_name} {e.last_name}, Date: {e.work_date}, "
        f"Log In: {_fmt(e.log_in)}, Log Out: {_fmt(e.log_out)}"
        for e in entries
    ]
    return "\n".join(lines) if lines else "No work logs found."
