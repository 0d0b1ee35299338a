from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Sequence

import pytest

from payroll_system.attendance.model import AttendanceEntry
from payroll_system.employees.model import Employee

EMPLOYEE_HEADER = [
    "Employee #", "Last Name", "First Name", "Birthday", "Address", "Phone Number",
    "SSS #", "Philhealth #", "TIN #", "Pag-ibig #", "Status", "Position",
    "Immediate Supervisor", "Basic Salary", "Rice Subsidy", "Phone Allowance",
    "Clothing Allowance", "Gross Semi-monthly Rate", "Hourly Rate",
]
ATTENDANCE_HEADER = ["Employee #", "Last Name", "First Name", "Date", "Log In", "Log Out", "Total Worked Hours Daily"]


def employee_row(number: str, last: str, first: str, basic_salary: str, hourly_rate: str) -> List[str]:
    return [
        number, last, first, "10/11/1983", "Valero Carpark Building, Makati City", "966-860-270",
        "44-4506057-3", "820126853951", "442-605-657-000", "691295330870", "Regular", "Chief Executive Officer",
        "N/A", basic_salary, "1,500", "2,000", "1,000", "45,000", hourly_rate,
    ]


def write_csv(path: Path, header: Sequence[str], rows: Iterable[Sequence[str]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in rows:
            writer.writerow(row)
    return path


@pytest.fixture
def employees_csv(tmp_path: Path) -> Path:
    return write_csv(
        tmp_path / "employees.csv",
        EMPLOYEE_HEADER,
        [
            employee_row("10001", "Garcia", "Manuel III", "20,000", "100"),
            employee_row("10002", "Lim", "Antonio", "60,000", "357.14"),
        ],
    )


@pytest.fixture
def attendance_csv(tmp_path: Path) -> Path:
    rows = [["10001", "Garcia", "Manuel III", f"06/{day:02d}/2024", "8:00", "17:00", "8"] for day in range(1, 21)]
    rows += [["10002", "Lim", "Antonio", "06/03/2024", "8:30", "18:30", "9"]]
    return write_csv(tmp_path / "attendance.csv", ATTENDANCE_HEADER, rows)


def make_employee(number: str = "10001", *, basic_salary: float = 20_000.0, hourly_rate: float = 100.0) -> Employee:
    return Employee(
        employee_number=number,
        last_name="Garcia",
        first_name="Manuel",
        basic_salary=basic_salary,
        hourly_rate=hourly_rate,
    )


def make_entries(count: int, *, number: str = "10001", log_in: str = "8:00", log_out: str = "17:00") -> List[AttendanceEntry]:
    return [
        AttendanceEntry(
            employee_number=number,
            work_date=f"day-{i + 1}",
            log_in=log_in,
            log_out=log_out,
            row_number=i + 2,
        )
        for i in range(count)
    ]


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def entries_factory():
    return make_entries


@pytest.fixture
def employee_row_factory():
    return employee_row


@pytest.fixture
def write_employees(tmp_path: Path):
    def _write(rows: Iterable[Sequence[str]], name: str = "employees.csv") -> Path:
        return write_csv(tmp_path / name, EMPLOYEE_HEADER, rows)

    return _write


@pytest.fixture
def write_attendance(tmp_path: Path):
    def _write(rows: Iterable[Sequence[str]], name: str = "attendance.csv") -> Path:
        return write_csv(tmp_path / name, ATTENDANCE_HEADER, rows)

    return _write
