from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the employee master file.

    Only ``employee_number``, ``basic_salary`` and ``hourly_rate`` take part in
    payroll computation; the profile fields are carried for display.
    """

    employee_number: str
    last_name: str
    first_name: str
    basic_salary: float
    hourly_rate: float
    birthday: str = ""
    address: str = ""
    phone_number: str = ""
    sss_number: str = ""
    philhealth_number: str = ""
    tin_number: str = ""
    pagibig_number: str = ""
    status: str = ""
    position: str = ""
    immediate_supervisor: str = ""
    rice_subsidy: float = 0.0
    phone_allowance: float = 0.0
    clothing_allowance: float = 0.0
    gross_semi_monthly_rate: float = 0.0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
