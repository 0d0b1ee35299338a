from __future__ import annotations

from typing import Dict, Sequence

from ..core.exceptions import UnknownEmployeeError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: browse the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def directory(self) -> Dict[str, Employee]:
        return {e.employee_number: e for e in self._employees.list_all()}

    def find_employee(self, employee_number: str) -> Employee:
        employee = self._employees.get_by_number(str(employee_number).strip())
        if not employee:
            raise UnknownEmployeeError(str(employee_number).strip())
        return employee
