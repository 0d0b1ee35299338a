from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..common.tabular import cell_text, read_rows
from ..common.validators import parse_amount, parse_optional_amount, require_non_empty
from ..core.constants import EMPLOYEE_COLUMN_COUNT
from ..core.exceptions import MalformedRecordError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


class FileEmployeeRepository(EmployeeRepository):
    """Employee directory backed by a CSV or XLSX master file.

    The file is read lazily on first access and cached; rows that are too short
    or carry an unparseable salary / hourly rate are skipped with a warning.
    """

    def __init__(self, path: Union[str, Path], *, logger: Optional[logging.Logger] = None):
        self._path = Path(path)
        self._logger = logger or logging.getLogger(__name__)
        self._employees: Optional[Dict[str, Employee]] = None

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        return self._load().get(str(employee_number).strip())

    def list_all(self) -> Sequence[Employee]:
        return list(self._load().values())

    def reload(self) -> None:
        self._employees = None

    def _load(self) -> Dict[str, Employee]:
        if self._employees is None:
            employees: Dict[str, Employee] = {}
            for row_number, cells in enumerate(read_rows(self._path, logger=self._logger), start=2):
                try:
                    employee = self._to_employee(cells)
                except ValidationError as exc:
                    self._logger.warning("Skipping invalid employee row %d in %s: %s", row_number, self._path.name, exc)
                    continue
                if employee.employee_number in employees:
                    self._logger.warning(
                        "Duplicate employee number %s on row %d, keeping the last one",
                        employee.employee_number,
                        row_number,
                    )
                employees[employee.employee_number] = employee
            self._logger.info("Loaded %d employees from %s", len(employees), self._path)
            self._employees = employees
        return self._employees

    @staticmethod
    def _to_employee(cells: List[Any]) -> Employee:
        if len(cells) < EMPLOYEE_COLUMN_COUNT:
            raise MalformedRecordError(f"Missing fields (expected {EMPLOYEE_COLUMN_COUNT}, got {len(cells)})")

        text = [cell_text(c) for c in cells]
        return Employee(
            employee_number=require_non_empty(text[0], "Employee #"),
            last_name=text[1],
            first_name=text[2],
            birthday=text[3],
            address=text[4],
            phone_number=text[5],
            sss_number=text[6],
            philhealth_number=text[7],
            tin_number=text[8],
            pagibig_number=text[9],
            status=text[10],
            position=text[11],
            immediate_supervisor=text[12],
            basic_salary=parse_amount(cells[13], "Basic Salary"),
            rice_subsidy=parse_optional_amount(cells[14], "Rice Subsidy"),
            phone_allowance=parse_optional_amount(cells[15], "Phone Allowance"),
            clothing_allowance=parse_optional_amount(cells[16], "Clothing Allowance"),
            gross_semi_monthly_rate=parse_optional_amount(cells[17], "Gross Semi-monthly Rate"),
            hourly_rate=parse_amount(cells[18], "Hourly Rate"),
        )
