from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .attendance.aggregator import AttendanceAggregator
from .attendance.file_attendance_repository import FileAttendanceRepository
from .employees.file_employee_repository import FileEmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .users.model import Credentials
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    employees_repo: FileEmployeeRepository
    attendance_repo: FileAttendanceRepository

    employee_service: EmployeeService
    payroll_service: PayrollService
    auth_service: AuthService


def build_container(settings: Any, *, logger: Optional[logging.Logger] = None) -> Container:
    logger = logger or logging.getLogger("payroll_system")

    employees_repo = FileEmployeeRepository(settings.EMPLOYEES_FILE, logger=logger.getChild("employees"))
    attendance_repo = FileAttendanceRepository(settings.ATTENDANCE_FILE, logger=logger.getChild("attendance"))

    employee_service = EmployeeService(employees_repo)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        aggregator=AttendanceAggregator(logger=logger.getChild("aggregator")),
        calculator=StandardPayrollCalculator(),
        logger=logger.getChild("payroll"),
    )
    auth_service = AuthService(
        Credentials(username=str(settings.LOGIN_USERNAME), password_hash=str(settings.LOGIN_PASSWORD_HASH)),
        max_attempts=int(getattr(settings, "MAX_LOGIN_ATTEMPTS", 3)),
        logger=logger.getChild("auth"),
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        payroll_service=payroll_service,
        auth_service=auth_service,
    )
