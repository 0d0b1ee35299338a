from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

from ..attendance.aggregator import AggregationResult, AttendanceAggregator
from ..attendance.model import AttendanceEntry
from ..attendance.repository import AttendanceRepository
from ..core.diagnostics import SkippedRow
from ..core.enums import SkipReason
from ..core.exceptions import UnknownEmployeeError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayPeriodResult, PayrollRun


class PayrollService:
    """Use case: process payroll for every employee in the directory."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
        calculator: Optional[PayrollCalculator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._logger = logger or logging.getLogger(__name__)
        self._aggregator = aggregator or AttendanceAggregator(logger=self._logger)
        self._calculator = calculator or StandardPayrollCalculator()

    def group_entries(self, directory: Dict[str, Employee]) -> tuple[Dict[str, List[AttendanceEntry]], List[SkippedRow]]:
        """Split the attendance log per employee, keeping file order."""
        grouped: Dict[str, List[AttendanceEntry]] = OrderedDict((number, []) for number in directory)
        skipped: List[SkippedRow] = []

        for entry in self._attendance.list_entries():
            if not entry.employee_number:
                self._logger.warning("Skipping invalid attendance row %s: Missing employee number", entry.row_number)
                skipped.append(
                    SkippedRow(
                        reason=SkipReason.MALFORMED_RECORD,
                        message="Missing employee number",
                        row_number=entry.row_number,
                    )
                )
                continue

            bucket = grouped.get(entry.employee_number)
            if bucket is None:
                self._logger.warning("Employee not found for Employee #: %s (row %s)", entry.employee_number, entry.row_number)
                skipped.append(
                    SkippedRow(
                        reason=SkipReason.UNKNOWN_EMPLOYEE,
                        message=f"Employee not found for Employee #: {entry.employee_number}",
                        employee_number=entry.employee_number,
                        row_number=entry.row_number,
                    )
                )
                continue
            bucket.append(entry)

        return grouped, skipped

    def process_employee(self, employee: Employee, entries: Sequence[AttendanceEntry]) -> tuple[List[PayPeriodResult], AggregationResult]:
        aggregation = self._aggregator.aggregate(entries, employee.hourly_rate)
        results = self._calculator.calculate(employee, aggregation)
        return results, aggregation

    def run(self) -> PayrollRun:
        directory = {e.employee_number: e for e in self._employees.list_all()}
        grouped, skipped = self.group_entries(directory)
        run = PayrollRun(skipped=skipped)

        for number, employee in directory.items():
            try:
                results, aggregation = self.process_employee(employee, grouped[number])
            except Exception as exc:
                self._logger.exception("Error processing payroll for employee %s", number)
                run.skipped.append(
                    SkippedRow(reason=SkipReason.PROCESSING_ERROR, message=str(exc), employee_number=number)
                )
                continue

            run.skipped.extend(aggregation.skipped)
            run.results[number] = results
            run.periods[number] = aggregation.periods
            self._logger.info("Processed employee %s: %d pay period(s)", number, len(results))

        return run

    def run_for_employee(self, employee_number: str) -> List[PayPeriodResult]:
        employee = self._employees.get_by_number(str(employee_number).strip())
        if not employee:
            raise UnknownEmployeeError(str(employee_number).strip())

        entries = [e for e in self._attendance.list_entries() if e.employee_number == employee.employee_number]
        results, _ = self.process_employee(employee, entries)
        return results
