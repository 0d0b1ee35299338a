from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.aggregator import AggregationResult
from ...attendance.model import PeriodAggregate
from ...employees.model import Employee
from ..model import PayPeriodResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate_period(self, employee: Employee, period: PeriodAggregate) -> PayPeriodResult:
        raise NotImplementedError

    def calculate(self, employee: Employee, aggregation: AggregationResult) -> list[PayPeriodResult]:
        return [self.calculate_period(employee, p) for p in aggregation.periods]
