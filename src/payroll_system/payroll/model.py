from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..attendance.model import PeriodAggregate
from ..core.diagnostics import SkippedRow
from ..deductions import PagIbigContribution


@dataclass(frozen=True)
class PayPeriodResult:
    """Everything the receipt needs for one employee and one pay period."""

    employee_number: str
    employee_name: str
    period_number: int
    start_date: str
    end_date: str
    total_hours: float
    total_overtime_pay: float
    base_pay: float
    gross_pay: float
    sss: float
    philhealth_premium: float
    philhealth_employee_share: float
    philhealth_employer_share: float
    pagibig: PagIbigContribution
    withholding_tax: float
    allowance: float
    late_count: int = 0

    @property
    def total_deductions(self) -> float:
        return self.sss + self.philhealth_employee_share + self.pagibig.employee + self.withholding_tax

    @property
    def net_pay(self) -> float:
        return self.gross_pay - self.total_deductions + self.allowance


@dataclass
class PayrollRun:
    """Results of a batch, keyed by employee number in directory order."""

    results: Dict[str, List[PayPeriodResult]] = field(default_factory=dict)
    skipped: List[SkippedRow] = field(default_factory=list)
    periods: Dict[str, List[PeriodAggregate]] = field(default_factory=dict)

    def all_results(self) -> List[PayPeriodResult]:
        return [r for rows in self.results.values() for r in rows]
