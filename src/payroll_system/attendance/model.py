from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Any, List, Optional


@dataclass(frozen=True)
class AttendanceEntry:
    """Raw attendance row as read from the work-log file (times not parsed yet)."""

    employee_number: str
    work_date: str
    log_in: Any
    log_out: Any
    last_name: str = ""
    first_name: str = ""
    row_number: Optional[int] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worked day with derived hours and lateness."""

    employee_number: str
    work_date: str
    log_in: time
    log_out: time
    worked_hours: float
    is_late: bool


@dataclass(frozen=True)
class WeekSummary:
    week_number: int
    days: int
    total_hours: float
    overtime_hours: float
    overtime_pay: float


@dataclass(frozen=True)
class PeriodAggregate:
    """One closed pay period: up to 20 consecutive records split into weeks of 5."""

    period_number: int
    records: List[AttendanceRecord] = field(default_factory=list)
    weeks: List[WeekSummary] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return sum(w.total_hours for w in self.weeks)

    @property
    def total_overtime_pay(self) -> float:
        return sum(w.overtime_pay for w in self.weeks)

    @property
    def late_count(self) -> int:
        return sum(1 for r in self.records if r.is_late)

    @property
    def start_date(self) -> str:
        return self.records[0].work_date if self.records else ""

    @property
    def end_date(self) -> str:
        return self.records[-1].work_date if self.records else ""
