from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import time
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..common.datetime_utils import hours_between, parse_clock_time
from ..core.constants import (
    DAYS_PER_PERIOD,
    DAYS_PER_WEEK,
    LUNCH_BREAK_HOURS,
    OVERTIME_MULTIPLIER,
    REGULAR_WEEKLY_HOURS,
    REQUIRED_LOGIN_TIME,
)
from ..core.diagnostics import SkippedRow
from ..core.enums import SkipReason
from ..core.exceptions import MalformedRecordError
from .model import AttendanceEntry, AttendanceRecord, PeriodAggregate, WeekSummary

T = TypeVar("T")


def compute_worked_hours(log_in: Any, log_out: Any, *, lunch_break_hours: float = LUNCH_BREAK_HOURS) -> float:
    """(log_out - log_in) minus the lunch break, in fractional hours.

    Both times are wall-clock times of the same day; overnight shifts are not
    handled, a logout before login simply yields a negative figure.
    """
    start = parse_clock_time(log_in)
    end = parse_clock_time(log_out)
    return hours_between(start, end) - lunch_break_hours


def is_late(log_in: Any, *, required_login: time = REQUIRED_LOGIN_TIME) -> bool:
    return parse_clock_time(log_in) > required_login


def build_record(entry: AttendanceEntry) -> AttendanceRecord:
    """Parse one raw entry into an AttendanceRecord (raises MalformedRecordError)."""
    if not entry.employee_number:
        raise MalformedRecordError("Missing employee number")
    if not entry.work_date:
        raise MalformedRecordError("Missing date")

    log_in = parse_clock_time(entry.log_in)
    log_out = parse_clock_time(entry.log_out)
    return AttendanceRecord(
        employee_number=entry.employee_number,
        work_date=entry.work_date,
        log_in=log_in,
        log_out=log_out,
        worked_hours=compute_worked_hours(log_in, log_out),
        is_late=is_late(log_in),
    )


def summarize_week(records: Sequence[AttendanceRecord], hourly_rate: float, week_number: int) -> WeekSummary:
    total_hours = sum(r.worked_hours for r in records)
    overtime_hours = max(total_hours - REGULAR_WEEKLY_HOURS, 0.0)
    return WeekSummary(
        week_number=week_number,
        days=len(records),
        total_hours=total_hours,
        overtime_hours=overtime_hours,
        overtime_pay=overtime_hours * hourly_rate * OVERTIME_MULTIPLIER,
    )


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Consecutive slices of ``size`` items; the last one may be shorter."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


@dataclass(frozen=True)
class AggregationResult:
    records: List[AttendanceRecord] = field(default_factory=list)
    periods: List[PeriodAggregate] = field(default_factory=list)
    skipped: List[SkippedRow] = field(default_factory=list)


class AttendanceAggregator:
    """Turns one employee's ordered attendance entries into pay periods.

    Weeks are every 5 consecutive records and pay periods every 20, counted
    by position in the log rather than by calendar date.
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        days_per_week: int = DAYS_PER_WEEK,
        days_per_period: int = DAYS_PER_PERIOD,
    ):
        if days_per_period % days_per_week:
            raise ValueError("days_per_period must be a multiple of days_per_week")
        self._logger = logger or logging.getLogger(__name__)
        self._days_per_week = days_per_week
        self._days_per_period = days_per_period

    def build_records(self, entries: Iterable[AttendanceEntry]) -> Tuple[List[AttendanceRecord], List[SkippedRow]]:
        records: List[AttendanceRecord] = []
        skipped: List[SkippedRow] = []
        for entry in entries:
            try:
                records.append(build_record(entry))
            except MalformedRecordError as exc:
                self._logger.warning(
                    "Skipping invalid attendance row %s for employee %s: %s",
                    entry.row_number if entry.row_number is not None else "?",
                    entry.employee_number or "?",
                    exc,
                )
                skipped.append(
                    SkippedRow(
                        reason=SkipReason.MALFORMED_RECORD,
                        message=str(exc),
                        employee_number=entry.employee_number or None,
                        row_number=entry.row_number,
                    )
                )
        return records, skipped

    def aggregate(self, entries: Iterable[AttendanceEntry], hourly_rate: float) -> AggregationResult:
        records, skipped = self.build_records(entries)

        periods: List[PeriodAggregate] = []
        week_number = 0
        for period_number, period_records in enumerate(chunked(records, self._days_per_period), start=1):
            weeks: List[WeekSummary] = []
            for week_records in chunked(period_records, self._days_per_week):
                week_number += 1
                week = summarize_week(week_records, hourly_rate, week_number)
                self._logger.debug(
                    "Week %d: total_hours=%.2f overtime_hours=%.2f overtime_pay=%.2f",
                    week.week_number,
                    week.total_hours,
                    week.overtime_hours,
                    week.overtime_pay,
                )
                weeks.append(week)
            periods.append(PeriodAggregate(period_number=period_number, records=list(period_records), weeks=weeks))

        return AggregationResult(records=records, periods=periods, skipped=skipped)
