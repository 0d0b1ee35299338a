from __future__ import annotations

from enum import Enum


class FileFormat(str, Enum):
    """Supported input file formats."""

    CSV = ".csv"
    XLSX = ".xlsx"


class SkipReason(str, Enum):
    """Why an input row or an employee was left out of a payroll run."""

    MALFORMED_RECORD = "MALFORMED_RECORD"
    UNKNOWN_EMPLOYEE = "UNKNOWN_EMPLOYEE"
    PROCESSING_ERROR = "PROCESSING_ERROR"
