from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import SkipReason


@dataclass(frozen=True)
class SkippedRow:
    """Diagnostic record for an input row or employee left out of a run."""

    reason: SkipReason
    message: str
    employee_number: Optional[str] = None
    row_number: Optional[int] = None
