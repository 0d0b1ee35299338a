from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_entries(self) -> Sequence[AttendanceEntry]:
        """All attendance rows in file order."""

        raise NotImplementedError
