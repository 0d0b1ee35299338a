from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..common.tabular import cell_text, read_rows
from ..core.constants import ATTENDANCE_COLUMN_COUNT
from .model import AttendanceEntry
from .repository import AttendanceRepository


class FileAttendanceRepository(AttendanceRepository):
    """Attendance log backed by a CSV or XLSX file.

    Columns by position: Employee #, Last Name, First Name, Date, Log In,
    Log Out (a trailing "Total Worked Hours Daily" column is ignored, hours are
    always recomputed). Times are kept raw here and parsed by the aggregator.
    """

    def __init__(self, path: Union[str, Path], *, logger: Optional[logging.Logger] = None):
        self._path = Path(path)
        self._logger = logger or logging.getLogger(__name__)

    def list_entries(self) -> Sequence[AttendanceEntry]:
        entries: List[AttendanceEntry] = []
        for row_number, cells in enumerate(read_rows(self._path, logger=self._logger), start=2):
            if len(cells) < ATTENDANCE_COLUMN_COUNT:
                self._logger.warning("Skipping invalid attendance row %d in %s: Missing fields", row_number, self._path.name)
                continue

            entries.append(
                AttendanceEntry(
                    employee_number=cell_text(cells[0]),
                    last_name=cell_text(cells[1]),
                    first_name=cell_text(cells[2]),
                    work_date=cell_text(cells[3]),
                    log_in=cells[4],
                    log_out=cells[5],
                    row_number=row_number,
                )
            )
        self._logger.info("Loaded %d attendance rows from %s", len(entries), self._path)
        return entries
