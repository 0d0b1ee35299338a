from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from ..core.enums import FileFormat
from ..core.exceptions import MalformedRecordError, UnsupportedFileFormatError

_logger = logging.getLogger(__name__)


def detect_format(path: Union[str, Path]) -> FileFormat:
    suffix = Path(path).suffix.lower()
    for fmt in FileFormat:
        if fmt.value == suffix:
            return fmt
    raise UnsupportedFileFormatError(
        f"Unsupported file format {suffix or '(none)'!r}. Only .csv and .xlsx files are supported."
    )


def read_rows(path: Union[str, Path], *, logger: Optional[logging.Logger] = None) -> List[List[Any]]:
    """Read the first sheet / the CSV body (header skipped) as a list of raw rows.

    Trailing empty cells are dropped so callers can validate the row length the
    same way for both formats. Missing cells come back as ``None``. CSV lines
    with more fields than the header are logged and dropped; an empty file
    yields no rows.
    """

    log = logger or _logger
    fmt = detect_format(path)
    try:
        if fmt is FileFormat.CSV:
            df = _read_csv(path, log)
        else:
            df = pd.read_excel(path, sheet_name=0, dtype=object, engine="openpyxl")
    except pd.errors.EmptyDataError:
        log.warning("No rows in %s", Path(path).name)
        return []
    except pd.errors.ParserError as exc:
        raise MalformedRecordError(f"Could not parse {Path(path).name}: {exc}") from exc

    rows: List[List[Any]] = []
    for record in df.itertuples(index=False, name=None):
        cells = [_clean_cell(v) for v in record]
        while cells and cells[-1] is None:
            cells.pop()
        rows.append(cells)
    return rows


def _read_csv(path: Union[str, Path], log: logging.Logger) -> pd.DataFrame:
    name = Path(path).name

    def _drop_bad_line(fields: List[str]) -> None:
        # Typically an unquoted amount such as 90,000 splitting into two cells.
        log.warning("Skipping malformed line in %s (%d fields): %s", name, len(fields), ",".join(fields))
        return None

    # Keep every cell as text: "H:mm" times and "90,000" amounts are parsed later.
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        engine="python",
        on_bad_lines=_drop_bad_line,
    )
    # pandas turns the first column into an index when the first data line has one extra field
    if len(df) and not isinstance(df.index, pd.RangeIndex):
        raise MalformedRecordError(f"Could not parse {name}: first data line has more fields than the header")
    return df


def _clean_cell(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if pd.isna(value):
        return None
    return value


def cell_text(value: Any) -> str:
    """Text form of a cell; spreadsheet integers such as ``10001.0`` become ``"10001"``."""
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime("%m/%d/%Y")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
