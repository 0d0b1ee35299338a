from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Any

from ..core.exceptions import MalformedRecordError

CLOCK_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_clock_time(value: Any) -> time:
    """Parse a wall-clock time written as ``H:mm`` (``H:mm:ss`` is tolerated).

    Spreadsheet readers may already hand us ``datetime.time`` / ``datetime`` /
    ``timedelta`` values, those are normalized instead of parsed.
    """

    if value is None:
        raise MalformedRecordError("Missing time value")

    if isinstance(value, datetime):
        return value.time().replace(microsecond=0)

    if isinstance(value, time):
        return value.replace(microsecond=0)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)

    text = str(value).strip()
    for fmt in CLOCK_TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise MalformedRecordError(f"Invalid time string: {value!r}")


def hours_between(start: time, end: time) -> float:
    """Fractional hours from ``start`` to ``end`` on the same day (may be negative)."""
    start_seconds = start.hour * 3600 + start.minute * 60 + start.second
    end_seconds = end.hour * 3600 + end.minute * 60 + end.second
    return (end_seconds - start_seconds) / 3600.0


def format_clock_time(value: time) -> str:
    return f"{value.hour}:{value.minute:02d}"
