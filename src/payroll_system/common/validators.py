from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ..core.exceptions import InvalidArgumentError, MalformedRecordError, ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative_salary(salary: Any) -> float:
    """Validate a monthly salary passed to a deduction calculator."""
    if isinstance(salary, bool) or not isinstance(salary, Real):
        raise InvalidArgumentError(f"Salary must be a number, got {salary!r}")
    value = float(salary)
    if math.isnan(value):
        raise InvalidArgumentError("Salary must be a number, got NaN")
    if value < 0:
        raise InvalidArgumentError("Salary cannot be negative.")
    return value


def parse_amount(value: Any, field_name: str) -> float:
    """Parse a money cell such as ``"90,000"`` or ``535.71`` into a float."""
    if isinstance(value, Real) and not isinstance(value, bool):
        if math.isnan(float(value)):
            raise MalformedRecordError(f"{field_name}: empty value")
        return float(value)

    text = "" if value is None else str(value).strip()
    if not text:
        raise MalformedRecordError(f"{field_name}: empty value")
    try:
        return float(text.replace(",", ""))
    except ValueError as exc:
        raise MalformedRecordError(f"{field_name}: invalid number format {value!r}") from exc


def parse_optional_amount(value: Any, field_name: str, default: float = 0.0) -> float:
    try:
        return parse_amount(value, field_name)
    except MalformedRecordError:
        return default
