"""Field validation shared by the employee records."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable


class ValidationError(Exception):
    """Raised when a field value violates its constraint."""

    def __init__(self, field: str, constraint: str):
        self.field = field
        self.constraint = constraint
        super().__init__(f"Invalid {field}: {constraint}")


def require_text(field: str, value: Any) -> str:
    """Non-empty string, stored verbatim."""
    if value is None:
        raise ValidationError(field, "is required")
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    if not value.strip():
        raise ValidationError(field, "must not be blank")
    return value


def require_money(field: str, value: Any) -> Decimal:
    """Monetary amount >= 0, as Decimal."""
    if value is None:
        raise ValidationError(field, "is required")
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(field, "must be a number")
    if not amount.is_finite():
        raise ValidationError(field, "must be a finite number")
    if amount < 0:
        raise ValidationError(field, "must be >= 0")
    return amount


def require_count(field: str, value: Any) -> int:
    """Whole number >= 0."""
    if value is None:
        raise ValidationError(field, "is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer")
    if value < 0:
        raise ValidationError(field, "must be >= 0")
    return value


def require_flag(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(field, "must be true or false")
    return value


def require_date(field: str, value: Any) -> date:
    """A date, or an ISO-8601 (YYYY-MM-DD) string."""
    if value is None:
        raise ValidationError(field, "is required")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(field, f"'{value}' is not a valid YYYY-MM-DD date")
    raise ValidationError(field, "must be a date")


def unique_names(field: str, values: Iterable[Any] | None) -> tuple[str, ...]:
    """Deduplicate names keeping first-seen order."""
    if values is None:
        return ()
    if isinstance(values, str):
        raise ValidationError(field, "must be a collection of names")
    result: list[str] = []
    for value in values:
        name = require_text(field, value)
        if name not in result:
            result.append(name)
    return tuple(result)
