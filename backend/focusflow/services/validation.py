"""Input checks shared by the services.

The API layer already rejects malformed bodies; these keep the services safe
when called directly.
"""
from datetime import date
from enum import Enum
from typing import Type

from ..errors import ValidationAppError


def require_text(value, code: str, field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationAppError(code, f"{field} must not be empty")
    return value


def enum_value(enum_cls: Type[Enum], value, code: str) -> str:
    try:
        return enum_cls(value).value
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationAppError(code, f"invalid value {value!r}; expected one of: {allowed}")


def iso_date(value: str, code: str) -> date:
    try:
        if len(value) != 10:
            raise ValueError(value)
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationAppError(code, f"invalid date {value!r}; expected YYYY-MM-DD")


def monday(value: str, code: str) -> str:
    if iso_date(value, code).weekday() != 0:
        raise ValidationAppError(code, f"{value} is not a Monday")
    return value
