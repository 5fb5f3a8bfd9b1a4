from __future__ import annotations

from typing import Optional

from ..core.constants import FIRST_HOUR, LAST_HOUR
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hour(value, field_name: str) -> int:
    try:
        hour = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an hour between {FIRST_HOUR} and {LAST_HOUR}") from None
    if hour < FIRST_HOUR or hour > LAST_HOUR:
        raise ValidationError(f"{field_name} must be an hour between {FIRST_HOUR} and {LAST_HOUR}")
    return hour
