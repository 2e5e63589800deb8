from __future__ import annotations

from ..core.constants import OPTION_FIELDS
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_option(value: str, field_name: str = "Option") -> str:
    value = (value or "").strip()
    if value not in OPTION_FIELDS:
        raise ValidationError(f"{field_name} must be one of {', '.join(OPTION_FIELDS)}")
    return value


def normalize_email(value: str) -> str:
    return require_non_empty(value, "Email").lower()
