from __future__ import annotations

import re
from typing import Iterable, Optional
from urllib.parse import urlparse

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str, *, field: Optional[str] = None) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.", field)
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int, *, field: Optional[str] = None) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters long.", field)
    return value.strip()


def require_length_between(
    value: Optional[str],
    field_name: str,
    min_len: int,
    max_len: int,
    *,
    field: Optional[str] = None,
) -> str:
    value = require_min_length(value, field_name, min_len, field=field)
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters.", field)
    return value


def optional_url(value: Optional[str], *, field: Optional[str] = None) -> Optional[str]:
    """Empty -> None; otherwise require an absolute http(s) URL."""
    v = (value or "").strip()
    if not v:
        return None
    parsed = urlparse(v)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValidationError("A valid URL is required for the attachment.", field)
    return v


def require_email(value: Optional[str], *, field: Optional[str] = None) -> str:
    v = (value or "").strip()
    if not _EMAIL_RE.match(v):
        raise ValidationError("Must be a valid email.", field)
    return v


def parse_non_negative_number(value: object, field_name: str, *, field: Optional[str] = None) -> float:
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number.", field)
    if number != number or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number.", field)
    return number


def parse_weekdays(values: Iterable[object]) -> list[int]:
    """Parse Sunday-based weekday numbers (0..6), de-duplicated and sorted."""
    days: set[int] = set()
    for raw in values:
        try:
            day = int(str(raw).strip())
        except (TypeError, ValueError):
            raise ValidationError("Invalid data submitted for weekend days.")
        if not 0 <= day <= 6:
            raise ValidationError("Invalid data submitted for weekend days.")
        days.add(day)
    return sorted(days)
