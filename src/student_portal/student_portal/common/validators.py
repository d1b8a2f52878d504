from __future__ import annotations

import re
from typing import Optional

from ..core.constants import EMAIL_PATTERN
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str]) -> str:
    value = (value or "").strip()
    if not _EMAIL_RE.match(value):
        raise ValidationError("Enter a valid email address")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank form input becomes None so it is stored as NULL."""
    if value is None:
        return None
    value = value.strip()
    return value or None
