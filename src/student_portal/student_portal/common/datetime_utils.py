from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_form_date(value: Optional[str], *, default: date) -> date:
    """Date picker value, falling back to ``default`` when left blank."""
    if not value:
        return default
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def format_display_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
