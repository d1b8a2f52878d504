from __future__ import annotations

from typing import Optional

from flask import session

from ..attendance.summary_cache import SummaryCache
from ..cohorts.selection import SelectionStore


def selection_store() -> SelectionStore:
    return SelectionStore(session)


def summary_cache() -> SummaryCache:
    return SummaryCache(session)


def safe_next(value: Optional[str]) -> Optional[str]:
    """Only same-site paths are accepted as redirect targets."""
    if value and value.startswith("/") and not value.startswith("//"):
        return value
    return None
