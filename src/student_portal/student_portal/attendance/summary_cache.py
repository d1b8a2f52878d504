from __future__ import annotations

import logging
from datetime import date
from typing import Any, MutableMapping, Optional

from ..core.constants import SUMMARY_CACHE_LIMIT, SUMMARY_KEY_PREFIX, SUMMARY_STORAGE_KEY
from .model import DailySummary

logger = logging.getLogger(__name__)


def summary_key(scope: str, on: date) -> str:
    return f"{SUMMARY_KEY_PREFIX}-{scope}-{on.isoformat()}"


class SummaryCache:
    """Per-browser cache of the daily summary computed at save time.

    It is written only when attendance is saved and never reconciled with the
    attendance table. Entries are kept as ``[key, json_text]`` pairs, newest
    last, because the session serializer does not preserve dict order.
    """

    def __init__(
        self,
        storage: MutableMapping[str, Any],
        *,
        limit: int = SUMMARY_CACHE_LIMIT,
        storage_key: str = SUMMARY_STORAGE_KEY,
    ):
        self._storage = storage
        self._limit = int(limit)
        self._storage_key = storage_key

    def _entries(self) -> list[list[str]]:
        raw = self._storage.get(self._storage_key)
        if not isinstance(raw, list):
            return []
        return [list(e) for e in raw if isinstance(e, (list, tuple)) and len(e) == 2]

    def peek(self, scope: str, on: date) -> Optional[DailySummary]:
        """Cached summary, or None when nothing usable is stored."""
        key = summary_key(scope, on)
        for k, text in self._entries():
            if k != key:
                continue
            try:
                return DailySummary.from_json(text)
            except (ValueError, KeyError, TypeError):
                logger.warning("Discarding unreadable attendance summary under %s", key)
                return None
        return None

    def read(self, scope: str, on: date) -> DailySummary:
        return self.peek(scope, on) or DailySummary()

    def write(self, scope: str, on: date, summary: DailySummary) -> None:
        key = summary_key(scope, on)
        entries = [e for e in self._entries() if e[0] != key]
        entries.append([key, summary.to_json()])
        self._storage[self._storage_key] = entries[-self._limit:]
