from __future__ import annotations

from typing import Any, MutableMapping, Optional

from ..core.constants import SELECTION_STORAGE_KEY
from .model import Cohort

_FIELDS = ("department_id", "year_id", "semester_id", "department_code", "year_value", "sem_number")


class SelectionStore:
    """Active cohort, persisted in per-browser storage (the Flask session).

    Values are kept as strings, the way they appear in dashboard URLs.
    """

    def __init__(self, storage: MutableMapping[str, Any], *, key: str = SELECTION_STORAGE_KEY):
        self._storage = storage
        self._key = key

    def _state(self) -> dict:
        state = self._storage.get(self._key)
        return dict(state) if isinstance(state, dict) else {}

    def get(self, field: str) -> Optional[str]:
        return self._state().get(field)

    @property
    def department_id(self) -> Optional[str]:
        return self.get("department_id")

    @property
    def year_id(self) -> Optional[str]:
        return self.get("year_id")

    @property
    def semester_id(self) -> Optional[str]:
        return self.get("semester_id")

    @property
    def department_code(self) -> Optional[str]:
        return self.get("department_code")

    @property
    def year_value(self) -> Optional[str]:
        return self.get("year_value")

    @property
    def sem_number(self) -> Optional[str]:
        return self.get("sem_number")

    def set_selection(self, cohort: Cohort) -> None:
        # Reassign rather than mutate so the session notices the change
        self._storage[self._key] = {
            "department_id": cohort.department.id,
            "year_id": cohort.year.id,
            "semester_id": cohort.semester.id,
            "department_code": cohort.department.code,
            "year_value": str(cohort.year.value),
            "sem_number": str(cohort.semester.number),
        }

    def clear_selection(self) -> None:
        self._storage[self._key] = {field: None for field in _FIELDS}

    def has_selection(self) -> bool:
        state = self._state()
        return all(state.get(field) for field in _FIELDS)

    def dashboard_path(self) -> Optional[str]:
        if not self.has_selection():
            return None
        return f"/dashboard/{self.department_code}/{self.year_value}/{self.sem_number}"
