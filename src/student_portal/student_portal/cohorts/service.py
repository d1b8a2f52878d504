from __future__ import annotations

from typing import Optional

from ..core.exceptions import NotFoundError, ValidationError
from .model import Cohort, Lookups
from .repository import CohortRepository


class CohortService:
    """Use cases: list lookups, resolve a dashboard URL, choose a cohort."""

    def __init__(self, cohorts: CohortRepository):
        self._cohorts = cohorts

    def list_lookups(self) -> Lookups:
        return Lookups(
            departments=list(self._cohorts.list_departments()),
            years=list(self._cohorts.list_years()),
            semesters=list(self._cohorts.list_semesters()),
        )

    def resolve(self, dept_code: str, year_value, sem_number) -> Cohort:
        try:
            year_int = int(year_value)
            sem_int = int(sem_number)
        except (TypeError, ValueError):
            raise NotFoundError(f"Unknown course {dept_code}/{year_value}/{sem_number}") from None

        department = self._cohorts.get_department_by_code(dept_code)
        year = self._cohorts.get_year_by_value(year_int)
        semester = self._cohorts.get_semester_by_number(sem_int)
        if not department or not year or not semester:
            raise NotFoundError(f"Unknown course {dept_code}/{year_int}/{sem_int}")
        return Cohort(department=department, year=year, semester=semester)

    def choose(
        self,
        *,
        department_id: Optional[str],
        year_id: Optional[str],
        semester_id: Optional[str],
        lookups: Optional[Lookups] = None,
    ) -> Cohort:
        if not department_id or not year_id or not semester_id:
            raise ValidationError("Choose a department, year and semester to continue")

        lookups = lookups or self.list_lookups()
        department = next((d for d in lookups.departments if d.id == department_id), None)
        year = next((y for y in lookups.years if y.id == year_id), None)
        semester = next((s for s in lookups.semesters if s.id == semester_id), None)
        if not department or not year or not semester:
            raise NotFoundError("The selected course no longer exists")
        return Cohort(department=department, year=year, semester=semester)
