from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, Semester, Year


class CohortRepository(Protocol):
    """Lookup tables that make up a cohort (departments, years, semesters)."""

    def list_departments(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_years(self) -> Sequence[Year]:
        raise NotImplementedError

    def list_semesters(self) -> Sequence[Semester]:
        raise NotImplementedError

    def get_department_by_code(self, code: str) -> Optional[Department]:
        raise NotImplementedError

    def get_year_by_value(self, value: int) -> Optional[Year]:
        raise NotImplementedError

    def get_semester_by_number(self, number: int) -> Optional[Semester]:
        raise NotImplementedError
