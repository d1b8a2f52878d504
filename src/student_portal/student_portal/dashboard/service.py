from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import DailySummary
from ..attendance.summary_cache import SummaryCache
from ..cohorts.model import Cohort
from ..students.model import Student
from ..students.service import StudentService


@dataclass(frozen=True)
class DashboardData:
    cohort: Cohort
    students: list[Student]
    visible: list[Student]
    search_term: str
    today: date
    today_summary: Optional[DailySummary]

    @property
    def total_students(self) -> int:
        return len(self.students)

    def stat(self, name: str) -> str:
        """Stat card text; '--' until attendance is saved for today."""
        if self.today_summary is None:
            return "--%" if name == "rate" else "--"
        value = getattr(self.today_summary, name)
        return f"{value}%" if name == "rate" else str(value)


class DashboardService:
    def __init__(self, students: StudentService):
        self._students = students

    def build(self, cohort: Cohort, *, search_term: Optional[str], today: date, cache: SummaryCache) -> DashboardData:
        students = self._students.list_for_cohort(cohort)
        term = (search_term or "").strip()
        return DashboardData(
            cohort=cohort,
            students=students,
            visible=self._students.search(students, term),
            search_term=term,
            today=today,
            today_summary=cache.peek(cohort.cache_scope, today),
        )
