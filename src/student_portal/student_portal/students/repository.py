from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student, StudentDraft


class StudentRepository(Protocol):
    def list_for_cohort(self, *, department_id: str, year_id: str, semester_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, draft: StudentDraft) -> str:
        raise NotImplementedError

    def update(self, student_id: str, draft: StudentDraft) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
