from __future__ import annotations

from typing import Iterable, Optional

from ..cohorts.model import Cohort
from ..common.validators import optional_text, require_email, require_non_empty
from ..core.constants import BLOOD_GROUPS
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student, StudentDraft
from .repository import StudentRepository


class StudentService:
    """Use cases: roster listing/search and the student create/edit/delete flow."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_for_cohort(self, cohort: Cohort) -> list[Student]:
        return list(
            self._students.list_for_cohort(
                department_id=cohort.department.id,
                year_id=cohort.year.id,
                semester_id=cohort.semester.id,
            )
        )

    @staticmethod
    def search(students: Iterable[Student], term: Optional[str]) -> list[Student]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(students)
        return [s for s in students if needle in s.name.lower() or needle in s.reg_no.lower()]

    def get(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def build_draft(
        self,
        *,
        reg_no: Optional[str],
        name: Optional[str],
        department_id: Optional[str],
        year_id: Optional[str],
        semester_id: Optional[str],
        blood_group: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> StudentDraft:
        blood_group = optional_text(blood_group)
        if blood_group and blood_group not in BLOOD_GROUPS:
            raise ValidationError(f"Unknown blood group: {blood_group}")

        email = optional_text(email)
        if email:
            email = require_email(email)

        return StudentDraft(
            reg_no=require_non_empty(reg_no, "Registration number is required"),
            name=require_non_empty(name, "Name is required"),
            department_id=require_non_empty(department_id, "Department is required"),
            year_id=require_non_empty(year_id, "Year is required"),
            semester_id=require_non_empty(semester_id, "Semester is required"),
            blood_group=blood_group,
            phone=optional_text(phone),
            email=email,
            address=optional_text(address),
        )

    def create(self, draft: StudentDraft) -> str:
        student_id = self._students.create(draft)
        if not student_id:
            raise ValidationError("Could not add the student")
        return student_id

    def update(self, student_id: str, draft: StudentDraft) -> None:
        if not self._students.update(student_id, draft):
            raise NotFoundError("Student not found")

    def delete(self, student_id: str) -> None:
        if not self._students.delete_by_id(student_id):
            raise NotFoundError("Student not found")
