from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..cohorts.model import Cohort
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import Student
from .model import AttendanceMark, AttendanceSheet, DailySummary
from .repository import AttendanceRepository
from .summary_cache import SummaryCache


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}") from None


class AttendanceService:
    """Use cases behind the attendance panel: load, bulk mark, save."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def load_sheet(self, students: Sequence[Student], on: date) -> AttendanceSheet:
        if not students:
            return AttendanceSheet(date=on)

        rows = self._attendance.list_for_date(on=on, student_ids=[s.id for s in students])
        marks = {r.student_id: r.status for r in rows}
        return AttendanceSheet(date=on, marks=marks, is_editing=bool(marks))

    @staticmethod
    def bulk_mark(students: Sequence[Student], status: Optional[str]) -> dict[str, AttendanceStatus]:
        if not status:
            return {}
        parsed = parse_status(status)
        return {s.id: parsed for s in students}

    def save(
        self,
        *,
        cohort: Cohort,
        on: date,
        marks: Mapping[str, object],
        cache: SummaryCache,
    ) -> DailySummary:
        if not marks:
            raise ValidationError("Mark at least one student before saving")

        parsed = {student_id: parse_status(status) for student_id, status in marks.items()}
        self._attendance.upsert(
            [AttendanceMark(student_id=sid, date=on, status=status) for sid, status in parsed.items()]
        )

        summary = DailySummary.from_marks(parsed)
        cache.write(cohort.cache_scope, on, summary)
        return summary
