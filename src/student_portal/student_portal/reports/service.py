from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.repository import AttendanceRepository
from ..cohorts.model import Cohort
from ..core.exceptions import ValidationError
from ..students.service import StudentService
from .exports import (
    ATTENDANCE_COLUMNS,
    STUDENT_COLUMNS,
    ExportFile,
    export_to_excel,
    export_to_pdf,
    format_attendance_for_export,
    format_students_for_export,
)


@dataclass(frozen=True)
class ReportData:
    title: str
    filename: str
    columns: tuple[str, ...]
    rows: list[dict]

    def to_excel(self) -> ExportFile:
        return export_to_excel(self.rows, self.filename, columns=self.columns)

    def to_pdf(self) -> ExportFile:
        return export_to_pdf(self.rows, self.filename, title=self.title, columns=self.columns)


class ExportService:
    def __init__(self, students: StudentService, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def roster(self, cohort: Cohort) -> ReportData:
        students = self._students.list_for_cohort(cohort)
        return ReportData(
            title=f"Students - {cohort.title}",
            filename=f"students_{cohort.cache_scope}",
            columns=STUDENT_COLUMNS,
            rows=format_students_for_export(students),
        )

    def attendance(self, cohort: Cohort, *, start: date, end: date) -> ReportData:
        if start > end:
            raise ValidationError("Start date must be on or before end date")

        students = self._students.list_for_cohort(cohort)
        records = self._attendance.list_range(start=start, end=end, student_ids=[s.id for s in students])

        reg_no = {s.id: s.reg_no for s in students}
        records = sorted(records, key=lambda r: (r.date, reg_no.get(r.student_id, "")))

        return ReportData(
            title=f"Attendance - {cohort.title} ({start.isoformat()} to {end.isoformat()})",
            filename=f"attendance_{cohort.cache_scope}_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}",
            columns=ATTENDANCE_COLUMNS,
            rows=format_attendance_for_export(records, students),
        )
