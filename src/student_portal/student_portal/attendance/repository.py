from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceMark, AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, *, on: date, student_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, student_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, marks: Sequence[AttendanceMark]) -> None:
        """Insert or update, keyed on the (student_id, date) unique constraint."""

        raise NotImplementedError
