from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus
from ..database.connection import SupabaseConnection
from ..database.supabase_base import db_client, fetchall
from .model import AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository

UPSERT_CONFLICT_TARGET = "student_id,date"


def attendance_from_row(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(r["id"]),
        student_id=str(r["student_id"]),
        date=parse_iso_date(str(r["date"])[:10]),
        status=AttendanceStatus(r["status"]),
    )


class SupabaseAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, *, on: date, student_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        if not student_ids:
            return []
        with db_client(self._conn_factory) as client:
            res = (
                client.table("attendance")
                .select("id, student_id, date, status")
                .eq("date", on.isoformat())
                .in_("student_id", list(student_ids))
                .execute()
            )
            return [attendance_from_row(r) for r in fetchall(res)]

    def list_range(self, *, start: date, end: date, student_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        if not student_ids:
            return []
        with db_client(self._conn_factory) as client:
            res = (
                client.table("attendance")
                .select("id, student_id, date, status")
                .gte("date", start.isoformat())
                .lte("date", end.isoformat())
                .in_("student_id", list(student_ids))
                .order("date")
                .execute()
            )
            return [attendance_from_row(r) for r in fetchall(res)]

    def upsert(self, marks: Sequence[AttendanceMark]) -> None:
        with db_client(self._conn_factory) as client:
            client.table("attendance").upsert(
                [m.to_row() for m in marks],
                on_conflict=UPSERT_CONFLICT_TARGET,
            ).execute()
