from __future__ import annotations

from typing import Optional, Sequence

from ..cohorts.supabase_cohort_repository import department_from_row, semester_from_row, year_from_row
from ..database.connection import SupabaseConnection
from ..database.supabase_base import db_client, fetchall, fetchone
from .model import Student, StudentDraft
from .repository import StudentRepository

# Embeds the lookup rows so cards and exports can show codes without extra calls
STUDENT_COLUMNS = "*, department:departments(*), year:years(*), semester:semesters(*)"


def student_from_row(r: dict) -> Student:
    return Student(
        id=str(r["id"]),
        reg_no=r["reg_no"],
        name=r["name"],
        department_id=str(r["department_id"]),
        year_id=str(r["year_id"]),
        semester_id=str(r["semester_id"]),
        blood_group=r.get("blood_group"),
        phone=r.get("phone"),
        email=r.get("email"),
        address=r.get("address"),
        department=department_from_row(r["department"]) if r.get("department") else None,
        year=year_from_row(r["year"]) if r.get("year") else None,
        semester=semester_from_row(r["semester"]) if r.get("semester") else None,
    )


class SupabaseStudentRepository(StudentRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def list_for_cohort(self, *, department_id: str, year_id: str, semester_id: str) -> Sequence[Student]:
        with db_client(self._conn_factory) as client:
            res = (
                client.table("students")
                .select(STUDENT_COLUMNS)
                .eq("department_id", department_id)
                .eq("year_id", year_id)
                .eq("semester_id", semester_id)
                .order("reg_no")
                .execute()
            )
            return [student_from_row(r) for r in fetchall(res)]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_client(self._conn_factory) as client:
            res = client.table("students").select(STUDENT_COLUMNS).eq("id", student_id).limit(1).execute()
            row = fetchone(res)
            return student_from_row(row) if row else None

    def create(self, draft: StudentDraft) -> str:
        with db_client(self._conn_factory) as client:
            res = client.table("students").insert(draft.to_row()).execute()
            row = fetchone(res)
            return str(row["id"]) if row else ""

    def update(self, student_id: str, draft: StudentDraft) -> bool:
        with db_client(self._conn_factory) as client:
            res = client.table("students").update(draft.to_row()).eq("id", student_id).execute()
            return bool(fetchall(res))

    def delete_by_id(self, student_id: str) -> bool:
        with db_client(self._conn_factory) as client:
            res = client.table("students").delete().eq("id", student_id).execute()
            return bool(fetchall(res))
