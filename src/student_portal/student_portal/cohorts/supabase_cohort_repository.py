from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import SupabaseConnection
from ..database.supabase_base import db_client, fetchall, fetchone
from .model import Department, Semester, Year
from .repository import CohortRepository


def department_from_row(r: dict) -> Department:
    return Department(id=str(r["id"]), code=r["code"], name=r["name"])


def year_from_row(r: dict) -> Year:
    return Year(id=str(r["id"]), label=str(r["label"]), value=int(r["value"]))


def semester_from_row(r: dict) -> Semester:
    return Semester(id=str(r["id"]), number=int(r["number"]))


class SupabaseCohortRepository(CohortRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def list_departments(self) -> Sequence[Department]:
        with db_client(self._conn_factory) as client:
            res = client.table("departments").select("*").order("name").execute()
            return [department_from_row(r) for r in fetchall(res)]

    def list_years(self) -> Sequence[Year]:
        with db_client(self._conn_factory) as client:
            res = client.table("years").select("*").order("value").execute()
            return [year_from_row(r) for r in fetchall(res)]

    def list_semesters(self) -> Sequence[Semester]:
        with db_client(self._conn_factory) as client:
            res = client.table("semesters").select("*").order("number").execute()
            return [semester_from_row(r) for r in fetchall(res)]

    def get_department_by_code(self, code: str) -> Optional[Department]:
        with db_client(self._conn_factory) as client:
            res = client.table("departments").select("*").eq("code", code).limit(1).execute()
            row = fetchone(res)
            return department_from_row(row) if row else None

    def get_year_by_value(self, value: int) -> Optional[Year]:
        with db_client(self._conn_factory) as client:
            res = client.table("years").select("*").eq("value", int(value)).limit(1).execute()
            row = fetchone(res)
            return year_from_row(row) if row else None

    def get_semester_by_number(self, number: int) -> Optional[Semester]:
        with db_client(self._conn_factory) as client:
            res = client.table("semesters").select("*").eq("number", int(number)).limit(1).execute()
            row = fetchone(res)
            return semester_from_row(row) if row else None
