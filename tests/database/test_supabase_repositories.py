from __future__ import annotations

import logging
from datetime import date
from types import SimpleNamespace

import httpx
import pytest
from postgrest.exceptions import APIError

from src.student_portal.student_portal.attendance.model import AttendanceMark
from src.student_portal.student_portal.attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from src.student_portal.student_portal.core.enums import AttendanceStatus
from src.student_portal.student_portal.core.exceptions import BackendError
from src.student_portal.student_portal.database.supabase_base import db_client
from src.student_portal.student_portal.students.supabase_student_repository import (
    SupabaseStudentRepository,
    student_from_row,
)


class RecordingQuery:
    def __init__(self, table, data, error):
        self.table = table
        self.calls = []
        self._data = data
        self._error = error

    def __getattr__(self, name):
        def call(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return call

    def execute(self):
        if self._error:
            raise self._error
        return SimpleNamespace(data=self._data)


class RecordingClient:
    def __init__(self, data=None, error=None):
        self.queries = []
        self._data = data or []
        self._error = error

    def table(self, name):
        query = RecordingQuery(name, self._data, self._error)
        self.queries.append(query)
        return query


class RecordingConnection:
    def __init__(self, client):
        self.client = client
        self.tokens = []

    def connect(self, *, access_token=None):
        self.tokens.append(access_token)
        return self.client


STUDENT_ROW = {
    "id": 7,
    "reg_no": "21CS001",
    "name": "Anita",
    "department_id": "dep-cse",
    "year_id": "year-2",
    "semester_id": "sem-3",
    "blood_group": "O+",
    "phone": None,
    "department": {"id": "dep-cse", "code": "CSE", "name": "Computer Science and Engineering"},
    "year": {"id": "year-2", "label": "II", "value": 2},
    "semester": {"id": "sem-3", "number": 3},
}


def test_api_error_becomes_backend_error(caplog):
    conn = RecordingConnection(
        RecordingClient(error=APIError({"message": "permission denied for table attendance", "code": "42501"}))
    )

    with caplog.at_level(logging.WARNING):
        with pytest.raises(BackendError, match="permission denied for table attendance"):
            with db_client(conn) as client:
                client.table("attendance").select("*").execute()

    assert "42501" in caplog.text


def test_transport_error_becomes_backend_error():
    conn = RecordingConnection(RecordingClient(error=httpx.ConnectError("connection refused")))

    with pytest.raises(BackendError, match="Could not reach the database service"):
        with db_client(conn) as client:
            client.table("students").select("*").execute()


def test_db_client_passes_explicit_token():
    conn = RecordingConnection(RecordingClient())

    with db_client(conn, access_token="jwt-1"):
        pass

    assert conn.tokens == ["jwt-1"]


def test_attendance_upsert_targets_student_and_date():
    client = RecordingClient()
    repo = SupabaseAttendanceRepository(RecordingConnection(client))

    repo.upsert([AttendanceMark(student_id="s1", date=date(2024, 3, 15), status=AttendanceStatus.ABSENT)])

    (query,) = client.queries
    assert query.table == "attendance"
    ((name, args, kwargs),) = query.calls
    assert name == "upsert"
    assert args == ([{"student_id": "s1", "date": "2024-03-15", "status": "absent"}],)
    assert kwargs == {"on_conflict": "student_id,date"}


def test_attendance_reads_skip_backend_without_students():
    client = RecordingClient()
    repo = SupabaseAttendanceRepository(RecordingConnection(client))

    assert repo.list_for_date(on=date(2024, 3, 15), student_ids=[]) == []
    assert client.queries == []


def test_student_row_maps_embedded_lookups():
    student = student_from_row(STUDENT_ROW)

    assert student.id == "7"
    assert student.department.code == "CSE"
    assert student.year.value == 2
    assert student.semester.number == 3
    assert student.phone is None


def test_student_row_without_embeds():
    row = {k: v for k, v in STUDENT_ROW.items() if k not in ("department", "year", "semester")}

    student = student_from_row(row)

    assert student.department is None and student.year is None and student.semester is None


def test_roster_query_filters_by_cohort_ids():
    client = RecordingClient(data=[STUDENT_ROW])
    repo = SupabaseStudentRepository(RecordingConnection(client))

    (student,) = repo.list_for_cohort(department_id="dep-cse", year_id="year-2", semester_id="sem-3")

    assert student.reg_no == "21CS001"
    filters = [(args[0], args[1]) for name, args, _ in client.queries[0].calls if name == "eq"]
    assert filters == [("department_id", "dep-cse"), ("year_id", "year-2"), ("semester_id", "sem-3")]
