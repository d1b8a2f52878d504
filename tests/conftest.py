from __future__ import annotations

import time
from datetime import date
from typing import Optional

import pytest

from src.student_portal.student_portal.attendance.model import AttendanceRecord
from src.student_portal.student_portal.auth.model import AuthSession, AuthUser
from src.student_portal.student_portal.cohorts.model import Cohort, Department, Semester, Year
from src.student_portal.student_portal.common import datetime_utils
from src.student_portal.student_portal.container import assemble
from src.student_portal.student_portal.core.exceptions import AuthenticationError, BackendError
from src.student_portal.student_portal.students.model import Student

TODAY = date(2024, 3, 15)

CSE = Department(id="dep-cse", code="CSE", name="Computer Science and Engineering")
ECE = Department(id="dep-ece", code="ECE", name="Electronics and Communication Engineering")
YEAR_2 = Year(id="year-2", label="II", value=2)
YEAR_3 = Year(id="year-3", label="III", value=3)
SEM_3 = Semester(id="sem-3", number=3)
SEM_4 = Semester(id="sem-4", number=4)


class FakeCohortRepo:
    def __init__(self):
        self.departments = [ECE, CSE]
        self.years = [YEAR_3, YEAR_2]
        self.semesters = [SEM_4, SEM_3]

    def list_departments(self):
        return sorted(self.departments, key=lambda d: d.name)

    def list_years(self):
        return sorted(self.years, key=lambda y: y.value)

    def list_semesters(self):
        return sorted(self.semesters, key=lambda s: s.number)

    def get_department_by_code(self, code):
        return next((d for d in self.departments if d.code == code), None)

    def get_year_by_value(self, value):
        return next((y for y in self.years if y.value == value), None)

    def get_semester_by_number(self, number):
        return next((s for s in self.semesters if s.number == number), None)


class FakeStudentRepo:
    def __init__(self, cohorts: FakeCohortRepo):
        self._cohorts = cohorts
        self._rows: dict[str, Student] = {}
        self._next_id = 1
        self.fail = False

    def _attach(self, student_id: str, draft) -> Student:
        return Student(
            id=student_id,
            reg_no=draft.reg_no,
            name=draft.name,
            department_id=draft.department_id,
            year_id=draft.year_id,
            semester_id=draft.semester_id,
            blood_group=draft.blood_group,
            phone=draft.phone,
            email=draft.email,
            address=draft.address,
            department=next((d for d in self._cohorts.departments if d.id == draft.department_id), None),
            year=next((y for y in self._cohorts.years if y.id == draft.year_id), None),
            semester=next((s for s in self._cohorts.semesters if s.id == draft.semester_id), None),
        )

    def list_for_cohort(self, *, department_id, year_id, semester_id):
        if self.fail:
            raise BackendError("backend unavailable")
        items = [
            s
            for s in self._rows.values()
            if s.department_id == department_id and s.year_id == year_id and s.semester_id == semester_id
        ]
        return sorted(items, key=lambda s: s.reg_no)

    def get_by_id(self, student_id) -> Optional[Student]:
        return self._rows.get(student_id)

    def create(self, draft) -> str:
        student_id = f"stu-{self._next_id}"
        self._next_id += 1
        self._rows[student_id] = self._attach(student_id, draft)
        return student_id

    def update(self, student_id, draft) -> bool:
        if student_id not in self._rows:
            return False
        self._rows[student_id] = self._attach(student_id, draft)
        return True

    def delete_by_id(self, student_id) -> bool:
        return self._rows.pop(student_id, None) is not None


class FakeAttendanceRepo:
    def __init__(self):
        self.rows: dict[tuple[str, date], AttendanceRecord] = {}
        self.list_calls = 0
        self.upsert_calls = 0
        self.fail_upsert = False

    def list_for_date(self, *, on, student_ids):
        self.list_calls += 1
        return [r for (sid, d), r in self.rows.items() if d == on and sid in student_ids]

    def list_range(self, *, start, end, student_ids):
        return [r for (sid, d), r in self.rows.items() if start <= d <= end and sid in student_ids]

    def upsert(self, marks):
        self.upsert_calls += 1
        if self.fail_upsert:
            raise BackendError("permission denied for table attendance")
        for m in marks:
            key = (m.student_id, m.date)
            existing = self.rows.get(key)
            self.rows[key] = AttendanceRecord(
                id=existing.id if existing else f"att-{len(self.rows) + 1}",
                student_id=m.student_id,
                date=m.date,
                status=m.status,
            )


class FakeAuthProvider:
    def __init__(self):
        self.users: dict[str, tuple[str, AuthUser]] = {}
        self.confirm_email = False
        self.revoked: set[str] = set()
        self.signed_out: list[str] = []
        self.restored: list[str] = []
        self.restore_error: Optional[Exception] = None
        self.sign_out_error: Optional[Exception] = None

    def _session(self, user: AuthUser, *, token: str = "access-1") -> AuthSession:
        return AuthSession(
            access_token=token,
            refresh_token=f"refresh-for-{token}",
            expires_at=int(time.time()) + 3600,
            user=user,
        )

    def sign_in_with_password(self, email, password):
        entry = self.users.get(email)
        if not entry or entry[0] != password:
            raise AuthenticationError("Invalid login credentials")
        return self._session(entry[1])

    def sign_up(self, email, password, *, name):
        user = AuthUser(id=f"user-{len(self.users) + 1}", email=email, name=name)
        self.users[email] = (password, user)
        if self.confirm_email:
            return user, None
        return user, self._session(user)

    def restore(self, access_token, refresh_token):
        self.restored.append(access_token)
        if self.restore_error:
            raise self.restore_error
        if access_token in self.revoked:
            raise AuthenticationError("Session expired")
        user = next(u for _, u in self.users.values())
        return self._session(user, token="access-refreshed")

    def sign_out(self, access_token, refresh_token):
        if self.sign_out_error:
            raise self.sign_out_error
        self.signed_out.append(access_token)


class FakeProfiles:
    def __init__(self):
        self.created: list[dict] = []
        self.fail = False

    def create_profile(self, *, user_id, name, email, role, access_token=None):
        if self.fail:
            raise BackendError("duplicate key value violates unique constraint")
        self.created.append({"user_id": user_id, "name": name, "email": email, "role": role})


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(datetime_utils, "today_local", lambda: TODAY)
    return TODAY


@pytest.fixture
def cohort() -> Cohort:
    return Cohort(department=CSE, year=YEAR_2, semester=SEM_3)


@pytest.fixture
def cohorts_repo():
    return FakeCohortRepo()


@pytest.fixture
def students_repo(cohorts_repo):
    return FakeStudentRepo(cohorts_repo)


@pytest.fixture
def attendance_repo():
    return FakeAttendanceRepo()


@pytest.fixture
def auth_provider():
    provider = FakeAuthProvider()
    provider.users["staff@college.edu"] = ("secret1", AuthUser(id="user-1", email="staff@college.edu", name="Asha"))
    return provider


@pytest.fixture
def profiles_repo():
    return FakeProfiles()


@pytest.fixture
def container(auth_provider, profiles_repo, cohorts_repo, students_repo, attendance_repo):
    return assemble(
        auth_provider=auth_provider,
        profiles_repo=profiles_repo,
        cohorts_repo=cohorts_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
    )


@pytest.fixture
def add_student(container):
    def _add(reg_no, name, *, department=CSE, year=YEAR_2, semester=SEM_3, **extra):
        draft = container.student_service.build_draft(
            reg_no=reg_no,
            name=name,
            department_id=department.id,
            year_id=year.id,
            semester_id=semester.id,
            **extra,
        )
        return container.student_service.create(draft)

    return _add


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.student_portal.student_portal.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in_client(client):
    with client.session_transaction() as sess:
        sess["access_token"] = "access-1"
        sess["refresh_token"] = "refresh-1"
        sess["expires_at"] = int(time.time()) + 3600
        sess["user_id"] = "user-1"
        sess["email"] = "staff@college.edu"
        sess["name"] = "Asha"
    return client
