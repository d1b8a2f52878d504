from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.supabase_attendance_repository import SupabaseAttendanceRepository
from .auth.repository import AuthProvider, ProfileRepository
from .auth.service import AuthService
from .auth.supabase_profile_repository import SupabaseProfileRepository
from .auth.supabase_provider import SupabaseAuthProvider
from .cohorts.repository import CohortRepository
from .cohorts.service import CohortService
from .cohorts.supabase_cohort_repository import SupabaseCohortRepository
from .dashboard.service import DashboardService
from .database.connection import SupabaseConfig, SupabaseConnection, TokenProvider
from .reports.service import ExportService
from .students.repository import StudentRepository
from .students.service import StudentService
from .students.supabase_student_repository import SupabaseStudentRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[SupabaseConnection]

    auth_provider: AuthProvider
    profiles_repo: ProfileRepository
    cohorts_repo: CohortRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    cohort_service: CohortService
    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    export_service: ExportService


def assemble(
    *,
    auth_provider: AuthProvider,
    profiles_repo: ProfileRepository,
    cohorts_repo: CohortRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[SupabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories (Supabase-backed or fakes)."""

    student_service = StudentService(students_repo)
    return Container(
        conn=conn,
        auth_provider=auth_provider,
        profiles_repo=profiles_repo,
        cohorts_repo=cohorts_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(auth_provider, profiles_repo),
        cohort_service=CohortService(cohorts_repo),
        student_service=student_service,
        attendance_service=AttendanceService(attendance_repo),
        dashboard_service=DashboardService(student_service),
        export_service=ExportService(student_service, attendance_repo),
    )


def build_container(*, supabase_config: dict, token_provider: Optional[TokenProvider] = None) -> Container:
    config = SupabaseConfig.from_dict(supabase_config)
    conn = SupabaseConnection.get_instance(config, token_provider=token_provider)

    return assemble(
        conn=conn,
        auth_provider=SupabaseAuthProvider(conn),
        profiles_repo=SupabaseProfileRepository(conn),
        cohorts_repo=SupabaseCohortRepository(conn),
        students_repo=SupabaseStudentRepository(conn),
        attendance_repo=SupabaseAttendanceRepository(conn),
    )
