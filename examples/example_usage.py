"""Example: use the service layer directly (no Flask).

Controllers stay thin; the roster and export logic lives in the services.
"""

import importlib
import sys

from dotenv import load_dotenv

from config import get_settings_module

from src.student_portal.student_portal.common.datetime_utils import today_local
from src.student_portal.student_portal.container import build_container


def main(email: str, password: str) -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    session = {}
    container = build_container(
        supabase_config=settings.SUPABASE_CONFIG,
        token_provider=lambda: session.get("access_token"),
    )

    auth = container.auth_service.sign_in(email, password)
    session["access_token"] = auth.access_token

    cohort = container.cohort_service.resolve("CSE", 2, 3)
    students = container.student_service.list_for_cohort(cohort)
    print(f"{cohort.title}: {len(students)} students")

    report = container.export_service.attendance(cohort, start=today_local(), end=today_local())
    file = report.to_excel()
    with open(file.filename, "wb") as fh:
        fh.write(file.content)
    print(f"Wrote {file.filename} ({len(report.rows)} rows)")


if __name__ == "__main__":
    main(sys.argv[1], sys.argv[2])
