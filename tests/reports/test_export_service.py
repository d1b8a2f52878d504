from __future__ import annotations

from datetime import date

import pytest

from src.student_portal.student_portal.attendance.summary_cache import SummaryCache
from src.student_portal.student_portal.core.exceptions import ValidationError


def test_roster_report(container, cohort, add_student):
    add_student("21CS002", "Bala")
    add_student("21CS001", "Anita", phone="98400")

    report = container.export_service.roster(cohort)

    assert report.filename == "students_CSE-2-3"
    assert [r["Registration No"] for r in report.rows] == ["21CS001", "21CS002"]
    assert report.to_excel().filename == "students_CSE-2-3.xlsx"


def test_attendance_report_sorted_and_scoped(container, cohort, add_student):
    b = add_student("21CS002", "Bala")
    a = add_student("21CS001", "Anita")
    cache = SummaryCache({})
    container.attendance_service.save(cohort=cohort, on=date(2024, 3, 2), marks={a: "absent", b: "present"}, cache=cache)
    container.attendance_service.save(cohort=cohort, on=date(2024, 3, 1), marks={b: "present"}, cache=cache)
    container.attendance_service.save(cohort=cohort, on=date(2024, 3, 9), marks={a: "present"}, cache=cache)

    report = container.export_service.attendance(cohort, start=date(2024, 3, 1), end=date(2024, 3, 5))

    assert report.filename == "attendance_CSE-2-3_20240301_20240305"
    assert [(r["Date"], r["Registration No"]) for r in report.rows] == [
        ("01/03/2024", "21CS002"),
        ("02/03/2024", "21CS001"),
        ("02/03/2024", "21CS002"),
    ]


def test_attendance_report_rejects_reversed_range(container, cohort):
    with pytest.raises(ValidationError):
        container.export_service.attendance(cohort, start=date(2024, 3, 5), end=date(2024, 3, 1))
