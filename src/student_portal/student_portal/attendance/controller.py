from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, url_for

from ..auth.guards import login_required
from ..common import datetime_utils
from ..common.web import summary_cache
from ..container import Container
from ..core.exceptions import BackendError, DomainError, ValidationError
from ..dashboard.controller import render_dashboard, resolve_cohort
from .model import AttendanceSheet
from .service import parse_status

logger = logging.getLogger(__name__)

STATUS_FIELD_PREFIX = "status-"


def _submitted_marks(students) -> dict:
    marks = {}
    for s in students:
        value = (request.form.get(f"{STATUS_FIELD_PREFIX}{s.id}") or "").strip()
        if value:
            marks[s.id] = value
    return marks


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/<dept>/<year>/<sem>/attendance", methods=["GET", "POST"], endpoint="attendance")
    @login_required
    def attendance(dept: str, year: str, sem: str):
        cohort = resolve_cohort(container, dept, year, sem)
        if cohort is None:
            return redirect(url_for("select"))

        source = request.form if request.method == "POST" else request.args
        try:
            on = datetime_utils.parse_form_date(source.get("date"), default=datetime_utils.today_local())
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("attendance", **cohort.route_args))

        if request.method == "GET":
            try:
                students = container.student_service.list_for_cohort(cohort)
                sheet = container.attendance_service.load_sheet(students, on)
            except BackendError as e:
                return render_dashboard(container, cohort, sheet=AttendanceSheet(date=on), attendance_error=str(e))
            return render_dashboard(container, cohort, sheet=sheet)

        is_editing = request.form.get("is_editing") == "1"
        try:
            students = container.student_service.list_for_cohort(cohort)
        except BackendError as e:
            flash(f"Could not load students: {e}", "danger")
            return redirect(url_for("dashboard", **cohort.route_args))

        submitted = _submitted_marks(students)
        action = request.form.get("action", "save")

        if action == "bulk":
            try:
                marks = container.attendance_service.bulk_mark(students, request.form.get("bulk_status"))
                marks = marks or {sid: parse_status(v) for sid, v in submitted.items()}
            except ValidationError as e:
                flash(str(e), "danger")
                marks = {}
            return render_dashboard(
                container,
                cohort,
                sheet=AttendanceSheet(date=on, marks=marks, is_editing=is_editing),
            )

        try:
            summary = container.attendance_service.save(cohort=cohort, on=on, marks=submitted, cache=summary_cache())
            logger.info(
                "Saved attendance for %s on %s: %d present, %d absent",
                cohort.cache_scope,
                on.isoformat(),
                summary.present,
                summary.absent,
            )
            flash("Attendance saved successfully!", "success")
            return redirect(url_for("dashboard", **cohort.route_args))
        except DomainError as e:
            error = str(e)
        except Exception:
            logger.exception("Unexpected error while saving attendance")
            error = "Error saving attendance"

        kept = {}
        for sid, value in submitted.items():
            try:
                kept[sid] = parse_status(value)
            except ValidationError:
                continue
        return render_dashboard(
            container,
            cohort,
            sheet=AttendanceSheet(date=on, marks=kept, is_editing=is_editing),
            attendance_error=error,
        )
