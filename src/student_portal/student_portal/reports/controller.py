from __future__ import annotations

import io
import logging

from flask import Flask, flash, redirect, request, send_file, url_for

from ..auth.guards import login_required
from ..common import datetime_utils
from ..container import Container
from ..core.exceptions import BackendError, ValidationError
from ..dashboard.controller import resolve_cohort
from .exports import ExportFile

logger = logging.getLogger(__name__)


def _download(file: ExportFile):
    return send_file(
        io.BytesIO(file.content),
        mimetype=file.mimetype,
        as_attachment=True,
        download_name=file.filename,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/<dept>/<year>/<sem>/export/students.<any(xlsx, pdf):fmt>", endpoint="export_students")
    @login_required
    def export_students(dept: str, year: str, sem: str, fmt: str):
        cohort = resolve_cohort(container, dept, year, sem)
        if cohort is None:
            return redirect(url_for("select"))

        try:
            report = container.export_service.roster(cohort)
            return _download(report.to_excel() if fmt == "xlsx" else report.to_pdf())
        except BackendError as e:
            flash(f"Could not export students: {e}", "danger")
        except Exception:
            logger.exception("Student export failed")
            flash("Error exporting students", "danger")
        return redirect(url_for("dashboard", **cohort.route_args))

    @app.route("/dashboard/<dept>/<year>/<sem>/export/attendance.<any(xlsx, pdf):fmt>", endpoint="export_attendance")
    @login_required
    def export_attendance(dept: str, year: str, sem: str, fmt: str):
        cohort = resolve_cohort(container, dept, year, sem)
        if cohort is None:
            return redirect(url_for("select"))

        try:
            today = datetime_utils.today_local()
            start = datetime_utils.parse_form_date(request.args.get("start"), default=today)
            end = datetime_utils.parse_form_date(request.args.get("end"), default=today)
            report = container.export_service.attendance(cohort, start=start, end=end)
            if not report.rows:
                flash("No attendance records found for the selected date range.", "warning")
                return redirect(url_for("dashboard", **cohort.route_args))
            return _download(report.to_excel() if fmt == "xlsx" else report.to_pdf())
        except (ValidationError, BackendError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Attendance export failed")
            flash("Error exporting attendance", "danger")
        return redirect(url_for("dashboard", **cohort.route_args))
