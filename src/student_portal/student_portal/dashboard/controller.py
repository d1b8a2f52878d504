from __future__ import annotations

from typing import Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..attendance.model import AttendanceSheet
from ..auth.guards import login_required
from ..cohorts.model import Cohort
from ..common import datetime_utils
from ..common.web import selection_store, summary_cache
from ..container import Container
from ..core.exceptions import BackendError, NotFoundError


def resolve_cohort(container: Container, dept: str, year: str, sem: str) -> Optional[Cohort]:
    """Cohort named by a dashboard URL, recorded as the current selection.

    Flashes and returns None when the URL names nothing.
    """
    try:
        cohort = container.cohort_service.resolve(dept, year, sem)
    except NotFoundError as e:
        flash(str(e), "warning")
        return None
    except BackendError as e:
        flash(f"Could not load the course: {e}", "danger")
        return None

    selection_store().set_selection(cohort)
    return cohort


def render_dashboard(
    container: Container,
    cohort: Cohort,
    *,
    sheet: Optional[AttendanceSheet] = None,
    attendance_error: Optional[str] = None,
):
    cache = summary_cache()
    try:
        data = container.dashboard_service.build(
            cohort,
            search_term=request.args.get("q"),
            today=datetime_utils.today_local(),
            cache=cache,
        )
    except BackendError as e:
        flash(f"Could not load students: {e}", "danger")
        return redirect(url_for("select"))

    return render_template(
        "dashboard.html",
        data=data,
        sheet=sheet,
        sheet_summary=cache.read(cohort.cache_scope, sheet.date) if sheet else None,
        attendance_error=attendance_error,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/<dept>/<year>/<sem>", endpoint="dashboard")
    @login_required
    def dashboard(dept: str, year: str, sem: str):
        cohort = resolve_cohort(container, dept, year, sem)
        if cohort is None:
            return redirect(url_for("select"))
        return render_dashboard(container, cohort)
