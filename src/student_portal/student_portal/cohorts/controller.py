from __future__ import annotations

from flask import Flask, flash, redirect, render_template, url_for

from ..auth.guards import login_required
from ..common.web import selection_store
from ..container import Container
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .forms import SelectionForm
from .model import Lookups


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    @login_required
    def index():
        path = selection_store().dashboard_path()
        return redirect(path or url_for("select"))

    @app.route("/select", methods=["GET", "POST"], endpoint="select")
    @login_required
    def select():
        store = selection_store()
        try:
            lookups = container.cohort_service.list_lookups()
        except BackendError as e:
            flash(f"Could not load courses: {e}", "danger")
            lookups = Lookups(departments=[], years=[], semesters=[])

        form = SelectionForm()
        form.set_lookups(lookups)
        if not form.is_submitted():
            form.department_id.data = store.department_id
            form.year_id.data = store.year_id
            form.semester_id.data = store.semester_id

        if form.validate_on_submit():
            try:
                cohort = container.cohort_service.choose(
                    department_id=form.department_id.data,
                    year_id=form.year_id.data,
                    semester_id=form.semester_id.data,
                    lookups=lookups,
                )
                store.set_selection(cohort)
                return redirect(url_for("dashboard", **cohort.route_args))
            except (ValidationError, NotFoundError) as e:
                flash(str(e), "danger")

        return render_template("select.html", form=form, lookups=lookups)

    @app.errorhandler(404)
    def not_found(e):
        return redirect(url_for("index"))
