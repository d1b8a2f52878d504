from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.guards import login_required
from ..cohorts.model import Lookups
from ..common.web import safe_next, selection_store
from ..container import Container
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .forms import StudentForm

logger = logging.getLogger(__name__)


def _back_url() -> str:
    return safe_next(request.values.get("next")) or selection_store().dashboard_path() or url_for("index")


def _draft_from_form(container: Container, form: StudentForm):
    return container.student_service.build_draft(
        reg_no=form.reg_no.data,
        name=form.name.data,
        department_id=form.department_id.data,
        year_id=form.year_id.data,
        semester_id=form.semester_id.data,
        blood_group=form.blood_group.data,
        phone=form.phone.data,
        email=form.email.data,
        address=form.address.data,
    )


def register(app: Flask, container: Container) -> None:
    def load_lookups() -> Lookups:
        try:
            return container.cohort_service.list_lookups()
        except BackendError as e:
            flash(f"Could not load courses: {e}", "danger")
            return Lookups(departments=[], years=[], semesters=[])

    @app.route("/students/add", methods=["GET", "POST"], endpoint="student_add")
    @login_required
    def student_add():
        form = StudentForm()
        form.set_lookups(load_lookups())
        if not form.is_submitted():
            store = selection_store()
            form.department_id.data = store.department_id
            form.year_id.data = store.year_id
            form.semester_id.data = store.semester_id

        if form.validate_on_submit():
            try:
                student_id = container.student_service.create(_draft_from_form(container, form))
                logger.info("Created student %s", student_id)
                flash("Student added successfully!", "success")
                return redirect(_back_url())
            except (ValidationError, BackendError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error while adding a student")
                flash("Error saving student", "danger")

        return render_template("students/form.html", form=form, student=None, back_url=_back_url())

    @app.route("/students/<student_id>", methods=["GET", "POST"], endpoint="student_edit")
    @login_required
    def student_edit(student_id: str):
        try:
            student = container.student_service.get(student_id)
        except (NotFoundError, BackendError) as e:
            flash(str(e), "warning")
            return redirect(_back_url())

        form = StudentForm(obj=student)
        form.set_lookups(load_lookups())

        if form.validate_on_submit():
            try:
                container.student_service.update(student_id, _draft_from_form(container, form))
                flash("Student updated successfully!", "success")
                return redirect(_back_url())
            except (ValidationError, NotFoundError, BackendError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error while updating student %s", student_id)
                flash("Error saving student", "danger")

        return render_template("students/form.html", form=form, student=student, back_url=_back_url())

    @app.route("/students/<student_id>/delete", methods=["POST"], endpoint="student_delete")
    @login_required
    def student_delete(student_id: str):
        try:
            container.student_service.delete(student_id)
            flash("Student deleted.", "success")
        except (NotFoundError, BackendError) as e:
            flash(str(e), "danger")
        return redirect(_back_url())
