from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import RadioField
from wtforms.validators import DataRequired

from .model import Lookups


class SelectionForm(FlaskForm):
    department_id = RadioField("Department", validators=[DataRequired(message="Choose a department")])
    year_id = RadioField("Year", validators=[DataRequired(message="Choose a year")])
    semester_id = RadioField("Semester", validators=[DataRequired(message="Choose a semester")])

    def set_lookups(self, lookups: Lookups) -> None:
        self.department_id.choices = [(d.id, d.code) for d in lookups.departments]
        self.year_id.choices = [(y.id, y.label) for y in lookups.years]
        self.semester_id.choices = [(s.id, str(s.number)) for s in lookups.semesters]
