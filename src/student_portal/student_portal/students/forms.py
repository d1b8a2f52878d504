from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, Regexp

from ..cohorts.model import Lookups
from ..core.constants import BLOOD_GROUPS, EMAIL_PATTERN


class StudentForm(FlaskForm):
    reg_no = StringField(
        "Registration Number *",
        validators=[DataRequired(message="Registration number is required"), Length(max=50)],
    )
    name = StringField("Full Name *", validators=[DataRequired(message="Name is required"), Length(max=200)])
    department_id = SelectField("Department *", validators=[DataRequired(message="Department is required")])
    year_id = SelectField("Year *", validators=[DataRequired(message="Year is required")])
    semester_id = SelectField("Semester *", validators=[DataRequired(message="Semester is required")])
    blood_group = SelectField(
        "Blood Group",
        choices=[("", "Select Blood Group")] + [(bg, bg) for bg in BLOOD_GROUPS],
        validators=[Optional()],
    )
    phone = StringField("Phone Number", validators=[Optional(), Length(max=30)])
    email = StringField(
        "Email Address",
        validators=[Optional(), Regexp(EMAIL_PATTERN, message="Enter a valid email address")],
    )
    address = TextAreaField("Address", validators=[Optional(), Length(max=500)])

    def set_lookups(self, lookups: Lookups) -> None:
        self.department_id.choices = [("", "Select Department")] + [
            (d.id, f"{d.code} - {d.name}") for d in lookups.departments
        ]
        self.year_id.choices = [("", "Select Year")] + [(y.id, f"Year {y.label}") for y in lookups.years]
        self.semester_id.choices = [("", "Select Semester")] + [
            (s.id, f"Semester {s.number}") for s in lookups.semesters
        ]
