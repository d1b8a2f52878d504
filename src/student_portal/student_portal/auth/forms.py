from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import BooleanField, PasswordField, StringField
from wtforms.validators import DataRequired, Length, Regexp

from ..core.constants import EMAIL_PATTERN, MIN_PASSWORD_LENGTH


class LoginForm(FlaskForm):
    email = StringField("Email Address", validators=[DataRequired(message="Email is required")])
    password = PasswordField("Password", validators=[DataRequired(message="Password is required")])
    remember_me = BooleanField("Remember me")


class SignUpForm(FlaskForm):
    name = StringField("Full Name", validators=[DataRequired(message="Full name is required"), Length(max=200)])
    email = StringField(
        "Email Address",
        validators=[
            DataRequired(message="Email is required"),
            Regexp(EMAIL_PATTERN, message="Enter a valid email address"),
        ],
    )
    password = PasswordField(
        "Password",
        validators=[
            DataRequired(message="Password is required"),
            Length(min=MIN_PASSWORD_LENGTH, message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters"),
        ],
    )
