from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, session, url_for

from ..core.exceptions import AuthenticationError, BackendError, ValidationError
from ..container import Container
from .forms import LoginForm, SignUpForm
from .guards import clear_auth_session, store_auth_session
from .model import AuthUser

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_current_user():
        g.current_user = None
        access_token = session.get("access_token")
        if not access_token:
            return

        if container.auth_service.is_expired(session.get("expires_at")):
            try:
                restored = container.auth_service.restore(access_token, session.get("refresh_token"))
            except BackendError as e:
                logger.warning("Could not restore session: %s", e)
                flash("Could not reach the sign-in service. Please try again.", "warning")
                return
            if not restored:
                clear_auth_session()
                return
            store_auth_session(restored)

        g.current_user = AuthUser(id=session.get("user_id", ""), email=session.get("email", ""), name=session.get("name"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.get("current_user"):
            return redirect(url_for("index"))

        form = LoginForm()
        if form.validate_on_submit():
            try:
                auth = container.auth_service.sign_in(form.email.data, form.password.data)
                session.permanent = bool(form.remember_me.data)
                store_auth_session(auth)
                logger.info("User %s signed in", auth.user.id)
                return redirect(url_for("index"))
            except (ValidationError, AuthenticationError) as e:
                flash(str(e), "danger")
            except BackendError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during sign-in")
                flash("System error while signing in", "danger")

        return render_template("auth/login.html", form=form)

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if g.get("current_user"):
            return redirect(url_for("index"))

        form = SignUpForm()
        if form.validate_on_submit():
            try:
                auth = container.auth_service.sign_up(form.email.data, form.password.data, form.name.data)
                if auth is None:
                    flash("Account created. Confirm your email address, then sign in.", "info")
                    return redirect(url_for("login"))
                store_auth_session(auth)
                flash("Account created. Welcome!", "success")
                return redirect(url_for("index"))
            except (ValidationError, AuthenticationError, BackendError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during sign-up")
                flash("System error while creating the account", "danger")

        return render_template("auth/signup.html", form=form)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.sign_out(session.get("access_token"), session.get("refresh_token"))
        clear_auth_session()
        flash("Signed out.", "info")
        return redirect(url_for("login"))
