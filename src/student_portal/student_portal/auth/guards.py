from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, g, has_request_context, redirect, session, url_for

from .model import AuthSession

SESSION_AUTH_KEYS = ("access_token", "refresh_token", "expires_at", "user_id", "email", "name")


def current_access_token() -> Optional[str]:
    """JWT of the signed-in user for the current request, if any."""
    if not has_request_context():
        return None
    return session.get("access_token")


def store_auth_session(auth: AuthSession) -> None:
    session["access_token"] = auth.access_token
    session["refresh_token"] = auth.refresh_token
    session["expires_at"] = auth.expires_at
    session["user_id"] = auth.user.id
    session["email"] = auth.user.email
    session["name"] = auth.user.name or auth.user.email


def clear_auth_session() -> None:
    for key in SESSION_AUTH_KEYS:
        session.pop(key, None)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not g.get("current_user"):
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper
