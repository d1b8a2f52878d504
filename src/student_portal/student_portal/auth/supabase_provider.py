from __future__ import annotations

import logging
from typing import Optional

import httpx
from supabase import AuthError

from ..core.exceptions import AuthenticationError, BackendError
from ..database.connection import SupabaseConnection
from .model import AuthSession, AuthUser
from .repository import AuthProvider

logger = logging.getLogger(__name__)


def _user_from_sdk(user) -> AuthUser:
    metadata = getattr(user, "user_metadata", None) or {}
    return AuthUser(id=str(user.id), email=user.email or "", name=metadata.get("name"))


def _session_from_sdk(session) -> AuthSession:
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=getattr(session, "expires_at", None),
        user=_user_from_sdk(session.user),
    )


class SupabaseAuthProvider(AuthProvider):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        client = self._conn_factory.connect()
        try:
            res = client.auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            raise AuthenticationError(e.message) from e
        except httpx.HTTPError as e:
            raise BackendError("Could not reach the sign-in service") from e
        if not res.session:
            raise AuthenticationError("Sign-in did not return a session")
        return _session_from_sdk(res.session)

    def sign_up(self, email: str, password: str, *, name: str) -> tuple[Optional[AuthUser], Optional[AuthSession]]:
        client = self._conn_factory.connect()
        try:
            res = client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": {"name": name}}}
            )
        except AuthError as e:
            raise AuthenticationError(e.message) from e
        except httpx.HTTPError as e:
            raise BackendError("Could not reach the sign-up service") from e
        user = _user_from_sdk(res.user) if res.user else None
        session = _session_from_sdk(res.session) if res.session else None
        return user, session

    def restore(self, access_token: str, refresh_token: str) -> AuthSession:
        client = self._conn_factory.connect()
        try:
            # Validates the access token and refreshes it when it has expired
            res = client.auth.set_session(access_token, refresh_token)
        except AuthError as e:
            raise AuthenticationError(e.message) from e
        except httpx.HTTPError as e:
            raise BackendError("Could not reach the sign-in service") from e
        if not res.session:
            raise AuthenticationError("Session expired")
        return _session_from_sdk(res.session)

    def sign_out(self, access_token: str, refresh_token: str) -> None:
        client = self._conn_factory.connect()
        try:
            client.auth.set_session(access_token, refresh_token)
            client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as e:
            raise AuthenticationError(str(e)) from e
