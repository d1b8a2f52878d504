from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import AuthSession, AuthUser


class AuthProvider(Protocol):
    """External identity provider. It owns passwords, tokens and expiry."""

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        raise NotImplementedError

    def sign_up(self, email: str, password: str, *, name: str) -> tuple[Optional[AuthUser], Optional[AuthSession]]:
        raise NotImplementedError

    def restore(self, access_token: str, refresh_token: str) -> AuthSession:
        raise NotImplementedError

    def sign_out(self, access_token: str, refresh_token: str) -> None:
        raise NotImplementedError


class ProfileRepository(Protocol):
    def create_profile(
        self,
        *,
        user_id: str,
        name: str,
        email: str,
        role: Role,
        access_token: Optional[str] = None,
    ) -> None:
        raise NotImplementedError
