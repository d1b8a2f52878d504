from __future__ import annotations

import logging
import time
from typing import Optional

from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, BackendError, DomainError, ValidationError
from .model import AuthSession
from .repository import AuthProvider, ProfileRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign staff in and out through the external identity provider."""

    def __init__(self, provider: AuthProvider, profiles: ProfileRepository):
        self._provider = provider
        self._profiles = profiles

    def sign_in(self, email: str, password: str) -> AuthSession:
        email = require_non_empty(email, "Email is required")
        if not password:
            raise ValidationError("Password is required")
        return self._provider.sign_in_with_password(email, password)

    def sign_up(self, email: str, password: str, name: str) -> Optional[AuthSession]:
        """Register and create the profile row.

        Returns None when the provider wants the address confirmed first.
        """

        name = require_non_empty(name, "Full name is required")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        user, session = self._provider.sign_up(email, password, name=name)
        if user:
            try:
                self._profiles.create_profile(
                    user_id=user.id,
                    name=name,
                    email=email,
                    role=Role.ADMIN,
                    access_token=session.access_token if session else None,
                )
            except BackendError:
                # The account exists either way; a missing profile only loses the display name
                logger.exception("Could not create profile for new user %s", user.id)
        return session

    @staticmethod
    def is_expired(session_expires_at: Optional[int], *, now: Optional[float] = None) -> bool:
        if not session_expires_at:
            return True
        now = time.time() if now is None else now
        return int(session_expires_at) <= int(now)

    def restore(self, access_token: Optional[str], refresh_token: Optional[str]) -> Optional[AuthSession]:
        if not access_token or not refresh_token:
            return None
        try:
            return self._provider.restore(access_token, refresh_token)
        except AuthenticationError as e:
            logger.info("Stored session is no longer valid: %s", e)
            return None

    def sign_out(self, access_token: Optional[str], refresh_token: Optional[str]) -> None:
        if not access_token or not refresh_token:
            return
        try:
            self._provider.sign_out(access_token, refresh_token)
        except DomainError as e:
            logger.warning("Provider sign-out failed, clearing local session anyway: %s", e)
