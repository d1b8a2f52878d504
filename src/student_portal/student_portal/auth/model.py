from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str
    name: Optional[str] = None


@dataclass(frozen=True)
class AuthSession:
    """Tokens handed back by the identity provider, plus who they belong to."""

    access_token: str
    refresh_token: str
    expires_at: Optional[int]
    user: AuthUser
