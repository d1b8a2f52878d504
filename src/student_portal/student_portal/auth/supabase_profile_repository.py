from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import SupabaseConnection
from ..database.supabase_base import db_client
from .repository import ProfileRepository


class SupabaseProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory

    def create_profile(
        self,
        *,
        user_id: str,
        name: str,
        email: str,
        role: Role,
        access_token: Optional[str] = None,
    ) -> None:
        with db_client(self._conn_factory, access_token=access_token) as client:
            client.table("user_profiles").insert(
                {"id": user_id, "name": name, "email": email, "role": role.value}
            ).execute()
