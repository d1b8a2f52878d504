from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from supabase import Client, create_client
from supabase.lib.client_options import SyncClientOptions

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "https://placeholder.supabase.co"
PLACEHOLDER_KEY = "placeholder.anon.key"

TokenProvider = Callable[[], Optional[str]]


@dataclass
class SupabaseConfig:
    url: str
    key: str

    @classmethod
    def from_dict(cls, config: dict) -> "SupabaseConfig":
        url = str(config.get("url") or "")
        key = str(config.get("key") or "")
        if not url or not key:
            logger.warning(
                "Supabase settings not found (SUPABASE_URL / SUPABASE_ANON_KEY); "
                "using placeholders, every backend call will fail until they are set."
            )
        return cls(url=url or PLACEHOLDER_URL, key=key or PLACEHOLDER_KEY)


class SupabaseConnection:
    """Singleton-like client factory.

    Note: We create a short-lived client per operation so each request talks to
    the backend as the signed-in user (row level security sees their JWT).
    """

    _instance: Optional["SupabaseConnection"] = None

    def __init__(self, config: SupabaseConfig, *, token_provider: Optional[TokenProvider] = None):
        self._config = config
        self._token_provider = token_provider

    @classmethod
    def get_instance(
        cls, config: SupabaseConfig, *, token_provider: Optional[TokenProvider] = None
    ) -> "SupabaseConnection":
        if cls._instance is None:
            cls._instance = SupabaseConnection(config, token_provider=token_provider)
        return cls._instance

    @property
    def url(self) -> str:
        return self._config.url

    def connect(self, *, access_token: Optional[str] = None) -> Client:
        # Tokens live in the Flask session; the client must not refresh or keep them
        client = create_client(
            self._config.url,
            self._config.key,
            options=SyncClientOptions(auto_refresh_token=False, persist_session=False),
        )
        token = access_token or (self._token_provider() if self._token_provider else None)
        if token:
            client.postgrest.auth(token)
        return client
