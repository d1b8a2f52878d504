from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..core.exceptions import BackendError
from .connection import SupabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_client(conn_factory: SupabaseConnection, *, access_token: Optional[str] = None) -> Iterator[Client]:
    """Yield a client; backend failures surface as ``BackendError``."""
    client = conn_factory.connect(access_token=access_token)
    try:
        yield client
    except APIError as e:
        logger.warning("Backend rejected request: code=%s message=%s", e.code, e.message)
        raise BackendError(e.message or "The database rejected the request") from e
    except httpx.HTTPError as e:
        logger.error("Backend unreachable: %s", e)
        raise BackendError("Could not reach the database service") from e


def fetchone(response) -> Optional[Dict[str, Any]]:
    rows = fetchall(response)
    return rows[0] if rows else None


def fetchall(response) -> List[Dict[str, Any]]:
    if response is None:
        return []
    return list(response.data or [])
