"""DB session and request actor dependencies."""

from __future__ import annotations

from fastapi import Request

from codelists.core.config import get_settings
from codelists.infrastructure.persistence.database import get_db

__all__ = ["get_actor", "get_db"]


def get_actor(request: Request) -> str | None:
    """Return the caller identity from the actor header (trimmed), or None.

    The upstream auth layer sets the header; None makes the audit recorder
    fall back to the system actor.
    """
    raw = request.headers.get(get_settings().actor_header_name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()
