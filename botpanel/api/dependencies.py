"""FastAPI dependencies for dependency injection."""

from functools import lru_cache

from fastapi import Header, HTTPException, status

from botpanel.core import DataStore
from botpanel.database import SupabaseStore
from botpanel.templates import TemplateResolver


@lru_cache
def get_store() -> DataStore:
    """Get singleton Supabase store built from Config."""
    return SupabaseStore.from_config()


def get_resolver() -> TemplateResolver:
    return TemplateResolver(get_store())


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """ID of the authenticated dashboard user.

    Session validation happens upstream; the gateway forwards the user ID
    in the X-User-Id header.
    """
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_user_id
