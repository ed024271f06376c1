"""Database layer."""

from botpanel.database.supabase_store import StoreError, SupabaseStore

__all__ = [
    "StoreError",
    "SupabaseStore",
]
