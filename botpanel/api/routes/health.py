"""Health check endpoint.

Reports whether the store credentials are present and how many template
variables are registered; it does not contact Supabase.
"""

from fastapi import APIRouter

from botpanel.config import VERSION, Config
from botpanel.templates import get_registry

router = APIRouter()


@router.get("/health")
def health_check() -> dict:
    store_configured = bool(Config.SUPABASE_URL and Config.SUPABASE_KEY)
    return {
        "status": "healthy" if store_configured else "degraded",
        "version": VERSION,
        "store_configured": store_configured,
        "timezone": Config.USER_TIMEZONE,
        "variables": len(get_registry()),
    }
