"""API routers."""

from botpanel.api.routes import health, templates

__all__ = ["health", "templates"]
