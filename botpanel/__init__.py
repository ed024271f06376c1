"""Botpanel - WhatsApp/Instagram chatbot dashboard backend."""

from botpanel.config import VERSION

__version__ = VERSION
