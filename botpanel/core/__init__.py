"""Core types and interfaces."""

from botpanel.core.interfaces import DataStore
from botpanel.core.types import (
    PREVIEW_CLIENT,
    PREVIEW_CLIENT_ID,
    Business,
    Client,
    ClientRef,
    Order,
    Platform,
    PreviewClient,
    Promotion,
    RealClient,
    client_ref_from_id,
)

__all__ = [
    "PREVIEW_CLIENT",
    "PREVIEW_CLIENT_ID",
    "Business",
    "Client",
    "ClientRef",
    "DataStore",
    "Order",
    "Platform",
    "PreviewClient",
    "Promotion",
    "RealClient",
    "client_ref_from_id",
]
