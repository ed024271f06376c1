"""Core data types.

Read-only projections of the rows the dashboard keeps in Supabase. Template
resolution never writes any of these back.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Platform(str, Enum):
    """Channel an outbound message goes through."""

    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"
    EMAIL = "email"


@dataclass(frozen=True)
class Client:
    """End customer of a business (clients table)."""

    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    instagram_username: str = ""
    points: int = 0
    total_purchases: Decimal = Decimal("0")
    last_purchase_date: date | None = None


@dataclass(frozen=True)
class Business:
    """Business profile of a dashboard user (profiles table)."""

    user_id: str
    business_name: str = ""
    business_description: str = ""
    location: str = ""
    menu_link: str = ""


@dataclass(frozen=True)
class Promotion:
    """Promotion row. max_uses None means unlimited."""

    id: str
    name: str = ""
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    max_uses: int | None = None
    current_uses: int | None = None


@dataclass(frozen=True)
class Order:
    """Customer order."""

    id: str
    order_number: str = ""
    total_amount: Decimal | None = None
    status: str = ""
    estimated_delivery_date: date | None = None


# =============================================================================
# CLIENT REFERENCES
# =============================================================================


@dataclass(frozen=True)
class RealClient:
    """A client stored in the database."""

    client_id: str


@dataclass(frozen=True)
class PreviewClient:
    """Synthetic client used by previews; never looked up in storage."""


ClientRef = RealClient | PreviewClient

# Value the dashboard sends when previewing without a real client
PREVIEW_CLIENT_ID = "sample-client-preview"

PREVIEW_CLIENT = Client(
    id=PREVIEW_CLIENT_ID,
    name="María González",
    email="maria.gonzalez@email.com",
    phone="+57 300 123 4567",
    instagram_username="@mariagonzalez",
    points=250,
    total_purchases=Decimal("487.50"),
    last_purchase_date=date(2024, 10, 28),
)


def client_ref_from_id(client_id: str | None) -> ClientRef | None:
    """Map a raw client ID from a request to a ClientRef.

    Returns None for a missing/empty ID.
    """
    if not client_id:
        return None
    if client_id == PREVIEW_CLIENT_ID:
        return PreviewClient()
    return RealClient(client_id)
