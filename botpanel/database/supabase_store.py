"""Supabase-backed DataStore.

Single-row lookups against the dashboard tables. Rows come back as dicts
with ISO date strings and JSON numbers; they are converted to the typed
records in botpanel.core before leaving this module.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

import httpx
from supabase import Client as SupabaseClient
from supabase import ClientOptions, PostgrestAPIError, create_client

from botpanel.config import Config
from botpanel.core import Business, Client, Order, Promotion

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Backing store could not answer a lookup (query or transport failure)."""


CLIENT_COLUMNS = "name, email, phone, instagram_username, points, total_purchases, last_purchase_date"
BUSINESS_COLUMNS = "business_name, business_description, location, menu_link"
PROMOTION_COLUMNS = "name, description, start_date, end_date, max_uses, current_uses"
ORDER_COLUMNS = "order_number, total_amount, status, estimated_delivery_date"


def parse_date(value) -> date | None:
    """Parse a Supabase date/timestamp value.

    Plain dates ('2024-10-28') become date; timestamps keep their time and
    offset so the formatter can shift them to the user timezone.
    """
    if not value:
        return None
    if isinstance(value, date):
        return value
    text = str(value)
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable date value from store: {text!r}")
        return None


def parse_decimal(value) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        logger.warning(f"Unparseable amount from store: {value!r}")
        return None


def parse_int(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Unparseable count from store: {value!r}")
        return None


class SupabaseStore:
    """DataStore over the Supabase REST API.

    Usage:
        store = SupabaseStore.from_config()
        client = store.get_client("c0ffee...")
    """

    def __init__(self, client: SupabaseClient):
        self._client = client

    @classmethod
    def from_config(cls) -> "SupabaseStore":
        """Create a store from Config.SUPABASE_URL / Config.SUPABASE_KEY."""
        if not Config.SUPABASE_URL or not Config.SUPABASE_KEY:
            raise StoreError("SUPABASE_URL and SUPABASE_KEY must be set")
        # HTTP calls give up at the same deadline the ContextBuilder waits for
        options = ClientOptions(postgrest_client_timeout=Config.LOOKUP_TIMEOUT)
        return cls(create_client(Config.SUPABASE_URL, Config.SUPABASE_KEY, options=options))

    def _fetch_one(self, table: str, columns: str, key: str, value: str) -> dict | None:
        """Fetch a single row by key. None when no row matches."""
        try:
            response = (
                self._client.table(table)
                .select(columns)
                .eq(key, value)
                .limit(1)
                .execute()
            )
        except PostgrestAPIError as e:
            raise StoreError(f"Query on {table} failed: {e.message}") from e
        except httpx.HTTPError as e:
            raise StoreError(f"Request to {table} failed: {e}") from e

        rows = response.data or []
        if not rows:
            logger.debug(f"No {table} row with {key}={value}")
            return None
        return rows[0]

    def get_client(self, client_id: str) -> Client | None:
        row = self._fetch_one("clients", CLIENT_COLUMNS, "id", client_id)
        if row is None:
            return None
        return Client(
            id=client_id,
            name=row.get("name") or "",
            email=row.get("email") or "",
            phone=row.get("phone") or "",
            instagram_username=row.get("instagram_username") or "",
            points=parse_int(row.get("points")) or 0,
            total_purchases=parse_decimal(row.get("total_purchases")) or Decimal("0"),
            last_purchase_date=parse_date(row.get("last_purchase_date")),
        )

    def get_business(self, user_id: str) -> Business | None:
        row = self._fetch_one("profiles", BUSINESS_COLUMNS, "id", user_id)
        if row is None:
            return None
        return Business(
            user_id=user_id,
            business_name=row.get("business_name") or "",
            business_description=row.get("business_description") or "",
            location=row.get("location") or "",
            menu_link=row.get("menu_link") or "",
        )

    def get_promotion(self, promotion_id: str) -> Promotion | None:
        row = self._fetch_one("promotions", PROMOTION_COLUMNS, "id", promotion_id)
        if row is None:
            return None
        return Promotion(
            id=promotion_id,
            name=row.get("name") or "",
            description=row.get("description") or "",
            start_date=parse_date(row.get("start_date")),
            end_date=parse_date(row.get("end_date")),
            max_uses=parse_int(row.get("max_uses")),
            current_uses=parse_int(row.get("current_uses")),
        )

    def get_order(self, order_id: str) -> Order | None:
        row = self._fetch_one("orders", ORDER_COLUMNS, "id", order_id)
        if row is None:
            return None
        order_number = row.get("order_number")
        return Order(
            id=order_id,
            order_number=str(order_number) if order_number is not None else "",
            total_amount=parse_decimal(row.get("total_amount")),
            status=row.get("status") or "",
            estimated_delivery_date=parse_date(row.get("estimated_delivery_date")),
        )
