"""Shared fixtures: in-memory store and a fixed clock."""

from datetime import date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from botpanel.config import Config
from botpanel.core import Business, Client, Order, Promotion
from botpanel.templates import ContextBuilder, TemplateResolver

USER_ID = "user-1"
CLIENT_ID = "client-1"
PROMOTION_ID = "promo-1"
ORDER_ID = "order-1"

# Monday 28 October 2024, 14:05 in the default user timezone
FIXED_NOW = datetime(2024, 10, 28, 14, 5, tzinfo=ZoneInfo("America/Bogota"))


class FakeStore:
    """DataStore over dicts, recording every lookup."""

    def __init__(self, clients=None, businesses=None, promotions=None, orders=None):
        self.clients = clients or {}
        self.businesses = businesses or {}
        self.promotions = promotions or {}
        self.orders = orders or {}
        self.calls: list[tuple[str, str]] = []
        self.fail_with: dict[str, Exception] = {}

    def _lookup(self, kind: str, table: dict, key: str):
        self.calls.append((kind, key))
        if kind in self.fail_with:
            raise self.fail_with[kind]
        return table.get(key)

    def get_client(self, client_id):
        return self._lookup("client", self.clients, client_id)

    def get_business(self, user_id):
        return self._lookup("business", self.businesses, user_id)

    def get_promotion(self, promotion_id):
        return self._lookup("promotion", self.promotions, promotion_id)

    def get_order(self, order_id):
        return self._lookup("order", self.orders, order_id)


@pytest.fixture(autouse=True)
def user_timezone():
    """Pin the user timezone for every test."""
    original = Config.USER_TIMEZONE
    Config.USER_TIMEZONE = "America/Bogota"
    yield
    Config.USER_TIMEZONE = original


@pytest.fixture
def client_record() -> Client:
    return Client(
        id=CLIENT_ID,
        name="Ana Torres",
        email="ana@correo.com",
        phone="+57 311 555 0101",
        instagram_username="@anatorres",
        points=250,
        total_purchases=Decimal("1250"),
        last_purchase_date=date(2024, 9, 3),
    )


@pytest.fixture
def business_record() -> Business:
    return Business(
        user_id=USER_ID,
        business_name="Café Aroma",
        business_description="Café de especialidad",
        location="Calle 10 #5-20",
        menu_link="https://cafearoma.co/menu",
    )


@pytest.fixture
def promotion_record() -> Promotion:
    return Promotion(
        id=PROMOTION_ID,
        name="2x1 en capuchinos",
        description="Todos los martes",
        start_date=date(2024, 11, 1),
        end_date=date(2024, 11, 30),
        max_uses=100,
        current_uses=45,
    )


@pytest.fixture
def order_record() -> Order:
    return Order(
        id=ORDER_ID,
        order_number="#1042",
        total_amount=Decimal("99.9"),
        status="En preparación",
        estimated_delivery_date=date(2024, 11, 15),
    )


@pytest.fixture
def store(client_record, business_record, promotion_record, order_record) -> FakeStore:
    return FakeStore(
        clients={CLIENT_ID: client_record},
        businesses={USER_ID: business_record},
        promotions={PROMOTION_ID: promotion_record},
        orders={ORDER_ID: order_record},
    )


@pytest.fixture
def resolver(store) -> TemplateResolver:
    builder = ContextBuilder(store, clock=lambda: FIXED_NOW, lookup_timeout=2.0)
    return TemplateResolver(store, context_builder=builder)
